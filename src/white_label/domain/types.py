"""Literal kinds and output targets.

A clause value is one of five literal kinds. The kind is carried next to
the decoded value so generated code keeps the literal's original shape.
"""

from __future__ import annotations

from enum import StrEnum

BRAND_ENV_VAR = "WHITE_LABEL_BRAND"


class LiteralKind(StrEnum):
    """Kinds of literal a clause may select."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    FLOAT = "float"
    CHAR = "char"


class Target(StrEnum):
    """Syntaxes the code generator can emit."""

    PYTHON = "python"
    JSON = "json"
