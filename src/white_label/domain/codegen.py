"""Code generation: bake resolved values into a source artifact.

Each value is emitted in the syntax of its own literal kind, so a string
stays a string and a float stays a float in the generated file. The
artifact holds no branching: one value per constant, chosen at build time.
"""

from __future__ import annotations

import json
import keyword
from collections.abc import Mapping

from white_label.domain.clauses import Value
from white_label.domain.errors import InvalidConstantNameError
from white_label.domain.types import LiteralKind, Target

PYTHON_TYPES: dict[LiteralKind, str] = {
    LiteralKind.STRING: "str",
    LiteralKind.INTEGER: "int",
    LiteralKind.BOOLEAN: "bool",
    LiteralKind.FLOAT: "float",
    LiteralKind.CHAR: "str",
}


def render_value(value: Value, target: Target = Target.PYTHON) -> str:
    """Render *value* as a literal in *target* syntax."""
    if target == Target.JSON:
        return json.dumps(value.value, ensure_ascii=False)
    return repr(value.value)


def validate_name(name: str, target: Target) -> None:
    """Raise InvalidConstantNameError if *name* cannot be emitted for *target*."""
    if target == Target.PYTHON:
        if not name.isidentifier() or keyword.iskeyword(name):
            raise InvalidConstantNameError(name, target)
    elif not name:
        raise InvalidConstantNameError(name, target)


def generate_module(
    constants: Mapping[str, Value],
    target: Target = Target.PYTHON,
    *,
    brand: str,
) -> str:
    """Render an ordered mapping of constant name to value as one file.

    Python output is a module of ``Final`` annotated constants; JSON output
    is an object with ``brand`` and ``constants`` keys.
    """
    for name in constants:
        validate_name(name, target)

    if target == Target.JSON:
        payload = {
            "brand": brand,
            "constants": {name: value.value for name, value in constants.items()},
        }
        return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"

    lines = [
        f"# Generated by white-label for brand {brand!r}. Do not edit.",
        "",
        "from typing import Final",
        "",
    ]
    for name, value in constants.items():
        lines.append(f"{name}: Final[{PYTHON_TYPES[value.kind]}] = {render_value(value)}")
    return "\n".join(lines) + "\n"
