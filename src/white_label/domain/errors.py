"""Brand resolution errors.

Every failure that must stop a build is a :class:`BrandError`. The service
layer maps ``code`` onto ``ServiceError.code`` and ``detail()`` onto
``ServiceError.detail``; nothing in the domain layer terminates the process.
"""

from __future__ import annotations

from typing import Any

from white_label.domain.types import BRAND_ENV_VAR


class BrandError(ValueError):
    """Base class for fatal brand resolution failures."""

    code = "BRAND_ERROR"

    def detail(self) -> dict[str, Any]:
        return {}


class ConfigMissingError(BrandError):
    """No brand was configured for the build."""

    code = "CONFIG_MISSING"

    def __init__(self, env_var: str = BRAND_ENV_VAR) -> None:
        super().__init__(f"{env_var} must be set.")
        self.env_var = env_var

    def detail(self) -> dict[str, Any]:
        return {"env_var": self.env_var}


class NoMatchError(BrandError):
    """The brand matched no clause and no wildcard was present."""

    code = "NO_MATCH"

    def __init__(self, brand: str, known: tuple[str, ...] = ()) -> None:
        msg = f"Brand {brand!r} matches no clause and no wildcard `_` is present"
        if known:
            msg += f" (known brands: {', '.join(repr(k) for k in known)})"
        super().__init__(msg)
        self.brand = brand
        self.known = known

    def detail(self) -> dict[str, Any]:
        return {"brand": self.brand, "known": list(self.known)}


class ClauseSyntaxError(BrandError):
    """Clause text does not follow the ``pattern => literal`` grammar.

    Attributes:
        message: Bare description of the problem, without position.
        line: 1-based line of the offending token.
        column: 1-based column of the offending token.
        source: The full text that was parsed, used for diagnostics.
    """

    code = "SYNTAX_ERROR"

    def __init__(self, message: str, *, line: int, column: int, source: str = "") -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.message = message
        self.line = line
        self.column = column
        self.source = source

    def render(self) -> str:
        """Return the offending source line with a caret under the column."""
        lines = self.source.splitlines()
        if not 0 < self.line <= len(lines):
            return self.message
        text = lines[self.line - 1]
        gutter = f"{self.line} | "
        caret = " " * (len(gutter) + self.column - 1) + "^"
        return f"{gutter}{text}\n{caret} {self.message}"

    def detail(self) -> dict[str, Any]:
        return {
            "line": self.line,
            "column": self.column,
            "diagnostic": self.render(),
        }


class InvalidConstantNameError(BrandError):
    """A generated constant name is not valid in the target syntax."""

    code = "INVALID_NAME"

    def __init__(self, name: str, target: str) -> None:
        super().__init__(f"{name!r} is not a valid {target} constant name")
        self.name = name
        self.target = target

    def detail(self) -> dict[str, Any]:
        return {"name": self.name, "target": self.target}
