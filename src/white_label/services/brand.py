"""BrandService: parse, resolve, and bake brand values.

Pipelines:
  resolve:  PARSE → SELECT → RENDER
  generate: for each manifest constant PARSE → SELECT, then RENDER → WRITE
  splice:   READ → (per call site PARSE → SELECT → RENDER) → WRITE

Each clause text is an independent resolution. A failed resolution never
produces output: nothing is written unless every constant or call site
resolved.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from white_label.domain.clauses import (
    Clause,
    ClauseList,
    Value,
    has_wildcard,
    shadowed_clauses,
)
from white_label.domain.codegen import generate_module, render_value, validate_name
from white_label.domain.errors import BrandError, ConfigMissingError
from white_label.domain.parser import parse_clauses
from white_label.domain.resolver import select_clause
from white_label.domain.splice import splice_text
from white_label.domain.types import Target
from white_label.services.base import BaseService
from white_label.services.result import ServiceResult

logger = logging.getLogger(__name__)


def _clause_dict(clause: Clause) -> dict[str, Any]:
    return {
        "pattern": str(clause.pattern),
        "kind": str(clause.value.kind),
        "raw": clause.value.raw,
        "value": clause.value.value,
        "line": clause.line,
        "column": clause.column,
    }


def _shadow_warnings(clauses: ClauseList, label: str = "") -> list[str]:
    prefix = f"{label}: " if label else ""
    return [
        f"{prefix}clause {c.pattern} => {c.value.raw} at line {c.line} is unreachable"
        for c in shadowed_clauses(clauses)
    ]


class BrandService(BaseService):
    """Resolves clause texts against the configured brand."""

    def _target(self, target: Target | str | None) -> Target:
        return Target(target) if target is not None else self._settings.build.format

    def _resolve_path(self, path: Path | str) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._settings.project_root / p

    # ── single clause text ────────────────────────────────────────────

    def parse(self, text: str) -> ServiceResult:
        """Parse *text* without resolving it. No brand is required."""
        op = "parse"
        try:
            clauses = parse_clauses(text)
        except BrandError as exc:
            return self._fail(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "count": len(clauses),
                "has_wildcard": has_wildcard(clauses),
                "clauses": [_clause_dict(c) for c in clauses],
            },
            warnings=_shadow_warnings(clauses),
        )

    def resolve(self, text: str, *, target: Target | str | None = None) -> ServiceResult:
        """Select the value *text* yields for the configured brand."""
        op = "resolve"
        fmt = self._target(target)
        try:
            clauses = parse_clauses(text)
            clause = select_clause(clauses, self.brand)
        except BrandError as exc:
            return self._fail(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "brand": self.brand,
                "pattern": str(clause.pattern),
                "kind": str(clause.value.kind),
                "raw": clause.value.raw,
                "value": clause.value.value,
                "format": str(fmt),
                "rendered": render_value(clause.value, fmt),
            },
            warnings=_shadow_warnings(clauses),
        )

    # ── manifest ──────────────────────────────────────────────────────

    def _manifest_error(self, op: str) -> ServiceResult | None:
        if self._settings.config_path is None:
            return self._error(
                op,
                "NO_MANIFEST",
                "No white-label.toml found (use --config or WHITE_LABEL_CONFIG)",
            )
        if not self._settings.constants:
            return self._error(
                op,
                "NO_CONSTANTS",
                f"{self._settings.config_path} has no [constants] table",
                path=str(self._settings.config_path),
            )
        return None

    def check(self) -> ServiceResult:
        """Parse every manifest constant without resolving any of them."""
        op = "check"
        if (failed := self._manifest_error(op)) is not None:
            return failed

        summary: list[dict[str, Any]] = []
        failures: list[tuple[str, BrandError]] = []
        warnings: list[str] = []
        for name, text in self._settings.constants.items():
            try:
                clauses = parse_clauses(text)
            except BrandError as exc:
                failures.append((name, exc))
                continue
            warnings.extend(_shadow_warnings(clauses, name))
            summary.append(
                {
                    "name": name,
                    "count": len(clauses),
                    "has_wildcard": has_wildcard(clauses),
                }
            )

        if failures:
            return self._aggregate(op, failures)
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(summary), "constants": summary},
            warnings=warnings,
        )

    def generate(
        self,
        *,
        target: Target | str | None = None,
        output: Path | str | None = None,
    ) -> ServiceResult:
        """Resolve every manifest constant and write the generated module."""
        op = "generate"
        if (failed := self._manifest_error(op)) is not None:
            return failed
        fmt = self._target(target)

        values: dict[str, Value] = {}
        failures: list[tuple[str, BrandError]] = []
        warnings: list[str] = []
        for name, text in self._settings.constants.items():
            try:
                validate_name(name, fmt)
                clauses = parse_clauses(text)
                values[name] = select_clause(clauses, self.brand).value
            except BrandError as exc:
                failures.append((name, exc))
                continue
            warnings.extend(_shadow_warnings(clauses, name))

        if failures:
            return self._aggregate(op, failures)

        assert self.brand is not None  # every constant resolved
        path = self._resolve_path(output or self._settings.build.output)
        content = generate_module(values, fmt, brand=self.brand)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            return self._error(op, "WRITE_FAILED", f"Cannot write {path}: {exc}", path=str(path))

        logger.info("Generated %d constants for brand %r at %s", len(values), self.brand, path)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "brand": self.brand,
                "format": str(fmt),
                "path": str(path),
                "count": len(values),
                "constants": {name: render_value(v, fmt) for name, v in values.items()},
            },
            warnings=warnings,
        )

    def _aggregate(self, op: str, failures: list[tuple[str, BrandError]]) -> ServiceResult:
        """Report every failed constant in one result.

        A missing brand fails every constant the same way, so it is
        reported once.
        """
        first_name, first = failures[0]
        if len(failures) == 1:
            return self._fail(op, first, constant=first_name)
        if all(isinstance(exc, ConfigMissingError) for _, exc in failures):
            return self._fail(op, first)

        errors = [
            {"constant": name, "code": exc.code, "message": str(exc), **exc.detail()}
            for name, exc in failures
        ]
        codes = {e["code"] for e in errors}
        message = f"{len(errors)} constants failed: " + "; ".join(
            f"{e['constant']}: {e['message']}" for e in errors
        )
        return self._error(
            op,
            first.code if len(codes) == 1 else "RESOLVE_FAILED",
            message,
            errors=errors,
        )

    # ── templates ─────────────────────────────────────────────────────

    def splice(
        self,
        template: Path | str,
        *,
        output: Path | str | None = None,
        target: Target | str | None = None,
    ) -> ServiceResult:
        """Expand every ``brand!`` call site in *template*.

        With no *output*, the expanded text is returned in ``data["text"]``.
        """
        op = "splice"
        fmt = self._target(target)
        source = self._resolve_path(template)
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as exc:
            return self._error(op, "READ_FAILED", f"Cannot read {source}: {exc}", path=str(source))

        try:
            expanded, sites = splice_text(text, self.brand, fmt)
        except BrandError as exc:
            return self._fail(op, exc, template=str(source))

        data: dict[str, Any] = {
            "brand": self.brand,
            "template": str(source),
            "format": str(fmt),
            "count": len(sites),
            "sites": [
                {
                    "line": s.line,
                    "column": s.column,
                    "kind": str(s.value.kind),
                    "rendered": s.rendered,
                }
                for s in sites
            ],
        }
        if output is None:
            data["text"] = expanded
        else:
            dest = self._resolve_path(output)
            try:
                dest.parent.mkdir(parents=True, exist_ok=True)
                dest.write_text(expanded, encoding="utf-8")
            except OSError as exc:
                return self._error(op, "WRITE_FAILED", f"Cannot write {dest}: {exc}", path=str(dest))
            data["path"] = str(dest)
            logger.info("Spliced %d call sites from %s into %s", len(sites), source, dest)
        return ServiceResult(ok=True, op=op, data=data)
