"""Template splicing: replace ``brand! { ... }`` call sites with literals.

Each call site is an independent resolution: its body is parsed and
resolved on its own and the whole ``brand!`` expression is replaced by the
rendered literal. Any failure aborts the splice; partial output is never
returned.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from white_label.domain.clauses import Value
from white_label.domain.codegen import render_value
from white_label.domain.errors import ClauseSyntaxError
from white_label.domain.parser import skip_block_comment, source_position
from white_label.domain.resolver import resolve_text
from white_label.domain.types import Target

_CALL_RE = re.compile(r"(?<![\w])brand!\s*([{(\[])")
_RAW_RE = re.compile(r'r(#*)"')
_CLOSERS = {"{": "}", "(": ")", "[": "]"}


@dataclass(frozen=True)
class CallSite:
    """One ``brand!`` invocation found in a template."""

    start: int
    end: int
    body_start: int
    body: str
    line: int
    column: int


@dataclass(frozen=True)
class SplicedSite:
    """A call site together with the value it resolved to."""

    line: int
    column: int
    value: Value
    rendered: str


def _skip_quoted(text: str, index: int, quote: str) -> int:
    """Return the index just past the literal opened at *index*."""
    i = index + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == quote:
            return i + 1
        i += 1
    return len(text)


def _find_close(text: str, index: int, opener: str) -> int:
    """Return the index of the bracket closing *opener*, or -1."""
    closer = _CLOSERS[opener]
    depth = 1
    i = index
    while i < len(text):
        ch = text[i]
        # Comments go first: brackets and quotes inside them do not count.
        if text.startswith("//", i):
            end = text.find("\n", i)
            i = len(text) if end == -1 else end
            continue
        if text.startswith("/*", i):
            end = skip_block_comment(text, i)
            i = len(text) if end == -1 else end
            continue
        if ch in "\"'":
            i = _skip_quoted(text, i, ch)
            continue
        if ch == "r" and (m := _RAW_RE.match(text, i)):
            end = text.find('"' + m.group(1), m.end())
            i = len(text) if end == -1 else end + 1 + len(m.group(1))
            continue
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return -1


def find_call_sites(text: str) -> list[CallSite]:
    """Locate every ``brand!`` invocation in *text*, in source order.

    Raises:
        ClauseSyntaxError: If an invocation is never closed.
    """
    sites: list[CallSite] = []
    pos = 0
    while m := _CALL_RE.search(text, pos):
        body_start = m.end()
        close = _find_close(text, body_start, m.group(1))
        line, column = source_position(text, m.start())
        if close == -1:
            raise ClauseSyntaxError(
                "unterminated `brand!` invocation", line=line, column=column, source=text
            )
        sites.append(
            CallSite(
                start=m.start(),
                end=close + 1,
                body_start=body_start,
                body=text[body_start:close],
                line=line,
                column=column,
            )
        )
        pos = close + 1
    return sites


def _relocate(exc: ClauseSyntaxError, text: str, site: CallSite) -> ClauseSyntaxError:
    """Translate an error inside a call-site body to template coordinates."""
    base_line, base_column = source_position(text, site.body_start)
    line = base_line + exc.line - 1
    column = exc.column + base_column - 1 if exc.line == 1 else exc.column
    return ClauseSyntaxError(exc.message, line=line, column=column, source=text)


def splice_text(
    text: str,
    brand: str | None,
    target: Target = Target.PYTHON,
) -> tuple[str, list[SplicedSite]]:
    """Resolve every call site in *text* and return the expanded text.

    Text outside call sites is copied verbatim.
    """
    pieces: list[str] = []
    spliced: list[SplicedSite] = []
    pos = 0
    for site in find_call_sites(text):
        try:
            value = resolve_text(site.body, brand)
        except ClauseSyntaxError as exc:
            raise _relocate(exc, text, site) from exc
        rendered = render_value(value, target)
        pieces.append(text[pos : site.start])
        pieces.append(rendered)
        spliced.append(SplicedSite(site.line, site.column, value, rendered))
        pos = site.end
    pieces.append(text[pos:])
    return "".join(pieces), spliced
