"""Clause parser: turn ``pattern => literal`` text into a ClauseList.

Grammar::

    ClauseList := Clause (","? Clause)* ","?
    Clause     := Pattern "=>" Value
    Pattern    := StringLiteral | "_"
    Value      := StringLiteral | IntegerLiteral | BooleanLiteral
                | FloatLiteral | CharLiteral

Literal syntax follows the usual C-family conventions: double-quoted
strings with backslash escapes (plus ``r"..."`` / ``r#"..."#`` raw
strings), single-quoted characters, decimal/hex/octal/binary integers with
``_`` separators and optional width suffixes (``8080u16``), floats with an
optional ``f32``/``f64`` suffix (``1.`` included), and ``true``/``false``.
``//`` line comments and nesting ``/* ... */`` block comments are
skipped.

Parsing is purely syntactic: duplicate patterns and missing wildcards are
left for the resolver to encounter.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from white_label.domain.clauses import WILDCARD, Clause, ClauseList, NamedPattern, Pattern, Value
from white_label.domain.errors import ClauseSyntaxError
from white_label.domain.types import LiteralKind

INT_SUFFIXES = frozenset(
    f"{sign}{width}" for sign in "ui" for width in ("8", "16", "32", "64", "128", "size")
)
FLOAT_SUFFIXES = frozenset({"f32", "f64"})

_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

_NUMBER_RE = re.compile(
    r"-?(?:0x(?P<hex>[0-9a-fA-F_]+)|0o(?P<oct>[0-7_]+)|0b(?P<bin>[01_]+)"
    r"|(?P<dec>[0-9][0-9_]*)"
    # `1.` is a float unless a field access (`1.x`) or range (`1..2`) follows
    r"(?P<frac>\.(?:[0-9][0-9_]*|(?![.A-Za-z_])))?"
    r"(?P<exp>[eE][+-]?_*[0-9][0-9_]*)?)"
    r"(?P<suffix>[A-Za-z_][A-Za-z0-9_]*)?"
)
_RAW_START_RE = re.compile(r'r#*"')
_UNICODE_ESCAPE_RE = re.compile(r"\{([0-9a-fA-F][0-9a-fA-F_]{0,7})\}")
_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_WHITESPACE_RE = re.compile(r"\s+")

# Token kinds
STRING = "string"
CHAR = "char"
NUMBER = "number"
IDENT = "ident"
ARROW = "=>"
COMMA = ","
EOF = "end of input"


@dataclass(frozen=True)
class Token:
    """A lexical token with its decoded value and 1-based position."""

    kind: str
    text: str
    line: int
    column: int
    value: Any = None
    literal_kind: LiteralKind | None = None

    def describe(self) -> str:
        if self.kind == EOF:
            return EOF
        return f"`{self.text}`"


def source_position(text: str, index: int) -> tuple[int, int]:
    """1-based (line, column) of *index* in *text*."""
    line = text.count("\n", 0, index) + 1
    column = index - (text.rfind("\n", 0, index) + 1) + 1
    return line, column


def skip_block_comment(text: str, index: int) -> int:
    """Index just past the ``/* ... */`` comment opened at *index*, or -1.

    Block comments nest: ``/* a /* b */ c */`` is a single comment.
    """
    depth = 0
    i = index
    while i < len(text):
        if text.startswith("/*", i):
            depth += 1
            i += 2
        elif text.startswith("*/", i):
            depth -= 1
            i += 2
            if depth == 0:
                return i
        else:
            i += 1
    return -1


class _Lexer:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def error(self, message: str, index: int) -> ClauseSyntaxError:
        line, column = source_position(self._text, index)
        return ClauseSyntaxError(message, line=line, column=column, source=self._text)

    def tokens(self) -> Iterator[Token]:
        text = self._text
        while True:
            self._skip_trivia()
            start = self._pos
            if start >= len(text):
                line, column = source_position(text, start)
                yield Token(EOF, "", line, column)
                return
            ch = text[start]
            if text.startswith("=>", start):
                self._pos += 2
                yield self._token(ARROW, start)
            elif ch == ",":
                self._pos += 1
                yield self._token(COMMA, start)
            elif ch == '"':
                value = self._string(start)
                yield self._token(STRING, start, value, LiteralKind.STRING)
            elif _RAW_START_RE.match(text, start):
                value = self._raw_string(start)
                yield self._token(STRING, start, value, LiteralKind.STRING)
            elif ch == "'":
                value = self._char(start)
                yield self._token(CHAR, start, value, LiteralKind.CHAR)
            elif ch.isdigit() or (ch == "-" and text[start + 1 : start + 2].isdigit()):
                value, kind = self._number(start)
                yield self._token(NUMBER, start, value, kind)
            elif m := _IDENT_RE.match(text, start):
                self._pos = m.end()
                yield self._token(IDENT, start)
            else:
                raise self.error(f"unexpected character `{ch}`", start)

    def _token(
        self,
        kind: str,
        start: int,
        value: Any = None,
        literal_kind: LiteralKind | None = None,
    ) -> Token:
        line, column = source_position(self._text, start)
        return Token(kind, self._text[start : self._pos], line, column, value, literal_kind)

    def _skip_trivia(self) -> None:
        text = self._text
        while self._pos < len(text):
            if m := _WHITESPACE_RE.match(text, self._pos):
                self._pos = m.end()
            elif text.startswith("//", self._pos):
                end = text.find("\n", self._pos)
                self._pos = len(text) if end == -1 else end
            elif text.startswith("/*", self._pos):
                end = skip_block_comment(text, self._pos)
                if end == -1:
                    raise self.error("unterminated block comment", self._pos)
                self._pos = end
            else:
                return

    def _escape(self, index: int) -> tuple[str, int]:
        """Decode the escape starting at the backslash at *index*."""
        text = self._text
        code = text[index + 1 : index + 2]
        if code in _ESCAPES:
            return _ESCAPES[code], index + 2
        if code == "x":
            digits = text[index + 2 : index + 4]
            if re.fullmatch(r"[0-7][0-9a-fA-F]", digits):
                return chr(int(digits, 16)), index + 4
            raise self.error("invalid `\\x` escape", index)
        if code == "u":
            m = _UNICODE_ESCAPE_RE.match(text, index + 2)
            if m:
                codepoint = int(m.group(1).replace("_", ""), 16)
                if codepoint <= 0x10FFFF and not 0xD800 <= codepoint <= 0xDFFF:
                    return chr(codepoint), m.end()
            raise self.error("invalid unicode escape", index)
        if code == "":
            raise self.error("unterminated escape sequence", index)
        raise self.error(f"unknown escape `\\{code}`", index)

    def _string(self, start: int) -> str:
        text = self._text
        i = start + 1
        parts: list[str] = []
        while i < len(text):
            ch = text[i]
            if ch == '"':
                self._pos = i + 1
                return "".join(parts)
            if ch == "\\":
                if text.startswith(("\n", "\r\n"), i + 1):
                    # line continuation: skip the newline and leading whitespace
                    i += 1
                    while i < len(text) and text[i] in " \t\r\n":
                        i += 1
                    continue
                decoded, i = self._escape(i)
                parts.append(decoded)
                continue
            parts.append(ch)
            i += 1
        raise self.error("unterminated string literal", start)

    def _raw_string(self, start: int) -> str:
        text = self._text
        hashes = 0
        i = start + 1
        while text[i] == "#":
            hashes += 1
            i += 1
        terminator = '"' + "#" * hashes
        end = text.find(terminator, i + 1)
        if end == -1:
            raise self.error("unterminated raw string literal", start)
        self._pos = end + len(terminator)
        return text[i + 1 : end]

    def _char(self, start: int) -> str:
        text = self._text
        i = start + 1
        if i >= len(text) or text[i] in "'\n":
            raise self.error("empty character literal", start)
        if text[i] == "\\":
            value, i = self._escape(i)
        else:
            value = text[i]
            i += 1
        if text[i : i + 1] != "'":
            raise self.error("character literal must hold exactly one character", start)
        self._pos = i + 1
        return value

    def _number(self, start: int) -> tuple[int | float, LiteralKind]:
        m = _NUMBER_RE.match(self._text, start)
        assert m is not None  # the caller checked for a leading digit
        self._pos = m.end()
        negative = self._text[start] == "-"
        suffix = m.group("suffix")
        is_float = bool(m.group("frac") or m.group("exp")) or suffix in FLOAT_SUFFIXES

        if is_float:
            if m.group("dec") is None:
                raise self.error("hexadecimal, octal and binary literals cannot be floats", start)
            if suffix is not None and suffix not in FLOAT_SUFFIXES:
                raise self.error(f"invalid suffix `{suffix}` for float literal", start)
            body = m.group("dec") + (m.group("frac") or "") + (m.group("exp") or "")
            value = float(body.replace("_", ""))
            if math.isinf(value):
                raise self.error("float literal out of range", start)
            return -value if negative else value, LiteralKind.FLOAT

        if suffix is not None and suffix not in INT_SUFFIXES:
            raise self.error(f"invalid suffix `{suffix}` for integer literal", start)
        for group, base in (("hex", 16), ("oct", 8), ("bin", 2), ("dec", 10)):
            digits = m.group(group)
            if digits is not None:
                break
        digits = digits.replace("_", "")
        if not digits:
            raise self.error("integer literal has no digits", start)
        number = int(digits, base)
        return -number if negative else number, LiteralKind.INTEGER


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._tokens = list(_Lexer(text).tokens())
        self._index = 0

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind != EOF:
            self._index += 1
        return token

    def _error(self, message: str, token: Token) -> ClauseSyntaxError:
        return ClauseSyntaxError(
            message, line=token.line, column=token.column, source=self._text
        )

    def parse(self) -> ClauseList:
        clauses: list[Clause] = []
        while self._peek().kind != EOF:
            clauses.append(self._clause())
            if self._peek().kind == COMMA:
                self._advance()
        return tuple(clauses)

    def _clause(self) -> Clause:
        start = self._peek()
        pattern = self._pattern()
        arrow = self._advance()
        if arrow.kind != ARROW:
            raise self._error(f"expected `=>` after pattern, found {arrow.describe()}", arrow)
        value = self._value()
        return Clause(pattern=pattern, value=value, line=start.line, column=start.column)

    def _pattern(self) -> Pattern:
        token = self._advance()
        if token.kind == STRING:
            return NamedPattern(token.value)
        if token.kind == IDENT and token.text == "_":
            return WILDCARD
        raise self._error(
            f"expected brand name string or `_`, found {token.describe()}", token
        )

    def _value(self) -> Value:
        token = self._advance()
        if token.literal_kind is not None:
            return Value(kind=token.literal_kind, raw=token.text, value=token.value)
        if token.kind == IDENT and token.text in ("true", "false"):
            return Value(kind=LiteralKind.BOOLEAN, raw=token.text, value=token.text == "true")
        raise self._error(f"expected literal value, found {token.describe()}", token)


def parse_clauses(text: str) -> ClauseList:
    """Parse clause text into an ordered, immutable ClauseList.

    Raises:
        ClauseSyntaxError: If *text* does not follow the clause grammar.
    """
    return _Parser(text).parse()
