"""Clause model: patterns, values, and clause lists.

Pure frozen dataclasses. A clause list is a plain tuple so that source
order is preserved and nothing can be appended after parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from white_label.domain.types import LiteralKind


@dataclass(frozen=True)
class Value:
    """An opaque literal selected by a clause.

    ``raw`` is the token exactly as written (suffixes included) and
    ``value`` the decoded Python object. Neither is ever converted to
    another kind.
    """

    kind: LiteralKind
    raw: str
    value: str | int | bool | float


@dataclass(frozen=True)
class NamedPattern:
    """Matches one brand name, case-sensitively."""

    name: str

    def matches(self, brand: str) -> bool:
        return self.name == brand

    def __str__(self) -> str:
        return f'"{self.name}"'


@dataclass(frozen=True)
class WildcardPattern:
    """The catch-all ``_`` pattern."""

    def matches(self, brand: str) -> bool:
        return True

    def __str__(self) -> str:
        return "_"


Pattern = NamedPattern | WildcardPattern

WILDCARD = WildcardPattern()


@dataclass(frozen=True)
class Clause:
    """One ``pattern => value`` rule.

    ``line`` and ``column`` locate the pattern in the source text; they are
    excluded from equality so equivalent clause lists compare equal however
    they were laid out.
    """

    pattern: Pattern
    value: Value
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


ClauseList = tuple[Clause, ...]


def brand_names(clauses: ClauseList) -> tuple[str, ...]:
    """Named patterns in source order, without duplicates."""
    seen: dict[str, None] = {}
    for clause in clauses:
        if isinstance(clause.pattern, NamedPattern):
            seen.setdefault(clause.pattern.name, None)
    return tuple(seen)


def has_wildcard(clauses: ClauseList) -> bool:
    return any(isinstance(c.pattern, WildcardPattern) for c in clauses)


def shadowed_clauses(clauses: ClauseList) -> list[Clause]:
    """Clauses that first-match-wins can never select.

    A clause is shadowed when it follows a wildcard or repeats a brand
    name already matched by an earlier clause.
    """
    seen: set[str] = set()
    after_wildcard = False
    shadowed: list[Clause] = []
    for clause in clauses:
        pattern = clause.pattern
        if after_wildcard or (isinstance(pattern, NamedPattern) and pattern.name in seen):
            shadowed.append(clause)
        elif isinstance(pattern, NamedPattern):
            seen.add(pattern.name)
        else:
            after_wildcard = True
    return shadowed
