"""Resolver: select one value from a ClauseList for a configured brand.

INVARIANT: first match in source order wins. A wildcard matches
unconditionally and ends the scan where it stands, so ``_`` placed before a
named clause shadows that clause.
"""

from __future__ import annotations

import logging

from white_label.domain.clauses import Clause, ClauseList, Value, brand_names
from white_label.domain.errors import ConfigMissingError, NoMatchError
from white_label.domain.parser import parse_clauses

logger = logging.getLogger(__name__)


def select_clause(clauses: ClauseList, brand: str | None) -> Clause:
    """Return the first clause whose pattern matches *brand*.

    Raises:
        ConfigMissingError: If *brand* is None, whatever the clauses hold.
        NoMatchError: If no clause matches.
    """
    if brand is None:
        raise ConfigMissingError()
    for clause in clauses:
        if clause.pattern.matches(brand):
            logger.debug(
                "Brand %r matched %s => %s",
                brand,
                clause.pattern,
                clause.value.raw,
                extra={
                    "brand": brand,
                    "pattern": str(clause.pattern),
                    "kind": str(clause.value.kind),
                    "clause_line": clause.line,
                },
            )
            return clause
    raise NoMatchError(brand, brand_names(clauses))


def resolve(clauses: ClauseList, brand: str | None) -> Value:
    """Return the value selected for *brand*. See :func:`select_clause`."""
    return select_clause(clauses, brand).value


def resolve_text(text: str, brand: str | None) -> Value:
    """Parse *text* and resolve it for *brand* in one step.

    The brand check runs after parsing, so a syntax error is reported even
    when no brand is configured.
    """
    return resolve(parse_clauses(text), brand)
