"""Tests for first-match-wins brand resolution."""

import pytest

from white_label.domain.clauses import WILDCARD, Clause, NamedPattern, Value
from white_label.domain.errors import ClauseSyntaxError, ConfigMissingError, NoMatchError
from white_label.domain.parser import parse_clauses
from white_label.domain.resolver import resolve, resolve_text, select_clause
from white_label.domain.types import LiteralKind


def _int(n: int) -> Value:
    return Value(kind=LiteralKind.INTEGER, raw=str(n), value=n)


class TestMatching:
    def test_named_match(self) -> None:
        clauses = parse_clauses('"Northwind" => 8080, "TestBrand" => 7777')
        assert resolve(clauses, "TestBrand") == _int(7777)

    def test_case_sensitive(self) -> None:
        clauses = parse_clauses('"Northwind" => 1, _ => 2')
        assert resolve(clauses, "northwind").value == 2

    def test_no_trimming(self) -> None:
        clauses = parse_clauses('"Northwind" => 1, _ => 2')
        assert resolve(clauses, "Northwind ").value == 2

    def test_first_match_wins(self) -> None:
        clauses = parse_clauses('"A" => 1, "B" => 2, "A" => 3')
        assert resolve(clauses, "A").value == 1

    def test_select_clause_returns_clause(self) -> None:
        clauses = parse_clauses('"A" => 1, "B" => 2')
        clause = select_clause(clauses, "B")
        assert isinstance(clause, Clause)
        assert clause.pattern == NamedPattern("B")

    def test_accepts_hand_built_clauses(self) -> None:
        clauses = (Clause(NamedPattern("A"), _int(1)), Clause(WILDCARD, _int(9)))
        assert resolve(clauses, "Z") == _int(9)

    def test_deterministic(self) -> None:
        clauses = parse_clauses('"A" => 1, _ => 2')
        assert {resolve(clauses, "A") for _ in range(10)} == {_int(1)}


class TestWildcard:
    def test_fallback(self) -> None:
        value = resolve_text('"NonExistentBrand" => "specific", _ => "fallback"', "TestBrand")
        assert value.value == "fallback"

    def test_named_match_before_wildcard(self) -> None:
        value = resolve_text('"TestBrand" => "specific", _ => "fallback"', "TestBrand")
        assert value.value == "specific"

    @pytest.mark.parametrize("brand,expected", [("C", 9), ("A", 1), ("B", 9)])
    def test_wildcard_short_circuits_in_source_order(self, brand: str, expected: int) -> None:
        """A wildcard ahead of a named clause shadows that clause."""
        clauses = parse_clauses('"A" => 1, _ => 9, "B" => 2')
        assert resolve(clauses, brand).value == expected

    @pytest.mark.parametrize("brand", ["Northwind", "anything", ""])
    def test_wildcard_only_matches_any_brand(self, brand: str) -> None:
        assert resolve_text('_ => "always"', brand).value == "always"


class TestFailures:
    def test_no_match_without_wildcard(self) -> None:
        clauses = parse_clauses('"A" => 1, "B" => 2')
        with pytest.raises(NoMatchError) as exc_info:
            resolve(clauses, "C")
        assert exc_info.value.brand == "C"
        assert exc_info.value.known == ("A", "B")
        assert exc_info.value.code == "NO_MATCH"

    def test_empty_list_never_matches(self) -> None:
        with pytest.raises(NoMatchError):
            resolve((), "A")

    @pytest.mark.parametrize("text", ['_ => 1', '"A" => 1', ""])
    def test_missing_brand_always_fails(self, text: str) -> None:
        with pytest.raises(ConfigMissingError, match="WHITE_LABEL_BRAND must be set"):
            resolve_text(text, None)

    def test_empty_brand_is_configured(self) -> None:
        assert resolve_text('"" => 1, _ => 2', "").value == 1

    def test_syntax_error_wins_over_missing_brand(self) -> None:
        with pytest.raises(ClauseSyntaxError):
            resolve_text('"A" => ', None)


class TestKindPreservation:
    @pytest.mark.parametrize(
        "literal,kind,expected",
        [
            ('"https://test.example.com/"', LiteralKind.STRING, "https://test.example.com/"),
            ("7777", LiteralKind.INTEGER, 7777),
            ("false", LiteralKind.BOOLEAN, False),
            ("3.14", LiteralKind.FLOAT, 3.14),
            ("'T'", LiteralKind.CHAR, "T"),
        ],
    )
    def test_value_returned_unchanged(
        self, literal: str, kind: LiteralKind, expected: object
    ) -> None:
        value = resolve_text(f'"Northwind" => 0, "X" => {literal}', "X")
        assert value.kind == kind
        assert value.value == expected
        assert type(value.value) is type(expected)
        assert value.raw == literal
