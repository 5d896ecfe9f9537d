"""Tests for BaseService error conversion."""

from __future__ import annotations

from collections.abc import Callable

from white_label.config.settings import WhiteLabelSettings
from white_label.domain.errors import ClauseSyntaxError, NoMatchError
from white_label.services.base import BaseService
from white_label.services.brand import BrandService

SettingsFactory = Callable[..., WhiteLabelSettings]


class TestBaseService:
    def test_brand_from_settings(self, make_settings: SettingsFactory) -> None:
        assert BaseService(make_settings(brand="Contoso")).brand == "Contoso"
        assert BaseService(make_settings()).brand is None

    def test_empty_brand_is_a_brand(self, make_settings: SettingsFactory) -> None:
        assert BaseService(make_settings(brand="")).brand == ""

    def test_fail_merges_detail(self, make_settings: SettingsFactory) -> None:
        svc = BaseService(make_settings())
        result = svc._fail("resolve", NoMatchError("C", ("A",)), constant="PORT")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_MATCH"
        assert result.error.detail == {"brand": "C", "known": ["A"], "constant": "PORT"}

    def test_fail_syntax_error(self, make_settings: SettingsFactory) -> None:
        result = BaseService(make_settings())._fail(
            "parse", ClauseSyntaxError("bad", line=1, column=1)
        )
        assert result.error is not None
        assert result.error.message == "bad (line 1, column 1)"

    def test_error_helper(self) -> None:
        result = BaseService._error("check", "NO_MANIFEST", "missing", path="/x")
        assert result.error is not None
        assert result.error.detail == {"path": "/x"}

    def test_brand_service_inherits(self, make_settings: SettingsFactory) -> None:
        assert isinstance(BrandService(make_settings()), BaseService)
