from decimal import Decimal

import pytest
from pydantic import ValidationError

from basket_pricing import Basket, SettingsConfigurationError
from basket_pricing.core.settings import BasketSettings, get_settings


def test_defaults():
    s = BasketSettings(_env_file=None)
    assert s.ROUNDING == "ROUND_HALF_UP"
    assert s.LOG_LEVEL == "INFO"
    assert s.CURRENCY_SYMBOL == "$"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BASKET_ROUNDING", "round_half_even")
    monkeypatch.setenv("BASKET_LOG_LEVEL", "debug")
    monkeypatch.setenv("BASKET_LOG_JSON", "false")

    s = BasketSettings(_env_file=None)
    assert s.ROUNDING == "ROUND_HALF_EVEN"
    assert s.LOG_LEVEL == "DEBUG"
    assert s.LOG_JSON is False


def test_unknown_rounding_mode_is_rejected(monkeypatch):
    monkeypatch.setenv("BASKET_ROUNDING", "ROUND_NEAREST")
    with pytest.raises(ValidationError):
        BasketSettings(_env_file=None)


@pytest.fixture
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.usefixtures("_fresh_settings")
def test_bad_env_settings_fail_basket_construction(monkeypatch, catalogue, delivery_rules, special_offers):
    monkeypatch.setenv("BASKET_ROUNDING", "bogus")

    with pytest.raises(SettingsConfigurationError) as exc:
        Basket(catalogue, delivery_rules, special_offers)

    assert exc.value.table == "settings"
    assert exc.value.field == "ROUNDING"
    assert exc.value.value == "bogus"


@pytest.mark.usefixtures("_fresh_settings")
def test_settings_are_checked_before_tables(monkeypatch, delivery_rules, special_offers):
    monkeypatch.setenv("BASKET_ROUNDING", "bogus")

    with pytest.raises(SettingsConfigurationError):
        Basket({"R01": 0}, delivery_rules, special_offers)


@pytest.mark.usefixtures("_fresh_settings")
def test_explicit_settings_skip_the_environment(monkeypatch, catalogue, delivery_rules, special_offers, settings):
    monkeypatch.setenv("BASKET_ROUNDING", "bogus")

    basket = Basket(catalogue, delivery_rules, special_offers, settings=settings)
    assert basket.total() == Decimal("4.95")
