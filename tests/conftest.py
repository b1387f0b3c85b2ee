from __future__ import annotations

import copy
from decimal import ROUND_HALF_UP

import pytest

from basket_pricing import Basket
from basket_pricing.core.settings import BasketSettings
from basket_pricing.samples import SAMPLE_CATALOGUE, SAMPLE_DELIVERY_RULES, SAMPLE_SPECIAL_OFFERS


@pytest.fixture
def settings():
    # Never read a developer's .env during tests
    return BasketSettings(_env_file=None, ROUNDING=ROUND_HALF_UP)


@pytest.fixture
def catalogue():
    return dict(SAMPLE_CATALOGUE)


@pytest.fixture
def delivery_rules():
    return copy.deepcopy(SAMPLE_DELIVERY_RULES)


@pytest.fixture
def special_offers():
    return copy.deepcopy(SAMPLE_SPECIAL_OFFERS)


@pytest.fixture
def make_basket(catalogue, delivery_rules, special_offers, settings):
    def _make(*codes, **overrides):
        basket = Basket(
            overrides.get("catalogue", catalogue),
            overrides.get("delivery_rules", delivery_rules),
            overrides.get("special_offers", special_offers),
            settings=overrides.get("settings", settings),
        )
        for code in codes:
            basket.add(code)
        return basket

    return _make


@pytest.fixture
def basket(make_basket):
    return make_basket()
