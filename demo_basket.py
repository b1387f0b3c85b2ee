#!/usr/bin/env python3
"""
Demo script for the Basket.
Prices the four sample baskets and prints each total.
"""

from basket_pricing import Basket
from basket_pricing.core.logging_config import setup_logging
from basket_pricing.core.settings import get_settings
from basket_pricing.samples import SAMPLE_CATALOGUE, SAMPLE_DELIVERY_RULES, SAMPLE_SPECIAL_OFFERS

SCENARIOS = [
    ["B01", "G01"],
    ["R01", "R01"],
    ["R01", "G01"],
    ["B01", "B01", "R01", "R01", "R01"],
]


def main():
    setup_logging()
    settings = get_settings()

    for i, codes in enumerate(SCENARIOS, 1):
        basket = Basket(SAMPLE_CATALOGUE, SAMPLE_DELIVERY_RULES, SAMPLE_SPECIAL_OFFERS)
        for code in codes:
            basket.add(code)

        print(f"Basket {i} ({', '.join(codes)}) total: {settings.CURRENCY_SYMBOL}{basket.total()}")


if __name__ == "__main__":
    main()
