"""Sample configuration used by the demo script and the tests."""

SAMPLE_CATALOGUE = {
    "R01": 32.95,
    "G01": 24.95,
    "B01": 7.95,
}

SAMPLE_SPECIAL_OFFERS = {
    "R01": {
        "percentage": 50,
        "min_buy": 2,
        "max_apply_count": 1,
    },
}

SAMPLE_DELIVERY_RULES = {
    "tiers": [
        {"min_total": 0, "cost": 4.95},
        {"min_total": 50, "cost": 2.95},
        {"min_total": 90, "cost": 0},
    ],
}
