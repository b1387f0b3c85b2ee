from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Tuple

from ..schemas import DeliveryRulesV1

D = Decimal


def calc_delivery_charge(subtotal: D, rules: DeliveryRulesV1) -> Tuple[D, Dict[str, Any]]:
    """
    Charge of the highest tier whose min_total <= subtotal.

    With the sample tiers:
      - min_total: 0   cost: 4.95
      - min_total: 50  cost: 2.95
      - min_total: 90  cost: 0
    """
    if not rules.tiers:
        return D("0"), {"reason": "no_tiers"}

    chosen = rules.select(subtotal)
    if chosen is None:
        return D("0"), {"reason": "no_match"}

    return chosen.cost, {"tier_min_total": str(chosen.min_total), "cost": str(chosen.cost)}
