from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Tuple

from ..schemas import SpecialOfferV1

D = Decimal


def applicable_sets(count: int, offer: SpecialOfferV1) -> int:
    """Number of discounted sets, capped by max_apply_count."""
    if count < offer.min_buy:
        return 0
    return min(count // offer.min_buy, offer.max_apply_count)


def calc_offer_discount_delta(unit_price: D, count: int, offer: SpecialOfferV1) -> Tuple[D, Dict[str, Any]]:
    """
    One unit per qualifying set is discounted, not every unit of the set:
      delta = -(unit_price * percentage / 100) * applicable_sets

    The delta is left unrounded; only the basket total is rounded.
    """
    if count <= 0:
        return D("0"), {"reason": "not_in_basket"}

    if count < offer.min_buy:
        return D("0"), {"reason": "min_buy_not_met", "count": count, "min_buy": offer.min_buy}

    sets = applicable_sets(count, offer)
    if sets < 1:
        return D("0"), {"reason": "no_applicable_sets", "count": count}

    pct = D(offer.percentage)
    delta = (unit_price * pct / D("100")) * sets * D("-1")
    return delta, {"pct": str(pct), "count": count, "applicable_sets": sets}
