from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Mapping, Optional, Tuple

from .calculators import calc_delivery_charge, calc_offer_discount_delta
from .core.logging_config import logger
from .core.settings import BasketSettings
from .errors import UnknownProductError
from .validators import (
    resolve_settings,
    validate_delivery_rules,
    validate_product_catalogue,
    validate_special_offers,
)

D = Decimal
CENT = D("0.01")


# -----------------------------
# Breakdown (explainability)
# -----------------------------


@dataclass(frozen=True)
class OfferLine:
    product_code: str
    count: int
    applicable_sets: int
    delta: D


@dataclass(frozen=True)
class PriceBreakdown:
    """
    Every intermediate amount is exact; only `total` is rounded.
    """

    subtotal: D
    discount_total: D
    discounted_subtotal: D
    delivery_charge: D
    delivery_tier_min_total: Optional[D]
    total: D
    offers: Tuple[OfferLine, ...] = ()


# -----------------------------
# Basket
# -----------------------------


class Basket:
    """
    Shopping basket priced against a product catalogue, tiered delivery
    charges and "buy N, get a percentage off" special offers.

    Settings and all three tables are validated here; anything invalid
    raises a ConfigurationError and no basket is created.
    """

    def __init__(
        self,
        product_catalogue: Mapping[str, Any],
        delivery_rules: Any,
        special_offers: Mapping[str, Any],
        *,
        settings: Optional[BasketSettings] = None,
    ):
        resolved = resolve_settings(settings)
        catalogue = validate_product_catalogue(product_catalogue)
        rules = validate_delivery_rules(delivery_rules)
        offers = validate_special_offers(special_offers, catalogue)

        self._catalogue = catalogue
        self._delivery_rules = rules
        self._special_offers = offers
        self._settings = resolved
        self._items: List[str] = []

        logger.debug(
            "basket_created",
            products=len(catalogue),
            delivery_tiers=len(rules.tiers),
            special_offers=len(offers),
        )

    @property
    def items(self) -> Tuple[str, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Basket(items={self._items!r})"

    def add(self, product_code: str) -> None:
        if not isinstance(product_code, str) or product_code not in self._catalogue:
            logger.info("basket_item_rejected", product_code=product_code)
            raise UnknownProductError(product_code)

        self._items.append(product_code)

    def breakdown(self) -> PriceBreakdown:
        subtotal = D("0")
        for code in self._items:
            subtotal += self._catalogue[code]
        counts = Counter(self._items)

        # Offers target distinct products, so their order does not matter
        offer_lines: List[OfferLine] = []
        discount_total = D("0")
        for code, offer in self._special_offers.items():
            delta, meta = calc_offer_discount_delta(self._catalogue[code], counts.get(code, 0), offer)
            if delta == 0:
                continue
            discount_total += delta
            offer_lines.append(
                OfferLine(
                    product_code=code,
                    count=meta["count"],
                    applicable_sets=meta["applicable_sets"],
                    delta=delta,
                )
            )

        discounted = subtotal + discount_total
        delivery, meta = calc_delivery_charge(discounted, self._delivery_rules)
        tier_min = meta.get("tier_min_total")

        total = (discounted + delivery).quantize(CENT, rounding=self._settings.ROUNDING)

        logger.debug(
            "basket_total_computed",
            items=len(self._items),
            subtotal=str(subtotal),
            discount=str(discount_total),
            delivery=str(delivery),
            total=str(total),
        )

        return PriceBreakdown(
            subtotal=subtotal,
            discount_total=discount_total,
            discounted_subtotal=discounted,
            delivery_charge=delivery,
            delivery_tier_min_total=D(tier_min) if tier_min is not None else None,
            total=total,
            offers=tuple(offer_lines),
        )

    def total(self) -> D:
        """Basket total after offers and delivery, rounded to cents."""
        return self.breakdown().total
