# basket_pricing/schemas/config_v1.py
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

D = Decimal


def to_decimal(value: Any, *, allow_str: bool) -> Any:
    """
    Numbers are converted via str() so 32.95 stays Decimal("32.95").
    Anything we cannot convert is handed back untouched; pydantic then
    reports it as the offending input.
    """
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    if isinstance(value, str):
        if not allow_str:
            raise ValueError("must be a number, not a string")
        value = value.strip()
    if isinstance(value, (int, float, str, Decimal)):
        try:
            d = D(str(value))
        except InvalidOperation:
            raise ValueError("must be numeric") from None
        if not d.is_finite():
            raise ValueError("must be a finite number")
        return d
    return value


class CatalogueEntryV1(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    code: StrictStr = Field(min_length=1)
    price: Decimal = Field(gt=0)

    @field_validator("price", mode="before")
    @classmethod
    def _price_number(cls, v: Any) -> Any:
        return to_decimal(v, allow_str=False)


class DeliveryTierV1(BaseModel):
    """
    A delivery bracket: `cost` is charged once the discounted subtotal
    reaches `min_total`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    min_total: Decimal = Field(ge=0)
    cost: Decimal = Field(ge=0)

    @field_validator("min_total", "cost", mode="before")
    @classmethod
    def _numeric(cls, v: Any) -> Any:
        # tiers accept numeric strings ("50", "2.95")
        return to_decimal(v, allow_str=True)


class DeliveryRulesV1(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    tiers: Tuple[DeliveryTierV1, ...]

    @field_validator("tiers")
    @classmethod
    def _sorted_unique(cls, tiers: Tuple[DeliveryTierV1, ...]) -> Tuple[DeliveryTierV1, ...]:
        ordered = tuple(sorted(tiers, key=lambda t: t.min_total))
        for prev, cur in zip(ordered, ordered[1:]):
            if prev.min_total == cur.min_total:
                raise ValueError(f"duplicate min_total {cur.min_total}; thresholds must be unique")
        return ordered

    def select(self, subtotal: D) -> Optional[DeliveryTierV1]:
        """Highest-threshold tier the subtotal qualifies for (None if none does)."""
        chosen = None
        for t in self.tiers:
            if subtotal >= t.min_total:
                if chosen is None or t.min_total > chosen.min_total:
                    chosen = t
        return chosen


class SpecialOfferV1(BaseModel):
    """
    Buy at least `min_buy` units of a product, get `percentage` off one unit
    per set of `min_buy`, for at most `max_apply_count` sets.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    percentage: StrictInt = Field(ge=1, le=100)
    min_buy: StrictInt = Field(ge=1)
    max_apply_count: StrictInt = Field(ge=1)
