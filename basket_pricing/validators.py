from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Dict, Optional, Type

from pydantic import ValidationError

from .core.logging_config import logger
from .core.settings import BasketSettings, get_settings
from .errors import (
    CatalogueConfigurationError,
    ConfigurationError,
    DeliveryRulesConfigurationError,
    SettingsConfigurationError,
    SpecialOfferConfigurationError,
)
from .schemas import CatalogueEntryV1, DeliveryRulesV1, SpecialOfferV1

D = Decimal


def _fail(error_cls: Type[ConfigurationError], message: str, **details: Any) -> ConfigurationError:
    err = error_cls(message, **details)
    logger.warning(
        "basket_configuration_invalid",
        table=err.table,
        field=err.field,
        key=err.key,
        error=err.message,
    )
    return err


def _from_pydantic(
    error_cls: Type[ConfigurationError], exc: ValidationError, *, key: Any = None
) -> ConfigurationError:
    """
    Translate the first pydantic error into a ConfigurationError.
    loc looks like ("price",) for entries or ("tiers", 2, "cost") for tiers.
    """
    first = exc.errors()[0]
    loc = tuple(first.get("loc") or ())
    field = None
    for part in loc:
        if isinstance(part, int):
            key = part
        elif part != "tiers" or len(loc) == 1:
            field = str(part)

    msg = str(first.get("msg", "invalid value"))
    where = f" for {key!r}" if key is not None else ""
    message = f"Invalid {field or 'entry'}{where}: {msg}"
    return _fail(error_cls, message, field=field, key=key, value=first.get("input"))


# -----------------------------
# Product catalogue
# -----------------------------


def validate_product_catalogue(product_catalogue: Any) -> Mapping[str, D]:
    """Every key a non-empty string, every price a number > 0."""
    if not isinstance(product_catalogue, Mapping):
        raise _fail(
            CatalogueConfigurationError,
            "Product catalogue must be a mapping of product code to price.",
            value=product_catalogue,
        )

    prices: Dict[str, D] = {}
    for code, price in product_catalogue.items():
        try:
            entry = CatalogueEntryV1(code=code, price=price)
        except ValidationError as e:
            raise _from_pydantic(CatalogueConfigurationError, e, key=code) from e
        prices[entry.code] = entry.price

    return MappingProxyType(prices)


# -----------------------------
# Delivery rules
# -----------------------------


def validate_delivery_rules(delivery_rules: Any) -> DeliveryRulesV1:
    """
    Accepts {"tiers": [...]} or a bare sequence of tiers.
    Tiers come back sorted ascending by min_total.
    """
    if isinstance(delivery_rules, Mapping):
        if "tiers" not in delivery_rules:
            raise _fail(
                DeliveryRulesConfigurationError,
                'Invalid delivery rules format. Must have a "tiers" key with a list of tiers.',
                field="tiers",
            )
        payload = dict(delivery_rules)
    elif isinstance(delivery_rules, Sequence) and not isinstance(delivery_rules, (str, bytes)):
        payload = {"tiers": list(delivery_rules)}
    else:
        raise _fail(
            DeliveryRulesConfigurationError,
            "Delivery rules must be a mapping with \"tiers\" or a list of tiers.",
            value=delivery_rules,
        )

    try:
        return DeliveryRulesV1.model_validate(payload)
    except ValidationError as e:
        raise _from_pydantic(DeliveryRulesConfigurationError, e) from e


# -----------------------------
# Special offers
# -----------------------------


def validate_special_offers(
    special_offers: Any, product_catalogue: Mapping[str, D]
) -> Mapping[str, SpecialOfferV1]:
    if not isinstance(special_offers, Mapping):
        raise _fail(
            SpecialOfferConfigurationError,
            "Special offers must be a mapping of product code to offer.",
            value=special_offers,
        )

    offers: Dict[str, SpecialOfferV1] = {}
    for code, offer in special_offers.items():
        if code not in product_catalogue:
            raise _fail(
                SpecialOfferConfigurationError,
                f"Special offer defined for non-existent product: {code!r}",
                key=code,
                value=offer,
            )
        try:
            offers[code] = SpecialOfferV1.model_validate(offer)
        except ValidationError as e:
            raise _from_pydantic(SpecialOfferConfigurationError, e, key=code) from e

    return MappingProxyType(offers)


# -----------------------------
# Settings
# -----------------------------


def resolve_settings(settings: Optional[BasketSettings] = None) -> BasketSettings:
    """Explicit settings win; otherwise the cached env-backed settings."""
    if settings is not None:
        return settings
    try:
        return get_settings()
    except ValidationError as e:
        raise _from_pydantic(SettingsConfigurationError, e) from e
