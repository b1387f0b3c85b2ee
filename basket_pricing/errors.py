from __future__ import annotations

from typing import Any, Optional


class BasketError(Exception):
    """Base class for everything the basket raises."""


class ConfigurationError(BasketError, ValueError):
    """
    Raised while constructing a Basket when one of the configuration tables
    is invalid. Only the first violation is reported.

    - table: "catalogue" / "delivery_rules" / "special_offers"
    - field: offending field name (None when the whole entry is wrong)
    - key:   product code or tier index the violation belongs to
    - value: the offending input value
    """

    table: str = "configuration"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        key: Any = None,
        value: Any = None,
    ):
        self.message = str(message)
        self.field = field
        self.key = key
        self.value = value
        super().__init__(f"{self.table}: {self.message}")


class CatalogueConfigurationError(ConfigurationError):
    table = "catalogue"


class DeliveryRulesConfigurationError(ConfigurationError):
    table = "delivery_rules"


class SpecialOfferConfigurationError(ConfigurationError):
    table = "special_offers"


class SettingsConfigurationError(ConfigurationError):
    table = "settings"


class UnknownProductError(BasketError, KeyError):
    def __init__(self, product_code: Any):
        self.product_code = product_code
        super().__init__(product_code)

    def __str__(self) -> str:
        return f"Product code {self.product_code!r} does not exist in the catalogue."
