from .basket import Basket, OfferLine, PriceBreakdown
from .errors import (
    BasketError,
    CatalogueConfigurationError,
    ConfigurationError,
    DeliveryRulesConfigurationError,
    SettingsConfigurationError,
    SpecialOfferConfigurationError,
    UnknownProductError,
)

__all__ = [
    "Basket",
    "BasketError",
    "CatalogueConfigurationError",
    "ConfigurationError",
    "DeliveryRulesConfigurationError",
    "OfferLine",
    "PriceBreakdown",
    "SettingsConfigurationError",
    "SpecialOfferConfigurationError",
    "UnknownProductError",
]
