from .config_v1 import CatalogueEntryV1, DeliveryRulesV1, DeliveryTierV1, SpecialOfferV1

__all__ = ["CatalogueEntryV1", "DeliveryRulesV1", "DeliveryTierV1", "SpecialOfferV1"]
