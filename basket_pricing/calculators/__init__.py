from .delivery import calc_delivery_charge
from .special_offer import applicable_sets, calc_offer_discount_delta

__all__ = ["applicable_sets", "calc_delivery_charge", "calc_offer_discount_delta"]
