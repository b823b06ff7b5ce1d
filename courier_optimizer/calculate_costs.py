"""
Courier Cost Calculator

Prices a single parcel against a list of carriers and picks the cheapest.

PRICING MODEL
-------------
    cost = base_cost + cost_per_kg * weight_kg + cost_per_cm3 * volume_cm3

    volume_cm3 = width * height * depth

No rounding is applied; format prices at display time. Inputs are not
validated here: negative or non-finite values flow straight through the
formula. Use courier_optimizer.validation at the boundary if that matters.

SELECTION
---------
    find_cheapest() scans carriers in order and keeps the first one with the
    lowest cost (strict less-than, so later ties never replace the winner).
    An empty carrier list yields UNAVAILABLE instead of raising.

USAGE
-----
    from courier_optimizer.calculate_costs import find_cheapest
    option = find_cheapest(carriers, parcel)
    if option.is_available:
        print(option)
"""

import sys
from typing import Iterable

from .models import Carrier, Parcel, ShippingOption


# Placeholder result when no carrier can be selected
UNAVAILABLE = ShippingOption(carrier=None, price=sys.float_info.max)


# =============================================================================
# COST MODEL
# =============================================================================

def volume(parcel: Parcel) -> float:
    """Parcel volume in cubic centimeters."""
    return parcel.dimensions.volume_cm3


def cost(carrier: Carrier, parcel: Parcel) -> float:
    """Total price of shipping parcel with carrier."""
    rates = carrier.rates
    weight_cost = rates.cost_per_kg * parcel.weight_kg
    volume_cost = rates.cost_per_cm3 * volume(parcel)
    return rates.base_cost + weight_cost + volume_cost


# =============================================================================
# SELECTOR
# =============================================================================

def find_cheapest(carriers: Iterable[Carrier], parcel: Parcel) -> ShippingOption:
    """
    Find the cheapest carrier for a parcel.

    Args:
        carriers: Carriers in preference order (first one wins ties)
        parcel: Parcel to price

    Returns:
        ShippingOption with the winning carrier's name and price,
        or UNAVAILABLE if carriers is empty
    """
    best = UNAVAILABLE

    for carrier in carriers:
        price = cost(carrier, parcel)
        if price < best.price:
            best = ShippingOption(carrier=carrier.name, price=price)

    return best


__all__ = [
    "UNAVAILABLE",
    "volume",
    "cost",
    "find_cheapest",
]
