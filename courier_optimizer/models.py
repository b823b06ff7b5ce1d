"""
Parcel and Carrier Models

Immutable value types shared by the cost model, selector, and batch pipeline.
Units are kilograms and centimeters throughout.
"""

import re
from typing import NamedTuple


# =============================================================================
# PARCEL
# =============================================================================

class Dimensions(NamedTuple):
    """Parcel size in centimeters."""
    width: float
    height: float
    depth: float

    @property
    def volume_cm3(self) -> float:
        return self.width * self.height * self.depth


class Parcel(NamedTuple):
    """A parcel to ship: actual weight plus dimensions."""
    weight_kg: float
    dimensions: Dimensions


# =============================================================================
# CARRIER
# =============================================================================

class RateTable(NamedTuple):
    """
    Linear pricing coefficients for a carrier.

    Attributes:
        base_cost     - Flat charge per parcel
        cost_per_kg   - Charge per kilogram of actual weight
        cost_per_cm3  - Charge per cubic centimeter of volume
    """
    base_cost: float
    cost_per_kg: float
    cost_per_cm3: float


class Carrier(NamedTuple):
    """A named delivery service with its rate table."""
    name: str
    rates: RateTable

    @property
    def slug(self) -> str:
        """
        Column-safe identifier.

        Lower-cases the name and collapses every run of non-word characters
        (Unicode letters and digits are kept) into one underscore:
        "DHL Express" -> "dhl_express", "日本郵便" -> "日本郵便".
        """
        return re.sub(r"[\W_]+", "_", self.name.lower()).strip("_")


# =============================================================================
# RESULT
# =============================================================================

class ShippingOption(NamedTuple):
    """
    Chosen carrier and its computed price.

    carrier holds a copy of the winning carrier's name, so the option stays
    valid after the carrier list is gone. None marks the "unavailable"
    placeholder returned when nothing could be selected; check is_available
    before treating price as a real quote.
    """
    carrier: str | None
    price: float

    @property
    def is_available(self) -> bool:
        return self.carrier is not None

    def __str__(self) -> str:
        if not self.is_available:
            return "Carrier: Unavailable"
        return f"Carrier: {self.carrier}, Total Cost: ${self.price:.2f}"


__all__ = [
    "Dimensions",
    "Parcel",
    "RateTable",
    "Carrier",
    "ShippingOption",
]
