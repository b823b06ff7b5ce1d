"""
Courier Optimizer

Finds the cheapest carrier for a parcel under linear per-kg and per-cm3
pricing.

Structure:
    - models: Parcel, carrier, and result value types
    - calculate_costs: Cost model and cheapest-carrier selector
    - validation: Optional boundary checks for parcels and carriers
    - data/: Reference carriers, sample parcel, parcel generation
    - pipeline/: Batch pricing over polars DataFrames
    - scripts/: calculator and stress_test CLIs
"""

from .models import Dimensions, Parcel, RateTable, Carrier, ShippingOption
from .calculate_costs import UNAVAILABLE, volume, cost, find_cheapest
from .version import VERSION

__all__ = [
    # Models
    "Dimensions",
    "Parcel",
    "RateTable",
    "Carrier",
    "ShippingOption",
    # Core
    "UNAVAILABLE",
    "volume",
    "cost",
    "find_cheapest",
    "VERSION",
]
