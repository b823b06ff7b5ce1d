"""
Pipeline Package

Batch pricing over parcel DataFrames:
- columns: Column schema and per-carrier naming
- supplement_parcels: Validate parcels and add volume
- calculate: Price every carrier and pick the cheapest per row
"""

from .columns import REQUIRED_INPUT_COLS, cost_column, after_calculate
from .supplement_parcels import supplement_parcels
from .calculate import calculate, calculate_costs, cheapest_overall

__all__ = [
    "REQUIRED_INPUT_COLS",
    "cost_column",
    "after_calculate",
    "supplement_parcels",
    "calculate",
    "calculate_costs",
    "cheapest_overall",
]
