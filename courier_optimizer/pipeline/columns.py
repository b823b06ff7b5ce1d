"""
Column Schema Definitions

Documents the columns at each pipeline stage and the per-carrier naming rule.
"""

from ..models import Carrier


# =============================================================================
# REQUIRED INPUT COLUMNS
# =============================================================================

REQUIRED_INPUT_COLS = [
    "weight_kg",            # Actual weight (kilograms)
    "width_cm",             # Parcel width (centimeters)
    "height_cm",            # Parcel height (centimeters)
    "depth_cm",             # Parcel depth (centimeters)
]


# =============================================================================
# SUPPLEMENT COLUMNS (added by supplement_parcels)
# =============================================================================

SUPPLEMENT_COLS = [
    "volume_cm3",           # W x H x D (cubic centimeters)
]


# =============================================================================
# CARRIER COST COLUMNS (added by calculate, one per carrier)
# =============================================================================

def cost_column(carrier: Carrier) -> str:
    """Cost column name for a carrier ("DHL Express" -> "cost_dhl_express")."""
    return f"cost_{carrier.slug}"


def carrier_cost_cols(carriers: list[Carrier]) -> list[str]:
    """Cost columns for each carrier, in carrier order."""
    return [cost_column(c) for c in carriers]


# =============================================================================
# SELECTION COLUMNS (added by calculate)
# =============================================================================

SELECTION_COLS = [
    "cheapest_carrier",     # Winning carrier name (null if no carriers)
    "cost_cheapest",        # Winning price (float max if no carriers)
]


# =============================================================================
# METADATA COLUMNS
# =============================================================================

METADATA_COLS = [
    "calculator_version",   # Version stamp from courier_optimizer/version.py
]


# =============================================================================
# COLUMN SETS
# =============================================================================

# All columns after supplement_parcels (with required inputs)
AFTER_SUPPLEMENT = REQUIRED_INPUT_COLS + SUPPLEMENT_COLS

# Names a carrier cost column must not take
RESERVED_COLS = AFTER_SUPPLEMENT + SELECTION_COLS + METADATA_COLS


def after_calculate(carriers: list[Carrier]) -> list[str]:
    """All columns after calculate (with required inputs)."""
    return (
        AFTER_SUPPLEMENT +
        carrier_cost_cols(carriers) +
        SELECTION_COLS +
        METADATA_COLS
    )
