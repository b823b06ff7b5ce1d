"""
Courier Data

Reference data and loaders for carriers and parcels.

Structure:
    - reference/: Static reference data (carrier rate tables, parcel config)
    - loaders/: Parcel sources (random generation, frame conversion)
"""

from ..models import Carrier
from ..validation import validate_carriers

from .reference import (
    CARRIERS,
    SAMPLE_PARCEL,
    WEIGHT_KG_LOW,
    WEIGHT_KG_SPAN,
    DIMENSION_CM_LOW,
    DIMENSION_CM_SPAN,
    DEFAULT_PARCEL_COUNT,
)
from .loaders import (
    generate_parcels,
    frame_from_parcels,
    parcels_from_frame,
    PARCEL_SCHEMA,
)


def load_carriers() -> list[Carrier]:
    """Reference carriers as a new list (callers may reorder or extend it)."""
    return list(CARRIERS)


# Fail fast on bad reference rates
validate_carriers(CARRIERS)

__all__ = [
    # Reference data
    "load_carriers",
    "CARRIERS",
    "SAMPLE_PARCEL",
    "WEIGHT_KG_LOW",
    "WEIGHT_KG_SPAN",
    "DIMENSION_CM_LOW",
    "DIMENSION_CM_SPAN",
    "DEFAULT_PARCEL_COUNT",
    # Loaders
    "generate_parcels",
    "frame_from_parcels",
    "parcels_from_frame",
    "PARCEL_SCHEMA",
]
