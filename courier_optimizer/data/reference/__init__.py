"""
Reference Data

Static carrier rate tables and parcel configuration.
"""

from .carriers import CARRIERS
from .parcels import (
    SAMPLE_PARCEL,
    WEIGHT_KG_LOW,
    WEIGHT_KG_SPAN,
    DIMENSION_CM_LOW,
    DIMENSION_CM_SPAN,
    DEFAULT_PARCEL_COUNT,
)

__all__ = [
    "CARRIERS",
    "SAMPLE_PARCEL",
    "WEIGHT_KG_LOW",
    "WEIGHT_KG_SPAN",
    "DIMENSION_CM_LOW",
    "DIMENSION_CM_SPAN",
    "DEFAULT_PARCEL_COUNT",
]
