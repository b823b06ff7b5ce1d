"""
Parcel Loaders

Parcel sources for the batch pipeline: random generation and conversion
from Parcel values.
"""

from .generate import generate_parcels, PARCEL_SCHEMA
from .frames import frame_from_parcels, parcels_from_frame

__all__ = [
    "generate_parcels",
    "frame_from_parcels",
    "parcels_from_frame",
    "PARCEL_SCHEMA",
]
