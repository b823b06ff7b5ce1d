"""
Parcel Frame Conversion

Moves parcels between Parcel values and the pipeline's DataFrame layout.
"""

from typing import Iterable

import polars as pl

from ...models import Dimensions, Parcel
from .generate import PARCEL_SCHEMA


def frame_from_parcels(parcels: Iterable[Parcel]) -> pl.DataFrame:
    """Build a pipeline input DataFrame, one row per parcel."""
    rows = [
        {
            "weight_kg": p.weight_kg,
            "width_cm": p.dimensions.width,
            "height_cm": p.dimensions.height,
            "depth_cm": p.dimensions.depth,
        }
        for p in parcels
    ]
    return pl.DataFrame(rows, schema=PARCEL_SCHEMA)


def parcels_from_frame(df: pl.DataFrame) -> list[Parcel]:
    """Read Parcel values back out of a DataFrame with the input columns."""
    return [
        Parcel(
            weight_kg=row["weight_kg"],
            dimensions=Dimensions(
                width=row["width_cm"],
                height=row["height_cm"],
                depth=row["depth_cm"],
            ),
        )
        for row in df.select(list(PARCEL_SCHEMA)).iter_rows(named=True)
    ]
