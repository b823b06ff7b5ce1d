"""
Generated Parcels

Random parcel batches for stress testing the selector and batch pipeline.
"""

import numpy as np
import polars as pl

from ..reference.parcels import (
    WEIGHT_KG_LOW,
    WEIGHT_KG_SPAN,
    DIMENSION_CM_LOW,
    DIMENSION_CM_SPAN,
)


PARCEL_SCHEMA = {
    "weight_kg": pl.Float64,
    "width_cm": pl.Float64,
    "height_cm": pl.Float64,
    "depth_cm": pl.Float64,
}


def generate_parcels(n: int, seed: int | None = None) -> pl.DataFrame:
    """
    Generate n random parcels.

    Args:
        n: Number of parcels (0 gives an empty frame with the input schema)
        seed: Seed for numpy's default_rng, for reproducible batches

    Returns:
        DataFrame with columns weight_kg, width_cm, height_cm, depth_cm

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Parcel count must be >= 0, got {n}")

    rng = np.random.default_rng(seed)

    def _draw(low: float, span: float) -> np.ndarray:
        return rng.random(n) * span + low

    return pl.DataFrame({
        "weight_kg": _draw(WEIGHT_KG_LOW, WEIGHT_KG_SPAN),
        "width_cm": _draw(DIMENSION_CM_LOW, DIMENSION_CM_SPAN),
        "height_cm": _draw(DIMENSION_CM_LOW, DIMENSION_CM_SPAN),
        "depth_cm": _draw(DIMENSION_CM_LOW, DIMENSION_CM_SPAN),
    }, schema=PARCEL_SCHEMA)

