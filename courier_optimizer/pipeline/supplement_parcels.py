"""
Supplement Parcels

Validates raw parcel rows and adds derived size columns.
"""

import polars as pl

from .columns import REQUIRED_INPUT_COLS


def supplement_parcels(df: pl.DataFrame) -> pl.DataFrame:
    """
    Supplement parcel data with calculated dimensions.

    Args:
        df: Parcel DataFrame with weight_kg, width_cm, height_cm, depth_cm

    Returns:
        DataFrame with input columns cast to Float64 and added columns:
            - volume_cm3: Cubic centimeters (W x H x D)

    Raises:
        ValueError: If required columns are missing, or any value is null,
            negative, or non-finite
    """
    _check_required_columns(df)

    df = df.with_columns([pl.col(c).cast(pl.Float64) for c in REQUIRED_INPUT_COLS])
    _check_values(df)

    return _add_calculated_dimensions(df)


def _check_required_columns(df: pl.DataFrame) -> None:
    missing = [c for c in REQUIRED_INPUT_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required parcel columns: {', '.join(missing)}")


def _check_values(df: pl.DataFrame) -> None:
    """Reject rows the pricing formula would silently misprice."""
    errors = []

    for col in REQUIRED_INPUT_COLS:
        bad_count = df.filter(
            pl.col(col).is_null() |
            ~pl.col(col).is_finite() |
            (pl.col(col) < 0)
        ).height
        if bad_count > 0:
            errors.append(f"{col}: {bad_count} row(s) null, negative, or non-finite")

    if errors:
        raise ValueError("Parcel data errors:\n  " + "\n  ".join(errors))


def _add_calculated_dimensions(df: pl.DataFrame) -> pl.DataFrame:
    """Add calculated dimensional columns."""
    return df.with_columns(
        (pl.col("width_cm") * pl.col("height_cm") * pl.col("depth_cm"))
        .alias("volume_cm3")
    )
