"""
Calculate Parcel Costs

Vectorized counterpart of calculate_costs.find_cheapest: prices every parcel
in a DataFrame against every carrier and picks the cheapest per row.

Per-row results match find_cheapest exactly: the same formula evaluated in
the same order, and the same tie-break: the earliest carrier in list order
holding the minimum wins.
"""

import polars as pl

from ..calculate_costs import UNAVAILABLE
from ..data import load_carriers
from ..models import Carrier, ShippingOption
from ..validation import validate_carriers
from ..version import VERSION
from .columns import AFTER_SUPPLEMENT, RESERVED_COLS, carrier_cost_cols, cost_column
from .supplement_parcels import supplement_parcels


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    carriers: list[Carrier] | None = None
) -> pl.DataFrame:
    """
    Calculate shipping costs for a parcel DataFrame.

    Args:
        df: Raw parcel DataFrame (see columns.REQUIRED_INPUT_COLS)
        carriers: Carriers in preference order (reference carriers if not provided)

    Returns:
        DataFrame with supplemented data, per-carrier costs, and the cheapest option
    """
    if carriers is None:
        carriers = load_carriers()

    df = supplement_parcels(df)
    df = calculate(df, carriers)

    return df


def calculate(df: pl.DataFrame, carriers: list[Carrier]) -> pl.DataFrame:
    """
    Calculate costs for supplemented parcels.

    Args:
        df: Supplemented parcel DataFrame from supplement_parcels
        carriers: Carriers in preference order (first one wins ties)

    Returns:
        DataFrame with added columns:
            - cost_<carrier>: Price per carrier (see columns.cost_column)
            - cheapest_carrier: Winning carrier name (null if no carriers)
            - cost_cheapest: Winning price (UNAVAILABLE.price if no carriers)
            - calculator_version

    Raises:
        ValueError: If supplement columns are missing or carriers are misconfigured
    """
    missing = [c for c in AFTER_SUPPLEMENT if c not in df.columns]
    if missing:
        raise ValueError(
            f"Missing columns {', '.join(missing)}. Run supplement_parcels first."
        )
    validate_carriers(carriers)
    _check_carrier_columns(carriers)

    df = _calculate_carrier_costs(df, carriers)
    df = _select_cheapest(df, carriers)
    df = _stamp_version(df)

    return df


def _check_carrier_columns(carriers: list[Carrier]) -> None:
    """Reject carriers whose cost column would overwrite a pipeline column."""
    clashes = [
        f"{c.name}: cost column '{cost_column(c)}' is reserved"
        for c in carriers
        if cost_column(c) in RESERVED_COLS
    ]
    if clashes:
        raise ValueError("Carrier column errors:\n  " + "\n  ".join(clashes))


# =============================================================================
# COST CALCULATION
# =============================================================================

def _carrier_cost(carrier: Carrier) -> pl.Expr:
    """base + per-kg * weight + per-cm3 * volume, as a column expression."""
    rates = carrier.rates
    return (
        pl.lit(rates.base_cost, dtype=pl.Float64) +
        pl.lit(rates.cost_per_kg, dtype=pl.Float64) * pl.col("weight_kg") +
        pl.lit(rates.cost_per_cm3, dtype=pl.Float64) * pl.col("volume_cm3")
    )


def _calculate_carrier_costs(df: pl.DataFrame, carriers: list[Carrier]) -> pl.DataFrame:
    """Add one cost column per carrier."""
    if not carriers:
        return df
    return df.with_columns([
        _carrier_cost(c).alias(cost_column(c)) for c in carriers
    ])


# =============================================================================
# SELECTION
# =============================================================================

def _select_cheapest(df: pl.DataFrame, carriers: list[Carrier]) -> pl.DataFrame:
    """
    Pick the cheapest carrier per row.

    Takes the row minimum over the carrier cost columns, then the first
    carrier (in carrier order) holding it, so the earliest carrier keeps a
    tie. A minimum that is not below UNAVAILABLE.price, or an empty carrier
    list, leaves the row unavailable.
    """
    if not carriers:
        return df.with_columns([
            pl.lit(UNAVAILABLE.carrier, dtype=pl.Utf8).alias("cheapest_carrier"),
            pl.lit(UNAVAILABLE.price, dtype=pl.Float64).alias("cost_cheapest"),
        ])

    cost_cols = carrier_cost_cols(carriers)
    df = df.with_columns([
        pl.min_horizontal(cost_cols).alias("_min_cost"),
        pl.concat_list(cost_cols).list.arg_min().alias("_min_index"),
    ])

    # Map winning position to carrier name
    name = pl.when(pl.col("_min_index") == 0).then(pl.lit(carriers[0].name))
    for i, carrier in enumerate(carriers[1:], start=1):
        name = name.when(pl.col("_min_index") == i).then(pl.lit(carrier.name))

    available = pl.col("_min_cost") < UNAVAILABLE.price
    df = df.with_columns([
        pl.when(available)
        .then(name)
        .otherwise(pl.lit(UNAVAILABLE.carrier, dtype=pl.Utf8))
        .alias("cheapest_carrier"),
        pl.when(available)
        .then(pl.col("_min_cost"))
        .otherwise(pl.lit(UNAVAILABLE.price, dtype=pl.Float64))
        .alias("cost_cheapest"),
    ])

    return df.drop(["_min_cost", "_min_index"])


def cheapest_overall(df: pl.DataFrame) -> ShippingOption:
    """
    Cheapest option across all rows of a calculated DataFrame.

    The first row holding the minimum wins ties.

    Returns:
        ShippingOption for the winning row, or UNAVAILABLE if no row
        has an available option
    """
    available = df.filter(pl.col("cheapest_carrier").is_not_null())
    if available.is_empty():
        return UNAVAILABLE

    row = available.filter(
        pl.col("cost_cheapest") == pl.col("cost_cheapest").min()
    ).row(0, named=True)

    return ShippingOption(carrier=row["cheapest_carrier"], price=row["cost_cheapest"])


# =============================================================================
# METADATA
# =============================================================================

def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))
