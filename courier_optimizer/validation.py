"""
Boundary Validation

Input checks for callers that want them. The cost model and selector never
call these: they evaluate the pricing formula as-is. Scripts and the batch
pipeline validate before handing data to the core.
"""

import math
from collections import Counter
from typing import Iterable

from .models import Carrier, Parcel


def _is_valid_amount(value: float) -> bool:
    """Finite and non-negative."""
    return math.isfinite(value) and value >= 0


def validate_parcel(parcel: Parcel) -> None:
    """
    Validate a parcel's weight and dimensions.

    Raises:
        ValueError: If weight or any dimension is negative or non-finite
    """
    errors = []

    if not _is_valid_amount(parcel.weight_kg):
        errors.append(f"weight_kg: {parcel.weight_kg} must be finite and >= 0")

    for field, value in parcel.dimensions._asdict().items():
        if not _is_valid_amount(value):
            errors.append(f"{field}: {value} must be finite and >= 0")

    if errors:
        raise ValueError("Parcel errors:\n  " + "\n  ".join(errors))


def validate_carriers(carriers: Iterable[Carrier]) -> None:
    """
    Validate carrier names and rate tables.

    Names must contain a letter or digit and map to distinct cost columns
    so the batch pipeline can hold one column per carrier.

    Raises:
        ValueError: If any carrier is misconfigured
    """
    carriers = list(carriers)
    errors = []

    for c in carriers:
        if not c.slug:
            errors.append(f"{c.name!r}: name must contain a letter or digit")
            continue

        for field, value in c.rates._asdict().items():
            if not _is_valid_amount(value):
                errors.append(f"{c.name}: {field} {value} must be finite and >= 0")

    slugs = Counter(c.slug for c in carriers if c.slug)
    for slug, count in slugs.items():
        if count > 1:
            errors.append(f"cost_{slug}: shared by {count} carriers")

    if errors:
        raise ValueError("Carrier configuration errors:\n  " + "\n  ".join(errors))


__all__ = [
    "validate_parcel",
    "validate_carriers",
]
