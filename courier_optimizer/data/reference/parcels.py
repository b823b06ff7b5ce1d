"""
Parcel Reference Data

Sample parcel for the calculator, and value ranges for generated parcels.

GENERATED PARCELS
-----------------
Each value is drawn uniformly from [low, low + span):
    weight_kg   - 1 to 21 kg
    dimensions  - 10 to 60 cm per side
"""

from ...models import Dimensions, Parcel


SAMPLE_PARCEL = Parcel(
    weight_kg=5.5,
    dimensions=Dimensions(width=15.0, height=10.0, depth=20.0),
)

WEIGHT_KG_LOW = 1.0
WEIGHT_KG_SPAN = 20.0

DIMENSION_CM_LOW = 10.0
DIMENSION_CM_SPAN = 50.0

DEFAULT_PARCEL_COUNT = 100_000    # Stress test batch size
