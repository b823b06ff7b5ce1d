"""
Carrier Rate Tables

Example carriers used by the calculator and stress test scripts.
Linear pricing: base + per-kg + per-cm3 (see calculate_costs).
"""

from ...models import Carrier, RateTable


CARRIERS = [
    Carrier(
        name="Rappi Courier",
        rates=RateTable(base_cost=5.0, cost_per_kg=1.5, cost_per_cm3=0.001),
    ),
    Carrier(
        name="Uber Paquetes",
        rates=RateTable(base_cost=8.0, cost_per_kg=1.2, cost_per_cm3=0.0008),
    ),
    Carrier(
        name="DHL Express",
        rates=RateTable(base_cost=20.0, cost_per_kg=1.0, cost_per_cm3=0.002),
    ),
]
