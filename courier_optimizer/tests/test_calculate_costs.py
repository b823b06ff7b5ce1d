"""
Tests for the Courier Cost Calculator

Run with: pytest courier_optimizer/tests/ -v
"""

import sys

import pytest

from courier_optimizer.calculate_costs import UNAVAILABLE, cost, find_cheapest, volume
from courier_optimizer.data import CARRIERS, SAMPLE_PARCEL
from courier_optimizer.models import Carrier, Dimensions, Parcel, RateTable, ShippingOption


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def cube_parcel() -> Parcel:
    """2 kg parcel, 10x10x10 cm (1000 cm3)."""
    return Parcel(weight_kg=2.0, dimensions=Dimensions(10.0, 10.0, 10.0))


@pytest.fixture
def two_carriers() -> list[Carrier]:
    """
    Two carriers where B wins for the cube parcel.

    A: 10 + 1.0*2 + 0.001*1000  = 13.0
    B:  5 + 2.0*2 + 0.0005*1000 =  9.5
    """
    return [
        Carrier("Carrier_A", RateTable(base_cost=10.0, cost_per_kg=1.0, cost_per_cm3=0.001)),
        Carrier("Carrier_B", RateTable(base_cost=5.0, cost_per_kg=2.0, cost_per_cm3=0.0005)),
    ]


def make_carrier(name: str, base: float, per_kg: float = 0.0, per_cm3: float = 0.0) -> Carrier:
    return Carrier(name, RateTable(base_cost=base, cost_per_kg=per_kg, cost_per_cm3=per_cm3))


# =============================================================================
# TESTS: VOLUME
# =============================================================================

class TestVolume:
    """Tests for volume()."""

    def test_cube(self, cube_parcel):
        assert volume(cube_parcel) == 1000.0

    def test_product_of_sides(self):
        parcel = Parcel(weight_kg=1.0, dimensions=Dimensions(15.0, 10.0, 20.0))
        assert volume(parcel) == 15.0 * 10.0 * 20.0

    def test_zero_side(self):
        parcel = Parcel(weight_kg=1.0, dimensions=Dimensions(15.0, 0.0, 20.0))
        assert volume(parcel) == 0.0

    def test_matches_dimensions_property(self, cube_parcel):
        assert volume(cube_parcel) == cube_parcel.dimensions.volume_cm3


# =============================================================================
# TESTS: COST MODEL
# =============================================================================

class TestCost:
    """Tests for cost()."""

    def test_zero_rates(self):
        """All-zero rate table costs nothing regardless of parcel."""
        carrier = make_carrier("Test Zero", 0.0)
        parcel = Parcel(weight_kg=10.0, dimensions=Dimensions(10.0, 10.0, 10.0))
        assert cost(carrier, parcel) == 0.0

    def test_base_only(self, cube_parcel):
        """With zero per-kg and per-cm3 rates, cost is the base."""
        assert cost(make_carrier("Flat", 7.25), cube_parcel) == 7.25

    def test_formula(self, two_carriers, cube_parcel):
        carrier_a, carrier_b = two_carriers
        assert cost(carrier_a, cube_parcel) == pytest.approx(13.0)
        assert cost(carrier_b, cube_parcel) == 9.5

    def test_linear_in_weight(self):
        """Adding weight adds exactly cost_per_kg per kg, whatever the size."""
        carrier = make_carrier("Linear", 3.0, per_kg=1.5, per_cm3=0.25)
        light = Parcel(weight_kg=2.0, dimensions=Dimensions(2.0, 2.0, 2.0))
        heavy = Parcel(weight_kg=6.0, dimensions=Dimensions(2.0, 2.0, 2.0))

        assert cost(carrier, heavy) - cost(carrier, light) == 1.5 * 4.0

    def test_linear_in_volume(self):
        """Adding volume adds exactly cost_per_cm3 per cm3, whatever the weight."""
        carrier = make_carrier("Linear", 3.0, per_kg=1.5, per_cm3=0.25)
        small = Parcel(weight_kg=2.0, dimensions=Dimensions(2.0, 2.0, 2.0))
        large = Parcel(weight_kg=2.0, dimensions=Dimensions(4.0, 2.0, 2.0))

        assert cost(carrier, large) - cost(carrier, small) == 0.25 * 8.0

    def test_price_at_least_base(self, two_carriers, cube_parcel):
        for carrier in two_carriers:
            assert cost(carrier, cube_parcel) >= carrier.rates.base_cost

    def test_negative_inputs_not_rejected(self):
        """Negative weight flows through the formula unchanged."""
        carrier = make_carrier("Neg", 5.0, per_kg=2.0)
        parcel = Parcel(weight_kg=-1.0, dimensions=Dimensions(1.0, 1.0, 1.0))
        assert cost(carrier, parcel) == 3.0

    def test_reference_carriers_sample_parcel(self):
        """Sample parcel (5.5 kg, 3000 cm3) against the reference carriers."""
        rappi, uber, dhl = CARRIERS
        assert cost(rappi, SAMPLE_PARCEL) == pytest.approx(5.0 + 8.25 + 3.0)
        assert cost(uber, SAMPLE_PARCEL) == pytest.approx(8.0 + 6.6 + 2.4)
        assert cost(dhl, SAMPLE_PARCEL) == pytest.approx(20.0 + 5.5 + 6.0)


# =============================================================================
# TESTS: SELECTOR
# =============================================================================

class TestFindCheapest:
    """Tests for find_cheapest()."""

    def test_picks_cheapest(self, two_carriers, cube_parcel):
        best = find_cheapest(two_carriers, cube_parcel)
        assert best.carrier == "Carrier_B"
        assert best.price == 9.5

    def test_order_independent_winner(self, two_carriers, cube_parcel):
        best = find_cheapest(list(reversed(two_carriers)), cube_parcel)
        assert best == ShippingOption("Carrier_B", 9.5)

    def test_price_is_minimum(self, cube_parcel):
        carriers = [
            make_carrier("A", 4.0, per_kg=0.3, per_cm3=0.002),
            make_carrier("B", 1.0, per_kg=2.7, per_cm3=0.0001),
            make_carrier("C", 6.0, per_kg=0.1, per_cm3=0.0),
            make_carrier("D", 3.3, per_kg=1.1, per_cm3=0.0009),
        ]
        best = find_cheapest(carriers, cube_parcel)
        assert best.price == min(cost(c, cube_parcel) for c in carriers)

    def test_winner_price_matches_cost(self, cube_parcel):
        carriers = [make_carrier("A", 4.0, per_kg=0.3), make_carrier("B", 1.0, per_kg=2.7)]
        best = find_cheapest(carriers, cube_parcel)
        winner = next(c for c in carriers if c.name == best.carrier)
        assert best.price == cost(winner, cube_parcel)

    def test_tie_first_wins(self, cube_parcel):
        """Equal costs: the earlier carrier is kept."""
        carriers = [make_carrier("First", 5.0), make_carrier("Second", 5.0)]
        assert find_cheapest(carriers, cube_parcel).carrier == "First"

    def test_tie_after_cheaper_carrier(self, cube_parcel):
        """Later carriers tying the running best do not replace it."""
        carriers = [
            make_carrier("Expensive", 9.0),
            make_carrier("Cheap", 2.0),
            make_carrier("AlsoCheap", 2.0),
        ]
        assert find_cheapest(carriers, cube_parcel) == ShippingOption("Cheap", 2.0)

    def test_single_carrier(self, cube_parcel):
        best = find_cheapest([make_carrier("Only", 1.0)], cube_parcel)
        assert best == ShippingOption("Only", 1.0)

    def test_empty_returns_unavailable(self, cube_parcel):
        best = find_cheapest([], cube_parcel)
        assert best is UNAVAILABLE
        assert not best.is_available
        assert best.price == sys.float_info.max

    def test_accepts_iterator(self, two_carriers, cube_parcel):
        best = find_cheapest(iter(two_carriers), cube_parcel)
        assert best.carrier == "Carrier_B"

    def test_does_not_modify_carriers(self, two_carriers, cube_parcel):
        before = list(two_carriers)
        find_cheapest(two_carriers, cube_parcel)
        assert two_carriers == before

    def test_reference_carriers_sample_parcel(self):
        best = find_cheapest(CARRIERS, SAMPLE_PARCEL)
        assert best.carrier == "Rappi Courier"
        assert best.price == pytest.approx(16.25)


# =============================================================================
# TESTS: SHIPPING OPTION
# =============================================================================

class TestShippingOption:
    """Tests for ShippingOption display and availability."""

    def test_str_rounds_to_cents(self):
        assert str(ShippingOption("DHL Express", 31.499)) == "Carrier: DHL Express, Total Cost: $31.50"

    def test_unavailable_str(self):
        assert str(UNAVAILABLE) == "Carrier: Unavailable"

    def test_free_option_is_available(self):
        """A zero price is a real quote, not the placeholder."""
        option = ShippingOption("Free", 0.0)
        assert option.is_available
        assert option != UNAVAILABLE
