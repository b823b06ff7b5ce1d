"""
Courier Cost Calculator
=======================

CLI tool to price a single parcel against the reference carriers and
show the cheapest option.

Usage:
    python -m courier_optimizer.scripts.calculator
    python -m courier_optimizer.scripts.calculator --weight 2 --width 10 --height 10 --depth 10
"""

import argparse

from courier_optimizer.calculate_costs import cost, find_cheapest, volume
from courier_optimizer.data import SAMPLE_PARCEL, load_carriers
from courier_optimizer.models import Carrier, Dimensions, Parcel, ShippingOption
from courier_optimizer.validation import validate_parcel
from courier_optimizer.version import VERSION


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find the cheapest carrier for a parcel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Sample parcel (5.5 kg, 15 x 10 x 20 cm):
    python -m courier_optimizer.scripts.calculator

    # Custom parcel (unset values fall back to the sample parcel):
    python -m courier_optimizer.scripts.calculator --weight 2 --width 10 --height 10 --depth 10
        """
    )
    sample = SAMPLE_PARCEL.dimensions

    parser.add_argument("--weight", type=float, default=SAMPLE_PARCEL.weight_kg,
                        help=f"Weight in kg (default: {SAMPLE_PARCEL.weight_kg})")
    parser.add_argument("--width", type=float, default=sample.width,
                        help=f"Width in cm (default: {sample.width})")
    parser.add_argument("--height", type=float, default=sample.height,
                        help=f"Height in cm (default: {sample.height})")
    parser.add_argument("--depth", type=float, default=sample.depth,
                        help=f"Depth in cm (default: {sample.depth})")

    return parser.parse_args(argv)


def build_parcel(args: argparse.Namespace) -> Parcel:
    """Create a parcel from CLI arguments."""
    return Parcel(
        weight_kg=args.weight,
        dimensions=Dimensions(width=args.width, height=args.height, depth=args.depth),
    )


def print_results(parcel: Parcel, carriers: list[Carrier], best: ShippingOption) -> None:
    """Print per-carrier costs and the cheapest option."""
    dims = parcel.dimensions

    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    print(f"\nParcel: {dims.width}x{dims.height}x{dims.depth} cm, {parcel.weight_kg} kg")
    print(f"Volume: {volume(parcel):.2f} cm3")

    print("\n--- Carrier Costs ---")
    for carrier in carriers:
        print(f"{carrier.name:<20}${cost(carrier, parcel):>8.2f}")

    print("\n" + "-" * 50)
    if best.is_available:
        print(f"Cheapest option: {best}")
    else:
        print("No carriers available.")
    print()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    print("\n=== Courier Cost Calculator ===")
    print(f"Version: {VERSION}")

    try:
        parcel = build_parcel(args)
        validate_parcel(parcel)

        carriers = load_carriers()
        best = find_cheapest(carriers, parcel)

        print_results(parcel, carriers, best)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
        return 1
    except ValueError as e:
        print(f"\nError: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
