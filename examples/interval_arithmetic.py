#!/usr/bin/env python3
"""
Example: Interval arithmetic.

This demonstrates parsing, stacking and inverting intervals, and how
enharmonic spellings stay distinct.

Usage:
    python examples/interval_arithmetic.py
"""

from tonic_intervals import Interval, interval_class_difference, interval_table


def main() -> None:
    """Print a tour of interval operations."""
    print("Named intervals:")
    for entry in interval_table():
        print(f"  {entry.semitones:2d}  {entry.name:<3} {entry.long_name:<12} -> {entry.interval}")

    print("\nStacking thirds:")
    for a, b in [("M3", "m3"), ("m3", "M3"), ("m3", "m3"), ("M3", "M3")]:
        result = Interval.parse(a) + Interval.parse(b)
        print(f"  {a} + {b} = {result} ({result.semitones} semitones)")

    print("\nInversions:")
    for name in ["M3", "P4", "A4", "m7"]:
        print(f"  {name} -> {Interval.parse(name).inversion()}")

    print("\nEnharmonics:")
    a4, d5 = Interval.A4, Interval.d5
    print(f"  {a4} and {d5} both span {a4.semitones} semitones; same object: {a4 is d5}")

    print("\nInspection:")
    print(f"  {Interval.TT.inspect.model_dump()}")

    print("\nInterval class from B (11) to D (2):")
    print(f"  {interval_class_difference(11, 2)}")


if __name__ == "__main__":
    main()
