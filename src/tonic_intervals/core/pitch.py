"""
Pitch class helpers.

Only what interval consumers need: reducing a pitch difference to an
interval class.
"""

from __future__ import annotations


def normalize_pitch_class(pitch_class: int) -> int:
    """Reduce any integer to a pitch class (0-11)."""
    return pitch_class % 12


def interval_class_difference(pitch_class_a: int, pitch_class_b: int) -> int:
    """
    The interval class from one pitch class up to another.

    Result is in 1-11 when the pitch classes differ, 0 when they are equal.

    Example:
        interval_class_difference(11, 2) == 3  # B up to D
    """
    return normalize_pitch_class(pitch_class_b - pitch_class_a)
