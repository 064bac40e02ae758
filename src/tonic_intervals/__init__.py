"""
tonic-intervals - diatonic pitch intervals for tonal music.

Intervals are spelled as a quality letter and a diatonic number (M3, P5,
d7), interned per spelling, and support addition, subtraction, inversion
and augmentation.
"""

from tonic_intervals.constants import INTERVAL_NAMES, LONG_INTERVAL_NAMES, SEMITONES_BY_NUMBER
from tonic_intervals.core import Interval, interval_class_difference, interval_table
from tonic_intervals.errors import (
    IntervalError,
    IntervalFormatError,
    InvalidAugmentationError,
    InvalidNumberError,
    InvalidQualityError,
)

__all__ = [
    "Interval",
    "interval_class_difference",
    "interval_table",
    "INTERVAL_NAMES",
    "LONG_INTERVAL_NAMES",
    "SEMITONES_BY_NUMBER",
    "IntervalError",
    "IntervalFormatError",
    "InvalidAugmentationError",
    "InvalidNumberError",
    "InvalidQualityError",
]
