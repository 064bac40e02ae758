"""
Constants and lookup tables for the interval system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal

# Canonical abbreviated interval names, indexed by semitone count (0-12)
INTERVAL_NAMES: tuple[str, ...] = (
    "P1",
    "m2",
    "M2",
    "m3",
    "M3",
    "P4",
    "TT",
    "P5",
    "m6",
    "M6",
    "m7",
    "M7",
    "P8",
)

# Display names, indexed by semitone count (0-12)
LONG_INTERVAL_NAMES: tuple[str, ...] = (
    "Unison",
    "Minor 2nd",
    "Major 2nd",
    "Minor 3rd",
    "Major 3rd",
    "Perfect 4th",
    "Tritone",
    "Perfect 5th",
    "Minor 6th",
    "Major 6th",
    "Minor 7th",
    "Major 7th",
    "Octave",
)

# Canonical (perfect or major) semitone count, indexed by diatonic number - 1
SEMITONES_BY_NUMBER: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11, 12)

MIN_NUMBER = 1
MAX_NUMBER = 8

# Quality letters, ordered from narrowest to widest
PERFECT_QUALITIES = "dPA"
IMPERFECT_QUALITIES = "dmMA"

# Qualities that can be raised to augmented
AUGMENTABLE_QUALITIES = "mMP"

QualityName = Literal["d", "m", "M", "P", "A"]


class IntervalErrorKind(str, Enum):
    """Categories of interval failures."""

    INVALID_NUMBER = "invalid_number"
    INVALID_QUALITY = "invalid_quality"
    FORMAT_ERROR = "format_error"
    INVALID_AUGMENTATION = "invalid_augmentation"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NUMBER = "Invalid interval number: {number}. Must be between 1 and 8."
    INVALID_QUALITY = "Invalid interval quality: '{quality}' for number {number}."
    NO_INTERVAL_NAMED = "No interval named '{name}'."
    CANNOT_QUALIFY = "Can't qualify {interval} to {semitones} semitone(s)."
    CANNOT_AUGMENT = "Can't augment {interval}."
