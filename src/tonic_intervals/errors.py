"""Custom exception hierarchy for tonic-intervals."""

from __future__ import annotations

from tonic_intervals.constants import IntervalErrorKind


class IntervalError(Exception):
    """Base exception for all interval errors.

    Every subclass carries a :class:`IntervalErrorKind` so callers can branch
    on the failure category without matching on exception types.
    """

    kind: IntervalErrorKind


class InvalidNumberError(IntervalError, ValueError):
    """Diatonic number outside 1-8, or no quality reaches the requested semitones."""

    kind = IntervalErrorKind.INVALID_NUMBER


class InvalidQualityError(IntervalError, ValueError):
    """Quality letter not valid for the number's class (perfect or imperfect)."""

    kind = IntervalErrorKind.INVALID_QUALITY


class IntervalFormatError(IntervalError, ValueError):
    """Text does not match the interval name grammar."""

    kind = IntervalErrorKind.FORMAT_ERROR


class InvalidAugmentationError(IntervalError, ValueError):
    """Augmentation requested on a diminished or augmented interval."""

    kind = IntervalErrorKind.INVALID_AUGMENTATION
