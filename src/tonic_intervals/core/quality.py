"""
Quality algebra - perfect/imperfect classes and quality offsets.

Perfect-class numbers (1, 4, 5, 8) take qualities from "dPA".
Imperfect-class numbers (2, 3, 6, 7) take qualities from "dmMA".
Each sequence is centred so that P and M sit at offset 0.
"""

from __future__ import annotations

from tonic_intervals.constants import (
    IMPERFECT_QUALITIES,
    PERFECT_QUALITIES,
    ErrorMessages,
)
from tonic_intervals.errors import InvalidQualityError

PERFECT_NUMBERS: frozenset[int] = frozenset({1, 4, 5, 8})
IMPERFECT_NUMBERS: frozenset[int] = frozenset({2, 3, 6, 7})

_QUALITY_LONG_NAMES: dict[str, str] = {
    "d": "diminished",
    "m": "minor",
    "M": "major",
    "P": "perfect",
    "A": "augmented",
}


def is_perfect(number: int) -> bool:
    """True for unison, fourth, fifth and octave."""
    return number in PERFECT_NUMBERS


def quality_sequence(number: int) -> str:
    """The ordered quality letters that apply to a diatonic number."""
    return PERFECT_QUALITIES if is_perfect(number) else IMPERFECT_QUALITIES


def _centre(sequence: str) -> int:
    return len(sequence) // 2


def quality_offset(quality_name: str, number: int) -> int:
    """
    Semitone offset of a quality relative to the perfect/major interval.

    Args:
        quality_name: One of d, m, M, P, A
        number: Diatonic number (1-8)

    Returns:
        Signed offset: -1..+1 for perfect numbers, -2..+1 for imperfect

    Raises:
        InvalidQualityError: If the letter is not in the number's sequence
    """
    sequence = quality_sequence(number)
    if not isinstance(quality_name, str) or len(quality_name) != 1 or quality_name not in sequence:
        raise InvalidQualityError(
            ErrorMessages.INVALID_QUALITY.format(quality=quality_name, number=number)
        )
    return sequence.index(quality_name) - _centre(sequence)


def quality_for_offset(offset: int, number: int) -> str | None:
    """
    Find the quality letter that produces an offset for a number.

    Returns None when no quality in the number's sequence reaches it.
    """
    sequence = quality_sequence(number)
    i = offset + _centre(sequence)
    if not 0 <= i < len(sequence):
        return None
    return sequence[i]


def quality_long_name(quality_name: str) -> str:
    """Display name for a quality letter (M -> 'major')."""
    try:
        return _QUALITY_LONG_NAMES[quality_name]
    except KeyError:
        raise InvalidQualityError(f"Unknown interval quality: '{quality_name}'") from None
