"""
Interval primitive - diatonic number plus quality.

An Interval is the signed distance between two notes, spelled as a
quality letter and a diatonic number (M3, P5, d7). Intervals with the
same spelling are interned: Interval(3, "M") is Interval.parse("M3").
Enharmonic spellings stay distinct - A4 and d5 both span 6 semitones
but are different objects.
"""

from __future__ import annotations

import re
from typing import Any, ClassVar

from tonic_intervals.constants import (
    AUGMENTABLE_QUALITIES,
    INTERVAL_NAMES,
    LONG_INTERVAL_NAMES,
    MAX_NUMBER,
    MIN_NUMBER,
    SEMITONES_BY_NUMBER,
    ErrorMessages,
)
from tonic_intervals.core.quality import quality_for_offset, quality_offset
from tonic_intervals.core.registry import get_registry
from tonic_intervals.errors import (
    IntervalFormatError,
    InvalidAugmentationError,
    InvalidNumberError,
)
from tonic_intervals.models.inspection import (
    IntervalInspection,
    IntervalTableEntry,
    QualityInfo,
)

# Names the grammar accepts: imperfect numbers take d/m/M/A, perfect take d/P/A
_INTERVAL_NAME_PATTERN = re.compile(r"([dmMA][2367])|([dPA][1458])|TT")
_INTERVAL_NAME_PARSE_PATTERN = re.compile(r"([dmMPA])(\d)", re.ASCII)


class Interval:
    """
    Distance between two notes as a diatonic number and a quality.

    Instances are interned and immutable apart from the one-time
    memoization of their augmented and diminished links.
    """

    __slots__ = ("_number", "_quality_name", "_quality_semitones", "_augmented", "_diminished")
    _number: int
    _quality_name: str
    _quality_semitones: int
    _augmented: Interval | None
    _diminished: Interval | None

    # Named intervals (class constants)
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    A1: ClassVar[Interval]
    A2: ClassVar[Interval]
    A3: ClassVar[Interval]
    A4: ClassVar[Interval]
    A5: ClassVar[Interval]
    A6: ClassVar[Interval]
    A7: ClassVar[Interval]

    d2: ClassVar[Interval]
    d3: ClassVar[Interval]
    d4: ClassVar[Interval]
    d5: ClassVar[Interval]
    d6: ClassVar[Interval]
    d7: ClassVar[Interval]
    d8: ClassVar[Interval]

    # Long aliases
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __new__(cls, number: int, quality_name: str | None = None) -> Interval:
        """
        Get the canonical interval for a number and quality.

        Args:
            number: Diatonic number (1 = unison .. 8 = octave)
            quality_name: d, m, M, P or A. Defaults to P or M.

        Raises:
            InvalidNumberError: If number is outside 1-8
            InvalidQualityError: If the quality doesn't apply to the number
        """
        if isinstance(number, bool) or not isinstance(number, int):
            raise InvalidNumberError(ErrorMessages.INVALID_NUMBER.format(number=number))
        if not MIN_NUMBER <= number <= MAX_NUMBER:
            raise InvalidNumberError(ErrorMessages.INVALID_NUMBER.format(number=number))

        if quality_name is None:
            quality_name = INTERVAL_NAMES[SEMITONES_BY_NUMBER[number - 1]][0]

        registry = get_registry()
        key = f"{quality_name}{number}"
        existing = registry.get(key)
        if existing is not None:
            return existing

        quality_semitones = quality_offset(quality_name, number)

        def create() -> Interval:
            interval = object.__new__(cls)
            object.__setattr__(interval, "_number", number)
            object.__setattr__(interval, "_quality_name", quality_name)
            object.__setattr__(interval, "_quality_semitones", quality_semitones)
            object.__setattr__(interval, "_augmented", None)
            object.__setattr__(interval, "_diminished", None)
            return interval

        return registry.intern(key, create)

    @classmethod
    def from_semitones(cls, semitones: int, number: int | None = None) -> Interval:
        """
        Build an interval from a semitone count.

        Counts outside 0-12 are reduced mod 12; 12 itself stays an octave.
        Without a number, the default spelling for the count is used
        (6 semitones gives d5). With a number, the quality is chosen to
        reach the count.

        Raises:
            InvalidNumberError: If number is invalid or no quality of that
                number spans the requested semitones
        """
        if semitones < 0 or semitones > 12:
            semitones %= 12

        if number is None:
            return cls.parse(INTERVAL_NAMES[semitones])

        canonical = cls(number)
        quality_name = quality_for_offset(semitones - canonical.semitones, number)
        if quality_name is None:
            raise InvalidNumberError(
                ErrorMessages.CANNOT_QUALIFY.format(interval=canonical, semitones=semitones)
            )
        return cls(number, quality_name)

    @classmethod
    def parse(cls, name: str) -> Interval:
        """
        Parse an interval from its abbreviated name ('M3', 'P5', 'TT').

        TT is read as a diminished fifth.

        Raises:
            IntervalFormatError: If the name doesn't follow the grammar
            InvalidQualityError: For a quality that doesn't fit the number ('m1')
            InvalidNumberError: For a number outside 1-8 ('P9')
        """
        if not isinstance(name, str):
            raise IntervalFormatError(ErrorMessages.NO_INTERVAL_NAMED.format(name=name))

        if not _INTERVAL_NAME_PATTERN.fullmatch(name):
            match = _INTERVAL_NAME_PARSE_PATTERN.fullmatch(name)
            if match:
                # Letter + digit but an impossible pair: the constructor says why
                cls(int(match.group(2)), match.group(1))
            raise IntervalFormatError(ErrorMessages.NO_INTERVAL_NAMED.format(name=name))

        if name == "TT":
            name = "d5"

        match = _INTERVAL_NAME_PARSE_PATTERN.fullmatch(name)
        assert match is not None
        return cls(int(match.group(2)), match.group(1))

    @property
    def number(self) -> int:
        """Diatonic number (1-8)."""
        return self._number

    @property
    def quality_name(self) -> str:
        """Quality letter (d, m, M, P, A)."""
        return self._quality_name

    @property
    def quality_semitones(self) -> int:
        """Offset from the perfect or major size of this number."""
        return self._quality_semitones

    @property
    def diatonic_semitones(self) -> int:
        """Semitones of the perfect or major interval with this number."""
        return SEMITONES_BY_NUMBER[self._number - 1]

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self.diatonic_semitones + self._quality_semitones

    @property
    def augmented(self) -> Interval:
        """
        The augmented interval with the same number.

        Raises:
            InvalidAugmentationError: If this interval is diminished or augmented
        """
        link = self._augmented
        if link is not None:
            return link
        if self._quality_name not in AUGMENTABLE_QUALITIES:
            raise InvalidAugmentationError(ErrorMessages.CANNOT_AUGMENT.format(interval=self))
        with get_registry().lock:
            link = self._augmented
            if link is None:
                link = Interval(self._number, "A")
                object.__setattr__(self, "_augmented", link)
        return link

    @property
    def diminished(self) -> Interval:
        """The diminished interval with the same number."""
        link = self._diminished
        if link is not None:
            return link
        with get_registry().lock:
            link = self._diminished
            if link is None:
                link = Interval(self._number, "d")
                object.__setattr__(self, "_diminished", link)
        return link

    @property
    def inspect(self) -> IntervalInspection:
        """Structured view: number, semitones and quality."""
        return IntervalInspection(
            number=self._number,
            semitones=self.semitones,
            quality=QualityInfo(name=self._quality_name, value=self._quality_semitones),
        )

    def inversion(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 -> m6
        P5 -> P4
        A1 -> d8
        """
        return Interval.from_semitones(12 - self.semitones, number=9 - self._number % 12)

    def __add__(self, other: Interval) -> Interval:
        """Stack two intervals (M3 + m3 = P5)."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.from_semitones(
            self.semitones + other.semitones,
            number=self._number + other._number - 1,
        )

    def __sub__(self, other: Interval) -> Interval:
        """Subtract an interval from another (P5 - M3 = m3)."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.from_semitones(
            self.semitones - other.semitones % 12,
            number=(self._number - other._number) % 7 + 1,
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Copies and unpickled instances resolve back to the interned object
    def __copy__(self) -> Interval:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Interval:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return (Interval, (self._number, self._quality_name))

    def __repr__(self) -> str:
        name = str(self)
        if getattr(Interval, name, None) is self:
            return f"Interval.{name}"
        return f"Interval(number={self._number}, quality_name={self._quality_name!r})"

    def __str__(self) -> str:
        return f"{self._quality_name}{self._number}"


def interval_table() -> list[IntervalTableEntry]:
    """
    The 13 named intervals from unison to octave, one per semitone.

    Display names come straight from the lookup tables; the 'interval'
    column is the canonical spelling the parser produces (TT -> d5).
    """
    return [
        IntervalTableEntry(
            semitones=semitones,
            name=name,
            long_name=LONG_INTERVAL_NAMES[semitones],
            interval=str(Interval.parse(name)),
        )
        for semitones, name in enumerate(INTERVAL_NAMES)
    ]


# Initialize class constants after class is defined
Interval.P1 = Interval.parse("P1")
Interval.m2 = Interval.parse("m2")
Interval.M2 = Interval.parse("M2")
Interval.m3 = Interval.parse("m3")
Interval.M3 = Interval.parse("M3")
Interval.P4 = Interval.parse("P4")
Interval.TT = Interval.parse("TT")
Interval.P5 = Interval.parse("P5")
Interval.m6 = Interval.parse("m6")
Interval.M6 = Interval.parse("M6")
Interval.m7 = Interval.parse("m7")
Interval.M7 = Interval.parse("M7")
Interval.P8 = Interval.parse("P8")

Interval.A1 = Interval.P1.augmented
Interval.A2 = Interval.M2.augmented
Interval.A3 = Interval.M3.augmented
Interval.A4 = Interval.P4.augmented
Interval.A5 = Interval.P5.augmented
Interval.A6 = Interval.M6.augmented
Interval.A7 = Interval.M7.augmented

Interval.d2 = Interval.m2.diminished
Interval.d3 = Interval.m3.diminished
Interval.d4 = Interval.P4.diminished
Interval.d5 = Interval.P5.diminished
Interval.d6 = Interval.m6.diminished
Interval.d7 = Interval.m7.diminished
Interval.d8 = Interval.P8.diminished

# Long aliases
Interval.UNISON = Interval.P1
Interval.MINOR_SECOND = Interval.m2
Interval.MAJOR_SECOND = Interval.M2
Interval.MINOR_THIRD = Interval.m3
Interval.MAJOR_THIRD = Interval.M3
Interval.PERFECT_FOURTH = Interval.P4
Interval.TRITONE = Interval.TT
Interval.PERFECT_FIFTH = Interval.P5
Interval.MINOR_SIXTH = Interval.m6
Interval.MAJOR_SIXTH = Interval.M6
Interval.MINOR_SEVENTH = Interval.m7
Interval.MAJOR_SEVENTH = Interval.M7
Interval.OCTAVE = Interval.P8
