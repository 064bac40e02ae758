"""
Core interval primitives.

These are the invariants everything else composes on:
- Interval: Diatonic number plus quality, interned per spelling
- IntervalRegistry: The canonicalization table behind interning
- Quality algebra: Perfect/imperfect classes and quality offsets
- interval_class_difference: Pitch class distance reduced to 0-11
"""

from tonic_intervals.core.interval import Interval, interval_table
from tonic_intervals.core.pitch import interval_class_difference, normalize_pitch_class
from tonic_intervals.core.quality import (
    IMPERFECT_NUMBERS,
    PERFECT_NUMBERS,
    is_perfect,
    quality_for_offset,
    quality_long_name,
    quality_offset,
    quality_sequence,
)
from tonic_intervals.core.registry import IntervalRegistry, get_registry

__all__ = [
    # Interval
    "Interval",
    "interval_table",
    # Registry
    "IntervalRegistry",
    "get_registry",
    # Quality
    "PERFECT_NUMBERS",
    "IMPERFECT_NUMBERS",
    "is_perfect",
    "quality_sequence",
    "quality_offset",
    "quality_for_offset",
    "quality_long_name",
    # Pitch
    "interval_class_difference",
    "normalize_pitch_class",
]
