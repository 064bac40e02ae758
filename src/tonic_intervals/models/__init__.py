"""
Pydantic models for the interval system.

This module provides:
- IntervalInspection: Structured view of an interval
- QualityInfo: Quality name and semitone offset
- IntervalTableEntry: Row of the display name table
"""

from tonic_intervals.models.inspection import (
    IntervalInspection,
    IntervalTableEntry,
    QualityInfo,
)

__all__ = [
    "IntervalInspection",
    "IntervalTableEntry",
    "QualityInfo",
]
