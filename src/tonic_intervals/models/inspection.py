"""
Inspection models - structured views of intervals.

These are the serializable records handed to tools and collaborators.
The Interval objects themselves stay lightweight and interned.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tonic_intervals.constants import QualityName


class QualityInfo(BaseModel):
    """A quality letter and its semitone offset."""

    name: QualityName = Field(..., description="Quality letter (d, m, M, P, A)")
    value: int = Field(..., ge=-2, le=1, description="Offset from the perfect/major size")

    model_config = {"frozen": True}


class IntervalInspection(BaseModel):
    """
    Inspection record for an interval.

    Exposes the diatonic number, the computed semitone count, and the
    quality as a nested record.
    """

    number: int = Field(..., ge=1, le=8, description="Diatonic number (1-8)")
    semitones: int = Field(..., description="Semitone span")
    quality: QualityInfo = Field(..., description="Quality name and offset")

    model_config = {"frozen": True}


class IntervalTableEntry(BaseModel):
    """One row of the 13-entry display table."""

    semitones: int = Field(..., ge=0, le=12, description="Semitone count")
    name: str = Field(..., description="Abbreviated name (e.g., 'TT')")
    long_name: str = Field(..., description="Display name (e.g., 'Tritone')")
    interval: str = Field(..., description="Canonical interval notation (e.g., 'd5')")

    model_config = {"frozen": True}
