"""
Pytest configuration and shared fixtures.
"""

import pytest

from tonic_intervals.core import IntervalRegistry


@pytest.fixture
def registry() -> IntervalRegistry:
    """A fresh, empty registry isolated from the process-wide one."""
    return IntervalRegistry()
