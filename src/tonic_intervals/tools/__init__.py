"""
MCP tool implementations.

Tools are organized by domain:
- intervals - Parsing, arithmetic and the interval name table
"""

from tonic_intervals.tools.intervals import register_interval_tools

__all__ = [
    "register_interval_tools",
]
