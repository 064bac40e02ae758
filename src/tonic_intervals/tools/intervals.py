"""
Interval tools - MCP tools for interval parsing and arithmetic.

Tools for parsing interval names, stacking and inverting intervals,
and exporting the interval name table.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import yaml

from tonic_intervals.core import Interval, interval_class_difference, interval_table
from tonic_intervals.errors import IntervalError

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _describe(interval: Interval) -> dict[str, Any]:
    """Tool-facing view of an interval."""
    return {
        "name": str(interval),
        **interval.inspect.model_dump(),
    }


def _error(e: IntervalError) -> str:
    return json.dumps({"status": "error", "kind": e.kind.value, "message": str(e)})


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def interval_parse(name: str) -> str:
        """
        Parse an interval name.

        Accepts abbreviated names like M3, P5, d7, A4 and TT (tritone,
        read as d5).

        Args:
            name: Abbreviated interval name

        Returns:
            JSON string with number, semitones and quality

        Example:
            interval_parse(name="M3")
        """
        try:
            interval = Interval.parse(name)
            return json.dumps({"status": "success", "interval": _describe(interval)})
        except IntervalError as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to parse interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_parse"] = interval_parse

    @mcp.tool  # type: ignore[arg-type]
    async def interval_from_semitones(semitones: int, number: int | None = None) -> str:
        """
        Build an interval from a semitone count.

        Without a number the default spelling is used (6 -> d5). With a
        number the quality is chosen to reach the count (6, number=4 -> A4).

        Args:
            semitones: Semitone count (reduced mod 12 outside 0-12)
            number: Optional diatonic number (1-8)

        Returns:
            JSON string with the resulting interval

        Example:
            interval_from_semitones(semitones=6, number=4)
        """
        try:
            interval = Interval.from_semitones(semitones, number=number)
            return json.dumps({"status": "success", "interval": _describe(interval)})
        except IntervalError as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to build interval from semitones")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_from_semitones"] = interval_from_semitones

    @mcp.tool  # type: ignore[arg-type]
    async def interval_add(a: str, b: str) -> str:
        """
        Stack two intervals.

        Args:
            a: First interval name
            b: Second interval name

        Returns:
            JSON string with the sum

        Example:
            interval_add(a="M3", b="m3")  # P5
        """
        try:
            result = Interval.parse(a) + Interval.parse(b)
            return json.dumps({"status": "success", "interval": _describe(result)})
        except IntervalError as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to add intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_add"] = interval_add

    @mcp.tool  # type: ignore[arg-type]
    async def interval_subtract(a: str, b: str) -> str:
        """
        Subtract one interval from another.

        Args:
            a: Interval name to subtract from
            b: Interval name to subtract

        Returns:
            JSON string with the difference

        Example:
            interval_subtract(a="P5", b="M3")  # m3
        """
        try:
            result = Interval.parse(a) - Interval.parse(b)
            return json.dumps({"status": "success", "interval": _describe(result)})
        except IntervalError as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to subtract intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_subtract"] = interval_subtract

    @mcp.tool  # type: ignore[arg-type]
    async def interval_invert(name: str) -> str:
        """
        Invert an interval within the octave.

        Args:
            name: Interval name

        Returns:
            JSON string with the inversion

        Example:
            interval_invert(name="M3")  # m6
        """
        try:
            result = Interval.parse(name).inversion()
            return json.dumps({"status": "success", "interval": _describe(result)})
        except IntervalError as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to invert interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_invert"] = interval_invert

    @mcp.tool  # type: ignore[arg-type]
    async def interval_augment(name: str) -> str:
        """
        Raise a minor, major or perfect interval to augmented.

        Args:
            name: Interval name

        Returns:
            JSON string with the augmented interval

        Example:
            interval_augment(name="P4")  # A4
        """
        try:
            result = Interval.parse(name).augmented
            return json.dumps({"status": "success", "interval": _describe(result)})
        except IntervalError as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to augment interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_augment"] = interval_augment

    @mcp.tool  # type: ignore[arg-type]
    async def interval_diminish(name: str) -> str:
        """
        Get the diminished interval with the same number.

        Args:
            name: Interval name

        Returns:
            JSON string with the diminished interval

        Example:
            interval_diminish(name="P5")  # d5
        """
        try:
            result = Interval.parse(name).diminished
            return json.dumps({"status": "success", "interval": _describe(result)})
        except IntervalError as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to diminish interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_diminish"] = interval_diminish

    @mcp.tool  # type: ignore[arg-type]
    async def interval_class(pitch_class_a: int, pitch_class_b: int) -> str:
        """
        Get the interval class between two pitch classes.

        Args:
            pitch_class_a: Starting pitch class (0-11, C = 0)
            pitch_class_b: Target pitch class

        Returns:
            JSON string with the interval class (0-11)

        Example:
            interval_class(pitch_class_a=11, pitch_class_b=2)  # 3
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "interval_class": interval_class_difference(pitch_class_a, pitch_class_b),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute interval class")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_class"] = interval_class

    @mcp.tool  # type: ignore[arg-type]
    async def interval_list() -> str:
        """
        List the named intervals from unison to octave.

        Returns:
            JSON string with one entry per semitone count

        Example:
            interval_list()
        """
        try:
            entries = interval_table()
            return json.dumps(
                {
                    "status": "success",
                    "intervals": [entry.model_dump() for entry in entries],
                    "count": len(entries),
                }
            )
        except Exception as e:
            logger.exception("Failed to list intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_list"] = interval_list

    @mcp.tool  # type: ignore[arg-type]
    async def interval_export_yaml() -> str:
        """
        Export the named interval table as YAML.

        Returns:
            JSON string containing the YAML content

        Example:
            interval_export_yaml()
        """
        try:
            yaml_dict = {
                "intervals": [
                    {
                        "name": entry.name,
                        "long_name": entry.long_name,
                        **Interval.parse(entry.name).inspect.model_dump(),
                    }
                    for entry in interval_table()
                ]
            }
            yaml_content = yaml.safe_dump(yaml_dict, default_flow_style=False, sort_keys=False)

            return json.dumps(
                {
                    "status": "success",
                    "yaml": yaml_content,
                }
            )
        except Exception as e:
            logger.exception("Failed to export YAML")
            return json.dumps({"status": "error", "message": str(e)})

    tools["interval_export_yaml"] = interval_export_yaml

    return tools
