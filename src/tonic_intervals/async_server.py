#!/usr/bin/env python3
"""
Async Interval MCP Server using chuk-mcp-server

This server provides MCP tools for working with diatonic pitch intervals.

The server provides tools for:
- Parsing interval names (M3, P5, TT)
- Building intervals from semitone counts
- Adding, subtracting, inverting, augmenting and diminishing intervals
- Reducing pitch class differences to interval classes
- Listing and exporting the interval name table
"""

import logging

from chuk_mcp_server import ChukMCPServer

from tonic_intervals.tools import register_interval_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("tonic-intervals")

# Register all tools
interval_tools = register_interval_tools(mcp)

# Export tool functions for direct access
interval_parse = interval_tools["interval_parse"]
interval_from_semitones = interval_tools["interval_from_semitones"]
interval_add = interval_tools["interval_add"]
interval_subtract = interval_tools["interval_subtract"]
interval_invert = interval_tools["interval_invert"]
interval_augment = interval_tools["interval_augment"]
interval_diminish = interval_tools["interval_diminish"]
interval_class = interval_tools["interval_class"]
interval_list = interval_tools["interval_list"]
interval_export_yaml = interval_tools["interval_export_yaml"]

logger.info("Tonic Intervals MCP Server initialized")
logger.info(f"  Tools registered: {len(interval_tools)}")
