"""Consolidated tools registered with the MCP server."""
