"""MCP server exposing Augment's context engine via the Auggie CLI."""

__version__ = "0.1.0"
