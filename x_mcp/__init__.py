"""X (Twitter) API v2 exposed as MCP tools."""

__version__ = "1.0.0"
