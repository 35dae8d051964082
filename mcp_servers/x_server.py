"""X MCP Server — exposes the X (Twitter) API v2 as tools for an LLM agent.

This MCP server provides:
- User tools: get-my-details, get-user-details, get-user-by-username,
  get-user-followers, get-user-following
- Tweet tools: post-tweet, delete-tweet, like-tweet, unlike-tweet, retweet,
  unretweet, advanced-tweet, reply-to-tweet, quote-a-tweet, tweet-thread,
  add-delete-bookmark, get-tweets
- Timeline tools: get-home-timeline, get-user-timeline, get-quoted-tweets
- Community tools: get-community, search-communities

Usage:
    python mcp_servers/x_server.py

Requires env vars: X_API_KEY, X_API_KEY_SECRET, X_ACCESS_TOKEN, X_ACCESS_TOKEN_SECRET
"""
import logging
import sys
from pathlib import Path

from mcp.server.fastmcp import FastMCP

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from x_mcp.client import XApi, XClient
from x_mcp.config import Config, load_config
from x_mcp.registry import ToolRegistry
from x_mcp.tools import register_all_tools
from x_mcp.utils import setup_logging

logger = logging.getLogger("x_mcp.server")


def create_server(config: Config, api: XApi | None = None) -> tuple[FastMCP, ToolRegistry]:
    """Build the MCP server with every tool group registered.

    ``api`` defaults to an ``XClient`` built from ``config``.
    """
    if api is None:
        api = XClient.from_config(config)
    server = FastMCP(config.server_name)
    registry = ToolRegistry(server)
    register_all_tools(registry, api)
    logger.info("Registered %d tools on %s", len(registry), config.server_name)
    return server, registry


def main():
    cfg = load_config()
    setup_logging(cfg.log_level)

    missing = cfg.missing_credentials()
    if missing:
        logger.warning(
            "Missing X API credentials: %s. Upstream calls will fail until they are set.",
            ", ".join(missing),
        )

    server, _ = create_server(cfg)
    logger.info("X MCP Server running on stdio")
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("X MCP Server shutting down.")


if __name__ == "__main__":
    main()
