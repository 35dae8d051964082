"""Tool groups, one module per resource domain."""

from x_mcp.client import XApi
from x_mcp.registry import ToolRegistry
from x_mcp.tools.community import register_community_tools
from x_mcp.tools.timeline import register_timeline_tools
from x_mcp.tools.tweet import register_tweet_tools
from x_mcp.tools.user import register_user_tools

TOOL_GROUPS = (
    register_user_tools,
    register_tweet_tools,
    register_timeline_tools,
    register_community_tools,
)


def register_all_tools(registry: ToolRegistry, api: XApi) -> None:
    for register in TOOL_GROUPS:
        register(registry, api)


__all__ = [
    "TOOL_GROUPS",
    "register_all_tools",
    "register_community_tools",
    "register_timeline_tools",
    "register_tweet_tools",
    "register_user_tools",
]
