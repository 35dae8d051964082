"""User tools: the authenticated account, user lookup, followers and following."""

from typing import Annotated

from pydantic import Field

from x_mcp.builders import build_follows_request, build_user_lookup
from x_mcp.client import XApi
from x_mcp.dispatch import dispatch
from x_mcp.registry import ToolRegistry
from x_mcp.utils import page_payload, to_json

MaxResults = Annotated[int, Field(ge=1, description="Maximum number of results to return")]


def register_user_tools(registry: ToolRegistry, api: XApi) -> None:
    """Register the user-domain tools."""

    @registry.tool("get-my-details", "Get my X account details")
    async def get_my_details() -> str:
        async def call():
            result = await api.get_me(build_user_lookup())
            return to_json(result.get("data"), pretty=False)
        return await dispatch("fetching X account details", call)

    @registry.tool("get-user-details", "Get details for a specific X user by ID")
    async def get_user_details(
        userId: Annotated[str, Field(description="The X user ID to fetch details for")],
    ) -> str:
        async def call():
            result = await api.get_user(userId, build_user_lookup())
            return to_json(result.get("data"))
        return await dispatch("fetching user details", call)

    @registry.tool("get-user-by-username", "Get details for a specific X user by username")
    async def get_user_by_username(
        username: Annotated[str, Field(min_length=1, description="The X username (without @) to fetch details for")],
    ) -> str:
        async def call():
            result = await api.get_user_by_username(username.lstrip("@"), build_user_lookup())
            return to_json(result.get("data"))
        return await dispatch("fetching user by username", call)

    @registry.tool("get-user-followers", "Get followers of a specific X user")
    async def get_user_followers(
        userId: Annotated[str, Field(description="The X user ID to fetch followers for")],
        maxResults: MaxResults = 10,
    ) -> str:
        async def call():
            result = await api.followers(userId, build_follows_request(maxResults))
            return to_json(page_payload(result))
        return await dispatch("fetching user followers", call)

    @registry.tool("get-user-following", "Get accounts that a specific X user is following")
    async def get_user_following(
        userId: Annotated[str, Field(description="The X user ID to fetch following accounts for")],
        maxResults: MaxResults = 10,
    ) -> str:
        async def call():
            result = await api.following(userId, build_follows_request(maxResults))
            return to_json(page_payload(result))
        return await dispatch("fetching accounts user is following", call)
