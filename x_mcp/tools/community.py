"""Community tools."""

from typing import Annotated

from pydantic import Field

from x_mcp.builders import build_community_search
from x_mcp.client import XApi
from x_mcp.dispatch import dispatch
from x_mcp.registry import ToolRegistry
from x_mcp.utils import to_json


def register_community_tools(registry: ToolRegistry, api: XApi) -> None:
    @registry.tool("get-community", "Get details for a specific X community")
    async def get_community(
        communityId: Annotated[str, Field(description="The ID of the community to fetch details for")],
    ) -> str:
        async def call():
            # The community endpoint supports few field options; take the defaults.
            result = await api.get_community(communityId)
            return to_json(result.get("data"))
        return await dispatch("fetching community details", call)

    @registry.tool("search-communities", "Search for X communities by keyword")
    async def search_communities(
        query: Annotated[str, Field(description="The search query for finding communities")],
        maxResults: Annotated[int, Field(ge=1, description="Maximum number of results to return")] = 10,
    ) -> str:
        async def call():
            result = await api.search_communities(build_community_search(query, maxResults))
            return to_json(result.get("data"))
        return await dispatch("searching communities", call)
