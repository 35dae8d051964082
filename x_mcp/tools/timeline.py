"""Timeline tools: home timeline, a user's timeline, and quote tweets."""

from typing import Annotated

from pydantic import Field

from x_mcp.builders import (
    build_home_timeline_request,
    build_quote_tweets_request,
    build_user_timeline_request,
)
from x_mcp.client import XApi
from x_mcp.dispatch import dispatch
from x_mcp.registry import ToolRegistry
from x_mcp.utils import page_payload, to_json

ExcludeReplies = Annotated[bool, Field(description="Whether to exclude replies")]
ExcludeRetweets = Annotated[bool, Field(description="Whether to exclude retweets")]


def register_timeline_tools(registry: ToolRegistry, api: XApi) -> None:
    """Register the timeline-domain tools."""

    @registry.tool("get-home-timeline", "Get tweets from your home timeline")
    async def get_home_timeline(
        maxResults: Annotated[int, Field(ge=1, description="Maximum number of results to return")] = 10,
        excludeReplies: ExcludeReplies = False,
        excludeRetweets: ExcludeRetweets = False,
    ) -> str:
        async def call():
            request = build_home_timeline_request(maxResults, excludeReplies, excludeRetweets)
            return to_json(page_payload(await api.home_timeline(request)))
        return await dispatch("fetching home timeline", call)

    @registry.tool("get-user-timeline", "Get tweets from a specific user's timeline")
    async def get_user_timeline(
        userId: Annotated[str, Field(description="The X user ID to fetch tweets from")],
        maxResults: Annotated[
            int, Field(ge=1, le=3200, description="Maximum number of results to return (up to 3200)")
        ] = 10,
        excludeReplies: ExcludeReplies = False,
        excludeRetweets: ExcludeRetweets = False,
    ) -> str:
        async def call():
            request = build_user_timeline_request(maxResults, excludeReplies, excludeRetweets)
            return to_json(page_payload(await api.user_timeline(userId, request)))
        return await dispatch("fetching user timeline", call)

    @registry.tool("get-quoted-tweets", "Get tweets that quote a specific tweet")
    async def get_quoted_tweets(
        tweetId: Annotated[str, Field(description="The ID of the tweet to get quotes for")],
        maxResults: Annotated[int, Field(ge=1, description="Maximum number of results to return")] = 10,
    ) -> str:
        async def call():
            request = build_quote_tweets_request(maxResults)
            return to_json(page_payload(await api.quote_tweets(tweetId, request)))
        return await dispatch("fetching quote tweets", call)
