"""Tweet tools: posting, deleting, engagement toggles, threads and lookup."""

from typing import Annotated

from pydantic import Field

from x_mcp.builders import (
    SingleTweet,
    build_tweet,
    build_tweet_lookup,
    normalize_thread,
    select_tweets,
)
from x_mcp.client import XApi
from x_mcp.dispatch import dispatch, toggle_text
from x_mcp.models import PollSpec, ThreadTweet
from x_mcp.registry import ToolRegistry
from x_mcp.utils import to_json


def _lookup_payload(result: dict) -> dict:
    return {key: result[key] for key in ("data", "includes", "errors") if key in result}


def register_tweet_tools(registry: ToolRegistry, api: XApi) -> None:
    """Register the tweet-domain tools."""

    @registry.tool("post-tweet", "Post a tweet with the specified content")
    async def post_tweet(
        content: Annotated[str, Field(description="The text content of the tweet")],
    ) -> str:
        async def call():
            result = await api.create_tweet(build_tweet(content))
            return f"Tweet posted successfully! Tweet ID: {result['data']['id']}"
        return await dispatch("posting tweet", call)

    @registry.tool("delete-tweet", "Delete one of your tweets")
    async def delete_tweet(
        tweetId: Annotated[str, Field(description="The ID of the tweet to delete")],
    ) -> str:
        async def call():
            result = await api.delete_tweet(tweetId)
            return toggle_text(
                result["data"].get("deleted") is True,
                f"Tweet {tweetId} deleted successfully",
                f"Failed to delete tweet {tweetId}",
            )
        return await dispatch("deleting tweet", call)

    @registry.tool("like-tweet", "Like a specific tweet")
    async def like_tweet(
        tweetId: Annotated[str, Field(description="The ID of the tweet to like")],
    ) -> str:
        async def call():
            result = await api.like(tweetId)
            return toggle_text(
                result["data"].get("liked") is True,
                f"Successfully liked tweet {tweetId}",
                f"Failed to like tweet {tweetId}",
            )
        return await dispatch("liking tweet", call)

    @registry.tool("unlike-tweet", "Unlike a specific tweet")
    async def unlike_tweet(
        tweetId: Annotated[str, Field(description="The ID of the tweet to unlike")],
    ) -> str:
        async def call():
            result = await api.unlike(tweetId)
            return toggle_text(
                result["data"].get("liked") is False,
                f"Successfully unliked tweet {tweetId}",
                f"Failed to unlike tweet {tweetId}",
            )
        return await dispatch("unliking tweet", call)

    @registry.tool("retweet", "Retweet a specific tweet")
    async def retweet(
        tweetId: Annotated[str, Field(description="The ID of the tweet to retweet")],
    ) -> str:
        async def call():
            result = await api.retweet(tweetId)
            return toggle_text(
                result["data"].get("retweeted") is True,
                f"Successfully retweeted tweet {tweetId}",
                f"Failed to retweet tweet {tweetId}",
            )
        return await dispatch("retweeting tweet", call)

    @registry.tool("unretweet", "Remove a retweet from a specific tweet")
    async def unretweet(
        tweetId: Annotated[str, Field(description="The ID of the tweet to unretweet")],
    ) -> str:
        async def call():
            result = await api.unretweet(tweetId)
            return toggle_text(
                result["data"].get("retweeted") is False,
                f"Successfully unretweeted tweet {tweetId}",
                f"Failed to unretweet tweet {tweetId}",
            )
        return await dispatch("unretweeting tweet", call)

    @registry.tool(
        "advanced-tweet",
        "Post a tweet with advanced options like reply to a tweet, quote a specific tweet, "
        "or create a poll for the tweet",
    )
    async def advanced_tweet(
        text: Annotated[str, Field(description="The text content of the tweet")],
        reply_to: Annotated[str | None, Field(description="Tweet ID to reply to")] = None,
        quote: Annotated[str | None, Field(description="Tweet ID to quote")] = None,
        poll: Annotated[PollSpec | None, Field(description="Add a poll to the tweet")] = None,
    ) -> str:
        async def call():
            result = await api.create_tweet(build_tweet(text, reply_to=reply_to, quote=quote, poll=poll))
            return f"Tweet posted successfully! Tweet ID: {result['data']['id']}"
        return await dispatch("posting tweet", call)

    @registry.tool("reply-to-tweet", "Reply to a specific tweet")
    async def reply_to_tweet(
        text: Annotated[str, Field(description="The text content of the reply")],
        tweetId: Annotated[str, Field(description="The ID of the tweet to reply to")],
    ) -> str:
        async def call():
            result = await api.create_tweet(build_tweet(text, reply_to=tweetId))
            return f"Reply posted successfully! Reply ID: {result['data']['id']}"
        return await dispatch("posting reply", call)

    @registry.tool("quote-a-tweet", "Quote a specific tweet")
    async def quote_a_tweet(
        text: Annotated[str, Field(description="The text content of the quote tweet")],
        tweetId: Annotated[str, Field(description="The ID of the tweet to quote")],
    ) -> str:
        async def call():
            result = await api.create_tweet(build_tweet(text, quote=tweetId))
            return f"Quote tweet posted successfully! Tweet ID: {result['data']['id']}"
        return await dispatch("posting quote tweet", call)

    @registry.tool("tweet-thread", "Post a thread of tweets")
    async def tweet_thread(
        tweets: Annotated[
            list[str | ThreadTweet],
            Field(
                min_length=1,
                description="An array of tweets to post as a thread, each either plain text "
                            "or a tweet object such as {\"text\": ..., \"reply\": {...}}",
            ),
        ],
    ) -> str:
        async def call():
            posted = await api.post_thread(normalize_thread(tweets))
            ids = ", ".join(tweet["data"]["id"] for tweet in posted)
            return f"Thread posted successfully! Tweet IDs: {ids}"
        return await dispatch("posting thread", call)

    @registry.tool("add-delete-bookmark", "Add or delete a bookmark for a specific tweet")
    async def add_delete_bookmark(
        tweetId: Annotated[str, Field(description="The ID of the tweet to bookmark or delete the bookmark for")],
        isAddBookmark: Annotated[bool, Field(description="True to bookmark the tweet, false to delete the bookmark")],
    ) -> str:
        async def call():
            if isAddBookmark:
                result = await api.bookmark(tweetId)
                return toggle_text(
                    result["data"].get("bookmarked") is True,
                    f"Tweet {tweetId} bookmarked successfully!",
                    f"Failed to bookmark tweet {tweetId}",
                )
            result = await api.remove_bookmark(tweetId)
            return toggle_text(
                result["data"].get("bookmarked") is False,
                f"Bookmark for tweet {tweetId} deleted successfully!",
                f"Failed to delete bookmark for tweet {tweetId}",
            )
        return await dispatch("toggling bookmark", call)

    @registry.tool("get-tweets", "Get one or more tweets by their IDs")
    async def get_tweets(
        tweetIds: Annotated[
            str | Annotated[list[str], Field(min_length=1, max_length=100)],
            Field(description="A single tweet ID or an array of up to 100 tweet IDs"),
        ],
    ) -> str:
        async def call():
            selection = select_tweets(tweetIds)
            if isinstance(selection, SingleTweet):
                result = await api.get_tweet(selection.tweet_id, build_tweet_lookup())
            else:
                result = await api.get_tweets(selection.tweet_ids, build_tweet_lookup())
            return to_json(_lookup_payload(result))
        return await dispatch("fetching tweets", call)
