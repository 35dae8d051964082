"""Request builders: validated tool parameters in, upstream request dicts out.

Every function here is pure. Tweet bodies use the X API v2 JSON shape;
read requests use tweepy's keyword names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from x_mcp.errors import RequestBuildError
from x_mcp.models import DEFAULT_POLL_DURATION_MINUTES, PollSpec, ThreadTweet

# Same superset for every tweet read so all tools return the same shape.
TWEET_EXPANSIONS = ["author_id", "attachments.media_keys", "referenced_tweets.id"]
TWEET_FIELDS = ["created_at", "public_metrics", "text", "entities"]
TWEET_USER_FIELDS = ["name", "username", "profile_image_url"]

USER_FIELDS = [
    "created_at",
    "description",
    "entities",
    "location",
    "name",
    "profile_image_url",
    "protected",
    "public_metrics",
    "url",
    "username",
    "verified",
    "verified_type",
]


@dataclass(frozen=True)
class SingleTweet:
    tweet_id: str


@dataclass(frozen=True)
class TweetBatch:
    tweet_ids: list[str]


def select_tweets(value: str | list[str]) -> SingleTweet | TweetBatch:
    """Classify the id-or-ids input of ``get-tweets``."""
    if isinstance(value, str):
        return SingleTweet(value)
    if isinstance(value, list):
        return TweetBatch(list(value))
    raise RequestBuildError(f"tweet ids must be a string or a list, got {type(value).__name__}")


def build_exclusions(exclude_replies: bool = False, exclude_retweets: bool = False) -> list[str]:
    exclude = []
    if exclude_replies:
        exclude.append("replies")
    if exclude_retweets:
        exclude.append("retweets")
    return exclude


def tweet_read_fields() -> dict[str, list[str]]:
    return {
        "expansions": list(TWEET_EXPANSIONS),
        "tweet_fields": list(TWEET_FIELDS),
        "user_fields": list(TWEET_USER_FIELDS),
    }


def build_tweet(
    text: str,
    reply_to: str | None = None,
    quote: str | None = None,
    poll: PollSpec | None = None,
) -> dict[str, Any]:
    """Compose a tweet body; optional parts are added only when given."""
    body: dict[str, Any] = {"text": text}
    if reply_to:
        body["reply"] = {"in_reply_to_tweet_id": reply_to}
    if quote:
        body["quote_tweet_id"] = quote
    if poll is not None:
        body["poll"] = {
            "options": list(poll.options),
            "duration_minutes": poll.duration_minutes or DEFAULT_POLL_DURATION_MINUTES,
        }
    return body


def normalize_thread(items: list[str | ThreadTweet]) -> list[dict[str, Any]]:
    """Turn thread items into tweet bodies, keeping the caller's order."""
    if not items:
        raise RequestBuildError("a thread needs at least one tweet")
    bodies = []
    for position, item in enumerate(items):
        if isinstance(item, str):
            body = {"text": item}
        elif isinstance(item, ThreadTweet):
            body = item.model_dump(exclude_none=True)
        elif isinstance(item, dict):
            body = dict(item)
        else:
            raise RequestBuildError(f"thread item {position} has unsupported type {type(item).__name__}")
        if not body.get("text") and "media" not in body:
            raise RequestBuildError(f"thread item {position} has no text")
        bodies.append(body)
    return bodies


def build_tweet_lookup() -> dict[str, list[str]]:
    return tweet_read_fields()


def build_home_timeline_request(
    max_results: int = 10,
    exclude_replies: bool = False,
    exclude_retweets: bool = False,
) -> dict[str, Any]:
    request: dict[str, Any] = {"max_results": max_results, **tweet_read_fields()}
    exclude = build_exclusions(exclude_replies, exclude_retweets)
    # Omitted entirely when empty: no filter is not the same as an empty filter.
    if exclude:
        request["exclude"] = exclude
    return request


def build_user_timeline_request(
    max_results: int = 10,
    exclude_replies: bool = False,
    exclude_retweets: bool = False,
) -> dict[str, Any]:
    return build_home_timeline_request(max_results, exclude_replies, exclude_retweets)


def build_quote_tweets_request(max_results: int = 10) -> dict[str, Any]:
    return {"max_results": max_results, **tweet_read_fields()}


def build_user_lookup() -> dict[str, list[str]]:
    return {"user_fields": list(USER_FIELDS)}


def build_follows_request(max_results: int = 10) -> dict[str, Any]:
    return {"max_results": max_results, "user_fields": list(USER_FIELDS)}


def build_community_search(query: str, max_results: int = 10) -> dict[str, Any]:
    if not query.strip():
        raise RequestBuildError("community search query is empty")
    return {"query": query, "max_results": max_results}
