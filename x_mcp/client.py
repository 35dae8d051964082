"""Upstream client adapter over tweepy's asynchronous X API v2 client.

``XApi`` is the set of operations tool handlers may call; ``XClient`` is the
production implementation. Tests substitute any object with the same methods.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Protocol

import aiohttp
from tweepy import TweepyException
from tweepy.asynchronous import AsyncClient, AsyncPaginator

from x_mcp.config import Config
from x_mcp.errors import RequestBuildError, UpstreamError
from x_mcp.models import DEFAULT_POLL_DURATION_MINUTES

logger = logging.getLogger("x_mcp.client")

# (min, max) page size accepted by each paged endpoint
HOME_TIMELINE_PAGE = (1, 100)
USER_TIMELINE_PAGE = (5, 100)
QUOTE_TWEETS_PAGE = (10, 100)
FOLLOWS_PAGE = (1, 1000)
COMMUNITY_SEARCH_PAGE = (10, 100)

# Top-level tweet body keys that map one-to-one onto create_tweet arguments.
_PASSTHROUGH_TWEET_KEYS = (
    "text",
    "quote_tweet_id",
    "reply_settings",
    "for_super_followers_only",
    "direct_message_deep_link",
)


class XApi(Protocol):
    async def create_tweet(self, body: dict) -> dict: ...
    async def delete_tweet(self, tweet_id: str) -> dict: ...
    async def get_tweet(self, tweet_id: str, params: dict) -> dict: ...
    async def get_tweets(self, tweet_ids: list[str], params: dict) -> dict: ...
    async def post_thread(self, bodies: list[dict]) -> list[dict]: ...
    async def like(self, tweet_id: str) -> dict: ...
    async def unlike(self, tweet_id: str) -> dict: ...
    async def retweet(self, tweet_id: str) -> dict: ...
    async def unretweet(self, tweet_id: str) -> dict: ...
    async def bookmark(self, tweet_id: str) -> dict: ...
    async def remove_bookmark(self, tweet_id: str) -> dict: ...
    async def home_timeline(self, request: dict) -> dict: ...
    async def user_timeline(self, user_id: str, request: dict) -> dict: ...
    async def quote_tweets(self, tweet_id: str, request: dict) -> dict: ...
    async def get_me(self, params: dict) -> dict: ...
    async def get_user(self, user_id: str, params: dict) -> dict: ...
    async def get_user_by_username(self, username: str, params: dict) -> dict: ...
    async def followers(self, user_id: str, request: dict) -> dict: ...
    async def following(self, user_id: str, request: dict) -> dict: ...
    async def get_community(self, community_id: str) -> dict: ...
    async def search_communities(self, request: dict) -> dict: ...


def upstream_call(func):
    """Re-raise tweepy and transport failures as UpstreamError."""
    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (TweepyException, aiohttp.ClientError) as exc:
            raise UpstreamError(str(exc) or type(exc).__name__) from exc
    return wrapper


def tweet_kwargs(body: dict) -> dict[str, Any]:
    """Flatten an X API v2 tweet body into ``AsyncClient.create_tweet`` kwargs."""
    body = dict(body)
    kwargs: dict[str, Any] = {}

    reply = body.pop("reply", None) or {}
    if reply.get("in_reply_to_tweet_id"):
        kwargs["in_reply_to_tweet_id"] = reply["in_reply_to_tweet_id"]
    if reply.get("exclude_reply_user_ids"):
        kwargs["exclude_reply_user_ids"] = reply["exclude_reply_user_ids"]

    poll = body.pop("poll", None)
    if poll:
        kwargs["poll_options"] = list(poll["options"])
        kwargs["poll_duration_minutes"] = poll.get("duration_minutes") or DEFAULT_POLL_DURATION_MINUTES

    media = body.pop("media", None)
    if media:
        kwargs["media_ids"] = media.get("media_ids")
        if media.get("tagged_user_ids"):
            kwargs["media_tagged_user_ids"] = media["tagged_user_ids"]

    geo = body.pop("geo", None)
    if geo and geo.get("place_id"):
        kwargs["place_id"] = geo["place_id"]

    for key in _PASSTHROUGH_TWEET_KEYS:
        if key in body:
            kwargs[key] = body.pop(key)

    if body:
        raise RequestBuildError(f"unsupported tweet fields: {', '.join(sorted(body))}")
    return kwargs


def _clamp(count: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(count, high))


class XClient:
    """Shared, stateless handle to the authenticated X API client."""

    def __init__(self, client: AsyncClient):
        self._client = client

    @classmethod
    def from_config(cls, config: Config) -> "XClient":
        return cls(AsyncClient(
            consumer_key=config.api_key,
            consumer_secret=config.api_key_secret,
            access_token=config.access_token,
            access_token_secret=config.access_token_secret,
            return_type=dict,
        ))

    # --- Tweets ---

    @upstream_call
    async def create_tweet(self, body: dict) -> dict:
        return await self._client.create_tweet(**tweet_kwargs(body), user_auth=True)

    @upstream_call
    async def delete_tweet(self, tweet_id: str) -> dict:
        return await self._client.delete_tweet(tweet_id, user_auth=True)

    @upstream_call
    async def get_tweet(self, tweet_id: str, params: dict) -> dict:
        return await self._client.get_tweet(tweet_id, user_auth=True, **params)

    @upstream_call
    async def get_tweets(self, tweet_ids: list[str], params: dict) -> dict:
        return await self._client.get_tweets(tweet_ids, user_auth=True, **params)

    async def post_thread(self, bodies: list[dict]) -> list[dict]:
        """Post tweets in order, each replying to the one before it.

        The first tweet keeps its own ``reply`` target, if any. Every body is
        checked before the first one is posted, so a malformed item never
        leaves a partial thread behind.
        """
        for body in bodies:
            tweet_kwargs(body)
        posted: list[dict] = []
        for body in bodies:
            body = dict(body)
            if posted:
                reply = dict(body.get("reply") or {})
                reply["in_reply_to_tweet_id"] = posted[-1]["data"]["id"]
                body["reply"] = reply
            posted.append(await self.create_tweet(body))
            logger.debug("Thread tweet %d posted: %s", len(posted), posted[-1]["data"]["id"])
        return posted

    # --- Engagement ---

    @upstream_call
    async def like(self, tweet_id: str) -> dict:
        return await self._client.like(tweet_id, user_auth=True)

    @upstream_call
    async def unlike(self, tweet_id: str) -> dict:
        return await self._client.unlike(tweet_id, user_auth=True)

    @upstream_call
    async def retweet(self, tweet_id: str) -> dict:
        return await self._client.retweet(tweet_id, user_auth=True)

    @upstream_call
    async def unretweet(self, tweet_id: str) -> dict:
        return await self._client.unretweet(tweet_id, user_auth=True)

    # tweepy's bookmark helpers only sign with OAuth 2.0 user tokens, so these
    # go through the raw route with the OAuth 1.0a credentials instead.
    @upstream_call
    async def bookmark(self, tweet_id: str) -> dict:
        user_id = await self._my_id()
        return await self._request(
            "POST", f"/2/users/{user_id}/bookmarks", json={"tweet_id": tweet_id},
        )

    @upstream_call
    async def remove_bookmark(self, tweet_id: str) -> dict:
        user_id = await self._my_id()
        return await self._request("DELETE", f"/2/users/{user_id}/bookmarks/{tweet_id}")

    # --- Timelines ---

    async def home_timeline(self, request: dict) -> dict:
        return await self._collect(self._client.get_home_timeline, request, HOME_TIMELINE_PAGE)

    async def user_timeline(self, user_id: str, request: dict) -> dict:
        return await self._collect(self._client.get_users_tweets, request, USER_TIMELINE_PAGE, user_id)

    async def quote_tweets(self, tweet_id: str, request: dict) -> dict:
        return await self._collect(self._client.get_quote_tweets, request, QUOTE_TWEETS_PAGE, tweet_id)

    # --- Users ---

    @upstream_call
    async def get_me(self, params: dict) -> dict:
        return await self._client.get_me(user_auth=True, **params)

    @upstream_call
    async def get_user(self, user_id: str, params: dict) -> dict:
        return await self._client.get_user(id=user_id, user_auth=True, **params)

    @upstream_call
    async def get_user_by_username(self, username: str, params: dict) -> dict:
        return await self._client.get_user(username=username, user_auth=True, **params)

    async def followers(self, user_id: str, request: dict) -> dict:
        return await self._collect(self._client.get_users_followers, request, FOLLOWS_PAGE, user_id)

    async def following(self, user_id: str, request: dict) -> dict:
        return await self._collect(self._client.get_users_following, request, FOLLOWS_PAGE, user_id)

    # --- Communities ---

    @upstream_call
    async def get_community(self, community_id: str) -> dict:
        return await self._request("GET", f"/2/communities/{community_id}")

    @upstream_call
    async def search_communities(self, request: dict) -> dict:
        params = {
            "query": request["query"],
            "max_results": _clamp(request["max_results"], COMMUNITY_SEARCH_PAGE),
        }
        result = await self._request("GET", "/2/communities/search", params=params)
        if isinstance(result.get("data"), list):
            result["data"] = result["data"][:request["max_results"]]
        return result

    # --- Raw routes ---

    async def _request(self, method: str, route: str, params: dict | None = None, json: dict | None = None) -> dict:
        """Call a v2 route tweepy has no OAuth 1.0a helper for; returns the decoded body."""
        # AsyncClient.request signs the query string and needs a dict, even an empty one.
        response = await self._client.request(
            method, route, params=params or {}, json=json, user_auth=True,
        )
        return await response.json()

    async def _my_id(self) -> str:
        me = await self._client.get_me(user_auth=True)
        return me["data"]["id"]

    # --- Paging ---

    @upstream_call
    async def _collect(self, method, request: dict, page_bounds: tuple[int, int], *args) -> dict:
        """Fetch pages until ``max_results`` items are collected or pages run out."""
        params = dict(request)
        wanted = params.pop("max_results")
        params["max_results"] = _clamp(wanted, page_bounds)

        data: list = []
        includes: dict[str, list] = {}
        meta: dict = {}
        pages = 0
        async for page in AsyncPaginator(method, *args, user_auth=True, **params):
            pages += 1
            data.extend(page.get("data") or [])
            for key, items in (page.get("includes") or {}).items():
                includes.setdefault(key, []).extend(items)
            meta = dict(page.get("meta") or {})
            if len(data) >= wanted:
                break

        data = data[:wanted]
        meta["result_count"] = len(data)
        logger.debug("%s: %d items over %d page(s)", method.__name__, len(data), pages)
        return {"meta": meta, "data": data, "includes": includes}
