"""Structured tool parameters shared by several tools."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_POLL_DURATION_MINUTES = 1440


class PollSpec(BaseModel):
    """Poll attached to a tweet."""

    options: list[str] = Field(
        min_length=2,
        max_length=4,
        description="Poll options (2-4 choices)",
    )
    duration_minutes: int | None = Field(
        default=None,
        ge=5,
        le=10080,
        description="Poll duration in minutes (defaults to 1440, i.e. 24 hours)",
    )


class ThreadTweet(BaseModel):
    """One tweet of a thread, in X API v2 request-body shape.

    Extra keys (``reply``, ``quote_tweet_id``, ``poll``, ``media``...) are
    passed through to the upstream request unchanged.
    """

    model_config = ConfigDict(extra="allow")

    text: str | None = Field(default=None, description="The text of this tweet")
