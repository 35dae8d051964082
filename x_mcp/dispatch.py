"""Invocation boundary shared by every tool handler."""

import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger("x_mcp.dispatch")


async def dispatch(action: str, call: Callable[[], Awaitable[str]]) -> str:
    """Run one tool invocation and return the text of its single content block.

    ``call`` builds the request, performs the upstream call and renders the
    outcome. Any failure is turned into ``Error <action>: <message>`` so the
    caller always receives a well-formed text block.
    """
    logger.debug("Running: %s", action)
    try:
        return await call()
    except Exception as e:
        logger.warning("Error %s: %s", action, e)
        return f"Error {action}: {e}"


def toggle_text(flag: bool | None, done: str, failed: str) -> str:
    """Render a toggle result from the state the upstream reports back."""
    return done if flag else failed
