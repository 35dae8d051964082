"""Error types raised inside the tool layer.

Handlers never let these escape: the dispatcher turns them into text.
"""


class XMcpError(Exception):
    """Base class for errors raised by this package."""
    pass


class UpstreamError(XMcpError):
    """The X API call failed (auth, not found, rate limit, network)."""
    pass


class RequestBuildError(XMcpError):
    """Validated parameters could not be turned into an upstream request."""
    pass


class DuplicateToolError(ValueError):
    """A tool name was registered twice."""
    pass
