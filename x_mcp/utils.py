import json
import logging
import sys
from typing import Any


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure and return the application logger.

    Logs go to stderr: stdout carries the MCP stdio transport.
    """
    logger = logging.getLogger("x_mcp")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def to_json(value: Any, pretty: bool = True) -> str:
    """Serialize an upstream payload for a text content block."""
    if pretty:
        return json.dumps(value, indent=2, default=str)
    return json.dumps(value, default=str)


def page_payload(result: dict) -> dict:
    """Pick the documented subset of a paged read: meta, data, includes."""
    return {
        "meta": result.get("meta"),
        "data": result.get("data"),
        "includes": result.get("includes"),
    }
