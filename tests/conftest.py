"""Shared fixtures: a substitute upstream API and a registry wired to it."""
from unittest.mock import AsyncMock

import pytest
from mcp.server.fastmcp import FastMCP

from x_mcp.client import XClient
from x_mcp.registry import ToolRegistry


@pytest.fixture
def api():
    """An XApi substitute whose every operation is an AsyncMock."""
    return AsyncMock(spec=XClient)


@pytest.fixture
def registry():
    return ToolRegistry(FastMCP("test-x-server"))
