"""Tests for the user-domain tools (x_mcp/tools/user.py)."""
import json

import pytest

from x_mcp.builders import USER_FIELDS
from x_mcp.errors import UpstreamError
from x_mcp.tools.user import register_user_tools


@pytest.fixture
def tools(registry, api):
    register_user_tools(registry, api)
    return registry


async def test_get_my_details(tools, api):
    api.get_me.return_value = {"data": {"id": "1", "username": "me"}}
    text = await tools.get("get-my-details").handler()
    assert json.loads(text) == {"id": "1", "username": "me"}
    api.get_me.assert_awaited_once_with({"user_fields": USER_FIELDS})


async def test_get_my_details_error(tools, api):
    api.get_me.side_effect = UpstreamError("401 Unauthorized")
    text = await tools.get("get-my-details").handler()
    assert text == "Error fetching X account details: 401 Unauthorized"


async def test_get_user_details(tools, api):
    api.get_user.return_value = {"data": {"id": "42", "name": "Ada"}}
    text = await tools.get("get-user-details").handler(userId="42")
    assert json.loads(text)["name"] == "Ada"
    api.get_user.assert_awaited_once_with("42", {"user_fields": USER_FIELDS})


async def test_get_user_by_username_strips_at_sign(tools, api):
    api.get_user_by_username.return_value = {"data": {"id": "42", "username": "ada"}}
    await tools.get("get-user-by-username").handler(username="@ada")
    assert api.get_user_by_username.await_args.args[0] == "ada"


async def test_get_user_by_username_error(tools, api):
    api.get_user_by_username.side_effect = UpstreamError("rate limited")
    text = await tools.get("get-user-by-username").handler(username="ada")
    assert "Error fetching user by username" in text
    assert "rate limited" in text


async def test_get_user_followers_returns_page_subset(tools, api):
    api.followers.return_value = {
        "meta": {"result_count": 1},
        "data": [{"id": "2"}],
        "includes": {},
        "errors": [],
    }
    text = await tools.get("get-user-followers").handler(userId="42", maxResults=5)
    payload = json.loads(text)
    assert set(payload) == {"meta", "data", "includes"}
    assert payload["data"] == [{"id": "2"}]
    api.followers.assert_awaited_once_with("42", {"max_results": 5, "user_fields": USER_FIELDS})


async def test_get_user_followers_default_count(tools, api):
    api.followers.return_value = {"meta": {}, "data": [], "includes": {}}
    await tools.get("get-user-followers").handler(userId="42")
    assert api.followers.await_args.args[1]["max_results"] == 10


async def test_get_user_following(tools, api):
    api.following.return_value = {"meta": {"result_count": 0}, "data": [], "includes": {}}
    text = await tools.get("get-user-following").handler(userId="42", maxResults=3)
    assert json.loads(text)["meta"] == {"result_count": 0}
    api.following.assert_awaited_once_with("42", {"max_results": 3, "user_fields": USER_FIELDS})


async def test_get_user_following_error(tools, api):
    api.following.side_effect = UpstreamError("boom")
    text = await tools.get("get-user-following").handler(userId="42")
    assert text == "Error fetching accounts user is following: boom"
