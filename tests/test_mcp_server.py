"""The five MCP tools, exercised in-memory through a FastMCP client."""

import asyncio
import json

import httpx
import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from agent.prompt import TOOL_NAMES, get_commute_advisor_prompt
from tools.mcp_server import mcp


def _call(name, arguments=None):
    async def go():
        async with Client(mcp) as client:
            return await client.call_tool(name, arguments or {})
    return asyncio.run(go())


def _text(result) -> str:
    return result.content[0].text


def test_server_exposes_exactly_the_five_tools():
    async def go():
        async with Client(mcp) as client:
            return await client.list_tools()

    names = {tool.name for tool in asyncio.run(go())}
    assert names == set(TOOL_NAMES)


def test_agent_prompt_mentions_every_tool():
    prompt = get_commute_advisor_prompt()
    for name in TOOL_NAMES:
        assert name in prompt


def test_get_fuel_price_falls_back_without_key():
    assert _text(_call("get_fuel_price")) == "Current WA regular gas price: $3.85 per gallon"


def test_get_toll_estimate():
    result = json.loads(_text(_call("get_toll_estimate", {"start": "Tacoma, WA", "end": "Gig Harbor, WA"})))

    assert result == {
        "corridor": "Tacoma Narrows Bridge",
        "estimated_cost": 6.5,
        "cost_range": "$6.50 (fixed)",
        "detected": True,
    }


def test_calculate_fuel_cost():
    result = json.loads(_text(_call("calculate_fuel_cost", {"miles": 100, "efficiency": 25, "price": 4.0})))

    assert result["fuel_cost"] == 16.0
    assert result["mpg"] == 25


@pytest.mark.parametrize(
    "arguments",
    [
        {"miles": 100, "efficiency": 0, "price": 4.0},
        {"miles": 100, "efficiency": 25, "price": -1},
        {"miles": -5, "efficiency": 25, "price": 4.0},
    ],
)
def test_calculate_fuel_cost_rejects_non_positive_inputs(arguments):
    with pytest.raises(ToolError):
        _call("calculate_fuel_cost", arguments)


def test_get_route_without_ors_key_is_a_failed_call():
    with pytest.raises(ToolError, match="ORS_API_KEY"):
        _call("get_route", {"start": "Tacoma, WA", "end": "Gig Harbor, WA"})


def test_analyze_commute_without_ors_key_returns_nothing():
    with pytest.raises(ToolError, match="ORS_API_KEY"):
        _call("analyze_commute", {"start": "Capitol Hill, Seattle, WA", "end": "Redmond, WA"})


@pytest.fixture
def fake_http(monkeypatch, upstream):
    """Every AsyncClient the core opens talks to the fake EIA/ORS upstream."""
    monkeypatch.setenv("ORS_API_KEY", "ors-key")
    monkeypatch.setenv("EIA_API_KEY", "eia-key")
    real_client = httpx.AsyncClient

    def fake_client(*args, **kwargs):
        return real_client(transport=httpx.MockTransport(upstream.handle))

    monkeypatch.setattr(httpx, "AsyncClient", fake_client)
    return upstream


def test_get_route_returns_the_route(fake_http):
    result = json.loads(_text(_call("get_route", {"start": "Tacoma, WA", "end": "Gig Harbor, WA"})))

    assert result == {
        "distance_miles": 11.2,
        "duration_minutes": 21,
        "summary": "11.2 miles, 21 minutes",
    }


def test_get_route_avoiding_tolls(fake_http):
    result = json.loads(_text(_call(
        "get_route", {"start": "Tacoma, WA", "end": "Gig Harbor, WA", "avoid_tolls": True},
    )))

    assert result["duration_minutes"] == 28


def test_analyze_commute_uses_the_given_efficiency(fake_http):
    text = _text(_call("analyze_commute", {
        "start": "Capitol Hill, Seattle, WA",
        "end": "Microsoft Campus, Redmond, WA",
        "efficiency": 25,
    }))

    assert "| | Toll Route (SR-520 Bridge) | No-Toll Route |" in text
    # 11.2 / 25 × $4.00 and 14.9 / 25 × $4.00; at 23 MPG these would be $1.95 / $2.59
    assert "| Fuel Cost | $1.79 | $2.38 |" in text
    assert "**Gas price used:** $4.00/gal (WA average, EIA)" in text
    assert "Avoiding the toll saves ~$2.19/trip but the no-toll route is 7 min longer." in text


def test_analyze_commute_defaults_to_23_mpg(fake_http):
    text = _text(_call("analyze_commute", {"start": "Tacoma, WA", "end": "Gig Harbor, WA"}))

    assert "| Fuel Cost | $1.95 | $2.59 |" in text
