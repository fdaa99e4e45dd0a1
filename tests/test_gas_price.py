"""EIA gas price provider: live value or fallback, never an exception."""

import asyncio
import json

import pytest

from core.config import FALLBACK_GAS_PRICE
from core.gas_price import EIA_SERIES_ID, get_wa_gas_price


def _price(upstream):
    async def go():
        async with upstream.client() as client:
            return await get_wa_gas_price(client=client)
    return asyncio.run(go())


def test_missing_key_uses_fallback_without_calling_eia(upstream):
    assert _price(upstream) == FALLBACK_GAS_PRICE == 3.85
    assert upstream.requests == []


def test_placeholder_key_counts_as_missing(upstream, monkeypatch):
    monkeypatch.setenv("EIA_API_KEY", "your_eia_api_key_here")

    assert _price(upstream) == FALLBACK_GAS_PRICE
    assert upstream.requests == []


def test_latest_weekly_value_is_returned(upstream, monkeypatch):
    monkeypatch.setenv("EIA_API_KEY", "eia-key")
    upstream.gas_price = "4.129"

    assert _price(upstream) == 4.129

    (request,) = upstream.requests
    params = request.url.params
    assert params["api_key"] == "eia-key"
    assert params["frequency"] == "weekly"
    assert params["facets[series][]"] == EIA_SERIES_ID
    assert params["length"] == "1"
    assert json.loads(params["sort"]) == [{"column": "period", "direction": "desc"}]


def test_every_call_fetches_again(upstream, monkeypatch):
    monkeypatch.setenv("EIA_API_KEY", "eia-key")

    _price(upstream)
    _price(upstream)

    assert len(upstream.requests) == 2


@pytest.mark.parametrize("status", [401, 500, 503])
def test_http_error_uses_fallback(upstream, monkeypatch, status):
    monkeypatch.setenv("EIA_API_KEY", "eia-key")
    upstream.gas_status = status

    assert _price(upstream) == FALLBACK_GAS_PRICE


def test_empty_dataset_uses_fallback(upstream, monkeypatch):
    monkeypatch.setenv("EIA_API_KEY", "eia-key")
    upstream.gas_price = None

    assert _price(upstream) == FALLBACK_GAS_PRICE


def test_unparseable_value_uses_fallback(upstream, monkeypatch):
    monkeypatch.setenv("EIA_API_KEY", "eia-key")
    upstream.gas_price = "n/a"

    assert _price(upstream) == FALLBACK_GAS_PRICE


def test_closed_client_uses_fallback(monkeypatch, upstream):
    monkeypatch.setenv("EIA_API_KEY", "eia-key")

    async def go():
        client = upstream.client()
        await client.aclose()
        return await get_wa_gas_price(client=client)

    assert asyncio.run(go()) == FALLBACK_GAS_PRICE
