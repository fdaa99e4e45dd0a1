# =============================================================================
# core/gas_price.py  —  Live WA Gas Price (EIA)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Fetches the most recent WEEKLY Washington State regular gasoline price
#   from the U.S. Energy Information Administration (EIA) v2 API.
#
# RESILIENCE:
#   This provider never raises.  A missing key, an empty dataset, a null
#   value, an HTTP error or an unparseable body all return
#   FALLBACK_GAS_PRICE.
#
#   Contrast with core/routing.py, which fails hard when its key is missing.
#   Keep the two providers' error handling separate.
#
# NO CACHING:
#   Every call performs a fresh request (when a key is configured).
# =============================================================================

import json
import logging
from typing import Optional

import httpx

from core.config import FALLBACK_GAS_PRICE, get_eia_api_key

logger = logging.getLogger(__name__)

EIA_URL = "https://api.eia.gov/v2/petroleum/pri/gnd/data/"
EIA_SERIES_ID = "EMM_EPMR_PTE_SWA_DPG"   # WA regular gasoline, $/gal


def _eia_params(api_key: str) -> dict:
    return {
        "api_key": api_key,
        "frequency": "weekly",
        "data[0]": "value",
        "facets[series][]": EIA_SERIES_ID,
        "sort": json.dumps([{"column": "period", "direction": "desc"}]),
        "offset": 0,
        "length": 1,
    }


async def _fetch_price(client: httpx.AsyncClient, api_key: str) -> float:
    response = await client.get(EIA_URL, params=_eia_params(api_key))
    response.raise_for_status()

    data = (response.json().get("response") or {}).get("data") or []
    if data and data[0].get("value") is not None:
        price = float(data[0]["value"])
        logger.info("EIA WA gas price fetched: $%s/gal", price)
        return price

    logger.warning("EIA returned no data, using fallback")
    return FALLBACK_GAS_PRICE


async def get_wa_gas_price(client: Optional[httpx.AsyncClient] = None) -> float:
    """Return the current WA regular gas price in USD per gallon.

    Args:
        client: Optional shared AsyncClient.  When omitted, a short-lived
            client is opened for this call only.

    Returns:
        The latest weekly EIA price, or FALLBACK_GAS_PRICE on any failure.
    """
    api_key = get_eia_api_key()
    if api_key is None:
        logger.warning("EIA_API_KEY not set, using fallback price")
        return FALLBACK_GAS_PRICE

    try:
        if client is None:
            async with httpx.AsyncClient() as own_client:
                return await _fetch_price(own_client, api_key)
        return await _fetch_price(client, api_key)
    except Exception as e:
        logger.warning("EIA API error: %s. Using fallback price.", e)
        return FALLBACK_GAS_PRICE
