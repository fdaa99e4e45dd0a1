# =============================================================================
# core/routing.py  —  Driving Routes (OpenRouteService)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns two free-text addresses into a driving distance and travel time.
#
# HOW IT WORKS (two stages, each may fail):
#   1. GEOCODE both addresses, concurrently, against ORS's Pelias endpoint
#      (restricted to the US, top result only).
#   2. ROUTE between the two points with the driving-car profile.  When
#      avoid_tolls is set, ORS is asked to avoid "tollways".
#
#   Distances come back in miles because the request says units="mi", so
#   no unit conversion happens here.  Durations are seconds on the wire and
#   are rounded to whole minutes, halves rounding UP (90 s -> 2, 150 s -> 3).
#
# FAILURE MODES:
#   - ORS_API_KEY missing/placeholder  -> ProviderUnavailable
#   - an address has no candidates     -> GeocodeNotFound
#   - no route summary in the response -> RouteNotFound
#   - HTTP errors                      -> httpx.HTTPStatusError, untouched
# =============================================================================

import asyncio
import logging
import math
from typing import Optional

import httpx

from core.config import ORS_API_KEY_ENV, get_ors_api_key
from core.errors import GeocodeNotFound, ProviderUnavailable, RouteNotFound
from core.models import Coordinates, RouteResult

logger = logging.getLogger(__name__)

ORS_BASE = "https://api.openrouteservice.org"
GEOCODE_URL = f"{ORS_BASE}/geocode/search"
DIRECTIONS_URL = f"{ORS_BASE}/v2/directions/driving-car"

SECONDS_PER_MINUTE = 60


def _whole_minutes(seconds: float) -> int:
    return math.floor(seconds / SECONDS_PER_MINUTE + 0.5)


async def geocode(client: httpx.AsyncClient, address: str, api_key: str) -> Coordinates:
    """Resolve a free-text address to its top-ranked US location."""
    response = await client.get(
        GEOCODE_URL,
        params={
            "api_key": api_key,
            "text": address,
            "boundary.country": "US",
            "size": 1,
        },
    )
    response.raise_for_status()

    features = response.json().get("features") or []
    if not features:
        raise GeocodeNotFound(address)

    lon, lat = features[0]["geometry"]["coordinates"][:2]
    logger.info('Geocoded "%s" → [%s, %s]', address, lon, lat)
    return Coordinates(lon=lon, lat=lat)


def _directions_body(start: Coordinates, end: Coordinates, avoid_tolls: bool) -> dict:
    body = {
        "coordinates": [start.as_lon_lat(), end.as_lon_lat()],
        "units": "mi",
        "instructions": False,
    }
    if avoid_tolls:
        body["options"] = {"avoid_features": ["tollways"]}
    return body


async def _route(
    client: httpx.AsyncClient,
    start: str,
    end: str,
    avoid_tolls: bool,
    api_key: str,
) -> RouteResult:
    start_coords, end_coords = await asyncio.gather(
        geocode(client, start, api_key),
        geocode(client, end, api_key),
    )

    response = await client.post(
        DIRECTIONS_URL,
        json=_directions_body(start_coords, end_coords, avoid_tolls),
        headers={"Authorization": api_key},
    )
    response.raise_for_status()

    routes = response.json().get("routes") or []
    summary = routes[0].get("summary") if routes else None
    if summary is None:
        raise RouteNotFound()

    # ORS leaves out zero-valued fields, e.g. when start == end.
    distance_miles = float(summary.get("distance", 0.0))
    duration_minutes = _whole_minutes(summary.get("duration", 0.0))

    route_type = "toll-free" if avoid_tolls else "standard"
    logger.info("Route (%s): %.1f mi, %d min", route_type, distance_miles, duration_minutes)

    return RouteResult(
        distance_miles=distance_miles,
        duration_minutes=duration_minutes,
        summary=f"{distance_miles:.1f} miles, {duration_minutes} minutes",
    )


async def get_route(
    start: str,
    end: str,
    avoid_tolls: bool = False,
    client: Optional[httpx.AsyncClient] = None,
) -> RouteResult:
    """Get driving distance and time between two addresses.

    Args:
        start: Starting address (e.g., "Capitol Hill, Seattle, WA").
        end: Destination address (e.g., "Microsoft Campus, Redmond, WA").
        avoid_tolls: If True, route around toll roads and bridges.
        client: Optional shared AsyncClient; a private one is opened otherwise.

    Raises:
        ProviderUnavailable: ORS_API_KEY is missing or a placeholder.
        GeocodeNotFound: Either address could not be resolved.
        RouteNotFound: ORS returned no route.
    """
    api_key = get_ors_api_key()
    if api_key is None:
        raise ProviderUnavailable(ORS_API_KEY_ENV)

    if client is None:
        async with httpx.AsyncClient() as own_client:
            return await _route(own_client, start, end, avoid_tolls, api_key)
    return await _route(client, start, end, avoid_tolls, api_key)
