# =============================================================================
# core/commute.py  —  Toll vs. No-Toll Commute Comparison
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Composes the other core modules into one answer:
#     "What does this commute cost with the toll, and without it?"
#
# THE PIPELINE:
#   1. Fetch, CONCURRENTLY: the toll route, the toll-free route, the gas price.
#   2. Estimate the toll locally (keyword match, no network).
#   3. Fuel cost for each route at the same gas price.
#   4. Totals, savings and time delta.
#
#   The three fetches are joined with asyncio.gather: the first failure
#   propagates immediately and the analysis returns nothing.  There is no
#   partial comparison.
#
# ROUNDING:
#   Fuel costs are rounded once (core/fuel_cost.py).  Totals and savings are
#   rounded to cents from those values; distances are rounded to 0.1 mi for
#   display only, after the costs were computed from the exact distance.
# =============================================================================

import asyncio
import logging
from typing import Optional

import httpx

from core.config import DEFAULT_MPG
from core.fuel_cost import calculate_fuel_cost
from core.gas_price import get_wa_gas_price
from core.models import CommuteComparison, CommuteSavings, RouteCostBreakdown
from core.routing import get_route
from core.tolls import NO_TOLL_DETECTED, estimate_tolls

logger = logging.getLogger(__name__)


async def _fetch_inputs(start: str, end: str, client: httpx.AsyncClient):
    return await asyncio.gather(
        get_route(start, end, avoid_tolls=False, client=client),
        get_route(start, end, avoid_tolls=True, client=client),
        get_wa_gas_price(client=client),
    )


async def analyze_commute(
    start: str,
    end: str,
    mpg: float = DEFAULT_MPG,
    client: Optional[httpx.AsyncClient] = None,
) -> CommuteComparison:
    """Compare the toll and toll-free routes for a commute.

    Args:
        start: Starting address.
        end: Destination address.
        mpg: Vehicle fuel efficiency (defaults to the US average, 23).
        client: Optional shared AsyncClient for all three fetches.

    Returns:
        A frozen CommuteComparison.

    Raises:
        Any error from the route provider (or the fuel cost calculator for a
        non-positive mpg).  Nothing is returned on failure.
    """
    logger.info('analyze_commute: "%s" → "%s" @ %s MPG', start, end, mpg)

    if client is None:
        async with httpx.AsyncClient() as own_client:
            toll_route, no_toll_route, gas_price = await _fetch_inputs(start, end, own_client)
    else:
        toll_route, no_toll_route, gas_price = await _fetch_inputs(start, end, client)

    toll_estimate = estimate_tolls(start, end)

    toll_fuel = calculate_fuel_cost(toll_route.distance_miles, mpg, gas_price)
    no_toll_fuel = calculate_fuel_cost(no_toll_route.distance_miles, mpg, gas_price)

    toll_total = toll_fuel.fuel_cost + toll_estimate.estimated_cost
    no_toll_total = no_toll_fuel.fuel_cost

    return CommuteComparison(
        toll_route=RouteCostBreakdown(
            distance_miles=round(toll_route.distance_miles, 1),
            duration_minutes=toll_route.duration_minutes,
            fuel_cost=toll_fuel.fuel_cost,
            toll_cost=toll_estimate.estimated_cost,
            total_cost=round(toll_total, 2),
            toll_corridor=toll_estimate.corridor,
        ),
        no_toll_route=RouteCostBreakdown(
            distance_miles=round(no_toll_route.distance_miles, 1),
            duration_minutes=no_toll_route.duration_minutes,
            fuel_cost=no_toll_fuel.fuel_cost,
            toll_cost=0.0,
            total_cost=round(no_toll_total, 2),
        ),
        savings=CommuteSavings(
            cost_savings_avoiding_toll=round(toll_total - no_toll_total, 2),
            time_cost_minutes=no_toll_route.duration_minutes - toll_route.duration_minutes,
        ),
        gas_price_used=gas_price,
    )


# =============================================================================
# PRESENTATION
# =============================================================================
def _time_label(minutes: int) -> str:
    if minutes > 0:
        return f"{minutes} min longer"
    if minutes < 0:
        return f"{abs(minutes)} min faster"
    return "same time"


def _savings_sentence(savings: CommuteSavings) -> str:
    amount = f"{abs(savings.cost_savings_avoiding_toll):.2f}"
    if savings.cost_savings_avoiding_toll > 0:
        return (
            f"Avoiding the toll saves ~${amount}/trip but the no-toll route is "
            f"{_time_label(savings.time_cost_minutes)}."
        )
    if savings.cost_savings_avoiding_toll < 0:
        return (
            f"Taking the toll route costs ${amount} more but saves "
            f"{abs(savings.time_cost_minutes)} min."
        )
    return "Both routes cost roughly the same."


def format_comparison(start: str, end: str, c: CommuteComparison) -> str:
    """Render a comparison as a markdown table plus a one-line verdict."""
    if c.toll_route.toll_corridor and c.toll_route.toll_corridor != NO_TOLL_DETECTED:
        toll_label = f"Toll Route ({c.toll_route.toll_corridor})"
    else:
        toll_label = "Toll Route"

    t, n = c.toll_route, c.no_toll_route
    lines = [
        f"## WA Commute Comparison: {start} → {end}",
        "",
        f"| | {toll_label} | No-Toll Route |",
        "|---|---|---|",
        f"| Distance | {t.distance_miles} mi | {n.distance_miles} mi |",
        f"| Travel Time | {t.duration_minutes} min | {n.duration_minutes} min |",
        f"| Fuel Cost | ${t.fuel_cost:.2f} | ${n.fuel_cost:.2f} |",
        f"| Toll Cost | ~${t.toll_cost:.2f} (avg Good To Go) | $0.00 |",
        f"| **Total Cost** | **~${t.total_cost:.2f}** | **${n.total_cost:.2f}** |",
        "",
        f"**Gas price used:** ${c.gas_price_used:.2f}/gal (WA average, EIA)",
        "",
        _savings_sentence(c.savings),
        "",
        "_Toll rates are Good To Go averages. Actual tolls vary by time of day._",
    ]
    return "\n".join(lines)
