# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the five MCP tools of the WA toll analyzer.  Each tool is a thin
#   wrapper around a core/ function: it validates inputs (via the type
#   annotations FastMCP turns into a JSON schema), formats the output, and
#   turns core errors into MCP tool failures.
#
# THE TOOLS:
#   - get_fuel_price       → live WA gas price (never fails, may fall back)
#   - get_route            → distance/time between two addresses
#   - get_toll_estimate    → which WA toll corridor a trip likely uses
#   - calculate_fuel_cost  → (miles / mpg) × price
#   - analyze_commute      → full toll vs. no-toll comparison (markdown)
#
#   All tools are read-only and idempotent.
#
# ERRORS:
#   Core errors (CommuteError) and upstream HTTP errors are logged and
#   re-raised as fastmcp ToolError, so the client sees a failed call rather
#   than a half-filled result.
#
# RUNNING THIS SERVER:
#     a) Standalone:  python -m tools.mcp_server   (or: wa-toll-analyzer)
#     b) Spawned by the commute agent via stdio transport (agent/commute_agent.py)
# =============================================================================

import json
import logging
import sys
from dataclasses import asdict
from typing import Annotated

import httpx
from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

# .env must be loaded before core/config reads anything (LOG_LEVEL below).
load_dotenv()

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core.commute import analyze_commute as run_commute_analysis, format_comparison
from core.config import DEFAULT_MPG, get_log_level
from core.errors import CommuteError
from core.fuel_cost import calculate_fuel_cost as compute_fuel_cost
from core.gas_price import get_wa_gas_price
from core.routing import get_route as fetch_route
from core.tolls import estimate_tolls

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because stdout carries the MCP protocol.  A stray print()
# or stdout log line would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result):
    """Log the tool response in GREEN, then return it."""
    if isinstance(result, dict):
        shown = json.dumps(result, separators=(",", ":"))
    else:
        shown = result.splitlines()[0] if result else ""
    logging.info(f"{_GREEN}  ← {tool_name} response: {shown}{_RESET}")
    return result


def _tool_failure(tool_name: str, error: Exception) -> ToolError:
    """Log a failed call and wrap the error for the MCP client."""
    _log_status(f"{tool_name} failed: {error}")
    return ToolError(str(error))


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("wa-toll-analyzer")

# =============================================================================
# TOOL 1: get_fuel_price
# =============================================================================
# Never fails: without EIA_API_KEY (or when EIA is down) the provider
# returns the fallback price.
# =============================================================================
@mcp.tool()
async def get_fuel_price() -> str:
    """Fetch the current Washington State regular gasoline price from the EIA API.

    Returns:
        A sentence with the price per gallon, formatted to cents.
    """
    _log_request("get_fuel_price")
    price = await get_wa_gas_price()
    return _log_response(
        "get_fuel_price",
        f"Current WA regular gas price: ${price:.2f} per gallon",
    )


# =============================================================================
# TOOL 2: get_route
# =============================================================================
@mcp.tool()
async def get_route(
    start: Annotated[str, Field(description="Starting address or location (e.g. 'Capitol Hill, Seattle, WA')")],
    end: Annotated[str, Field(description="Destination address or location (e.g. 'Microsoft Campus, Redmond, WA')")],
    avoid_tolls: Annotated[bool, Field(description="If true, routes around toll roads and bridges")] = False,
) -> dict:
    """Get driving distance (miles) and estimated travel time (minutes) between
    two addresses using OpenRouteService.

    Returns:
        A dict with distance_miles, duration_minutes and a short summary.
        Fails if ORS_API_KEY is not configured or an address cannot be found.
    """
    _log_request("get_route", start=start, end=end, avoid_tolls=avoid_tolls)
    try:
        route = await fetch_route(start, end, avoid_tolls)
    except (CommuteError, httpx.HTTPError) as e:
        raise _tool_failure("get_route", e) from e
    return _log_response("get_route", asdict(route))


# =============================================================================
# TOOL 3: get_toll_estimate
# =============================================================================
# Local keyword match against the four WA toll corridors.  No network.
# =============================================================================
@mcp.tool()
def get_toll_estimate(
    start: Annotated[str, Field(description="Starting address")],
    end: Annotated[str, Field(description="Destination address")],
) -> dict:
    """Estimate Washington State toll costs for a route based on known WA toll
    corridors (SR-520, I-405, SR-167, Tacoma Narrows), using Good To Go
    average rates.

    Returns:
        A dict with corridor, estimated_cost, cost_range and detected.
        corridor is "None detected" (cost 0) when no toll road is likely.
    """
    _log_request("get_toll_estimate", start=start, end=end)
    estimate = estimate_tolls(start, end)
    return _log_response("get_toll_estimate", asdict(estimate))


# =============================================================================
# TOOL 4: calculate_fuel_cost
# =============================================================================
@mcp.tool()
def calculate_fuel_cost(
    miles: Annotated[float, Field(gt=0, description="Trip distance in miles")],
    efficiency: Annotated[float, Field(gt=0, description="Vehicle fuel efficiency in miles per gallon")],
    price: Annotated[float, Field(gt=0, description="Gas price in dollars per gallon")],
) -> dict:
    """Calculate fuel cost for a trip: (miles / efficiency) × price.

    Returns:
        A dict with miles, mpg, gas_price_per_gallon and fuel_cost (to cents).
    """
    _log_request("calculate_fuel_cost", miles=miles, efficiency=efficiency, price=price)
    try:
        result = compute_fuel_cost(miles, efficiency, price)
    except CommuteError as e:
        raise _tool_failure("calculate_fuel_cost", e) from e
    return _log_response("calculate_fuel_cost", asdict(result))


# =============================================================================
# TOOL 5: analyze_commute
# =============================================================================
# Composition tool: two routes + gas price (concurrently) + toll estimate.
# Returns markdown, since the agent shows it to the user largely as-is.
# =============================================================================
@mcp.tool()
async def analyze_commute(
    start: Annotated[str, Field(description="Starting address (e.g. 'Capitol Hill, Seattle, WA')")],
    end: Annotated[str, Field(description="Destination address (e.g. 'Microsoft Campus, Redmond, WA')")],
    efficiency: Annotated[float, Field(gt=0, description="Vehicle MPG, defaults to 23 (US average)")] = DEFAULT_MPG,
) -> str:
    """Full toll vs. no-toll route comparison for a WA commute.

    Returns a markdown table with distance, travel time, fuel cost, toll cost
    and total cost for both options, followed by a one-line verdict on
    whether avoiding the toll is worth the extra time.
    """
    _log_request("analyze_commute", start=start, end=end, efficiency=efficiency)
    try:
        comparison = await run_commute_analysis(start, end, efficiency)
    except (CommuteError, httpx.HTTPError) as e:
        raise _tool_failure("analyze_commute", e) from e

    _log_status(
        f"savings={comparison.savings.cost_savings_avoiding_toll}, "
        f"time_cost={comparison.savings.time_cost_minutes} min"
    )
    return _log_response("analyze_commute", format_comparison(start, end, comparison))


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    logging.info("WA Toll Analyzer MCP Server running on stdio")
    mcp.run()


if __name__ == "__main__":
    main()
