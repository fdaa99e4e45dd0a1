# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# through the toll analyzer.  They carry no behavior.
#
# Everything here is produced fresh per request and never persisted.  The
# comparison records are frozen: once a CommuteComparison is built, nothing
# downstream (formatting, serialization) can alter the numbers.
# =============================================================================

from dataclasses import dataclass
from typing import Optional


# -----------------------------------------------------------------------------
# Coordinates — one geocoded point
# -----------------------------------------------------------------------------
# OpenRouteService speaks GeoJSON, so the order is [lon, lat] everywhere on
# the wire.  as_lon_lat() gives that pair back for the directions request.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Coordinates:
    """A geocoded location."""

    lon: float
    lat: float

    def as_lon_lat(self) -> list[float]:
        return [self.lon, self.lat]


# -----------------------------------------------------------------------------
# RouteResult — the route provider's output
# -----------------------------------------------------------------------------
@dataclass
class RouteResult:
    """Driving distance and time between two addresses."""

    distance_miles: float              # Already in miles (requested units="mi")
    duration_minutes: int              # Seconds / 60, rounded to whole minutes
    summary: str                       # "11.2 miles, 21 minutes"


# -----------------------------------------------------------------------------
# TollCorridor — one row of the static corridor table
# -----------------------------------------------------------------------------
# The table lives in core/tolls.py.  Keywords are lowercase substrings
# matched against the combined start + end text.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TollCorridor:
    """A named toll road or bridge with its average Good To Go rate."""

    name: str                          # "SR-520 Bridge"
    avg_cost: float                    # Average one-way toll (USD)
    cost_range: str                    # "$1.25–$4.30" — display only
    keywords: tuple[str, ...]          # Lowercase substrings that trigger a match


# -----------------------------------------------------------------------------
# TollEstimate — the toll estimator's output
# -----------------------------------------------------------------------------
@dataclass
class TollEstimate:
    """Estimated toll for a trip.

    "None detected" is a valid corridor value, not an error: it comes back
    with estimated_cost 0 and detected False.
    """

    corridor: str
    estimated_cost: float              # 0 exactly when detected is False
    cost_range: str
    detected: bool


# -----------------------------------------------------------------------------
# FuelCostResult — the fuel cost calculator's output
# -----------------------------------------------------------------------------
@dataclass
class FuelCostResult:
    """Fuel cost for one trip."""

    miles: float
    mpg: float
    gas_price_per_gallon: float
    fuel_cost: float                   # Rounded to cents


# -----------------------------------------------------------------------------
# Comparison records — the commute analyzer's output
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RouteCostBreakdown:
    """Cost and time of one route option, ready for display."""

    distance_miles: float              # Rounded to 0.1 mi for presentation
    duration_minutes: int
    fuel_cost: float
    toll_cost: float
    total_cost: float
    toll_corridor: Optional[str] = None  # Only set on the toll route


@dataclass(frozen=True)
class CommuteSavings:
    """What the driver gains or loses by avoiding tolls."""

    cost_savings_avoiding_toll: float  # Positive = the toll route costs more
    time_cost_minutes: int             # Positive = the toll-free route is slower


@dataclass(frozen=True)
class CommuteComparison:
    """Toll vs. no-toll comparison for a single commute."""

    toll_route: RouteCostBreakdown
    no_toll_route: RouteCostBreakdown
    savings: CommuteSavings
    gas_price_used: float
