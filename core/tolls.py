# =============================================================================
# core/tolls.py  —  WA Toll Corridor Estimation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Guesses which Washington State toll corridor (if any) a trip uses, by
#   looking for known place names and route numbers in the start/end text.
#   It never looks at the actual route geometry.
#
# HOW THE MATCH WORKS:
#   1. start + end are joined and lowercased into one haystack.
#   2. Corridors are scanned in TABLE ORDER.  The first corridor with any
#      keyword found as a substring wins.  No scoring, no merging.
#   3. If nothing matched, a Seattle -> Eastside heuristic infers SR-520
#      (the most common cross-lake commute).
#   4. Otherwise the "None detected" estimate is returned.
#
# TABLE ORDER IS THE TIE-BREAK.
#   "renton" appears under both I-405 and SR-167; I-405 wins because it is
#   listed first.  Results must stay reproducible, so do not reorder the table
#   or replace this with a "most specific match" rule.
#
# RATES:
#   Average Good To Go (transponder) rates.  Actual tolls vary by time of
#   day and occupancy; the ranges are shown to the user for that reason.
# =============================================================================

import logging

from core.models import TollCorridor, TollEstimate

logger = logging.getLogger(__name__)


WA_TOLL_CORRIDORS: tuple[TollCorridor, ...] = (
    TollCorridor(
        name="SR-520 Bridge",
        avg_cost=2.78,
        cost_range="$1.25–$4.30",
        keywords=("520", "sr-520", "sr 520", "montlake", "medina", "bellevue", "redmond"),
    ),
    TollCorridor(
        name="I-405 Express Toll Lanes",
        avg_cost=3.00,
        cost_range="$0.75–$10.00",
        keywords=("405", "i-405", "i 405", "kirkland", "renton", "lynnwood", "bothell"),
    ),
    TollCorridor(
        name="SR-167 HOT Lanes",
        avg_cost=2.50,
        cost_range="$0.50–$9.00",
        keywords=("167", "sr-167", "sr 167", "auburn", "kent", "renton", "puyallup"),
    ),
    TollCorridor(
        name="Tacoma Narrows Bridge",
        avg_cost=6.50,
        cost_range="$6.50 (fixed)",
        keywords=("tacoma narrows", "gig harbor", "tacoma", "narrows"),
    ),
)

# Fallback inference: one list per side of Lake Washington.
SEATTLE_KEYWORDS: tuple[str, ...] = (
    "seattle", "capitol hill", "downtown", "belltown", "fremont",
    "queen anne", "wallingford", "university district", "u district",
)
EASTSIDE_KEYWORDS: tuple[str, ...] = (
    "redmond", "bellevue", "kirkland", "microsoft", "amazon",
    "google", "meta", "eastside", "mercer island",
)

NO_TOLL_DETECTED = "None detected"


def _contains_any(haystack: str, keywords: tuple[str, ...]) -> bool:
    return any(kw in haystack for kw in keywords)


def _estimate_for(corridor: TollCorridor) -> TollEstimate:
    return TollEstimate(
        corridor=corridor.name,
        estimated_cost=corridor.avg_cost,
        cost_range=corridor.cost_range,
        detected=True,
    )


def estimate_tolls(start: str, end: str) -> TollEstimate:
    """Estimate the toll for a trip between two free-text locations.

    Deterministic and case-insensitive.  See the module header for the
    matching rules.

    Args:
        start: Starting address or place name.
        end: Destination address or place name.

    Returns:
        A TollEstimate; detected is False (and the cost 0) when no corridor
        matched directly or by inference.
    """
    combined = f"{start} {end}".lower()

    for corridor in WA_TOLL_CORRIDORS:
        if _contains_any(combined, corridor.keywords):
            logger.info("Toll corridor detected: %s", corridor.name)
            return _estimate_for(corridor)

    if _contains_any(combined, SEATTLE_KEYWORDS) and _contains_any(combined, EASTSIDE_KEYWORDS):
        sr520 = WA_TOLL_CORRIDORS[0]
        logger.info("%s corridor inferred for Seattle→Eastside route", sr520.name)
        return _estimate_for(sr520)

    logger.info("No WA toll corridor detected for this route")
    return TollEstimate(
        corridor=NO_TOLL_DETECTED,
        estimated_cost=0.0,
        cost_range="$0",
        detected=False,
    )
