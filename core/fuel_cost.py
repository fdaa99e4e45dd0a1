# =============================================================================
# core/fuel_cost.py  —  Fuel Cost Calculation
# =============================================================================
#
#   fuel_cost = (miles / mpg) × gas_price
#
# rounded once, to cents.  Every other monetary figure in the comparison is
# derived from this already-rounded value, so round() here is the single
# rounding rule of the whole system.
# =============================================================================

import logging

from core.errors import InvalidArgument
from core.models import FuelCostResult

logger = logging.getLogger(__name__)


def calculate_fuel_cost(
    miles: float,
    mpg: float,
    gas_price_per_gallon: float,
) -> FuelCostResult:
    """Calculate the fuel cost of a trip.

    Args:
        miles: Trip distance in miles (zero allowed, negative rejected).
        mpg: Vehicle fuel efficiency in miles per gallon (must be > 0).
        gas_price_per_gallon: Price in USD per gallon (must be > 0).

    Returns:
        A FuelCostResult echoing the inputs with fuel_cost rounded to cents.

    Raises:
        InvalidArgument: If any input is out of range.
    """
    if mpg <= 0:
        raise InvalidArgument("MPG must be greater than 0")
    if miles < 0:
        raise InvalidArgument("Miles cannot be negative")
    if gas_price_per_gallon <= 0:
        raise InvalidArgument("Gas price must be greater than 0")

    gallons_used = miles / mpg
    fuel_cost = gallons_used * gas_price_per_gallon

    logger.debug(
        "Fuel calc: %.1f mi / %s mpg × $%.2f = $%.2f",
        miles, mpg, gas_price_per_gallon, fuel_cost,
    )

    return FuelCostResult(
        miles=miles,
        mpg=mpg,
        gas_price_per_gallon=gas_price_per_gallon,
        fuel_cost=round(fuel_cost, 2),
    )
