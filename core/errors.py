# =============================================================================
# core/errors.py  —  Error kinds raised by the core layer
# =============================================================================
#
# Every error the core raises on purpose derives from CommuteError, so the
# tool layer can turn them into MCP tool failures with a single except clause.
#
# NOTE: the gas price provider never raises any of these.  It degrades to a
# fallback price instead (see core/gas_price.py).
# =============================================================================


class CommuteError(Exception):
    """Base class for failures surfaced to the caller of a tool."""


class InvalidArgument(CommuteError, ValueError):
    """A numeric input to the fuel cost calculation is out of range."""


class GeocodeNotFound(CommuteError):
    """The geocoder returned no candidates for a free-text location."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f'Could not geocode address: "{address}"')


class RouteNotFound(CommuteError):
    """The directions service returned no route between two points."""

    def __init__(self, message: str = "No route found between the provided addresses."):
        super().__init__(message)


class ProviderUnavailable(CommuteError):
    """A required credential for an external provider is missing."""

    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(
            f"{env_var} is not configured. Please set it in your environment."
        )
