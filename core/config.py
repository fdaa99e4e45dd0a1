# =============================================================================
# core/config.py  —  Environment-driven settings
# =============================================================================
#
# All settings come from environment variables (optionally loaded from a
# .env file by python-dotenv at process start, see tools/mcp_server.py and
# main.py).
#
# Credentials are read at CALL time, not import time, so a key added to the
# environment after startup is picked up by the next request.  The values
# shipped in .env.example are placeholders and count as "not set".
# =============================================================================

import os
from typing import Optional

# --- Credentials ---
EIA_API_KEY_ENV = "EIA_API_KEY"
ORS_API_KEY_ENV = "ORS_API_KEY"

_PLACEHOLDER_KEYS = {
    EIA_API_KEY_ENV: "your_eia_api_key_here",
    ORS_API_KEY_ENV: "your_openrouteservice_api_key_here",
}

# --- Domain constants ---
FALLBACK_GAS_PRICE = 3.85      # WA regular, USD per gallon
DEFAULT_MPG = 23               # US average fuel efficiency

# --- Agent ---
DEFAULT_AGENT_MODEL = "openrouter/openai/gpt-4o"


def _read_key(env_var: str) -> Optional[str]:
    value = os.environ.get(env_var, "").strip()
    if not value or value == _PLACEHOLDER_KEYS.get(env_var):
        return None
    return value


def get_eia_api_key() -> Optional[str]:
    """Return the EIA key, or None when unset or still the placeholder."""
    return _read_key(EIA_API_KEY_ENV)


def get_ors_api_key() -> Optional[str]:
    """Return the OpenRouteService key, or None when unset or still the placeholder."""
    return _read_key(ORS_API_KEY_ENV)


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def get_agent_model() -> str:
    return os.environ.get("COMMUTE_AGENT_MODEL", DEFAULT_AGENT_MODEL)
