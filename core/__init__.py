# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the WA toll analyzer.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any orchestration
#   framework.  The only third-party import is httpx, used by the two
#   providers that talk to external APIs (EIA and OpenRouteService).
#
#   Fuel cost, toll estimation and the comparison arithmetic are pure Python
#   and can be exercised in a bare REPL with zero internet access.
# =============================================================================
