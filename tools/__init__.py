# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP clients (the commute agent,
#   Claude Desktop, any MCP host) and the core business logic.  It:
#     1. Imports functions from core/
#     2. Wraps them in FastMCP tool decorators
#     3. Converts dataclasses → dicts (or markdown) for the wire
#     4. Converts core errors → MCP tool errors
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain business logic (that's in core/)
#   - They do NOT know about Google ADK (they're framework-agnostic)
# =============================================================================
