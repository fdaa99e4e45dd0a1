# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK commute-advisor agent.
#
# ARCHITECTURAL ROLE:
#   The agent turns a question like "Should I pay the 520 toll to get from
#   Capitol Hill to Redmond?" into tool calls against the MCP server, then
#   explains the numbers.  It:
#     1. Works out the start, destination and vehicle MPG
#     2. Calls analyze_commute (or the finer-grained tools)
#     3. Interprets the trade-off for the user
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the business logic (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
# =============================================================================
