# =============================================================================
# agent/commute_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the Google ADK agent that answers commute questions by calling
#   the WA toll analyzer's MCP tools.
#
# ARCHITECTURE:
#   ADK Agent ──(LiteLlm)──▶ LLM (GPT-4o via OpenRouter by default)
#       │
#       └──(MCP over stdio)──▶ tools/mcp_server.py ──▶ core/
#
#   ADK starts the MCP server as a subprocess and talks to it over
#   stdin/stdout.  The agent discovers the five tools automatically.
#
# MODEL:
#   Any LiteLlm model string works.  Set COMMUTE_AGENT_MODEL to switch, e.g.
#     - "openrouter/openai/gpt-4o-mini"
#     - "openrouter/anthropic/claude-3.5-sonnet"
#   LiteLlm reads OPENROUTER_API_KEY from the environment.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_commute_advisor_prompt
from core.config import get_agent_model

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def mcp_server_params() -> StdioServerParameters:
    """How ADK launches the tool server subprocess.

    "uv run" makes the subprocess use the project's virtualenv, where
    fastmcp and httpx are installed.  Running as a module from the project
    root keeps `core` importable.
    """
    return StdioServerParameters(
        command="uv",
        args=["run", "python", "-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
    )


def create_agent() -> Agent:
    """Create the WA commute advisor agent.

    Returns:
        A configured Google ADK Agent with the MCP toolset attached.
    """
    mcp_tools = MCPToolset(connection_params=mcp_server_params())

    return Agent(
        name="wa_commute_advisor",
        model=LiteLlm(model=get_agent_model()),
        instruction=get_commute_advisor_prompt(),
        tools=[mcp_tools],
    )
