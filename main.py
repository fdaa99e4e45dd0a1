# =============================================================================
# main.py  —  Entry Point for the WA Commute Advisor Agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py              # agent assumes 23 MPG unless told
#   uv run python main.py --mpg 31     # every question carries "31 MPG"
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/commute_agent.py)
#   2. Sets up an in-memory session
#   3. Reads questions from the terminal and sends them to the agent,
#      adding the --mpg hint when the question doesn't mention MPG
#   4. Prints each tool call as it happens, then the final answer
#
# To use the tools without the agent (e.g. from Claude Desktop), run the
# MCP server directly instead:  python -m tools.mcp_server
# =============================================================================

import argparse
import asyncio

from dotenv import load_dotenv

# Must run BEFORE creating the agent: LiteLlm reads OPENROUTER_API_KEY and
# the MCP subprocess inherits ORS_API_KEY / EIA_API_KEY from this process.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.commute_agent import create_agent
from agent.prompt import with_vehicle_hint
from core.config import DEFAULT_MPG

APP_NAME = "wa_commute_advisor"
USER_ID = "commuter"


async def run_agent(mpg=None):
    """Run the commute advisor interactively until the user quits."""
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    vehicle = f"{mpg:g} MPG" if mpg is not None else f"{DEFAULT_MPG} MPG (US average)"
    print(f"WA commute toll advisor, vehicle: {vehicle}. Type 'quit' to exit.")
    print("Example: Capitol Hill, Seattle to Microsoft Campus, Redmond")

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if user_input.lower() in ("quit", "exit", "q"):
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=with_vehicle_hint(user_input, mpg))],
        )

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 {part.function_call.name}")

        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")


def parse_args():
    parser = argparse.ArgumentParser(
        description="Ask whether WA tolls are worth it for your commute.")
    parser.add_argument("--mpg", type=float, default=None,
                        help=f"Your vehicle's fuel efficiency (default: {DEFAULT_MPG}, US average).")
    args = parser.parse_args()
    if args.mpg is not None and args.mpg <= 0:
        parser.error("--mpg must be greater than 0")
    return args


if __name__ == "__main__":
    asyncio.run(run_agent(parse_args().mpg))
