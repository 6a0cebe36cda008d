# =============================================================================
# main.py  —  Entry Point for the Weather & Time Agent
# =============================================================================
#
# HOW TO RUN:
#   export GOOGLE_API_KEY=...               (or put both in .env)
#   export LLM_MODEL=gemini/gemini-2.0-flash
#   python main.py                          → interactive console
#   python main.py --query "Weather in New York?"
#
# WHAT HAPPENS:
#   1. Loads .env and reads the settings once
#   2. Builds the model, the MCP toolset and the root agent, and starts
#      the tool server once to check it (agent/weather_time_agent.py)
#   3. Hands the agent to the console launcher with our arguments
#      (agent/launcher.py)
#
# EXIT STATUS:
#   0 when the launcher finishes cleanly, 1 when the agent can't be built
#   or the launcher fails.  A launcher failure also prints the usage.
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

from agent.config import load_settings
from agent.errors import BootstrapError, LauncherError
from agent.launcher import Launcher, SingleAgentLoader
from agent.weather_time_agent import create_agent, verify_tools


def main(argv: list[str] | None = None) -> int:
    # .env must be loaded BEFORE the settings are read.
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        root_agent = create_agent(settings)
        verify_tools()
    except BootstrapError as e:
        print(e, file=sys.stderr)
        return 1

    launcher = Launcher()
    args = sys.argv[1:] if argv is None else argv
    try:
        launcher.execute(SingleAgentLoader(root_agent), args)
    except LauncherError as e:
        print(f"Run failed: {e}\n\n{launcher.command_line_syntax()}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
