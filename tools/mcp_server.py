# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Publishes the two core/ lookups as MCP tools.  Each tool is a thin
#   wrapper: log the request, call the handler, log the result dict.
#
# HOW IT WORKS (the flow):
#   1. The ADK agent decides it needs information (e.g., the weather)
#   2. It calls a tool by name via MCP ("get_weather")
#   3. FastMCP routes the call to the wrapper registered below
#   4. The wrapper calls the core/ handler and returns its result dict
#   5. The agent gets {"status": ..., "report" | "error_message": ...}
#
# WHY WRAPPERS AND NOT THE HANDLERS THEMSELVES?
#   FastMCP builds the argument schema from the registered function's
#   signature.  core.clock.get_current_time also accepts a ``clock`` for
#   tests, which must not leak into the schema the model sees.  The
#   wrapper's signature is exactly ``(city: str)``.
#
# RUNNING THIS SERVER:
#   a) Standalone:  python -m tools.mcp_server
#   b) Spawned by the agent over stdio (agent/weather_time_agent.py)
# =============================================================================

import json
import logging
import sys

from fastmcp import FastMCP

from tools.registry import TOOL_SPECS, ToolSpec

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT is the MCP transport, so everything we log goes to STDERR.
# Colours: CYAN for requests, GREEN for responses, YELLOW for status.
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger("tools.mcp_server")


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("weather-time-agent")


def _register(spec: ToolSpec) -> None:
    """Register ``spec`` on the server under its fixed name and description."""

    def tool(city: str) -> dict:
        _log_request(spec.name, city=city)
        result = spec.handler(city)
        if result["status"] != "success":
            _log_status(result["error_message"])
        return _log_response(spec.name, result)

    tool.__name__ = spec.name
    mcp.tool(name=spec.name, description=spec.description)(tool)


# Registration order is the order the agent advertises: weather, then time.
for _spec in TOOL_SPECS:
    _register(_spec)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    mcp.run()


if __name__ == "__main__":
    main()
