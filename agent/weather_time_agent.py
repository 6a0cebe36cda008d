# =============================================================================
# agent/weather_time_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the three things the launcher needs, in order:
#     1. the model handle   (LiteLlm, configured from GOOGLE_API_KEY/LLM_MODEL)
#     2. the tools          (an McpToolset backed by tools/mcp_server.py)
#     3. the root agent     (name, description, instruction, tools)
#
#   Each step wraps its failure in BootstrapError with a message naming the
#   step ("Failed to create model: ..."), so main.py can print one line and
#   exit.
#
# MCP CONNECTION:
#   The toolset starts the FastMCP server as a subprocess of the current
#   interpreter and talks to it over stdin/stdout.  The subprocess is not
#   spawned until the first tool listing, so building the agent is cheap
#   and does not touch the network.  main.py calls verify_tools() once at
#   startup so a server that cannot start is a bootstrap failure, not a
#   failure on the first user turn.
#
#   The toolset is filtered to TOOL_NAMES and re-sorted into that order
#   (McpToolset itself sorts by name): get_weather, then get_current_time.
# =============================================================================

import asyncio
import logging
import os
import sys
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools import BaseTool
from google.adk.tools.mcp_tool import McpToolset, StdioConnectionParams
from mcp import StdioServerParameters

from agent.config import API_KEY_ENV, MODEL_ENV, Settings
from agent.errors import BootstrapError
from agent.prompt import AGENT_DESCRIPTION, AGENT_INSTRUCTION, AGENT_NAME
from tools.registry import TOOL_NAMES

logger = logging.getLogger(__name__)

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Seconds to wait for the MCP server subprocess to answer.
MCP_TIMEOUT = 30.0


def create_model(settings: Settings) -> LiteLlm:
    """Create the LLM handle from the startup settings.

    The key and model id are passed through verbatim; LiteLLM decides what
    provider the model id refers to.

    Raises:
        BootstrapError: a setting is missing or LiteLlm rejects it.
    """
    if not settings.google_api_key:
        raise BootstrapError(f"Failed to create model: {API_KEY_ENV} is not set")
    if not settings.llm_model:
        raise BootstrapError(f"Failed to create model: {MODEL_ENV} is not set")
    try:
        return LiteLlm(model=settings.llm_model, api_key=settings.google_api_key)
    except Exception as e:
        raise BootstrapError(f"Failed to create model: {e}") from e


class OrderedMcpToolset(McpToolset):
    """McpToolset that advertises its tools in TOOL_NAMES order.

    McpToolset.get_tools() sorts by name, which would put get_current_time
    ahead of get_weather.
    """

    async def get_tools(self, readonly_context=None) -> list[BaseTool]:
        tools = await super().get_tools(readonly_context)
        rank = {name: i for i, name in enumerate(TOOL_NAMES)}
        return sorted(tools, key=lambda tool: rank.get(tool.name, len(rank)))


def create_tools() -> OrderedMcpToolset:
    """Create the toolset that exposes get_weather and get_current_time.

    The server subprocess is not started here; see verify_tools().
    """
    try:
        return OrderedMcpToolset(
            connection_params=StdioConnectionParams(
                server_params=StdioServerParameters(
                    command=sys.executable,
                    args=["-m", "tools.mcp_server"],
                    cwd=PROJECT_ROOT,
                ),
                timeout=MCP_TIMEOUT,
            ),
            tool_filter=list(TOOL_NAMES),
        )
    except Exception as e:
        raise BootstrapError(f"Failed to create tools: {e}") from e


def verify_tools(toolset: Optional[McpToolset] = None) -> list[str]:
    """Start the tool server once and check it offers exactly TOOL_NAMES.

    Uses a throwaway toolset unless one is given; the toolset is closed
    again afterwards, so the subprocess does not outlive the check.

    Raises:
        BootstrapError: the server could not be started or listed, or it
            offers the wrong tools.
    """
    toolset = toolset or create_tools()

    async def list_names() -> list[str]:
        try:
            return [tool.name for tool in await toolset.get_tools()]
        finally:
            await toolset.close()

    try:
        names = asyncio.run(list_names())
    except Exception as e:
        raise BootstrapError(f"Failed to create tools: {e}") from e

    if names != TOOL_NAMES:
        raise BootstrapError(
            f"Failed to create tools: server offers {names}, expected {TOOL_NAMES}"
        )
    return names


def create_agent(settings: Settings) -> Agent:
    """Create the root agent.

    Raises:
        BootstrapError: the model, the toolset or the agent itself could
            not be constructed.
    """
    model = create_model(settings)
    toolset = create_tools()
    try:
        agent = Agent(
            name=AGENT_NAME,
            model=model,
            description=AGENT_DESCRIPTION,
            instruction=AGENT_INSTRUCTION,
            tools=[toolset],
        )
    except Exception as e:
        raise BootstrapError(f"Failed to create agent: {e}") from e

    logger.debug("Created agent %s with model %s", AGENT_NAME, settings.llm_model)
    return agent
