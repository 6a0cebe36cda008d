# =============================================================================
# tools/registry.py  —  Tool descriptors (name, description, handler)
# =============================================================================
#
# The names and descriptions below are what the LLM sees.  They are shared
# by the MCP server (which registers them) and the agent (which filters the
# server's tools down to exactly these, in this order), so the two sides
# can't drift apart.
#
# The argument schema is NOT declared here: FastMCP derives it from the
# handler signature, which for both handlers is ``(city: str)``.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Callable

from core.clock import get_current_time
from core.weather import get_weather


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    handler: Callable[[str], dict[str, Any]]


TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="get_weather",
        description="Retrieves the current weather report for a specified city.",
        handler=get_weather,
    ),
    ToolSpec(
        name="get_current_time",
        description="Returns the current time in a specified city.",
        handler=get_current_time,
    ),
)

TOOL_NAMES: list[str] = [spec.name for spec in TOOL_SPECS]
