# =============================================================================
# agent/prompt.py  —  The agent's identity and system prompt
# =============================================================================
#
# Kept apart from the agent wiring so the text the model sees can be read
# and reviewed on its own.  The tool descriptions live with the tools
# (tools/registry.py); this file only holds what belongs to the agent.
# =============================================================================

AGENT_NAME = "weather_time_agent"

AGENT_DESCRIPTION = "Agent to answer questions about the time and weather in a city."

AGENT_INSTRUCTION = (
    "You are a helpful agent who can answer user questions about the time"
    " and weather in a city."
)
