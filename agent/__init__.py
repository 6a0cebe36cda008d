# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK side of the project:
#   - config.py             → settings read once from the environment
#   - prompt.py             → the agent's name, description and instruction
#   - weather_time_agent.py → model, MCP toolset and root agent construction
#   - launcher.py           → the console session around the agent
#   - errors.py             → fatal startup errors
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the business logic (that's in core/)
#   - It is NOT the tool registration (that's in tools/)
# =============================================================================
