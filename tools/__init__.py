# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the translation layer between the agent framework and the
# core/ lookups:
#   - registry.py   → the tool names and descriptions the model sees
#   - mcp_server.py → a FastMCP server that publishes them over stdio
#
# Tools here do NOT contain business logic (that's in core/) and do NOT
# know about Google ADK (that's in agent/).
# =============================================================================
