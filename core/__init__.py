# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the weather & time agent:
# the two lookups and the result types they return.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any orchestration
#   framework.  Every module here is plain Python plus the standard library's
#   timezone database, so it can be tested without a model or a network.
# =============================================================================
