# =============================================================================
# core/weather.py  —  Weather lookup
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers "what's the weather in <city>?" from a hard-coded report.  There
#   is no weather service behind it; the point of the demo is the tool
#   contract, not the data.
#
# FAILURE MODEL:
#   An unknown city is not an exception.  It comes back as an error result
#   so the model can apologize to the user instead of aborting the turn.
#   This function cannot fail in any other way.
# =============================================================================

from typing import Any

from core.cities import NEW_YORK, is_known_city
from core.models import Error, Success, ToolResult

_REPORTS: dict[str, str] = {
    NEW_YORK: (
        "The weather in New York is sunny with a temperature of 25 degrees"
        " Celsius (77 degrees Fahrenheit)."
    ),
}


def weather_report(city: str) -> ToolResult:
    """Look up the weather report for ``city`` as a Success or Error."""
    if not is_known_city(city):
        return Error(f"Weather information for '{city}' is not available.")
    return Success(_REPORTS[city.lower()])


def get_weather(city: str) -> dict[str, Any]:
    """Retrieves the current weather report for a specified city.

    Args:
        city: The name of the city (e.g., "New York").  Matched
              case-insensitively.

    Returns:
        A dict with ``status`` "success" and a ``report`` sentence, or
        ``status`` "error" and an ``error_message`` naming the city.
    """
    return weather_report(city).to_dict()
