# =============================================================================
# core/clock.py  —  Current-time lookup
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers "what time is it in <city>?" by loading the city's IANA zone
#   from the system timezone database and formatting the current instant
#   there, e.g.:
#
#       The current time in New York is 2024-01-15 07:00:00 EST-0500
#
# THE CLOCK IS INJECTABLE:
#   get_current_time() takes an optional ``clock`` callable with the same
#   shape as datetime.now(tz).  Production passes nothing; tests pass a
#   frozen clock so DST behavior can be checked on fixed dates.
#
# FAILURE MODEL:
#   Unknown city and a missing/corrupt timezone database both come back as
#   error results.  Nothing here raises into the agent runtime.
# =============================================================================

import logging
from datetime import datetime
from typing import Any, Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from core.cities import timezone_for
from core.models import Error, Success, ToolResult

logger = logging.getLogger(__name__)

# strftime layout: 2024-01-15 07:00:00 EST-0500
TIME_FORMAT = "%Y-%m-%d %H:%M:%S %Z%z"

Clock = Callable[[ZoneInfo], datetime]


def current_time_report(city: str, clock: Optional[Clock] = None) -> ToolResult:
    """Format the current time in ``city`` as a Success or Error."""
    tz_name = timezone_for(city)
    if tz_name is None:
        return Error(f"Sorry, I don't have timezone information for {city}.")

    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        logger.warning("Timezone lookup for %s failed: %s", tz_name, e)
        return Error(f"Failed to load timezone data for {tz_name}: {e}")

    now = (clock or datetime.now)(tz)
    return Success(f"The current time in {city} is {now.strftime(TIME_FORMAT)}")


def get_current_time(city: str, clock: Optional[Clock] = None) -> dict[str, Any]:
    """Returns the current time in a specified city.

    Args:
        city: The name of the city (e.g., "New York").  Matched
              case-insensitively; echoed back verbatim in the report.
        clock: Optional replacement for ``datetime.now``.

    Returns:
        A dict with ``status`` "success" and a ``report`` sentence, or
        ``status`` "error" and an ``error_message``.
    """
    return current_time_report(city, clock).to_dict()
