# =============================================================================
# core/cities.py  —  The cities this demo knows about
# =============================================================================
#
# Both tools only know one city.  Keeping the lookup here means the weather
# and time handlers fold case the same way; if more cities are added they
# go into _KNOWN_CITIES and both tools pick them up.
# =============================================================================

NEW_YORK = "new york"
NEW_YORK_TIMEZONE = "America/New_York"

# Case-folded city name -> IANA timezone identifier
_KNOWN_CITIES: dict[str, str] = {
    NEW_YORK: NEW_YORK_TIMEZONE,
}


def is_known_city(city: str) -> bool:
    """Case-insensitive membership test.  No trimming or other normalization."""
    return city.lower() in _KNOWN_CITIES


def timezone_for(city: str) -> str | None:
    """Return the IANA timezone name for a known city, or None."""
    return _KNOWN_CITIES.get(city.lower())
