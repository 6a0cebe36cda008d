# =============================================================================
# agent/config.py  —  Startup configuration
# =============================================================================
#
# The agent reads two environment variables, once, at startup:
#
#   GOOGLE_API_KEY  → credential handed verbatim to the model client
#   LLM_MODEL       → LiteLLM model id, e.g. "gemini/gemini-2.0-flash"
#
# plus LOG_LEVEL for the launcher process.  main.py calls load_dotenv()
# first, so all three can also live in a .env file.
#
# Validation is NOT done here: a missing key is a model-creation failure
# and is reported by create_model() with that wording.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

API_KEY_ENV = "GOOGLE_API_KEY"
MODEL_ENV = "LLM_MODEL"
LOG_LEVEL_ENV = "LOG_LEVEL"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    google_api_key: str
    llm_model: str
    log_level: str = "WARNING"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Snapshot the agent's configuration from ``environ`` (default: os.environ).

    Unset variables become empty strings.  An unknown LOG_LEVEL falls back
    to WARNING.
    """
    env = os.environ if environ is None else environ
    log_level = env.get(LOG_LEVEL_ENV, "WARNING").upper()
    if log_level not in _LOG_LEVELS:
        log_level = "WARNING"
    return Settings(
        google_api_key=env.get(API_KEY_ENV, ""),
        llm_model=env.get(MODEL_ENV, ""),
        log_level=log_level,
    )
