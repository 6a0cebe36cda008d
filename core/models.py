# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# A tool result is a tagged union: either the lookup worked and there is a
# human-readable report, or it didn't and there is an error message.  The
# agent runtime expects a plain dict on the wire, so each variant knows how
# to serialize itself into exactly one of these shapes:
#
#     {"status": "success", "report": "..."}
#     {"status": "error",   "error_message": "..."}
#
# WHY TWO CLASSES INSTEAD OF ONE DICT WITH OPTIONAL KEYS?
#   A single dict lets you accidentally write both "report" and
#   "error_message".  Two frozen dataclasses make that impossible: a
#   Success has no error field and an Error has no report field.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Union

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class Success:
    """A tool call that produced an answer for the model."""

    report: str

    def to_dict(self) -> dict[str, Any]:
        return {"status": STATUS_SUCCESS, "report": self.report}


@dataclass(frozen=True)
class Error:
    """A tool call that could not answer; the model should tell the user."""

    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"status": STATUS_ERROR, "error_message": self.message}


ToolResult = Union[Success, Error]
