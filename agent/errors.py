"""Fatal startup errors.

Tool failures never show up here: they are returned in-band as
``{"status": "error", ...}`` results.  These exceptions are for the
bootstrap path only, and main.py turns them into a diagnostic and a
non-zero exit.
"""


class BootstrapError(RuntimeError):
    """The model, the tools or the agent could not be constructed."""


class LauncherError(RuntimeError):
    """The launcher rejected its arguments or the session failed."""
