"""Detection of the execution environment (CI runner or local machine)."""

from __future__ import annotations

import os

CI_VARIABLES = ("CI", "GITHUB_ACTIONS", "TF_BUILD")
TRUTHY = ("1", "true", "yes", "on")


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in TRUTHY


def is_running_in_ci() -> bool:
    """True when any of the well-known CI variables is set."""
    return any(_flag(name) for name in CI_VARIABLES)


def should_skip_browser_init() -> bool:
    """True when the run does not need the browser session setup step.

    Set ``SKIP_BROWSER_INIT=true`` for runs that never touch the UI.
    """
    return _flag("SKIP_BROWSER_INIT")
