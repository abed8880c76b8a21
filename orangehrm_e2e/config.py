"""Suite configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

from .environment.detector import is_running_in_ci

load_dotenv()

# Paths
ROOT_DIR = Path(__file__).resolve().parent.parent
ENVS_DIR = Path(os.getenv("ENVS_DIR", ROOT_DIR / "envs"))
AUTH_STATE_DIR = Path(os.getenv("AUTH_STATE_DIR", ROOT_DIR / ".auth"))
AUTH_STATE_FILE = os.getenv("AUTH_STATE_FILE", "login-auth.json")

# Environment
ENV = os.getenv("ENV", "qa").lower()
PORTAL_PREFLIGHT = os.getenv("PORTAL_PREFLIGHT", "false").lower() == "true"
PREFLIGHT_TIMEOUT = float(os.getenv("PREFLIGHT_TIMEOUT", "15"))

# Session
SESSION_EXPIRY_MINUTES = int(os.getenv("SESSION_EXPIRY_MINUTES", "60"))

# Browser
BROWSER_HEADLESS = os.getenv("BROWSER_HEADLESS", "true").lower() == "true"
SLOW_MO = int(os.getenv("SLOW_MO", "0"))
VIEWPORT = {"width": 1366, "height": 768}

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CI runners get longer timeouts (milliseconds)
TIMEOUTS = (
    {"test": 160_000, "expect": 160_000, "action": 140_000, "navigation": 50_000}
    if is_running_in_ci()
    else {"test": 80_000, "expect": 80_000, "action": 70_000, "navigation": 25_000}
)
