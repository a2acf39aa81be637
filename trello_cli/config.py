"""
trello-cli shared configuration, constants, and module-level state.
Imports only trello_cli.exceptions, which itself has no project imports.
"""

import os
from dataclasses import dataclass

from trello_cli.exceptions import ConfigurationError

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

# Process environment overrides the .env file for these keys.
ENV_KEYS = (
    "TRELLO_KEY",
    "TRELLO_TOKEN",
    "TRELLO_HTTP_LOG",
    "TRELLO_HTTP_MAX_RESPONSE_BYTES",
)


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in ENV_KEYS:
        val = os.environ.get(key)
        if val:
            env[key] = val
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.2.0"

BASE_URL = "https://api.trello.com/1"

# Sole bounded wait for one request, measured from request start.
TIMEOUT_MS = 30000

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env and the process environment)
# ---------------------------------------------------------------------------

env = load_env()

HTTP_MAX_RESPONSE_BYTES = _env_int("TRELLO_HTTP_MAX_RESPONSE_BYTES", 5_000_000)
HTTP_LOG_ENABLED = _env_bool("TRELLO_HTTP_LOG", False)

# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Credentials:
    """API key/token pair, built once at startup and passed into every request."""

    key: str
    token: str

    def __repr__(self):
        return "Credentials(key=***, token=***)"


def load_credentials():
    """Build Credentials from the loaded env. Raises ConfigurationError if incomplete."""
    key = env.get("TRELLO_KEY", "")
    token = env.get("TRELLO_TOKEN", "")
    if not key or not token:
        raise ConfigurationError("TRELLO_KEY and TRELLO_TOKEN must be set")
    return Credentials(key=key, token=token)
