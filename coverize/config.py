"""Configuration defaults and .env loading.

WHY: Deployments want different house styles (serif vs sans, bold vs
uppercase emphasis, larger covers) without code changes. Centralizing the
defaults here keeps them easy to find and override.

HOW: python-dotenv loads the .env file on import. Each default reads an
environment variable with a fallback. load_default_options() returns the
option dict a fresh Cover starts from.

RULES:
- Every default can be overridden via a COVERIZE_* environment variable
- Invalid option values are not checked here; Cover.options() validates them
- COVERIZE_RATIO and COVERIZE_WIDTH must parse as numbers
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Cover option defaults
# ---------------------------------------------------------------------------

DEFAULT_EMPHASIS = os.getenv("COVERIZE_EMPHASIS", "both")
DEFAULT_FONT = os.getenv("COVERIZE_FONT", "sans")
DEFAULT_SIZE = os.getenv("COVERIZE_SIZE", "regular")
DEFAULT_RATIO = float(os.getenv("COVERIZE_RATIO", "0.67"))
DEFAULT_WIDTH = int(os.getenv("COVERIZE_WIDTH", "200"))

# ---------------------------------------------------------------------------
# Server and logging
# ---------------------------------------------------------------------------

SERVER_HOST = os.getenv("COVERIZE_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("COVERIZE_PORT", "8000"))
LOG_LEVEL = os.getenv("COVERIZE_LOG_LEVEL", "INFO").upper()


def load_default_options() -> dict:
    """Return a fresh option dict for a new Cover.

    RULES:
    - Returns a new dict on every call; callers may mutate it freely
    - Keys: ratio, font, emphasis, size
    """
    return {
        "ratio": DEFAULT_RATIO,
        "font": DEFAULT_FONT,
        "emphasis": DEFAULT_EMPHASIS,
        "size": DEFAULT_SIZE,
    }
