"""Runtime configuration for the trail segmenter.

Values are module constants read from the environment (optionally via a
local ``.env``). Malformed values fall back to the defaults.
"""

from __future__ import annotations

import importlib
import os


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Load .env variables when python-dotenv is available.
try:
    _load_dotenv = getattr(importlib.import_module("dotenv"), "load_dotenv", None)
except ImportError:
    _load_dotenv = None

if callable(_load_dotenv):
    _load_dotenv()


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------
# Maximum step (meters) between consecutive fixes drawn on the same line.
DEFAULT_THRESHOLD_M = _env_float("TRAIL_SEGMENT_THRESHOLD_M", 1000.0)

# Fixes reported with a worse horizontal accuracy (meters) are not recorded.
MAX_ACCURACY_M = _env_float("TRAIL_MAX_ACCURACY_M", 100.0)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("TRAIL_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HOST = os.getenv("TRAIL_HOST", "0.0.0.0")
PORT = _env_int("TRAIL_PORT", 8000)
