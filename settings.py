# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-09
# Updated: 2026-10-19
# Description: settings.py
# -----------------------------------------------------------------------------
import os


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Completion prompt (pinned, not user-controllable)
# -----------------------------------------------------------------------------
SYSTEM_PROMPT = (
    "Always respond only with numbered lists. Provide no additional explanations or content. "
    "Summarize the key legal principles and case precedents that directly address the issue "
    "at hand, focusing on the most authoritative and relevant holdings."
)

# Substituted when POST /chat arrives without a message
DEFAULT_MESSAGE = "Explain the importance of fast language models"


# -----------------------------------------------------------------------------
# Client-side repeated query
# -----------------------------------------------------------------------------
# Number of sequential /chat calls merged into one chat turn
REPEAT_COUNT = _env_int("CASELIST_REPEAT_COUNT", 5)

API_BASE_URL = _env("CASELIST_API_BASE_URL", "http://127.0.0.1:8000").rstrip("/")
UI_TIMEOUT_SECONDS = _env_float("CASELIST_UI_TIMEOUT_SECONDS", 120.0)


# -----------------------------------------------------------------------------
# Upstream transport
# -----------------------------------------------------------------------------
# 0 keeps the httpx transport default
EMBEDDING_TIMEOUT_SECONDS = _env_float("CASELIST_EMBEDDING_TIMEOUT_SECONDS", 0.0)


# -----------------------------------------------------------------------------
# App wiring
# -----------------------------------------------------------------------------
MOUNT_UI = _env_bool("CASELIST_MOUNT_UI", True)
LOG_FILE = _env("CASELIST_LOG_FILE", "./logs/caselist.log")
LOG_TAIL_LINES = _env_int("CASELIST_UI_LOG_TAIL_LINES", 400)


# -----------------------------------------------------------------------------
# Sanity checks
# -----------------------------------------------------------------------------
if REPEAT_COUNT < 1:
    raise RuntimeError(f"CASELIST_REPEAT_COUNT must be >= 1, got {REPEAT_COUNT}")

if EMBEDDING_TIMEOUT_SECONDS < 0:
    raise RuntimeError("CASELIST_EMBEDDING_TIMEOUT_SECONDS must not be negative")

if not API_BASE_URL:
    raise RuntimeError("API_BASE_URL resolved to empty value")
