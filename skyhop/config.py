"""Environment configuration, read once at startup."""

import logging
import os
from pathlib import Path
from typing import Optional


def log_level_from_env() -> int:
    """``SKYHOP_LOG_LEVEL`` as a logging level; unknown names fall back to INFO."""
    name = os.environ.get("SKYHOP_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    # getLevelName maps unknown names to the string "Level <name>"
    return level if isinstance(level, int) else logging.INFO


def seed_from_env() -> Optional[int]:
    """Read ``SKYHOP_SEED``; an unset or empty variable means unseeded play."""
    raw = os.environ.get("SKYHOP_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"SKYHOP_SEED must be an integer, got {raw!r}") from None


def levels_path_from_env() -> Optional[Path]:
    raw = os.environ.get("SKYHOP_LEVELS", "").strip()
    return Path(raw).expanduser() if raw else None
