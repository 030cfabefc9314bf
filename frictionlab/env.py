# frictionlab/env.py
"""Environment lookups used by the command line."""

from __future__ import annotations

import os
from typing import Optional

LOG_LEVEL_VAR = "FRICTIONLAB_LOG_LEVEL"


def env_str(name: str) -> Optional[str]:
    """Value of `name`, or None when unset or blank."""
    value = os.environ.get(name, "").strip()
    return value or None


def log_level(default: str = "WARNING") -> str:
    return (env_str(LOG_LEVEL_VAR) or default).upper()


__all__ = ["LOG_LEVEL_VAR", "env_str", "log_level"]
