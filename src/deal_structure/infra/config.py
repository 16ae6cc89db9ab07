from __future__ import annotations

import os

DEFAULT_SAVE_DELAY_SECONDS = "1.5"
DEFAULT_LOG_LEVEL = "INFO"


def save_delay_seconds() -> float:
    raw = os.getenv("DEAL_SAVE_DELAY_SECONDS", DEFAULT_SAVE_DELAY_SECONDS)

    try:
        delay = float(raw)
    except ValueError:
        raise RuntimeError(f"DEAL_SAVE_DELAY_SECONDS must be a number, got {raw!r}") from None

    if delay < 0:
        raise RuntimeError("DEAL_SAVE_DELAY_SECONDS must be >= 0")

    return delay


def log_level() -> str:
    return os.getenv("DEAL_STRUCTURE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
