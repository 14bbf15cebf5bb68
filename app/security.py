"""
Lightweight rate limit helpers for the public API.
"""
from __future__ import annotations

import os
import time
from typing import Dict

API_RATE_LIMIT = int(os.getenv("API_RATE_LIMIT", "100"))
API_RATE_WINDOW_SECONDS = int(os.getenv("API_RATE_WINDOW_SECONDS", str(15 * 60)))


# -------- Rate limiting (in-memory) --------
_rate_state: Dict[str, list[float]] = {}


def allow_request(key: str, limit: int = 5, window_seconds: int = 60) -> bool:
    """
    Simple sliding-window rate limit stored in memory.
    Returns True if under limit, False otherwise.
    """
    allowed, _ = allow_request_with_remaining(key, limit=limit, window_seconds=window_seconds)
    return allowed


def allow_request_with_remaining(key: str, limit: int = 5, window_seconds: int = 60) -> tuple[bool, int]:
    """
    Sliding-window rate limit with remaining-count feedback.
    Returns (allowed: bool, remaining_after: int).
    """
    now = time.time()
    window_start = now - window_seconds
    history = _rate_state.get(key, [])
    history = [t for t in history if t > window_start]
    if len(history) >= limit:
        _rate_state[key] = history
        return False, 0
    history.append(now)
    _rate_state[key] = history
    remaining_after = max(0, limit - len(history))
    return True, remaining_after


def reset_rate_limits() -> None:
    _rate_state.clear()


__all__ = [
    "API_RATE_LIMIT",
    "API_RATE_WINDOW_SECONDS",
    "allow_request",
    "allow_request_with_remaining",
    "reset_rate_limits",
]
