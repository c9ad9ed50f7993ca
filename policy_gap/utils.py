"""
Shared scoring helpers.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a value to [low, high]."""
    return max(low, min(high, value))


def percentage(matched: int, total: int) -> float:
    """matched / total as a 0-100 value; 0 when there is nothing to match."""
    if total <= 0:
        return 0.0
    return clamp(matched / total * 100)


def require_text(text) -> str:
    """Fail fast on null or non-text input."""
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")
    return text
