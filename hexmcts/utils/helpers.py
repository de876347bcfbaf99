# File: hexmcts/utils/helpers.py
import time
from typing import Optional


def current_time_millis() -> int:
    """Millisecond timestamp for measuring search budgets (monotonic)."""
    return int(time.monotonic() * 1000)


def format_millis(millis: Optional[float]) -> str:
    """Formats a duration in milliseconds as '850ms' or '1.23s'."""
    if millis is None or millis < 0:
        return "N/A"
    if millis < 1000:
        return f"{int(millis)}ms"
    return f"{millis / 1000:.2f}s"
