"""Text conversion for date-free time-of-day values."""

from __future__ import annotations

from datetime import datetime, time
from typing import Optional


TIME_FORMAT = "%H:%M:%S"
QT_TIME_FORMAT = "HH:mm:ss"


def is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def format_time(value: Optional[time]) -> str:
    """Return ``HH:MM:SS`` for a time value, or an empty string when unset."""
    if value is None:
        return ""
    return value.strftime(TIME_FORMAT)


def parse_time(text: Optional[str]) -> Optional[time]:
    """Parse ``HH:MM:SS`` text into a time value.

    Blank text is the unset state and yields ``None``. Anything else that does
    not match the format raises ``ValueError``.
    """
    if is_blank(text):
        return None
    return datetime.strptime(text.strip(), TIME_FORMAT).time()
