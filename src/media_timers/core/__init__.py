"""Timer records and time-of-day helpers independent of Qt."""

from .timefmt import QT_TIME_FORMAT, TIME_FORMAT, format_time, is_blank, parse_time
from .timer import Timer

__all__ = ["Timer", "QT_TIME_FORMAT", "TIME_FORMAT", "format_time", "is_blank", "parse_time"]
