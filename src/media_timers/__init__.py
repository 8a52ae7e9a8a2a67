"""
Editor for scheduled media playback timers.

The package exposes the Qt-free timer record and settings at the top level;
the PySide6 widgets live in ``media_timers.gui``.
"""

from .core import Timer, format_time, is_blank, parse_time
from .settings import base_dir, default_timer_name, get_settings, reset_settings_cache

__all__ = [
    "Timer",
    "format_time",
    "is_blank",
    "parse_time",
    "base_dir",
    "default_timer_name",
    "get_settings",
    "reset_settings_cache",
]
