"""PySide6 GUI for editing scheduled media timers."""

from .app import TimersDialog, edit_timers, run

__all__ = ["TimersDialog", "edit_timers", "run"]
