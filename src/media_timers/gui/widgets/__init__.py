"""GUI widgets for the timers editor."""

from .delegates import (
    FilePathEditor,
    FilePathItemDelegate,
    LastDirectory,
    TimeEditor,
    TimeItemDelegate,
    choose_media_file,
    delegate_for_kind,
)
from .timers_table import TimersTableWidget

__all__ = [
    "FilePathEditor",
    "FilePathItemDelegate",
    "LastDirectory",
    "TimeEditor",
    "TimeItemDelegate",
    "TimersTableWidget",
    "choose_media_file",
    "delegate_for_kind",
]
