"""Data models for the GUI application."""

from .timers_table import (
    COLUMNS,
    PROBLEM_ROLE,
    ColumnKind,
    ColumnSpec,
    TimersTableModel,
    UnexpectedColumnError,
    column_kind,
    column_name,
    column_type,
    is_problem_path,
    render_value,
)

__all__ = [
    "COLUMNS",
    "PROBLEM_ROLE",
    "ColumnKind",
    "ColumnSpec",
    "TimersTableModel",
    "UnexpectedColumnError",
    "column_kind",
    "column_name",
    "column_type",
    "is_problem_path",
    "render_value",
]
