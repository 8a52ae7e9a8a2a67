"""Table model exposing a list of timers as five fixed columns."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import time
from pathlib import Path
from typing import Any, Iterable, List, Optional

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt

from ...core import Timer, format_time, is_blank


logger = logging.getLogger(__name__)

PROBLEM_ROLE = Qt.ItemDataRole.UserRole.value + 1


class UnexpectedColumnError(RuntimeError):
    """Raised for a column index outside the fixed column set."""

    def __init__(self, column: int):
        super().__init__(f"Unexpected column: {column}")
        self.column = column


class ColumnKind(enum.Enum):
    FLAG = "flag"
    TEXT = "text"
    TIME = "time"
    PATH = "path"


@dataclass(frozen=True)
class ColumnSpec:
    """Static description of one table column.

    Attributes:
        name: Header title
        value_type: Python type of the cell values
        kind: Render/edit behaviour of the column
        attribute: Timer attribute backing the column
    """
    name: str
    value_type: type
    kind: ColumnKind
    attribute: str


COLUMNS = (
    ColumnSpec("Enabled", bool, ColumnKind.FLAG, "enabled"),
    ColumnSpec("Name", str, ColumnKind.TEXT, "name"),
    ColumnSpec("From", time, ColumnKind.TIME, "from_time"),
    ColumnSpec("To", time, ColumnKind.TIME, "to_time"),
    ColumnSpec("Resource", Path, ColumnKind.PATH, "resource_path"),
)


def column_spec(column: int) -> ColumnSpec:
    if 0 <= column < len(COLUMNS):
        return COLUMNS[column]
    raise UnexpectedColumnError(column)


def column_name(column: int) -> str:
    return column_spec(column).name


def column_type(column: int) -> type:
    return column_spec(column).value_type


def column_kind(column: int) -> ColumnKind:
    return column_spec(column).kind


def is_problem_path(value: Optional[Path]) -> bool:
    """A resource is a problem when unset or not an existing regular file."""
    if value is None:
        return True
    return not Path(value).is_file()


def render_value(kind: ColumnKind, value: Any) -> str:
    """Return the display text of a cell value for the given column kind."""
    if kind is ColumnKind.FLAG:
        return ""
    if kind is ColumnKind.TEXT:
        return "" if value is None else str(value)
    if kind is ColumnKind.TIME:
        return format_time(value)
    if kind is ColumnKind.PATH:
        return "" if value is None else Path(value).name
    raise ValueError(f"Unknown column kind: {kind}")


def _coerce_value(kind: ColumnKind, value: Any) -> Any:
    if kind is ColumnKind.FLAG:
        return bool(value)
    if kind is ColumnKind.TEXT:
        return "" if value is None else str(value)
    if kind is ColumnKind.TIME:
        if value is not None and not isinstance(value, time):
            raise TypeError(f"Expected time value, got {type(value).__name__}")
        return value
    if kind is ColumnKind.PATH:
        if value is None or isinstance(value, Path):
            return value
        text = str(value)
        return None if is_blank(text) else Path(text)
    raise ValueError(f"Unknown column kind: {kind}")


def _is_checked(value: Any) -> bool:
    if isinstance(value, Qt.CheckState):
        return value == Qt.CheckState.Checked
    return int(value) == Qt.CheckState.Checked.value


class TimersTableModel(QAbstractTableModel):
    """Editable model over a private, sorted copy of the given timers.

    Bulk operations (add, remove, clear, enable/disable all) reset the model,
    so listeners receive a single ``modelReset`` per operation.
    """

    def __init__(self, timers: Iterable[Timer], parent=None):
        super().__init__(parent)
        self._timers: List[Timer] = sorted(timers)

    # ------------------------------------------------------------------ #
    # QAbstractTableModel interface
    # ------------------------------------------------------------------ #
    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: B008
        if parent.isValid():
            return 0
        return len(self._timers)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: B008
        if parent.isValid():
            return 0
        return len(COLUMNS)

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole):
        if role != Qt.ItemDataRole.DisplayRole:
            return None
        if orientation == Qt.Orientation.Horizontal:
            return column_name(section)
        return str(section + 1)

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        flags = Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable
        if column_kind(index.column()) is ColumnKind.FLAG:
            return flags | Qt.ItemFlag.ItemIsUserCheckable
        return flags | Qt.ItemFlag.ItemIsEditable

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):
        if not index.isValid():
            return None
        kind = column_kind(index.column())
        value = self.value_at(index.row(), index.column())

        if role == Qt.ItemDataRole.DisplayRole:
            if kind is ColumnKind.FLAG:
                return None
            return render_value(kind, value)
        if role == Qt.ItemDataRole.EditRole:
            return value
        if role == Qt.ItemDataRole.CheckStateRole and kind is ColumnKind.FLAG:
            return Qt.CheckState.Checked if value else Qt.CheckState.Unchecked
        if kind is ColumnKind.PATH:
            if role == PROBLEM_ROLE:
                return is_problem_path(value)
            if role == Qt.ItemDataRole.ToolTipRole:
                if value is None:
                    return "No media resource selected"
                if is_problem_path(value):
                    return f"Media resource not found: {value}"
                return str(value)
        return None

    def setData(self, index: QModelIndex, value: Any, role: int = Qt.ItemDataRole.EditRole) -> bool:
        if not index.isValid():
            return False
        kind = column_kind(index.column())
        if role == Qt.ItemDataRole.CheckStateRole and kind is ColumnKind.FLAG:
            value = _is_checked(value)
        elif role != Qt.ItemDataRole.EditRole:
            return False
        self.set_value_at(value, index.row(), index.column())
        self.dataChanged.emit(index, index, [role])
        return True

    # ------------------------------------------------------------------ #
    # Typed accessors
    # ------------------------------------------------------------------ #
    def is_cell_editable(self, row: int, column: int) -> bool:
        column_spec(column)
        return True

    def value_at(self, row: int, column: int) -> Any:
        spec = column_spec(column)
        return getattr(self._timers[row], spec.attribute)

    def set_value_at(self, value: Any, row: int, column: int) -> None:
        spec = column_spec(column)
        setattr(self._timers[row], spec.attribute, _coerce_value(spec.kind, value))

    def timers(self) -> List[Timer]:
        """Return a new list holding the current timers in held order."""
        return list(self._timers)

    # ------------------------------------------------------------------ #
    # Bulk mutations
    # ------------------------------------------------------------------ #
    def add_timer(self, timer: Timer) -> None:
        self.beginResetModel()
        self._timers.append(timer)
        self.endResetModel()
        logger.debug("Added timer %r, %d row(s)", timer.name, len(self._timers))

    def remove_rows(self, rows: Iterable[int]) -> None:
        """Remove the given row indices, keeping the order of the remainder."""
        marked = {row for row in rows if 0 <= row < len(self._timers)}
        self.beginResetModel()
        self._timers = [timer for row, timer in enumerate(self._timers) if row not in marked]
        self.endResetModel()
        logger.debug("Removed %d timer(s), %d row(s) left", len(marked), len(self._timers))

    def clear(self) -> None:
        self.beginResetModel()
        self._timers.clear()
        self.endResetModel()

    def enable_all(self) -> None:
        self._set_all_enabled(True)

    def disable_all(self) -> None:
        self._set_all_enabled(False)

    def _set_all_enabled(self, enabled: bool) -> None:
        self.beginResetModel()
        for timer in self._timers:
            timer.enabled = enabled
        self.endResetModel()
