"""Timers table widget for editing scheduled playback entries."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from PySide6.QtCore import QItemSelectionModel, Signal
from PySide6.QtWidgets import (
    QAbstractItemView,
    QDialog,
    QHBoxLayout,
    QHeaderView,
    QPushButton,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from ...core import Timer
from ..controllers import TimersController
from ..models import COLUMNS, ColumnKind, TimersTableModel
from .delegates import FileChooser, LastDirectory, delegate_for_kind


logger = logging.getLogger(__name__)


class TimersTableWidget(QWidget):
    """Editable table of timers with a side column of action buttons.

    Args:
        base_dir: Folder the first resource browse starts from
        timers: Initial timers; the widget keeps its own sorted copy
        parent: Parent widget
        chooser: Replacement for the file dialog used by resource editors
        default_name: Name for added timers (defaults to the configured one)
    """

    # Signals
    timers_changed = Signal()

    def __init__(
        self,
        base_dir: Path,
        timers: Iterable[Timer],
        parent: Optional[QWidget] = None,
        chooser: Optional[FileChooser] = None,
        default_name: Optional[str] = None,
    ):
        super().__init__(parent)
        self.last_dir = LastDirectory(Path(base_dir))
        self.model = TimersTableModel(timers, self)
        self.controller = TimersController(self, self.model, default_name=default_name)
        self._chooser = chooser
        self._delegates = []
        self._setup_ui()
        self._connect_signals()
        self.remove_button.setEnabled(False)
        self.remove_all_button.setEnabled(self.model.rowCount() > 0)

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        # Timers table
        self.table_view = QTableView()
        self.table_view.setModel(self.model)
        self.table_view.setShowGrid(True)
        self.table_view.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table_view.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        self.table_view.setEditTriggers(
            QAbstractItemView.EditTrigger.DoubleClicked
            | QAbstractItemView.EditTrigger.SelectedClicked
            | QAbstractItemView.EditTrigger.EditKeyPressed
        )
        self.table_view.verticalHeader().setVisible(False)

        for column, spec in enumerate(COLUMNS):
            delegate = delegate_for_kind(spec.kind, self.last_dir, self.table_view, chooser=self._chooser)
            if delegate is not None:
                self.table_view.setItemDelegateForColumn(column, delegate)
                self._delegates.append(delegate)

        header = self.table_view.horizontalHeader()
        header.setSectionsMovable(False)
        header.setStretchLastSection(True)
        for column, spec in enumerate(COLUMNS):
            if spec.kind in (ColumnKind.FLAG, ColumnKind.TIME):
                header.setSectionResizeMode(column, QHeaderView.ResizeMode.ResizeToContents)
        layout.addWidget(self.table_view, 1)

        # Buttons
        buttons = QVBoxLayout()
        buttons.setContentsMargins(0, 0, 0, 0)
        buttons.setSpacing(2)
        self.add_button = QPushButton("Add")
        self.remove_button = QPushButton("Remove")
        self.remove_all_button = QPushButton("Remove All")
        self.enable_all_button = QPushButton("Enable All")
        self.disable_all_button = QPushButton("Disable All")
        buttons.addWidget(self.add_button)
        buttons.addWidget(self.remove_button)
        buttons.addWidget(self.remove_all_button)
        buttons.addSpacing(16)
        buttons.addWidget(self.enable_all_button)
        buttons.addWidget(self.disable_all_button)
        buttons.addStretch(1)
        layout.addLayout(buttons)

    def _connect_signals(self) -> None:
        self.add_button.clicked.connect(self.controller.add_timer)
        self.remove_button.clicked.connect(self.remove_selected)
        self.remove_all_button.clicked.connect(self.controller.remove_all)
        self.enable_all_button.clicked.connect(self.controller.enable_all)
        self.disable_all_button.clicked.connect(self.controller.disable_all)

        self.table_view.selectionModel().selectionChanged.connect(self._update_buttons)
        self.model.modelReset.connect(self._on_model_changed)
        self.model.dataChanged.connect(self._on_model_changed)

    def timers(self) -> List[Timer]:
        """Return a copy of the current timer list."""
        return self.model.timers()

    def selected_rows(self) -> List[int]:
        selection = self.table_view.selectionModel()
        return sorted({index.row() for index in selection.selectedIndexes()})

    def select_rows(self, rows: Iterable[int]) -> None:
        """Replace the selection with the given rows."""
        selection = self.table_view.selectionModel()
        selection.clearSelection()
        for row in rows:
            selection.select(
                self.model.index(row, 0),
                QItemSelectionModel.SelectionFlag.Select | QItemSelectionModel.SelectionFlag.Rows,
            )

    def remove_selected(self) -> bool:
        return self.controller.remove_rows(self.selected_rows())

    def _on_model_changed(self, *args) -> None:
        self._update_buttons()
        self.timers_changed.emit()

    def _update_buttons(self, *args) -> None:
        self.remove_button.setEnabled(bool(self.selected_rows()))
        self.remove_all_button.setEnabled(self.model.rowCount() > 0)

    def showEvent(self, event) -> None:
        window = self.window()
        if isinstance(window, QDialog):
            window.setSizeGripEnabled(True)
        super().showEvent(event)
