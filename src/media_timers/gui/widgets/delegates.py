"""Custom item delegates for editing time-of-day and media file cells."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import time
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QFont, QKeyEvent, QPalette
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QStyledItemDelegate,
    QWidget,
)

from ...core import QT_TIME_FORMAT, format_time, is_blank, parse_time
from ..models import PROBLEM_ROLE, ColumnKind, render_value


logger = logging.getLogger(__name__)

FILE_DIALOG_TITLE = "Select media resource"
PROBLEM_COLOR = QColor(200, 40, 40)


@dataclass
class LastDirectory:
    """Folder the next file browse starts from, shared by one table's editors."""
    path: Optional[Path] = None


FileChooser = Callable[[Optional[QWidget], Optional[Path]], Optional[Path]]


def choose_media_file(parent: Optional[QWidget], start_dir: Optional[Path]) -> Optional[Path]:
    """Show a single-file open dialog and return the chosen file, or None."""
    dialog = QFileDialog(parent, FILE_DIALOG_TITLE, str(start_dir) if start_dir else "")
    dialog.setFileMode(QFileDialog.FileMode.ExistingFile)
    dialog.setAcceptMode(QFileDialog.AcceptMode.AcceptOpen)
    dialog.setNameFilter("All Files (*)")
    if dialog.exec() != QFileDialog.DialogCode.Accepted:
        return None
    selected = dialog.selectedFiles()
    return Path(selected[0]) if selected else None


class LookupButton(QPushButton):
    """Compact bold button placed at the right edge of a cell editor."""

    def __init__(self, text: str, parent: Optional[QWidget] = None):
        super().__init__(text, parent)
        font = QFont(self.font())
        font.setBold(True)
        self.setFont(font)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setFixedWidth(self.fontMetrics().horizontalAdvance(text) + 12)


class _CellLineEdit(QLineEdit):
    """Line edit that keeps Enter to itself instead of passing it to the view."""

    enter_pressed = Signal()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.enter_pressed.emit()
            event.accept()
            return
        super().keyPressEvent(event)


class TimeEditor(QWidget):
    """Masked ``HH:mm:ss`` field with a button clearing the value."""

    commit_requested = Signal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.text_field = _CellLineEdit(self)
        self.text_field.setInputMask("99:99:99")
        self.text_field.setFrame(False)
        self.text_field.setToolTip(QT_TIME_FORMAT)
        self.clear_button = LookupButton("X", self)
        self.clear_button.setToolTip("Clear time")

        layout.addWidget(self.text_field, 1)
        layout.addWidget(self.clear_button)
        self.setFocusProxy(self.text_field)

        self.text_field.enter_pressed.connect(self._on_enter)
        self.clear_button.clicked.connect(self._on_clear)

    def set_time(self, value: Optional[time]) -> None:
        self.text_field.setText(format_time(value or time(0, 0, 0)))
        self.text_field.setCursorPosition(len(self.text_field.text()))

    def text(self) -> str:
        raw = self.text_field.text()
        # An unfilled mask comes back as bare separators.
        return "" if is_blank(raw.replace(":", "")) else raw

    def time(self) -> Optional[time]:
        """Return the entered time, None when blank; raise ValueError if malformed."""
        return parse_time(self.text())

    def _on_enter(self) -> None:
        if is_blank(self.text()):
            self.commit_requested.emit()
            return
        try:
            self.time()
        except ValueError:
            logger.debug("Rejected time text %r", self.text_field.text())
            return
        self.commit_requested.emit()

    def _on_clear(self) -> None:
        self.text_field.clear()
        self._on_enter()


class FilePathEditor(QWidget):
    """Path field with a browse button opening a file dialog."""

    commit_requested = Signal()

    def __init__(
        self,
        last_dir: LastDirectory,
        parent: Optional[QWidget] = None,
        chooser: Optional[FileChooser] = None,
    ):
        super().__init__(parent)
        self._last_dir = last_dir
        self._chooser = chooser or choose_media_file
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.text_field = _CellLineEdit(self)
        self.text_field.setFrame(False)
        self.browse_button = LookupButton("...", self)
        self.browse_button.setToolTip(FILE_DIALOG_TITLE)

        layout.addWidget(self.text_field, 1)
        layout.addWidget(self.browse_button)
        self.setFocusProxy(self.text_field)

        self.text_field.enter_pressed.connect(self.commit_requested.emit)
        self.browse_button.clicked.connect(self.browse)

    @property
    def last_dir(self) -> LastDirectory:
        return self._last_dir

    def set_path(self, value: Optional[Path]) -> None:
        self.text_field.setText("" if value is None else str(Path(value).absolute()))

    def path(self) -> Optional[Path]:
        text = self.text_field.text()
        return None if is_blank(text) else Path(text.strip())

    def browse(self) -> None:
        chosen = self._chooser(self.window(), self._last_dir.path)
        if chosen is None:
            return
        chosen = Path(chosen).absolute()
        self._last_dir.path = chosen.parent
        self.text_field.setText(str(chosen))
        logger.debug("Selected media resource %s", chosen)
        self.commit_requested.emit()


class _CommittingDelegate(QStyledItemDelegate):
    """Base for delegates whose editors ask to be committed and closed."""

    def _watch_editor(self, editor) -> None:
        editor.commit_requested.connect(lambda: self._commit_and_close(editor))

    def _commit_and_close(self, editor: QWidget) -> None:
        self.commitData.emit(editor)
        self.closeEditor.emit(editor, QStyledItemDelegate.EndEditHint.NoHint)

    def updateEditorGeometry(self, editor, option, index):  # noqa: D401
        """Fit the editor to the cell."""
        editor.setGeometry(option.rect)


class TimeItemDelegate(_CommittingDelegate):
    """Delegate rendering and editing time-of-day cells."""

    def createEditor(self, parent, option, index):  # noqa: D401
        """Create a TimeEditor for the table cell."""
        editor = TimeEditor(parent)
        editor.setAutoFillBackground(True)
        self._watch_editor(editor)
        return editor

    def setEditorData(self, editor, index):  # noqa: D401
        """Load the time from the model into the editor."""
        editor.set_time(index.model().data(index, Qt.ItemDataRole.EditRole))

    def setModelData(self, editor, model, index):  # noqa: D401
        """Save the parsed time back to the model, skipping malformed text."""
        try:
            value = editor.time()
        except ValueError:
            logger.debug("Time edit not committed for row %d", index.row())
            return
        model.setData(index, value, Qt.ItemDataRole.EditRole)

    def displayText(self, value, locale):  # noqa: D401
        """Format the time as HH:mm:ss."""
        if value is None or isinstance(value, str):
            return value or ""
        return render_value(ColumnKind.TIME, value)


class FilePathItemDelegate(_CommittingDelegate):
    """Delegate rendering file names and editing media resource paths.

    All editors created by one delegate share the same ``LastDirectory``.
    """

    def __init__(
        self,
        last_dir: LastDirectory,
        parent: Optional[QWidget] = None,
        chooser: Optional[FileChooser] = None,
    ):
        super().__init__(parent)
        self._last_dir = last_dir
        self._chooser = chooser

    @property
    def last_dir(self) -> LastDirectory:
        return self._last_dir

    def createEditor(self, parent, option, index):  # noqa: D401
        """Create a FilePathEditor sharing the last browsed folder."""
        editor = FilePathEditor(self._last_dir, parent, chooser=self._chooser)
        editor.setAutoFillBackground(True)
        self._watch_editor(editor)
        return editor

    def setEditorData(self, editor, index):  # noqa: D401
        """Load the resource path from the model into the editor."""
        editor.set_path(index.model().data(index, Qt.ItemDataRole.EditRole))

    def setModelData(self, editor, model, index):  # noqa: D401
        """Save the entered path back to the model."""
        model.setData(index, editor.path(), Qt.ItemDataRole.EditRole)

    def initStyleOption(self, option, index):  # noqa: D401
        """Paint missing resources in the problem colour."""
        super().initStyleOption(option, index)
        if index.data(PROBLEM_ROLE):
            palette = QPalette(option.palette)
            palette.setColor(QPalette.ColorRole.Text, PROBLEM_COLOR)
            palette.setColor(QPalette.ColorRole.HighlightedText, PROBLEM_COLOR.lighter(160))
            option.palette = palette

    def displayText(self, value, locale):  # noqa: D401
        """Show only the file name."""
        if value is None or isinstance(value, str):
            return value or ""
        return render_value(ColumnKind.PATH, value)


def delegate_for_kind(
    kind: ColumnKind,
    last_dir: LastDirectory,
    parent: Optional[QWidget] = None,
    chooser: Optional[FileChooser] = None,
) -> Optional[QStyledItemDelegate]:
    """Return the delegate for a column kind, None where the default one fits."""
    if kind is ColumnKind.TIME:
        return TimeItemDelegate(parent)
    if kind is ColumnKind.PATH:
        return FilePathItemDelegate(last_dir, parent, chooser=chooser)
    return None
