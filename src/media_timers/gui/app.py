"""Dialog host for the timers table and GUI entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from PySide6.QtWidgets import QApplication, QDialog, QDialogButtonBox, QVBoxLayout, QWidget

from ..core import Timer
from .widgets import TimersTableWidget


logger = logging.getLogger(__name__)


class TimersDialog(QDialog):
    """Modal dialog editing a list of timers, accepted with OK."""

    def __init__(self, base_dir: Path, timers: Iterable[Timer], parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle("Timers")
        self.resize(720, 360)

        layout = QVBoxLayout(self)
        self.timers_table = TimersTableWidget(base_dir, timers, self)
        layout.addWidget(self.timers_table, 1)

        self.button_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self.button_box.accepted.connect(self.accept)
        self.button_box.rejected.connect(self.reject)
        layout.addWidget(self.button_box)

    def timers(self) -> List[Timer]:
        return self.timers_table.timers()


def edit_timers(parent: Optional[QWidget], base_dir: Path, timers: Iterable[Timer]) -> Optional[List[Timer]]:
    """Show the timers dialog; return the edited list, or None when cancelled."""
    dialog = TimersDialog(base_dir, timers, parent)
    if dialog.exec() != QDialog.DialogCode.Accepted:
        logger.info("Timer editing cancelled")
        return None
    result = dialog.timers()
    logger.info("Timer editing accepted with %d timer(s)", len(result))
    return result


def run(base_dir: Path, timers: Iterable[Timer]) -> Optional[List[Timer]]:
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("media-timers")
    return edit_timers(None, base_dir, timers)
