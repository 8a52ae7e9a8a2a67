"""Timer list management controller."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from PySide6.QtWidgets import QMessageBox, QWidget

from ...core import Timer
from ...settings import default_timer_name
from ..models import TimersTableModel


logger = logging.getLogger(__name__)

REMOVE_TITLE = "Remove timers"


class TimersController:
    """Runs the button commands (add, remove, enable, disable) against the model."""

    def __init__(
        self,
        parent: Optional[QWidget],
        model: TimersTableModel,
        default_name: Optional[str] = None,
    ):
        self.parent = parent
        self.model = model
        self._default_name = default_name

    @property
    def default_name(self) -> str:
        """Name given to new timers, falling back to the configured one."""
        return self._default_name or default_timer_name()

    def confirm(self, title: str, text: str) -> bool:
        """Ask an OK/Cancel question, return True when the user proceeds."""
        answer = QMessageBox.question(
            self.parent,
            title,
            text,
            QMessageBox.StandardButton.Ok | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Cancel,
        )
        return answer == QMessageBox.StandardButton.Ok

    def add_timer(self) -> Timer:
        """Append a new disabled timer with the default name."""
        timer = Timer(name=self.default_name)
        self.model.add_timer(timer)
        logger.info("Timer added (%d total)", self.model.rowCount())
        return timer

    def remove_rows(self, rows: Sequence[int]) -> bool:
        """Remove the given rows after confirmation, return True if removed."""
        rows = sorted(set(rows))
        if not rows:
            return False
        if not self.confirm(REMOVE_TITLE, f"Remove {len(rows)} timer(s)?"):
            logger.debug("Removal of %d timer(s) cancelled", len(rows))
            return False
        self.model.remove_rows(rows)
        logger.info("Removed %d timer(s)", len(rows))
        return True

    def remove_all(self) -> bool:
        """Clear the table after confirmation, return True if cleared."""
        if self.model.rowCount() == 0:
            return False
        if not self.confirm(REMOVE_TITLE, "Remove all timers?"):
            logger.debug("Removal of all timers cancelled")
            return False
        count = self.model.rowCount()
        self.model.clear()
        logger.info("Removed all %d timer(s)", count)
        return True

    def enable_all(self) -> None:
        self.model.enable_all()
        logger.info("Enabled all timers")

    def disable_all(self) -> None:
        self.model.disable_all()
        logger.info("Disabled all timers")
