from __future__ import annotations

import os
from datetime import time
from pathlib import Path
from typing import List

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from media_timers import Timer, reset_settings_cache


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point settings at a temp folder and keep a stray .env out of the way."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MEDIA_TIMERS_BASE_DIR", str(tmp_path))
    monkeypatch.delenv("MEDIA_TIMERS_DEFAULT_TIMER_NAME", raising=False)
    reset_settings_cache()
    yield tmp_path
    reset_settings_cache()


def make_timers() -> List[Timer]:
    """Three timers given out of natural order."""
    return [
        Timer("Zeta", enabled=True, from_time=time(22, 0, 0)),
        Timer("alpha", from_time=time(8, 15, 0), to_time=time(9, 0, 0)),
        Timer("Midday", enabled=True, resource_path=Path("/nonexistent/news.mp3")),
    ]


@pytest.fixture
def sample_timers() -> List[Timer]:
    return make_timers()
