from __future__ import annotations

from datetime import time
from pathlib import Path
from typing import List

import pytest
from PySide6.QtCore import Qt

from media_timers import Timer
from media_timers.gui.models import (
    PROBLEM_ROLE,
    ColumnKind,
    TimersTableModel,
    UnexpectedColumnError,
    column_kind,
    column_name,
    column_type,
    render_value,
)


EXPECTED_COLUMNS = [
    ("Enabled", bool, ColumnKind.FLAG),
    ("Name", str, ColumnKind.TEXT),
    ("From", time, ColumnKind.TIME),
    ("To", time, ColumnKind.TIME),
    ("Resource", Path, ColumnKind.PATH),
]


def _count_resets(model: TimersTableModel) -> List[int]:
    resets: List[int] = []
    model.modelReset.connect(lambda: resets.append(model.rowCount()))
    return resets


@pytest.mark.parametrize("column", range(5))
def test_fixed_columns(qapp, column: int) -> None:
    name, value_type, kind = EXPECTED_COLUMNS[column]
    assert column_name(column) == name
    assert column_type(column) is value_type
    assert column_kind(column) is kind

    model = TimersTableModel([])
    assert model.columnCount() == 5
    assert model.headerData(column, Qt.Orientation.Horizontal) == name


@pytest.mark.parametrize("column", [-1, 5, 42])
def test_unexpected_column_is_fatal(qapp, column: int, sample_timers) -> None:
    with pytest.raises(UnexpectedColumnError):
        column_name(column)
    with pytest.raises(UnexpectedColumnError):
        column_type(column)

    model = TimersTableModel(sample_timers)
    with pytest.raises(UnexpectedColumnError):
        model.value_at(0, column)
    with pytest.raises(UnexpectedColumnError):
        model.set_value_at("x", 0, column)


def test_rows_are_sorted_private_copy(qapp, sample_timers) -> None:
    model = TimersTableModel(sample_timers)
    assert [t.name for t in model.timers()] == ["alpha", "Midday", "Zeta"]

    sample_timers.append(Timer("extra"))
    assert model.rowCount() == 3

    copy = model.timers()
    copy.clear()
    assert model.rowCount() == 3


def test_all_cells_editable(qapp, sample_timers) -> None:
    model = TimersTableModel(sample_timers)
    for column in range(5):
        assert model.is_cell_editable(0, column)
        flags = model.flags(model.index(0, column))
        if column == 0:
            assert flags & Qt.ItemFlag.ItemIsUserCheckable
        else:
            assert flags & Qt.ItemFlag.ItemIsEditable


def test_add_timer_fires_one_notification(qapp, sample_timers) -> None:
    model = TimersTableModel(sample_timers)
    resets = _count_resets(model)

    model.add_timer(Timer("Unnamed"))

    assert model.rowCount() == 4
    assert resets == [4]
    assert model.timers()[-1].name == "Unnamed"


def test_remove_rows_keeps_order(qapp) -> None:
    model = TimersTableModel([Timer(name) for name in "abcde"])
    resets = _count_resets(model)

    model.remove_rows([3, 1])

    assert [t.name for t in model.timers()] == ["a", "c", "e"]
    assert len(resets) == 1


def test_remove_rows_ignores_duplicates_and_out_of_range(qapp) -> None:
    model = TimersTableModel([Timer(name) for name in "abc"])
    model.remove_rows([0, 0, 7, -1])
    assert [t.name for t in model.timers()] == ["b", "c"]


def test_clear(qapp, sample_timers) -> None:
    model = TimersTableModel(sample_timers)
    resets = _count_resets(model)
    model.clear()
    assert model.rowCount() == 0
    assert model.timers() == []
    assert resets == [0]


def test_enable_and_disable_all_only_touch_flag(qapp, sample_timers) -> None:
    model = TimersTableModel(sample_timers)
    before = [(t.name, t.from_time, t.to_time, t.resource_path) for t in model.timers()]
    resets = _count_resets(model)

    model.enable_all()
    assert all(t.enabled for t in model.timers())
    model.disable_all()
    assert not any(t.enabled for t in model.timers())

    after = [(t.name, t.from_time, t.to_time, t.resource_path) for t in model.timers()]
    assert after == before
    assert len(resets) == 2


def test_display_and_edit_roles(qapp) -> None:
    timer = Timer(
        "News",
        enabled=True,
        from_time=time(13, 45, 30),
        resource_path=Path("/media/clips/news.mp3"),
    )
    model = TimersTableModel([timer])

    assert model.data(model.index(0, 0), Qt.ItemDataRole.CheckStateRole) == Qt.CheckState.Checked
    assert model.data(model.index(0, 1)) == "News"
    assert model.data(model.index(0, 2)) == "13:45:30"
    assert model.data(model.index(0, 3)) == ""
    assert model.data(model.index(0, 4)) == "news.mp3"
    assert model.data(model.index(0, 2), Qt.ItemDataRole.EditRole) == time(13, 45, 30)
    assert model.data(model.index(0, 4), Qt.ItemDataRole.EditRole) == Path("/media/clips/news.mp3")


def test_set_data_updates_timer(qapp) -> None:
    timer = Timer("Old")
    model = TimersTableModel([timer])
    changes = []
    model.dataChanged.connect(lambda top_left, bottom_right, roles: changes.append(top_left.column()))

    assert model.setData(model.index(0, 1), "New")
    assert model.setData(model.index(0, 0), Qt.CheckState.Checked.value, Qt.ItemDataRole.CheckStateRole)
    assert model.setData(model.index(0, 3), time(9, 0, 0))
    assert model.setData(model.index(0, 4), "/tmp/clip.mp4")

    assert timer.name == "New"
    assert timer.enabled is True
    assert timer.to_time == time(9, 0, 0)
    assert timer.resource_path == Path("/tmp/clip.mp4")
    assert changes == [1, 0, 3, 4]

    assert model.setData(model.index(0, 4), "  ")
    assert model.setData(model.index(0, 3), None)
    assert timer.resource_path is None
    assert timer.to_time is None


def test_set_data_rejects_unknown_role(qapp) -> None:
    model = TimersTableModel([Timer("x")])
    assert not model.setData(model.index(0, 1), "y", Qt.ItemDataRole.ToolTipRole)
    assert model.timers()[0].name == "x"


def test_problem_state_for_resource(qapp, tmp_path: Path) -> None:
    media = tmp_path / "song.mp3"
    media.write_bytes(b"ID3")
    model = TimersTableModel([
        Timer("a", resource_path=media),
        Timer("b", resource_path=tmp_path / "missing.mp3"),
        Timer("c", resource_path=tmp_path),
        Timer("d"),
    ])
    problems = [model.data(model.index(row, 4), PROBLEM_ROLE) for row in range(4)]
    assert problems == [False, True, True, True]
    assert model.data(model.index(1, 4)) == "missing.mp3"
    assert model.data(model.index(3, 4)) == ""


def test_render_value_per_kind() -> None:
    assert render_value(ColumnKind.FLAG, True) == ""
    assert render_value(ColumnKind.TEXT, "x") == "x"
    assert render_value(ColumnKind.TIME, None) == ""
    assert render_value(ColumnKind.TIME, time(1, 2, 3)) == "01:02:03"
    assert render_value(ColumnKind.PATH, Path("/a/b/c.wav")) == "c.wav"
    assert render_value(ColumnKind.PATH, None) == ""
