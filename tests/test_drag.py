'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

DragSession: the gesture lifecycle end to end on the demo list.
'''
from __future__ import annotations

import pytest

from core.drag import DragError, DragSession, finger_content_y
from core.measure import MeasurementStore
from core.types import ContainerEntry, Direction, DragState, Position

from tests.geometry import measure


class Recorder:
    def __init__(self):
        self.changes = []
        self.starts = []
        self.ends = 0

    def on_change(self, data):
        self.changes.append(data)

    def on_drag_start(self, entry_id, is_container):
        self.starts.append((entry_id, is_container))

    def on_drag_end(self):
        self.ends += 1


@pytest.fixture
def rec():
    return Recorder()


@pytest.fixture
def session(data, schema, store, rec):
    return DragSession(
        data,
        schema=schema,
        measurements=store,
        on_change=rec.on_change,
        on_drag_start=rec.on_drag_start,
        on_drag_end=rec.on_drag_end,
    )


def test_idle_state(session, order):
    assert session.state == DragState()
    assert not session.is_dragging
    assert session.committed_order == order
    assert session.pending_order == order


def test_drag_into_container_and_commit(session, rec, data):
    assert session.drag_start(0) == Position(0)
    assert session.state == DragState(True, False, 0)
    assert rec.starts == [(0, False)]

    assert session.drag(200) == Position(2, 2)
    assert session.pending_order[2] == ContainerEntry(3, (4, 5, 0))
    # committed order only changes on drag_end
    assert session.committed_order[0] == 0

    new_data = session.drag_end()

    assert rec.changes == [new_data]
    assert rec.ends == 1
    assert [e["id"] for e in new_data] == [1, 2, 3, 6, 7]
    assert [c["id"] for c in new_data[2]["data"]] == [4, 5, 0]
    assert new_data[2]["data"][2] is data[0]
    assert session.data is new_data
    assert session.committed_order == session.pending_order
    assert session.state == DragState()


def test_repeated_sample_is_stable(session):
    session.drag_start(0)
    first = session.drag(200)
    pending = session.pending_order

    assert session.drag(200) == first
    assert session.pending_order is pending


def test_child_drag_to_top(session):
    session.drag_start(5)
    assert session.drag(17) == Position(0)
    assert session.pending_order[:2] == [5, 0]
    assert session.pending_order[4] == ContainerEntry(3, (4,))


def test_container_drag_uses_root_slots(session):
    session.drag_start(3, is_container=True)
    assert session.drag(0) == Position(0)
    assert session.pending_order[0] == ContainerEntry(3, (4, 5))

    new_data = session.drag_end()
    assert [e["id"] for e in new_data] == [3, 0, 1, 2, 6, 7]


def test_drop_in_place_does_not_notify(session, rec):
    session.drag_start(1)
    session.drag(55.5)
    assert session.drag_end() is None
    assert rec.changes == []
    assert rec.ends == 1


def test_cancel_restores_committed(session, rec, order):
    session.drag_start(0)
    session.drag(200)
    session.cancel()

    assert session.pending_order == order
    assert not session.is_dragging
    assert rec.changes == []
    assert rec.ends == 1


def test_unmeasured_list_ignores_samples(data, schema):
    session = DragSession(data, schema=schema, measurements=MeasurementStore())
    session.drag_start(0)

    assert session.offsets() is None
    assert session.range_map() is None
    assert session.drag(200) == Position(0)
    assert session.pending_order == session.committed_order


def test_sample_without_drag(session):
    assert session.drag(100) is None


def test_double_start_raises(session):
    session.drag_start(0)
    with pytest.raises(DragError):
        session.drag_start(1)


def test_unknown_id_raises(session):
    with pytest.raises(DragError):
        session.drag_start(42)
    with pytest.raises(DragError):
        session.drag_start(4, is_container=True)
    assert not session.is_dragging


def test_drag_end_without_drag(session, rec):
    assert session.drag_end() is None
    assert rec.ends == 0


def test_set_data_abandons_drag_of_removed_element(session, rec, data):
    session.drag_start(0)
    session.set_data(data[1:])

    assert not session.is_dragging
    assert rec.ends == 1
    assert session.pending_order == session.committed_order
    assert session.committed_order[0] == 1


def test_set_data_keeps_drag_of_surviving_element(session, data):
    session.drag_start(1)
    session.set_data(data[1:])

    assert session.is_dragging
    assert session.position_of(1) == Position(0)


def test_geometry_follows_pending_order(session):
    before = session.offsets()
    session.drag_start(0)
    session.drag(200)
    after = session.offsets()

    assert after is not before
    assert after.container(3).height == 186
    assert after.total_height == before.total_height


def test_direction_from_delta(session):
    session.drag_start(1)
    assert session.last_direction is None
    session.drag(50, delta_y=0)
    session.drag(60, delta_y=10)
    assert session.last_direction is Direction.DOWN
    session.drag(40, delta_y=-10)
    assert session.last_direction is Direction.UP


def test_direction_from_content_y(session):
    session.drag_start(6)
    session.drag(278)
    session.drag(270)
    assert session.last_direction is Direction.UP


def test_drag_translate_y(session):
    assert session.drag_translate_y() == 0.0

    session.drag_start(1, item_content_y=37, scroll_offset=0)
    session.drag(60, delta_y=23)
    assert session.drag_translate_y(0) == 60
    assert session.drag_translate_y(10) == 70


def test_finger_content_y():
    # list starts 100px down the screen, scrolled by 40px
    assert finger_content_y(150, 40, 100) == 90
    assert finger_content_y(150, 40, 100, content_y=10) == 80


def test_drop_into_empty_container(schema, rec):
    data = [{"id": 0}, {"id": 1, "data": []}, {"id": 2}]
    session = DragSession(data, schema=schema, measurements=measure(data, schema),
                          on_change=rec.on_change)
    session.drag_start(0)

    # between the empty container's TOP (49.5) and BOTTOM (87) points
    assert session.drag(68) == Position(0, 0)
    assert session.pending_order == [ContainerEntry(1, (0,)), 2]

    new_data = session.drag_end()
    assert new_data == [{"id": 1, "data": [{"id": 0}]}, {"id": 2}]
    assert rec.changes == [new_data]
