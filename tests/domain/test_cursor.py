# tests/domain/test_cursor.py
import pytest

from wp_nav.app.protocols import WaypointCursor
from wp_nav.domain.entities.cursor import EndPolicy, PathCursor
from wp_nav.domain.entities.geometry import Vec3
from wp_nav.runtime.hooks import NoopHooks


class _ReachedSpy(NoopHooks):
    def __init__(self):
        self.calls = []

    def waypoint_reached(self, *, index, key, wrapped):
        self.calls.append((index, key, wrapped))


SQUARE = [(0, 0, 0), (10, 0, 0), (10, 0, 10)]


def test_cursor_satisfies_protocol():
    assert isinstance(PathCursor(), WaypointCursor)


def test_empty_cursor_has_no_target():
    c = PathCursor()
    assert not c.has_path
    assert c.target is None and c.target_position is None
    assert c.advance() is False
    assert c.update((0, 0, 0)) is False


def test_clamp_stops_on_final_waypoint():
    spy = _ReachedSpy()
    c = PathCursor.from_positions(SQUARE, hooks=spy)
    assert c.advance() and c.advance()
    assert c.at_end and c.index == 2
    assert c.advance() is False
    assert c.advance() is False
    assert c.done and c.index == 2
    # the final waypoint is reported once
    assert spy.calls == [(0, 0, False), (1, 1, False), (2, 2, False)]


def test_cyclic_wraps_to_first_waypoint():
    spy = _ReachedSpy()
    c = PathCursor.from_positions(SQUARE, policy=EndPolicy.CYCLIC, hooks=spy)
    for _ in range(3):
        assert c.advance()
    assert c.index == 0 and not c.done
    assert spy.calls[-1] == (2, 2, True)


def test_update_advances_only_within_accuracy():
    c = PathCursor.from_positions(SQUARE, accuracy=0.5)
    assert c.update((3, 0, 0)) is False
    assert c.index == 0
    assert c.update((0.3, 0, 0.3)) is True
    assert c.target_position == Vec3(10, 0, 0)


@pytest.mark.parametrize("planar, expected", [(True, True), (False, False)])
def test_height_is_ignored_when_planar(planar, expected):
    c = PathCursor.from_positions(SQUARE, planar=planar)
    assert c.arrived((0, 3, 0)) is expected


def test_reset_restarts_and_replaces_nodes():
    c = PathCursor.from_positions(SQUARE)
    for _ in range(4):
        c.advance()
    assert c.done
    c.reset()
    assert c.index == 0 and not c.done
    c.reset([])
    assert not c.has_path
    assert c.remaining() == []
