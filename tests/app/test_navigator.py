# tests/app/test_navigator.py
import pytest

from wp_nav.app.build import build
from wp_nav.app.navigator import Navigator
from wp_nav.domain.entities.cursor import PathCursor
from wp_nav.domain.entities.graph import Link, build_graph
from wp_nav.domain.errors import NodeNotFoundError
from wp_nav.domain.search.search_planners import AStarPlanner, BreadthFirstPlanner


@pytest.fixture
def labyrinth_app():
    return build({"name": "nav"}, use_logging=False)


@pytest.fixture
def square():
    g = build_graph(
        {"A": (0, 0, 0), "B": (10, 0, 0), "C": (10, 0, 10), "D": (0, 0, 10)},
        [
            Link("A", "B", bidirectional=True),
            Link("B", "C", bidirectional=True),
            Link("C", "D", bidirectional=True),
            Link("D", "A", bidirectional=True),
        ],
    )
    nav = Navigator(
        g, AStarPlanner(), PathCursor(), "A", destinations={"depot": "C", "gate": "D"}
    )
    return nav


def test_goto_and_drive_to_goal(labyrinth_app):
    nav = labyrinth_app.navigator
    assert nav.goto(labyrinth_app.goal)
    path = list(nav.cursor.nodes)
    assert path[0].key == (0, 0) and path[-1].key == (6, 5)

    ticks = 0
    while not nav.arrived:
        nav.tick(nav.cursor.target_position)
        ticks += 1
    assert ticks == len(path)
    assert nav.current == (6, 5)
    assert nav.tick(nav.cursor.target_position) is False


def test_tick_far_from_target_does_not_advance(labyrinth_app):
    nav = labyrinth_app.navigator
    nav.goto(labyrinth_app.goal)
    assert nav.tick((100.0, 0.0, 100.0)) is False
    assert nav.cursor.index == 0
    assert nav.current == (0, 0)


def test_tick_without_path_is_a_noop(square):
    assert square.tick((0, 0, 0)) is False
    assert square.current == "A"


def test_replan_starts_from_waypoint_being_approached(square):
    assert square.goto("C")
    assert [n.key for n in square.cursor.nodes] == ["A", "B", "C"]
    square.tick((0, 0, 0))  # reached A, now heading to B
    assert square.current == "B"

    assert square.goto("D")
    assert [n.key for n in square.cursor.nodes][0] == "B"
    assert square.cursor.nodes[-1].key == "D"


def test_named_destinations(square):
    assert square.goto_named("depot")
    assert square.cursor.nodes[-1].key == "C"
    with pytest.raises(KeyError):
        square.goto_named("harbour")


def test_unknown_goal_raises(square):
    with pytest.raises(NodeNotFoundError):
        square.goto("Z")


def test_unreachable_goal_clears_cursor():
    g = build_graph(["A", "B"])
    nav = Navigator(g, BreadthFirstPlanner(), PathCursor(), "A")
    assert nav.goto("B") is False
    assert not nav.cursor.has_path
    assert not nav.arrived
