# tests/domain/test_search_uninformed.py
import pytest

from wp_nav.domain.entities.graph import Link, build_graph
from wp_nav.domain.entities.grid import (
    LABYRINTH_GOAL,
    LABYRINTH_PATTERN,
    LABYRINTH_START,
    build_grid,
    is_adjacent,
)
from wp_nav.domain.errors import PathReconstructionError, SearchDepthExceededError
from wp_nav.domain.search.search_context import SearchContext
from wp_nav.domain.search.search_factory import planner_for
from wp_nav.domain.search.search_uninformed import (
    _walk_back_by_depth,
    bfs,
    dfs,
    dfs_recursive,
    dfs_recursive_path,
    test_path as stub_path,
)


def keys(path):
    return [n.key for n in path]


def assert_valid_walk(path, start, goal):
    assert path[0] is start
    assert path[-1].key == goal.key
    for a, b in zip(path, path[1:]):
        assert b in a.neighbors
        assert b.walkable


@pytest.fixture
def labyrinth():
    grid = build_grid(LABYRINTH_PATTERN, force_walkable=[LABYRINTH_START, LABYRINTH_GOAL])
    return grid, grid.node_at(*LABYRINTH_START), grid.node_at(*LABYRINTH_GOAL)


# ------------------ LABYRINTH SCENARIO ------------------


def test_bfs_finds_minimal_path_through_labyrinth(labyrinth):
    _, s, g = labyrinth
    path = bfs(s, g)
    # a monotone route down the left side and across row 4 exists, so the
    # optimum equals the Manhattan distance
    assert len(path) - 1 == 11
    assert_valid_walk(path, s, g)


def test_dfs_variants_are_valid_and_never_shorter_than_bfs(labyrinth):
    _, s, g = labyrinth
    shortest = len(bfs(s, g))
    for path in (dfs(s, g), dfs_recursive_path(s, g)):
        assert_valid_walk(path, s, g)
        assert len(path) >= shortest


def test_recursive_path_only_steps_between_adjacent_cells(labyrinth):
    _, s, g = labyrinth
    path = dfs_recursive_path(s, g)
    for a, b in zip(path, path[1:]):
        assert is_adjacent(a.key, b.key)
        assert a.walkable and b.walkable


def test_repeated_searches_are_identical(labyrinth):
    _, s, g = labyrinth
    for search in (bfs, dfs, dfs_recursive_path):
        assert keys(search(s, g)) == keys(search(s, g))


def test_searches_leave_nodes_untouched(labyrinth):
    grid, s, g = labyrinth
    ctx = SearchContext("bfs")
    bfs(s, g, ctx=ctx)
    assert ctx.depth(g) == 11
    assert ctx.expanded > 0
    assert not hasattr(grid.node_at(0, 0), "depth")


# ------------------ EDGE CASES ------------------


def test_start_equal_goal_returns_single_node(labyrinth):
    _, s, _ = labyrinth
    assert bfs(s, s) == [s]
    assert dfs(s, s) == [s]
    assert dfs_recursive_path(s, s) == [s]


def test_unreachable_goal_returns_empty():
    grid = build_grid([[True, False, True]])
    s, g = grid.node_at(0, 0), grid.node_at(0, 2)
    assert bfs(s, g) == []
    assert dfs(s, g) == []
    assert dfs_recursive_path(s, g) == []


def test_bfs_follows_directed_edges():
    g = build_graph(["A", "B", "C"], [Link("A", "B"), Link("B", "C"), Link("C", "A")])
    a, b, c = (g.resolve(k) for k in "ABC")
    assert keys(bfs(a, c)) == ["A", "B", "C"]
    assert keys(bfs(c, b)) == ["C", "A", "B"]


def test_bfs_walk_back_takes_first_neighbour_one_level_up():
    # (1, 0) and (2, 1) both sit at depth 1 next to the goal; the walk-back
    # scans the goal's neighbours up, down, left, right and takes (2, 1)
    grid = build_grid([[True, True], [True, True], [True, True]])
    path = bfs(grid.node_at(2, 0), grid.node_at(1, 1))
    assert keys(path) == [(2, 0), (2, 1), (1, 1)]


def test_bfs_walk_back_falls_back_to_one_way_edges():
    # M -> G is one-way, so walking back from G finds M only through incoming edges
    g = build_graph(
        ["S", "M", "G"],
        [Link("S", "M"), Link("M", "G"), Link("G", "S", bidirectional=True)],
    )
    assert keys(bfs(g.resolve("S"), g.resolve("G"))) == ["S", "G"]
    assert keys(bfs(g.resolve("M"), g.resolve("S"))) == ["M", "G", "S"]


def test_walk_back_with_stale_depth_raises():
    g = build_graph(["A", "B", "C"], [Link("A", "B"), Link("B", "C")])
    ctx = SearchContext("bfs")
    ctx.of(g.resolve("C")).depth = 2  # B was never given depth 1
    with pytest.raises(PathReconstructionError):
        _walk_back_by_depth(g.resolve("C"), ctx)


def test_dfs_keeps_first_discovered_parent():
    # C is expanded first and rediscovers B, but B keeps A as its parent
    g = build_graph(
        ["A", "B", "C", "G"],
        [Link("A", "B"), Link("A", "C"), Link("C", "B"), Link("B", "G")],
    )
    assert keys(dfs(g.resolve("A"), g.resolve("G"))) == ["A", "B", "G"]


# ------------------ RECURSIVE DFS ------------------


def test_recursive_dfs_backtracks_out_of_dead_ends():
    g = build_graph(
        ["A", "B", "C", "D"],
        [Link("A", "B"), Link("A", "C"), Link("C", "D")],
    )
    visited, path = set(), []
    assert dfs_recursive(g.resolve("A"), g.resolve("D"), visited, path)
    assert keys(path) == ["A", "C", "D"]
    assert "B" in visited


def test_recursive_dfs_failure_leaves_path_empty():
    g = build_graph(["A", "B", "C"], [Link("A", "B")])
    visited, path = set(), []
    assert not dfs_recursive(g.resolve("A"), g.resolve("C"), visited, path)
    assert path == []
    assert visited == {"A", "B"}


def test_recursive_dfs_enforces_max_depth():
    chain = [str(i) for i in range(10)]
    g = build_graph(chain, [Link(a, b) for a, b in zip(chain, chain[1:])])
    with pytest.raises(SearchDepthExceededError):
        dfs_recursive_path(g.resolve("0"), g.resolve("9"), max_depth=5)
    assert len(dfs_recursive_path(g.resolve("0"), g.resolve("9"), max_depth=10)) == 10


def test_recursive_dfs_reports_interpreter_limit_as_depth_error():
    chain = list(range(3000))
    g = build_graph(chain, [Link(a, b) for a, b in zip(chain, chain[1:])])
    planner = planner_for("dfs_recursive", max_depth=2500)
    with pytest.raises(SearchDepthExceededError):
        planner.plan(g.resolve(0), g.resolve(2999))


# ------------------ STUB ------------------


def test_stub_path():
    g = build_graph(["A", "B"])
    a, b = g.resolve("A"), g.resolve("B")
    assert stub_path(a, a) == [a]
    assert stub_path(a, b) == [a, b]
