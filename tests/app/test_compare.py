# tests/app/test_compare.py
import numpy as np
import pytest

from wp_nav.app.compare import compare_planners
from wp_nav.domain.entities.grid import (
    LABYRINTH_GOAL,
    LABYRINTH_PATTERN,
    LABYRINTH_START,
    build_grid,
    random_grid,
)
from wp_nav.domain.errors import UnknownAlgorithmError
from wp_nav.runtime.rng import RNGRegistry


def test_labyrinth_report():
    grid = build_grid(LABYRINTH_PATTERN, force_walkable=[LABYRINTH_START, LABYRINTH_GOAL])
    reports = compare_planners(grid.graph, LABYRINTH_START, LABYRINTH_GOAL)

    assert set(reports) == {"bfs", "dfs", "dfs_recursive", "astar"}
    assert all(r.found for r in reports.values())
    assert reports["bfs"].edges == 11
    assert reports["astar"].edges == 11
    assert reports["astar"].cost == pytest.approx(275.0)
    for kind in ("dfs", "dfs_recursive"):
        assert reports[kind].edges >= reports["bfs"].edges
    assert reports["astar"].cost <= reports["dfs"].cost
    assert reports["bfs"].expanded > 0


def test_unknown_kind_is_rejected():
    grid = build_grid([[True, True]])
    with pytest.raises(UnknownAlgorithmError):
        compare_planners(grid.graph, (0, 0), (0, 1), kinds=["bfs", "greedy"])


TRIALS = RNGRegistry(2024, scenario="compare").trials("grid", 25)


@pytest.mark.parametrize("trial", range(len(TRIALS)))
def test_random_grids_agree_on_reachability(trial):
    rng = TRIALS[trial]
    rows, cols = 6 + trial % 5, 5 + trial % 7
    goal = (rows - 1, cols - 1)
    mask = random_grid(rows, cols, 0.3, rng)
    grid = build_grid(mask, force_walkable=[(0, 0), goal])

    reports = compare_planners(grid.graph, (0, 0), goal)
    found = {r.found for r in reports.values()}
    assert len(found) == 1  # all or none

    bfs = reports["bfs"]
    if bfs.found:
        for r in reports.values():
            assert r.edges >= bfs.edges
            assert r.keys[0] == (0, 0) and r.keys[-1] == goal
            assert all(
                np.abs(np.subtract(a, b)).sum() == 1 for a, b in zip(r.keys, r.keys[1:])
            )
    else:
        assert all(r.edges == 0 and r.keys == [] for r in reports.values())
