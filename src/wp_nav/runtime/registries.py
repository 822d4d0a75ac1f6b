# runtime/registries.py
from collections.abc import Callable
from typing import Any

from wp_nav.app.protocols import PathPlanner
from wp_nav.config.models import (
    AStarPlannerModel,
    BfsPlannerModel,
    CursorModel,
    DfsPlannerModel,
    DfsRecursivePlannerModel,
    PlannerUnion,
    TestPathPlannerModel,
)
from wp_nav.domain.entities.cursor import EndPolicy, PathCursor
from wp_nav.domain.errors import UnknownAlgorithmError
from wp_nav.domain.search.search_astar import HEURISTICS
from wp_nav.domain.search.search_planners import (
    AStarPlanner,
    BreadthFirstPlanner,
    DepthFirstPlanner,
    RecursiveDepthFirstPlanner,
    TestPathPlanner,
)

PlannerFactory = Callable[[PlannerUnion, dict], PathPlanner]
CursorFactory = Callable[[CursorModel, dict], PathCursor]

_planner_registry: dict[str, PlannerFactory] = {}
_cursor_registry: dict[str, CursorFactory] = {}


# ------------------- Planners ---------------------------


def register_planner(kind: str):
    def deco(fn: PlannerFactory):
        _planner_registry[kind] = fn
        return fn

    return deco


def planner_kinds() -> list[str]:
    return sorted(_planner_registry)


def make_planner(cfg: PlannerUnion, *, deps: dict[str, Any]) -> PathPlanner:
    try:
        factory = _planner_registry[cfg.kind]
    except KeyError:
        raise UnknownAlgorithmError(f"Unknown planner kind {cfg.kind!r}") from None
    return factory(cfg, deps)


@register_planner("bfs")
def _make_bfs(cfg: BfsPlannerModel, deps):
    return BreadthFirstPlanner(hooks=deps.get("hooks"))


@register_planner("dfs")
def _make_dfs(cfg: DfsPlannerModel, deps):
    return DepthFirstPlanner(hooks=deps.get("hooks"))


@register_planner("dfs_recursive")
def _make_dfs_recursive(cfg: DfsRecursivePlannerModel, deps):
    return RecursiveDepthFirstPlanner(max_depth=cfg.max_depth, hooks=deps.get("hooks"))


@register_planner("astar")
def _make_astar(cfg: AStarPlannerModel, deps):
    return AStarPlanner(
        heuristic=HEURISTICS[cfg.heuristic], tie_break=cfg.tie_break, hooks=deps.get("hooks")
    )


@register_planner("test_path")
def _make_test_path(cfg: TestPathPlannerModel, deps):
    return TestPathPlanner(hooks=deps.get("hooks"))


# ------------------- Cursors ---------------------------


def register_cursor(policy: str):
    def deco(fn: CursorFactory):
        _cursor_registry[policy] = fn
        return fn

    return deco


def make_cursor(cfg: CursorModel, *, deps: dict[str, Any]) -> PathCursor:
    return _cursor_registry[cfg.policy](cfg, deps)


@register_cursor("clamp")
def _make_clamp(cfg: CursorModel, deps):
    return PathCursor(
        policy=EndPolicy.CLAMP, accuracy=cfg.accuracy, planar=cfg.planar, hooks=deps.get("hooks")
    )


@register_cursor("cyclic")
def _make_cyclic(cfg: CursorModel, deps):
    return PathCursor(
        policy=EndPolicy.CYCLIC, accuracy=cfg.accuracy, planar=cfg.planar, hooks=deps.get("hooks")
    )
