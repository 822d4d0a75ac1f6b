# wp_nav/app/compare.py
from collections.abc import Iterable
from dataclasses import dataclass

from wp_nav.domain.entities.graph import Graph, NodeKey
from wp_nav.domain.search.search_astar import path_cost
from wp_nav.domain.search.search_factory import planner_for


@dataclass
class PlannerReport:
    algorithm: str
    found: bool
    edges: int  # path length in edges; 0 when not found
    cost: float  # sum of squared per-edge distances
    expanded: int
    keys: list[NodeKey]


def compare_planners(
    graph: Graph,
    start: NodeKey,
    goal: NodeKey,
    kinds: Iterable[str] = ("bfs", "dfs", "dfs_recursive", "astar"),
    *,
    hooks=None,
) -> dict[str, PlannerReport]:
    """Run several algorithms on the same start/goal pair."""
    s, g = graph.resolve(start), graph.resolve(goal)
    out: dict[str, PlannerReport] = {}
    for kind in kinds:
        planner = planner_for(kind, hooks=hooks)
        path = planner.plan(s, g)
        ctx = planner.last_context
        out[kind] = PlannerReport(
            algorithm=kind,
            found=bool(path),
            edges=max(0, len(path) - 1),
            cost=path_cost(path),
            expanded=ctx.expanded if ctx else 0,
            keys=[n.key for n in path],
        )
    return out
