# wp_nav/domain/search/search_planners.py
import time

from wp_nav.app.protocols import PathPlanner
from wp_nav.domain.entities.graph import Node
from wp_nav.domain.search.search_astar import Heuristic, astar, squared_euclidean
from wp_nav.domain.search.search_context import SearchContext
from wp_nav.domain.search.search_uninformed import (
    DEFAULT_MAX_DEPTH,
    bfs,
    dfs,
    dfs_recursive_path,
    test_path,
)
from wp_nav.runtime.hooks import SearchHooks


class _HookedPlanner(PathPlanner):
    kind = ""

    def __init__(self, hooks: SearchHooks | None = None):
        self.hooks = hooks
        self.last_context: SearchContext | None = None

    def _search(self, start: Node, goal: Node, ctx: SearchContext) -> list[Node]:
        raise NotImplementedError

    def plan(self, start: Node, goal: Node) -> list[Node]:
        ctx = SearchContext(self.kind, hooks=self.hooks)
        if self.hooks:
            self.hooks.search_start(algorithm=self.kind, start=start.key, goal=goal.key)
        t0 = time.perf_counter()
        path = self._search(start, goal, ctx)
        if self.hooks:
            self.hooks.search_end(
                algorithm=self.kind,
                start=start.key,
                goal=goal.key,
                found=bool(path),
                path_len=len(path),
                expanded=ctx.expanded,
                wall_ms=(time.perf_counter() - t0) * 1000,
            )
        self.last_context = ctx
        return path


class BreadthFirstPlanner(_HookedPlanner):
    kind = "bfs"

    def _search(self, start, goal, ctx):
        return bfs(start, goal, ctx=ctx)


class DepthFirstPlanner(_HookedPlanner):
    kind = "dfs"

    def _search(self, start, goal, ctx):
        return dfs(start, goal, ctx=ctx)


class RecursiveDepthFirstPlanner(_HookedPlanner):
    kind = "dfs_recursive"

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH, hooks: SearchHooks | None = None):
        super().__init__(hooks)
        self.max_depth = max_depth

    def _search(self, start, goal, ctx):
        return dfs_recursive_path(start, goal, max_depth=self.max_depth, ctx=ctx)


class AStarPlanner(_HookedPlanner):
    kind = "astar"

    def __init__(
        self,
        heuristic: Heuristic = squared_euclidean,
        tie_break: str = "h_then_insertion",
        hooks: SearchHooks | None = None,
    ):
        super().__init__(hooks)
        self.heuristic, self.tie_break = heuristic, tie_break

    def _search(self, start, goal, ctx):
        return astar(start, goal, self.heuristic, tie_break=self.tie_break, ctx=ctx)


class TestPathPlanner(_HookedPlanner):
    __test__ = False
    kind = "test_path"

    def _search(self, start, goal, ctx):
        return test_path(start, goal, ctx=ctx)
