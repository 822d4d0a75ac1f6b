# wp_nav/domain/search/search_uninformed.py
"""
Uninformed searches over walkable nodes.

All functions take already-resolved start/goal nodes and return the path as
a list running start -> goal, both ends included. An empty list means the
goal is unreachable; that is a normal outcome, not an error.
"""

from collections import deque

from wp_nav.domain.entities.graph import Node, NodeKey
from wp_nav.domain.errors import PathReconstructionError, SearchDepthExceededError
from wp_nav.domain.search.search_context import SearchContext

DEFAULT_MAX_DEPTH = 512


def bfs(start: Node, goal: Node, *, ctx: SearchContext | None = None) -> list[Node]:
    """
    Breadth-first search; shortest path by edge count.

    Depth is recorded when a node is first discovered and the path is rebuilt
    by walking back one depth level at a time from the goal.
    """
    ctx = ctx or SearchContext("bfs")
    ctx.of(start).depth = 0
    frontier: deque[Node] = deque([start])
    finalized: set[NodeKey] = set()

    while frontier:
        current = frontier.popleft()
        if current.key in finalized:
            continue
        finalized.add(current.key)
        d = ctx.depth(current)
        ctx.expand(current, d)

        if current.key == goal.key:
            return _walk_back_by_depth(current, ctx)

        for n in current.neighbors:
            if n.walkable and n.key not in finalized and ctx.depth(n) == -1:
                ctx.of(n).depth = d + 1
                frontier.append(n)
    return []


def _walk_back_by_depth(end: Node, ctx: SearchContext) -> list[Node]:
    path = [end]
    current = end
    while (d := ctx.depth(current)) != 0:
        prev = _one_level_up(current, d - 1, ctx)
        if prev is None:
            raise PathReconstructionError(
                f"no predecessor at depth {d - 1} for {current.key!r}; scratch state is stale"
            )
        path.append(prev)
        current = prev
    path.reverse()
    return path


def _one_level_up(node: Node, depth: int, ctx: SearchContext) -> Node | None:
    # neighbour order first (up, down, left, right on grids); one-way edges
    # into node are only reachable through its incoming list
    incoming = {p.key for p in node.predecessors}
    for n in node.neighbors:
        if n.key in incoming and ctx.depth(n) == depth:
            return n
    return next((p for p in node.predecessors if ctx.depth(p) == depth), None)


def dfs(start: Node, goal: Node, *, ctx: SearchContext | None = None) -> list[Node]:
    """Iterative depth-first search; returns the first path found, not the shortest."""
    ctx = ctx or SearchContext("dfs")
    stack: list[Node] = [start]
    parent: dict[NodeKey, Node | None] = {start.key: None}
    finalized: set[NodeKey] = set()

    while stack:
        current = stack.pop()
        if current.key in finalized:
            continue
        finalized.add(current.key)
        ctx.expand(current)

        if current.key == goal.key:
            path: list[Node] = []
            node: Node | None = current
            while node is not None:
                path.append(node)
                node = parent[node.key]
            path.reverse()
            return path

        for n in current.neighbors:
            if n.walkable and n.key not in finalized:
                stack.append(n)
                parent.setdefault(n.key, current)  # first discovery wins
    return []


def dfs_recursive(
    start: Node,
    goal: Node,
    visited: set[NodeKey],
    path: list[Node],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    ctx: SearchContext | None = None,
) -> bool:
    """
    Recursive depth-first search with backtracking.

    ``visited`` and ``path`` are filled in place. On success ``path`` holds a
    start -> goal walk; dead-end branches are popped off as the recursion
    unwinds, so on failure ``path`` is back to what it was on entry.
    Raises SearchDepthExceededError if the walk grows past ``max_depth`` nodes.
    """
    if len(path) >= max_depth:
        raise SearchDepthExceededError(f"recursive search exceeded max_depth={max_depth}")
    visited.add(start.key)
    path.append(start)
    if ctx:
        ctx.expand(start, len(path) - 1)

    if start.key == goal.key:
        return True

    for n in start.neighbors:
        if n.walkable and n.key not in visited:
            if dfs_recursive(n, goal, visited, path, max_depth=max_depth, ctx=ctx):
                return True

    path.pop()
    return False


def dfs_recursive_path(
    start: Node,
    goal: Node,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    ctx: SearchContext | None = None,
) -> list[Node]:
    path: list[Node] = []
    try:
        found = dfs_recursive(start, goal, set(), path, max_depth=max_depth, ctx=ctx)
    except RecursionError:
        raise SearchDepthExceededError(
            f"recursive search hit the interpreter recursion limit at depth {len(path)}"
            f" before max_depth={max_depth}"
        ) from None
    return path if found else []


def test_path(start: Node, goal: Node, *, ctx: SearchContext | None = None) -> list[Node]:
    """Fixed stand-in path for exercising consumers without a real search."""
    return [start] if start.key == goal.key else [start, goal]


# keep pytest from collecting the stub as a test
test_path.__test__ = False
