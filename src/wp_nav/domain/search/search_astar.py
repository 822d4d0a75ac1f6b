# wp_nav/domain/search/search_astar.py
import heapq
import itertools
import math
from collections.abc import Callable, Sequence

from wp_nav.domain.entities.geometry import distance, sq_distance
from wp_nav.domain.entities.graph import Node, NodeKey
from wp_nav.domain.search.search_context import SearchContext

Heuristic = Callable[[Node, Node], float]


def squared_euclidean(a: Node, b: Node) -> float:
    # not a metric, so not admissible in general; kept for path parity
    return sq_distance(a.position, b.position)


def euclidean(a: Node, b: Node) -> float:
    return distance(a.position, b.position)


def manhattan(a: Node, b: Node) -> float:
    pa, pb = a.position, b.position
    return abs(pa.x - pb.x) + abs(pa.y - pb.y) + abs(pa.z - pb.z)


def zero(a: Node, b: Node) -> float:
    return 0.0


HEURISTICS: dict[str, Heuristic] = {
    "squared_euclidean": squared_euclidean,
    "euclidean": euclidean,
    "manhattan": manhattan,
    "zero": zero,
}


def path_cost(path: Sequence[Node], cost: Heuristic = squared_euclidean) -> float:
    return math.fsum(cost(a, b) for a, b in zip(path, path[1:]))


def astar(
    start: Node,
    goal: Node,
    heuristic: Heuristic = squared_euclidean,
    *,
    cost: Heuristic | None = None,
    tie_break: str = "h_then_insertion",
    ctx: SearchContext | None = None,
) -> list[Node]:
    """
    A* over outgoing edges, skipping non-walkable targets.

    Edge cost defaults to the heuristic function itself (squared distance
    unless told otherwise). The open set is a binary heap ordered by f, then
    h (with ``tie_break="h_then_insertion"``), then insertion order. Closed
    nodes are never reopened. Returns [] when the goal is unreachable.
    """
    cost = cost or heuristic
    ctx = ctx or SearchContext("astar")
    use_h = tie_break == "h_then_insertion"
    seq = itertools.count()

    s = ctx.of(start)
    s.g, s.h, s.predecessor = 0.0, heuristic(start, goal), None
    s.f = s.g + s.h

    # (f, h-or-0, seq, node); seq is unique so nodes are never compared
    open_heap: list[tuple[float, float, int, Node]] = [
        (s.f, s.h if use_h else 0.0, next(seq), start)
    ]
    in_open: set[NodeKey] = {start.key}
    closed: set[NodeKey] = set()

    while open_heap:
        _, _, _, current = heapq.heappop(open_heap)
        if current.key in closed:
            continue  # superseded by a cheaper entry
        if current.key == goal.key:
            return _reconstruct(current, ctx)

        in_open.discard(current.key)
        closed.add(current.key)
        ctx.expand(current)
        cur = ctx.of(current)

        for e in current.edges:
            n = e.end
            if n.key in closed or not n.walkable:
                continue
            tentative_g = cur.g + cost(current, n)
            if n.key not in in_open:
                in_open.add(n.key)
            elif tentative_g >= ctx.of(n).g:
                continue
            ns = ctx.of(n)
            ns.predecessor = current
            ns.g = tentative_g
            ns.h = heuristic(n, goal)
            ns.f = ns.g + ns.h
            heapq.heappush(open_heap, (ns.f, ns.h if use_h else 0.0, next(seq), n))
    return []


def _reconstruct(end: Node, ctx: SearchContext) -> list[Node]:
    path = [end]
    p = ctx.predecessor(end)
    while p is not None:
        path.append(p)
        p = ctx.predecessor(p)
    path.reverse()
    return path
