# wp_nav/domain/entities/graph.py
from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field

from wp_nav.domain.entities.geometry import Pt, Vec3, to_vec3
from wp_nav.domain.errors import DanglingEdgeError, NodeNotFoundError

logger = logging.getLogger(__name__)

# (row, col) for grid worlds, an opaque waypoint handle otherwise
NodeKey = Hashable


@dataclass(eq=False)
class Node:
    key: NodeKey
    position: Vec3 = field(default_factory=Vec3)
    walkable: bool = True
    edges: list[Edge] = field(default_factory=list, repr=False)  # outgoing, insertion order
    incoming: list[Edge] = field(default_factory=list, repr=False)

    @property
    def neighbors(self) -> list[Node]:
        return [e.end for e in self.edges]

    @property
    def predecessors(self) -> list[Node]:
        return [e.start for e in self.incoming]


@dataclass(eq=False)
class Edge:
    start: Node
    end: Node

    def __repr__(self) -> str:
        return f"Edge({self.start.key!r} -> {self.end.key!r})"


class Graph:
    """
    Owns every node and edge of one navigation world.

    Construction is lenient by default: an edge naming an identity that was
    never added is skipped without error. With ``strict=True`` the same call
    raises ``DanglingEdgeError`` instead.

    Nodes are looked up by identity (``node.key``); duplicate identities are
    allowed and lookups return the first one added. Search scratch state is
    never stored on nodes, so a graph can be searched repeatedly without reset.
    """

    def __init__(self, *, strict: bool = False, hooks=None):
        self.nodes: list[Node] = []
        self.edges: list[Edge] = []
        self.strict = strict
        self.hooks = hooks
        # last A* result, start -> goal
        self.path_list: list[Node] = []
        self._index: dict[NodeKey, Node] = {}

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, identity: NodeKey) -> bool:
        return identity in self._index

    # ---------------- construction ----------------

    def add_node(
        self, identity: NodeKey, position: Pt | None = None, walkable: bool = True
    ) -> Node:
        pos = Vec3() if position is None else to_vec3(position)
        node = Node(key=identity, position=pos, walkable=walkable)
        self.nodes.append(node)
        self._index.setdefault(identity, node)
        return node

    def add_edge(self, from_identity: NodeKey, to_identity: NodeKey) -> Edge | None:
        start, end = self.find(from_identity), self.find(to_identity)
        if start is None or end is None:
            missing = from_identity if start is None else to_identity
            if self.strict:
                raise DanglingEdgeError(
                    f"edge {from_identity!r} -> {to_identity!r} references unknown node {missing!r}"
                )
            logger.debug(
                "edge %r -> %r skipped: unknown node %r", from_identity, to_identity, missing
            )
            if self.hooks:
                self.hooks.edge_skipped(from_key=from_identity, to_key=to_identity)
            return None

        e = Edge(start, end)
        self.edges.append(e)
        start.edges.append(e)
        end.incoming.append(e)
        return e

    def add_link(self, a: NodeKey, b: NodeKey, *, bidirectional: bool = False) -> list[Edge]:
        made = [self.add_edge(a, b)]
        if bidirectional:
            made.append(self.add_edge(b, a))
        return [e for e in made if e is not None]

    # ---------------- lookup ----------------

    def find(self, identity: NodeKey) -> Node | None:
        return self._index.get(identity)

    def resolve(self, identity: NodeKey) -> Node:
        try:
            return self._index[identity]
        except KeyError:
            raise NodeNotFoundError(identity) from None

    def has_edge(self, from_identity: NodeKey, to_identity: NodeKey) -> bool:
        start = self.find(from_identity)
        return start is not None and any(e.end.key == to_identity for e in start.edges)

    # ---------------- search ----------------

    def find_path(
        self, start_identity: NodeKey, goal_identity: NodeKey, algorithm: str = "bfs"
    ) -> list[Node]:
        """Resolve both identities and run the named algorithm with default options."""
        from wp_nav.domain.search.search_factory import planner_for

        start, goal = self.resolve(start_identity), self.resolve(goal_identity)
        return planner_for(algorithm, hooks=self.hooks).plan(start, goal)

    def astar(self, start_identity: NodeKey, goal_identity: NodeKey, heuristic=None) -> bool:
        """
        A* between two identities. On success ``path_list`` holds the path and
        True is returned; unknown identities or an unreachable goal give False.
        """
        from wp_nav.domain.search.search_astar import astar, squared_euclidean

        start, goal = self.find(start_identity), self.find(goal_identity)
        if start is None or goal is None:
            return False
        path = astar(start, goal, heuristic or squared_euclidean)
        if not path:
            return False
        self.path_list = path
        return True

    def get_path_point(self, index: int) -> NodeKey:
        return self.path_list[index].key


@dataclass(frozen=True)
class Link:
    node1: NodeKey
    node2: NodeKey
    bidirectional: bool = False


def build_graph(
    waypoints: Mapping[NodeKey, Pt] | Iterable[NodeKey],
    links: Iterable[Link] = (),
    *,
    strict: bool = False,
    hooks=None,
) -> Graph:
    """Register every waypoint, then every link exactly once."""
    g = Graph(strict=strict, hooks=hooks)
    items = waypoints.items() if isinstance(waypoints, Mapping) else ((k, None) for k in waypoints)
    for key, position in items:
        g.add_node(key, position)
    for link in links:
        g.add_link(link.node1, link.node2, bidirectional=link.bidirectional)
    return g
