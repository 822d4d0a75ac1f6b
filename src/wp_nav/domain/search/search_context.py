# wp_nav/domain/search/search_context.py
from dataclasses import dataclass, field

from wp_nav.domain.entities.graph import Node, NodeKey


@dataclass
class Scratch:
    depth: int = -1  # -1 = not reached (breadth-first)
    g: float = 0.0
    h: float = 0.0
    f: float = 0.0
    predecessor: Node | None = None


@dataclass
class SearchContext:
    """
    Scratch arena for a single search invocation, keyed by node identity.

    Every search allocates a fresh context unless one is passed in, so no
    state leaks between searches and the graph itself is never mutated.
    Reusing a context across two searches is a caller error.
    """

    algorithm: str = ""
    hooks: object | None = None
    scratch: dict[NodeKey, Scratch] = field(default_factory=dict)
    expanded: int = 0

    def of(self, node: Node) -> Scratch:
        s = self.scratch.get(node.key)
        if s is None:
            s = self.scratch[node.key] = Scratch()
        return s

    def depth(self, node: Node) -> int:
        s = self.scratch.get(node.key)
        return -1 if s is None else s.depth

    def predecessor(self, node: Node) -> Node | None:
        s = self.scratch.get(node.key)
        return None if s is None else s.predecessor

    def expand(self, node: Node, depth: int | None = None) -> None:
        self.expanded += 1
        if self.hooks:
            self.hooks.node_expanded(algorithm=self.algorithm, key=node.key, depth=depth)
