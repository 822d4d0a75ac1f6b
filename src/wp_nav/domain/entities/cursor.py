# wp_nav/domain/entities/cursor.py
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from wp_nav.domain.entities.geometry import Pt, Vec3, distance, to_vec3
from wp_nav.domain.entities.graph import Node


class EndPolicy(Enum):
    CLAMP = "clamp"  # stop on the final waypoint (search results)
    CYCLIC = "cyclic"  # wrap back to the first waypoint (patrol loops)


@dataclass
class PathCursor:
    """
    Consumer-side state for one path: the external movement controller polls
    ``has_path`` / ``target`` and calls ``update`` once per tick with its own
    position. The cursor only decides when to move on to the next waypoint.
    """

    nodes: list[Node] = field(default_factory=list)
    policy: EndPolicy = EndPolicy.CLAMP
    accuracy: float = 0.5
    planar: bool = True  # ignore height when measuring arrival
    index: int = 0
    done: bool = False  # clamped and the final waypoint has been reached
    hooks: object | None = field(default=None, repr=False)

    @classmethod
    def from_positions(cls, points: Iterable[Pt], **kw) -> "PathCursor":
        nodes = [Node(key=i, position=to_vec3(p)) for i, p in enumerate(points)]
        return cls(nodes=nodes, **kw)

    @property
    def has_path(self) -> bool:
        return bool(self.nodes)

    @property
    def target(self) -> Node | None:
        return self.nodes[self.index] if self.nodes else None

    @property
    def target_position(self) -> Vec3 | None:
        return self.nodes[self.index].position if self.nodes else None

    @property
    def at_end(self) -> bool:
        return not self.nodes or self.index == len(self.nodes) - 1

    def remaining(self) -> list[Node]:
        return self.nodes[self.index :]

    def reset(self, nodes: Iterable[Node] | None = None) -> None:
        if nodes is not None:
            self.nodes = list(nodes)
        self.index = 0
        self.done = False

    def advance(self) -> bool:
        """Move to the next waypoint. Returns False when clamped at the end."""
        if not self.nodes:
            return False
        reached = self.index
        if self.index < len(self.nodes) - 1:
            self.index += 1
            self._reached(reached, wrapped=False)
            return True
        if self.policy is EndPolicy.CYCLIC:
            self.index = 0
            self._reached(reached, wrapped=True)
            return True
        if not self.done:
            self.done = True
            self._reached(reached, wrapped=False)
        return False

    def arrived(self, position: Pt) -> bool:
        target = self.target_position
        if target is None:
            return False
        p = to_vec3(position)
        if self.planar:
            p = p.flat(target.y)
        return distance(p, target) <= self.accuracy

    def update(self, position: Pt) -> bool:
        """One tick: advance if ``position`` is within accuracy of the target."""
        return self.arrived(position) and self.advance()

    def _reached(self, index: int, *, wrapped: bool) -> None:
        if self.hooks:
            self.hooks.waypoint_reached(index=index, key=self.nodes[index].key, wrapped=wrapped)
