from typing import Protocol, runtime_checkable

from wp_nav.domain.entities.geometry import Pt, Vec3
from wp_nav.domain.entities.graph import Node


# ------------- Search --------------------
@runtime_checkable
class PathPlanner(Protocol):
    """
    Responsibilities:
      • Compute an ordered start -> goal path between two resolved nodes.
      • Return [] when the goal cannot be reached.
    Implementations are synchronous and must not keep scratch state on nodes.
    """

    kind: str

    def plan(self, start: Node, goal: Node) -> list[Node]: ...


# ------------- Consumption --------------------
@runtime_checkable
class WaypointCursor(Protocol):
    """
    What a movement controller polls once per tick.
    Positions are world coordinates; the cursor never moves anything itself.
    """

    @property
    def has_path(self) -> bool: ...
    @property
    def target_position(self) -> Vec3 | None: ...
    def advance(self) -> bool: ...
    def update(self, position: Pt) -> bool:
        """Advance when ``position`` is within accuracy of the current target."""
