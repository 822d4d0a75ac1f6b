# wp_nav/app/navigator.py
from collections.abc import Mapping

from wp_nav.app.protocols import PathPlanner
from wp_nav.domain.entities.cursor import PathCursor
from wp_nav.domain.entities.geometry import Pt
from wp_nav.domain.entities.graph import Graph, NodeKey


class Navigator:
    """
    Plans from the waypoint the agent is at (or heading to) towards a goal and
    hands the result to a cursor that the movement side drains tick by tick.
    """

    def __init__(
        self,
        graph: Graph,
        planner: PathPlanner,
        cursor: PathCursor,
        start: NodeKey,
        destinations: Mapping[str, NodeKey] | None = None,
    ):
        self.graph = graph
        self.planner = planner
        self.cursor = cursor
        self.current = graph.resolve(start).key
        self.destinations = dict(destinations or {})

    def goto(self, goal: NodeKey) -> bool:
        """
        Replace the current path with one from ``current`` to ``goal``.
        When no path exists the cursor is emptied and False is returned.
        """
        path = self.planner.plan(self.graph.resolve(self.current), self.graph.resolve(goal))
        self.cursor.reset(path)
        return bool(path)

    def goto_named(self, name: str) -> bool:
        try:
            goal = self.destinations[name]
        except KeyError:
            known = sorted(self.destinations)
            raise KeyError(f"unknown destination {name!r}; known: {known}") from None
        return self.goto(goal)

    def tick(self, position: Pt) -> bool:
        """One movement step: returns True if the cursor moved to a new waypoint."""
        if not self.cursor.has_path or self.cursor.done:
            return False
        advanced = self.cursor.update(position)
        # track the waypoint being approached, so a re-plan starts from there
        self.current = self.cursor.target.key
        return advanced

    @property
    def arrived(self) -> bool:
        return self.cursor.done
