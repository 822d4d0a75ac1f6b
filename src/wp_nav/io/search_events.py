# wp_nav/io/search_events.py

from dataclasses import dataclass


# Base type for analytics records (emitted by hooks, never consumed by search)
@dataclass
class NavEvent:
    run_id: str
    seq: int  # emission order within a run
    name: str  # stable event name


@dataclass
class SearchCompleted(NavEvent):
    algorithm: str
    start: str  # repr of the node identity
    goal: str
    found: bool
    path_len: int
    expanded: int
    wall_ms: float | None = None


@dataclass
class EdgeSkipped(NavEvent):
    from_key: str
    to_key: str


@dataclass
class WaypointReached(NavEvent):
    index: int
    key: str
    wrapped: bool = False
