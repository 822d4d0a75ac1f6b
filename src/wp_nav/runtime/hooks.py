# wp_nav/runtime/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def search_start(self, *, algorithm, start, goal): ...
    def search_end(self, *, algorithm, start, goal, found, path_len, expanded, wall_ms): ...
    def node_expanded(self, *, algorithm, key, depth): ...
    def edge_skipped(self, *, from_key, to_key): ...
    def waypoint_reached(self, *, index, key, wrapped): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def search_end(self, **_):
        pass

    def node_expanded(self, **_):
        pass

    def edge_skipped(self, **_):
        pass

    def waypoint_reached(self, **_):
        pass
