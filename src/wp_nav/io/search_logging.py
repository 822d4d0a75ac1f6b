# io/search_logging.py
import json
import logging
import sys

from wp_nav.io.recorder import Recorder
from wp_nav.io.search_events import EdgeSkipped, SearchCompleted, WaypointReached
from wp_nav.runtime.hooks import NoopHooks


def _default_json_logger(name="wp_nav", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=repr)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    One place to shape and emit structured logs for searches, graph
    construction and path consumption.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._expanded = 0
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _record(self, cls, name: str, **fields):
        if self.recorder:
            self._seq += 1
            self.recorder.emit(cls(run_id=self.run_id, seq=self._seq, name=name, **fields))

    # --------------- Search lifecycle --------------------

    def search_start(self, *, algorithm, start, goal):
        self._expanded = 0
        if self.debug:
            self._emit("DEBUG", "search_start", algorithm=algorithm, start=start, goal=goal)

    def search_end(self, *, algorithm, start, goal, found, path_len, expanded, wall_ms):
        self._emit(
            "INFO",
            "search_end",
            algorithm=algorithm,
            start=start,
            goal=goal,
            found=found,
            path_len=path_len,
            expanded=expanded,
            wall_ms=round(wall_ms, 3),
        )
        self._record(
            SearchCompleted,
            "search_completed",
            algorithm=algorithm,
            start=repr(start),
            goal=repr(goal),
            found=found,
            path_len=path_len,
            expanded=expanded,
            wall_ms=wall_ms,
        )

    def node_expanded(self, *, algorithm, key, depth):
        self._expanded += 1
        if self.debug and (self._expanded % self.sample_every) == 0:
            self._emit("DEBUG", "node_expanded", algorithm=algorithm, key=key, depth=depth)

    # --------------- Construction & consumption ----------

    def edge_skipped(self, *, from_key, to_key):
        self._emit("WARNING", "edge_skipped", from_key=from_key, to_key=to_key)
        self._record(EdgeSkipped, "edge_skipped", from_key=repr(from_key), to_key=repr(to_key))

    def waypoint_reached(self, *, index, key, wrapped):
        self._emit("INFO", "waypoint_reached", index=index, key=key, wrapped=wrapped)
        self._record(
            WaypointReached, "waypoint_reached", index=index, key=repr(key), wrapped=wrapped
        )
