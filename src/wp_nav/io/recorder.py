# wp_nav/io/recorder.py
import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol

logger = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, ev) -> None: ...


class JsonlSink:
    def __init__(self, fp=sys.stdout, *, flush: bool = False):
        self.fp, self.flush = fp, flush

    def write(self, ev) -> None:
        self.fp.write(json.dumps(asdict(ev), default=repr) + "\n")
        if self.flush:
            self.fp.flush()


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)

    def named(self, name: str) -> list:
        return [e for e in self.events if e.name == name]


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev):
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:  # a broken sink must not fail a search
                logger.warning("sink %s dropped %s", type(s).__name__, ev.name, exc_info=True)
