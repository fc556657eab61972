"""Polling watcher that re-runs the pipeline when a source file changes."""

from __future__ import annotations

import logging
import os
import time
from typing import Callable, Sequence

from .errors import ConfigError, KetodotError
from .tuples.reader import STDIN

logger = logging.getLogger("ketodot.watch")

Stamp = tuple[int, int] | None


def _stamp(path: str) -> Stamp:
    try:
        stat = os.stat(path)
    except OSError:
        return None
    return (stat.st_mtime_ns, stat.st_size)


class SourceWatcher:
    def __init__(
        self,
        sources: Sequence[str],
        on_change: Callable[[], object],
        poll_seconds: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if STDIN in sources:
            raise ConfigError("stdin cannot be watched; pass file paths")
        if not sources:
            raise ConfigError("nothing to watch")
        self.sources = list(sources)
        self.on_change = on_change
        self.poll_seconds = poll_seconds
        self._sleep = sleep
        self._stamps: dict[str, Stamp] = {path: _stamp(path) for path in self.sources}

    def run_once(self) -> bool:
        """Poll every source once; call ``on_change`` if any stamp moved."""
        changed = []
        for path in self.sources:
            stamp = _stamp(path)
            if stamp != self._stamps[path]:
                self._stamps[path] = stamp
                changed.append(path)
        if not changed:
            return False
        logger.info("ketodot source changed: %s", ", ".join(changed))
        try:
            self.on_change()
        except KetodotError as exc:
            # The next save gets another chance.
            logger.error("ketodot run failed: %s", exc)
        return True

    def run_forever(self, max_polls: int | None = None) -> None:
        polls = 0
        while max_polls is None or polls < max_polls:
            self.run_once()
            polls += 1
            self._sleep(self.poll_seconds)
