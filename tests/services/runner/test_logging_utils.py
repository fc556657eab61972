from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from ketodot.logging_utils import configure_logging


@contextmanager
def _bare_root() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers.clear()
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_configures_stream_and_file_handlers(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "ketodot.log"
    with _bare_root() as root:
        configure_logging(level=logging.DEBUG, log_paths=[str(log_path)])
        kinds = [type(handler) for handler in root.handlers]
        assert logging.FileHandler in kinds
        assert logging.StreamHandler in kinds
        logging.getLogger("ketodot.test").warning("palette low")
        for handler in root.handlers:
            handler.flush()
    assert "[WARNING] ketodot.test: palette low" in log_path.read_text(encoding="utf-8")


def test_leaves_existing_handlers_alone() -> None:
    with _bare_root() as root:
        existing = logging.NullHandler()
        root.addHandler(existing)
        configure_logging()
        assert root.handlers == [existing]
