"""Logging setup for the dsv logger hierarchy."""

from __future__ import annotations

import logging
from pathlib import Path

_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def setup_logging(level: str = 'INFO', log_file: Path | None = None) -> None:
    """Configure stderr logging, plus a file handler when *log_file* is given."""
    root = logging.getLogger('dsv')
    root.setLevel(level.upper())
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    stream = logging.StreamHandler()
    stream.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(stream)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(file_handler)
        logging.getLogger('dsv.llm').info('File logging started → %s', log_file)
