"""File-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path


def setup_file_logging(log_path: Path) -> None:
    """Configure file-based debug logging for all ``tsl`` loggers."""
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root = logging.getLogger('tsl')
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)
    logging.getLogger('tsl.host').info('Debug logging started → %s', log_path)
