# src/visualizer/logging_config.py
"""
Logging setup for the pathfinding visualizer.

Call configure_logging() once from an entrypoint (tools/nav_demo.py does):

    from visualizer.logging_config import configure_logging
    configure_logging("DEBUG")

DEBUG shows one line per search from pathfinding.pathfinder; INFO shows
controller activity (paths found, modes, arrivals).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Accept logging.DEBUG or names like "debug" / "INFO"."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
) -> None:
    """
    Attach a stdout handler (and optionally a file handler) to the root
    logger, unless some handler is already configured.
    """
    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    root.setLevel(resolve_level(level))
