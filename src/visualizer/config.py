# src/visualizer/config.py
"""
Visualizer settings: grid size, diagonal toggle, agent speed.

Loaded from config/visualizer.yaml when present; every key is optional and
falls back to the defaults below.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_ROOT / "visualizer.yaml"


@dataclass
class VisualizerConfig:
    """Plain settings consumed by NavigationController and the terminal view."""

    grid_width: int = 30
    grid_height: int = 30
    cell_size: int = 20
    allow_diagonal: bool = False
    move_interval: float = 0.1  # seconds per cell
    event_log_path: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("grid_width", "grid_height", "cell_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if isinstance(self.move_interval, bool) or not isinstance(self.move_interval, (int, float)):
            raise ValueError(f"move_interval must be a number, got {self.move_interval!r}")
        if self.move_interval <= 0:
            raise ValueError(f"move_interval must be positive, got {self.move_interval!r}")
        if not isinstance(self.allow_diagonal, bool):
            raise ValueError(f"allow_diagonal must be a boolean, got {self.allow_diagonal!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VisualizerConfig":
        """Convenience constructor from a plain dict (e.g. YAML)."""
        known = {"grid_width", "grid_height", "cell_size", "allow_diagonal",
                 "move_interval", "event_log_path"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown visualizer config keys: {', '.join(unknown)}")

        return cls(
            grid_width=data.get("grid_width", 30),
            grid_height=data.get("grid_height", 30),
            cell_size=data.get("cell_size", 20),
            allow_diagonal=data.get("allow_diagonal", False),
            move_interval=data.get("move_interval", 0.1),
            event_log_path=data.get("event_log_path"),
        )


def load_config(path: Optional[Path] = None) -> VisualizerConfig:
    """
    Load VisualizerConfig from YAML.

    - path given and missing  -> FileNotFoundError
    - path omitted and config/visualizer.yaml missing -> defaults
    - top-level YAML not a mapping -> ValueError
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            logger.info("No %s found; using default visualizer settings", path)
            return VisualizerConfig()
    else:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Missing config file: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")

    # allow an optional top-level "visualizer:" section
    section = data.get("visualizer", data)
    if not isinstance(section, dict):
        raise ValueError(f"'visualizer' section in {path} must be a mapping")

    config = VisualizerConfig.from_dict(section)
    logger.debug("Loaded visualizer config from %s: %s", path, config)
    return config
