# src/visualizer/__init__.py
"""
Driver layer for the pathfinding core.

Provides:
- VisualizerConfig / load_config: YAML-backed settings
- NavigationController / PlacementMode: grid edits, navigation, agent stepping
- configure_logging: stdout logging setup for entrypoints
"""

from __future__ import annotations

from .config import VisualizerConfig, load_config
from .controller import NavigationController, PlacementMode
from .logging_config import configure_logging

__all__ = [
    "VisualizerConfig",
    "load_config",
    "NavigationController",
    "PlacementMode",
    "configure_logging",
]
