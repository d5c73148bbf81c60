# path: src/monitoring/events.py
"""
Event schemas for navigation monitoring.

This module defines:
- EventType enum
- MonitoringEvent (structured runtime events)

All events are JSON-serializable via `.to_dict()` and are intended
for use with monitoring.bus.EventBus and monitoring.logger.JsonFileLogger.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum, auto
from typing import Any, Dict, Optional


# ============================================================
# Event Types
# ============================================================

class EventType(Enum):
    """Typed monitoring events emitted by the navigation driver."""

    # Grid edits (obstacle placed/removed, start/end moved, clear)
    GRID_EDITED = auto()

    # Search results
    PATH_COMPUTED = auto()
    PATH_NOT_FOUND = auto()

    # Driver settings
    MODE_CHANGED = auto()
    DIAGONAL_TOGGLED = auto()

    # Agent reached the last cell of its route
    AGENT_ARRIVED = auto()

    # Generic log messages
    LOG = auto()


# ============================================================
# Monitoring Event Structure
# ============================================================

@dataclass
class MonitoringEvent:
    """
    Runtime event emitted by the controller or tools.

    All fields must be JSON-safe.
    """

    ts: float                   # UNIX timestamp (seconds)
    module: str                 # Source module string ("visualizer.controller", etc.)
    event_type: EventType       # Enum describing the event class
    message: str                # Short human-readable description
    payload: Dict[str, Any]     # Structured data (path, positions, settings)
    correlation_id: Optional[str] = None  # Groups events per navigation request

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dict for loggers."""
        data = asdict(self)
        data["event_type"] = self.event_type.name  # store name, not enum
        return data
