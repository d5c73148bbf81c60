# src/monitoring/__init__.py
"""
Monitoring for the pathfinding visualizer.

Provides:
- MonitoringEvent / EventType: structured runtime events
- EventBus: in-process pub/sub
- JsonFileLogger / log_event: JSONL event log
- TuiDashboard: rich terminal view (import from monitoring.dashboard_tui)
"""

from __future__ import annotations

from .events import EventType, MonitoringEvent
from .bus import EventBus
from .logger import JsonFileLogger, log_event

__all__ = [
    "EventType",
    "MonitoringEvent",
    "EventBus",
    "JsonFileLogger",
    "log_event",
]
