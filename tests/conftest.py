# tests/conftest.py

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for test imports like `import pathfinding`.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture
def bus():
    from monitoring.bus import EventBus

    return EventBus()


@pytest.fixture
def recorded_events(bus):
    """List that collects every MonitoringEvent published on `bus`."""
    events = []
    bus.subscribe(events.append)
    return events
