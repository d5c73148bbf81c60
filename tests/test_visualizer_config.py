# tests/test_visualizer_config.py
"""
Tests for visualizer.config (YAML loading + validation) and
visualizer.logging_config level parsing.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from visualizer.config import DEFAULT_CONFIG_PATH, VisualizerConfig, load_config
from visualizer.logging_config import resolve_level


def write_yaml(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "visualizer.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    config = VisualizerConfig()

    assert config.grid_width == 30
    assert config.grid_height == 30
    assert config.cell_size == 20
    assert config.allow_diagonal is False
    assert config.move_interval == pytest.approx(0.1)
    assert config.event_log_path is None


def test_load_sectioned_yaml(tmp_path: Path) -> None:
    path = write_yaml(
        tmp_path,
        "visualizer:\n"
        "  grid_width: 12\n"
        "  grid_height: 8\n"
        "  allow_diagonal: true\n"
        "  move_interval: 0.25\n",
    )

    config = load_config(path)

    assert config.grid_width == 12
    assert config.grid_height == 8
    assert config.allow_diagonal is True
    assert config.move_interval == 0.25
    assert config.cell_size == 20


def test_load_flat_yaml(tmp_path: Path) -> None:
    path = write_yaml(tmp_path, "grid_width: 6\nevent_log_path: logs/events.log\n")

    config = load_config(path)

    assert config.grid_width == 6
    assert config.grid_height == 30
    assert config.event_log_path == "logs/events.log"


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    assert load_config(write_yaml(tmp_path, "")) == VisualizerConfig()


def test_repo_default_config_loads() -> None:
    assert DEFAULT_CONFIG_PATH.exists()
    config = load_config()

    assert config.grid_width == 30
    assert config.grid_height == 30


def test_missing_explicit_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "visualizer: 5\n",
        "grid_width: -3\n",
        "grid_height: 0\n",
        "grid_width: 2.5\n",
        "move_interval: 0\n",
        "allow_diagonal: maybe\n",
        "colour: red\n",
    ],
)
def test_invalid_yaml_raises_value_error(tmp_path: Path, text: str) -> None:
    with pytest.raises(ValueError):
        load_config(write_yaml(tmp_path, text))


def test_resolve_level() -> None:
    assert resolve_level(logging.WARNING) == logging.WARNING
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("INFO") == logging.INFO
    with pytest.raises(ValueError):
        resolve_level("loud")
