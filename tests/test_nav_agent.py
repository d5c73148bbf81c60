# tests/test_nav_agent.py
"""
Unit tests for pathfinding.agent.Agent.

Intervals and deltas are powers of two so timer arithmetic stays exact.
"""

from __future__ import annotations

import pytest

from pathfinding import Agent, AgentState, Vec2i

A, B, C, D = Vec2i(0, 0), Vec2i(1, 0), Vec2i(2, 0), Vec2i(2, 1)


def test_new_agent_is_idle() -> None:
    agent = Agent()

    assert agent.state is AgentState.IDLE
    assert agent.get_position() is None
    assert agent.has_reached_destination()
    assert not agent.has_path()
    assert agent.move_interval == pytest.approx(0.1)


def test_update_on_idle_agent_changes_nothing() -> None:
    agent = Agent(move_interval=1.0)
    agent.update(5.0)

    assert agent.state is AgentState.IDLE
    assert agent.get_position() is None
    assert agent.timer == 0.0

    agent.set_path([A, B])
    agent.reset()
    agent.update(5.0)

    assert agent.get_position() is None
    assert agent.timer == 0.0
    assert agent.path_index == 0


def test_catch_up_consumes_several_steps_and_keeps_remainder() -> None:
    agent = Agent(move_interval=1.0)
    agent.set_path([A, B, C])

    agent.update(2.5)

    assert agent.path_index == 2
    assert agent.get_position() == C
    assert agent.timer == pytest.approx(0.5)
    assert agent.has_reached_destination()
    assert agent.state is AgentState.ARRIVED


def test_remainder_carries_over_between_updates() -> None:
    agent = Agent(move_interval=0.5)
    agent.set_path([A, B, C, D])

    agent.update(0.25)
    assert agent.get_position() == A
    assert agent.state is AgentState.FOLLOWING

    agent.update(0.25)
    assert agent.get_position() == B
    assert agent.timer == 0.0

    agent.update(0.75)
    assert agent.get_position() == C
    assert agent.timer == pytest.approx(0.25)

    agent.update(0.25)
    assert agent.get_position() == D
    assert agent.has_reached_destination()


def test_arrived_agent_ignores_updates() -> None:
    agent = Agent(move_interval=1.0)
    agent.set_path([A, B])
    agent.update(1.0)
    assert agent.state is AgentState.ARRIVED

    timer_before = agent.timer
    agent.update(10.0)

    assert agent.get_position() == B
    assert agent.timer == timer_before


def test_single_cell_path_is_immediately_arrived() -> None:
    agent = Agent()
    agent.set_path([C])

    assert agent.state is AgentState.ARRIVED
    assert agent.get_position() == C
    assert agent.has_reached_destination()


def test_set_path_restarts_from_first_cell() -> None:
    agent = Agent(move_interval=1.0)
    agent.set_path([A, B, C])
    agent.update(1.5)
    assert agent.get_position() == B

    agent.set_path([C, D])

    assert agent.path_index == 0
    assert agent.timer == 0.0
    assert agent.get_position() == C
    assert agent.path == [C, D]


def test_set_path_copies_the_route() -> None:
    route = [A, B]
    agent = Agent()
    agent.set_path(route)
    route.append(C)

    assert agent.path == [A, B]


def test_empty_path_behaves_like_reset() -> None:
    agent = Agent()
    agent.set_path([A, B])
    agent.set_path([])

    assert agent.state is AgentState.IDLE
    assert agent.get_position() is None


def test_move_interval_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Agent(move_interval=0)

    agent = Agent()
    agent.move_interval = 0.25
    assert agent.move_interval == 0.25
    with pytest.raises(ValueError):
        agent.set_move_interval(-1.0)
