"""
Play the engine against every possible human strategy.

The automated player's moves are deterministic, so branching only on the
human's choices covers every game the engine can be dragged into.
"""

import pytest
from hypothesis import given, settings, strategies as st

from engine.ai_player import AIPlayer
from engine.game_engine import GameEngine
from engine.game_state import Outcome, Player


def all_outcomes(engine):
    if engine.outcome.is_over:
        yield engine.outcome
        return

    assert engine.is_humans_turn()
    for cell in engine.state.empty_cells():
        branch = GameEngine(ai=engine.ai, state=engine.state.copy())
        assert branch.submit_human_move(cell)
        yield from all_outcomes(branch)


@pytest.mark.parametrize("first_mover", [Player.HUMAN, Player.AUTOMATED])
def test_never_loses_to_any_human_strategy(first_mover):
    engine = GameEngine(ai=AIPlayer())
    engine.choose_first_mover(first_mover)

    outcomes = list(all_outcomes(engine))

    assert outcomes
    assert Outcome.HUMAN_WIN not in outcomes
    assert Outcome.AUTOMATED_WIN in outcomes


@settings(max_examples=20, deadline=None)
@given(st.sampled_from([Player.HUMAN, Player.AUTOMATED]), st.data())
def test_random_games_keep_invariants(first_mover, data):
    engine = GameEngine()
    engine.choose_first_mover(first_mover)

    while not engine.outcome.is_over:
        state = engine.state
        assert not set(state.human_moves) & set(state.automated_moves)
        diff = len(state.human_moves) - len(state.automated_moves)
        assert diff == (0 if first_mover == Player.HUMAN else -1)

        cell = data.draw(st.sampled_from(state.empty_cells()))
        assert engine.submit_human_move(cell)

    assert engine.outcome != Outcome.HUMAN_WIN
    assert engine.score.human_wins == 0
    assert engine.score.automated_wins == (1 if engine.outcome == Outcome.AUTOMATED_WIN else 0)
