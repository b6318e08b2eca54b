import numpy as np
from hypothesis import given, settings
from hypothesis import strategies as st

from connectfour.game.engine import GameEngine
from connectfour.utils import GameStatus, MoveOutcome, Player


@st.composite
def games(draw):
    height = draw(st.integers(min_value=4, max_value=7))
    width = draw(st.integers(min_value=4, max_value=8))
    # Includes out-of-range columns on both sides
    columns = draw(st.lists(st.integers(min_value=-2, max_value=width + 1), max_size=80))
    return height, width, columns


def assert_gravity(grid: np.ndarray):
    height, width = grid.shape
    for col in range(width):
        seen_empty = False
        for row in range(height - 1, -1, -1):
            if grid[row, col] == Player.EMPTY.value:
                seen_empty = True
            else:
                assert not seen_empty, f"floating piece at ({row}, {col})"


@settings(max_examples=200, deadline=None)
@given(games())
def test_reachable_states_respect_gravity(game):
    height, width, columns = game
    engine = GameEngine(height, width)
    for column in columns:
        engine.drop_piece(column)
        assert_gravity(engine.get_state())


@settings(max_examples=200, deadline=None)
@given(games())
def test_turns_alternate_until_game_ends(game):
    height, width, columns = game
    engine = GameEngine(height, width)
    for column in columns:
        before = engine.current_player
        result = engine.drop_piece(column)
        if result.outcome == MoveOutcome.IN_PROGRESS:
            assert engine.current_player == before.other()
        else:
            assert engine.current_player == before


@settings(max_examples=200, deadline=None)
@given(games())
def test_rejections_never_mutate(game):
    height, width, columns = game
    engine = GameEngine(height, width)
    for column in columns:
        before = engine.get_state()
        status = engine.status
        result = engine.drop_piece(column)
        after = engine.get_state()
        if result.accepted:
            assert np.count_nonzero(after != before) == 1
            assert after[result.row, column] == result.player.value
        else:
            np.testing.assert_array_equal(after, before)
            assert engine.status == status


@settings(max_examples=200, deadline=None)
@given(games())
def test_status_matches_board(game):
    height, width, columns = game
    engine = GameEngine(height, width)
    for column in columns:
        result = engine.drop_piece(column)
        if result.outcome == MoveOutcome.WON:
            assert engine.check_win(result.player)
            assert all(engine.cell_at(r, c) == result.player for r, c in result.winning_line)
        elif result.outcome == MoveOutcome.DRAW:
            assert np.all(engine.get_state() != Player.EMPTY.value)
            assert not engine.check_win(Player.ONE)
            assert not engine.check_win(Player.TWO)
        elif result.accepted:
            assert engine.status == GameStatus.IN_PROGRESS
            assert not engine.check_win(result.player)
