# tests/test_search.py
import numpy as np
import pytest

from alphacala.agents import alpha_beta, minimax
from alphacala.agents.alpha_beta import SearchStats, choose_move, evaluate
from alphacala.engine.core import board_from_list, new_board

def test_depth_zero_is_store_difference():
    b = board_from_list([1, 1, 1, 1, 1, 1, 7, 1, 1, 1, 1, 1, 1, 9])
    assert evaluate(b, True, 0) == (-2, None)

def test_start_position_depth_one():
    # every store-reaching move scores 1; pit 5 comes first
    assert evaluate(new_board(4), True, 1) == (1, 5)

def test_start_position_depth_two_prefers_extra_turn():
    # pit 2 lands in the store and the bonus move banks another seed
    assert evaluate(new_board(4), True, 2) == (2, 2)

def test_no_legal_move_side_a_sweeps_opponent():
    b = board_from_list([0, 0, 0, 0, 0, 0, 5, 1, 2, 0, 3, 0, 1, 4])
    value, move = evaluate(b, True, 3)
    assert move is None
    assert value == 5 - 4 - (1 + 2 + 3 + 1)

def test_no_legal_move_side_b_sweeps_opponent():
    b = board_from_list([2, 0, 1, 0, 0, 3, 1, 0, 0, 0, 0, 0, 0, 8])
    assert evaluate(b, False, 1) == (1 - 8 + 6, None)

def test_tie_break_near_store_first():
    b = board_from_list([0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 0, 2, 1, 0])
    assert evaluate(b, True, 1) == (1, 5)
    assert evaluate(b, False, 1) == (-1, 12)
    assert minimax.evaluate(b, True, 1) == (1, 5)
    assert minimax.evaluate(b, False, 1) == (-1, 12)

def test_extra_turn_keeps_side_to_move():
    # pit 5 reaches the store, then pit 3 captures pit 8 on the bonus move
    b = board_from_list([0, 0, 0, 1, 0, 1, 0, 0, 6, 0, 0, 0, 0, 0])
    assert evaluate(b, True, 2) == (8, 5)

def test_extra_turn_keeps_side_b_to_move():
    # pit 12 reaches the store, then pit 10 captures pit 1 on the bonus move
    b = board_from_list([0, 6, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0])
    assert evaluate(b, False, 2) == (-8, 12)
    assert minimax.evaluate(b, False, 2) == (-8, 12)

def test_search_does_not_mutate_board(reachable_boards):
    for board, a_turn in reachable_boards:
        before = board.copy()
        evaluate(board, a_turn, 4)
        assert np.array_equal(board, before)

@pytest.mark.parametrize("depth", [0, 1, 2, 3, 4])
def test_alpha_beta_matches_minimax(reachable_boards, depth):
    for board, a_turn in reachable_boards:
        for side in (a_turn, not a_turn):
            ab_stats, mm_stats = SearchStats(), SearchStats()
            ab_value, _ = alpha_beta.evaluate(board, side, depth, stats=ab_stats)
            mm_value, _ = minimax.evaluate(board, side, depth, stats=mm_stats)
            assert ab_value == mm_value
            assert ab_stats.visits <= mm_stats.visits

def test_alpha_beta_prunes_at_depth():
    ab_stats, mm_stats = SearchStats(), SearchStats()
    alpha_beta.evaluate(new_board(4), True, 5, stats=ab_stats)
    minimax.evaluate(new_board(4), True, 5, stats=mm_stats)
    assert ab_stats.visits < mm_stats.visits

def test_choose_move_returns_python_int():
    value, move = choose_move(new_board(4), True, depth=3)
    assert isinstance(value, int)
    assert move in range(6)

def test_choose_move_rejects_negative_depth():
    with pytest.raises(ValueError):
        choose_move(new_board(4), True, depth=-1)
