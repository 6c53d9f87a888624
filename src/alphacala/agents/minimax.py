# Simple Minimax (no alpha-beta), same rules and move order as alpha_beta
from __future__ import annotations
import math
from typing import Optional

from alphacala.engine.core import Board, play_move, side_pits, store_difference
from alphacala.agents.alpha_beta import SearchResult, SearchStats, next_side, no_move_value

def evaluate(
    board: Board,
    a_to_move: bool,
    depth: int,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """
    Exhaustive minimax value of `board`. Visits every node, so it is only
    practical for shallow depths; used as a reference for the pruned search.
    """
    if stats is not None:
        stats.visits += 1

    if depth == 0:
        return store_difference(board), None

    best_eval = -math.inf if a_to_move else math.inf
    best_move = None

    for pit in side_pits(a_to_move):
        if board[pit] == 0:
            continue

        child = board.copy()
        play_again = play_move(child, pit)
        score, _ = evaluate(child, next_side(a_to_move, play_again), depth - 1, stats)

        # strict comparison: first pit in near-store order keeps ties
        if (a_to_move and score > best_eval) or (not a_to_move and score < best_eval):
            best_eval, best_move = score, pit

    if best_move is None:
        return no_move_value(board, a_to_move), None

    return int(best_eval), best_move
