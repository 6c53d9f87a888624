# Alpha-beta minimax over the flat board
from __future__ import annotations
import logging, math
from typing import Optional, Tuple

from alphacala import config
from alphacala.engine.core import (
    Board, pit_total, play_move, side_pits, store_difference,
)

logger = logging.getLogger(__name__)

SearchResult = Tuple[int, Optional[int]]

class SearchStats:
    def __init__(self):
        self.visits = 0  # node expansions

# ------------------------------ shared pieces --------------------------------

def no_move_value(board: Board, a_to_move: bool) -> int:
    """
    Score when the side to move is out of seeds: the game ends and the
    opponent banks whatever is still on their side.
    """
    value = store_difference(board)
    if a_to_move:
        return value - pit_total(board, False)
    return value + pit_total(board, True)

def next_side(a_to_move: bool, play_again: bool) -> bool:
    return a_to_move if play_again else not a_to_move

# ----------------------------- alpha-beta core -------------------------------

def evaluate(
    board: Board,
    a_to_move: bool,
    depth: int,
    alpha: float = -math.inf,
    beta: float = math.inf,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """
    Minimax value of `board` searched `depth` plies deep, side A maximizing.

    Returns (evaluation, best_move). best_move is None at depth 0 and when
    the side to move has no legal move. Ties go to the pit nearest the
    mover's store. `board` is left untouched.
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
        score, _ = evaluate(child, next_side(a_to_move, play_again),
                            depth - 1, alpha, beta, stats)

        if a_to_move:
            if score > best_eval:
                best_eval, best_move = score, pit
            alpha = max(alpha, score)
        else:
            if score < best_eval:
                best_eval, best_move = score, pit
            beta = min(beta, score)

        if beta <= alpha:
            break

    if best_move is None:
        return no_move_value(board, a_to_move), None

    return int(best_eval), best_move

# ------------------------------- public API ----------------------------------

def choose_move(board: Board, a_to_move: bool, depth: int | None = None) -> SearchResult:
    """Search from the root at the configured fixed depth."""
    if depth is None:
        depth = config.SEARCH_DEPTH
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")

    stats = SearchStats()
    value, move = evaluate(board, a_to_move, depth, stats=stats)
    logger.debug("side=%s depth=%d move=%s eval=%d nodes=%d",
                 "A" if a_to_move else "B", depth, move, value, stats.visits)
    return value, move

__all__ = ["SearchStats", "evaluate", "choose_move",
           "no_move_value", "next_side"]
