# Kalah board engine (flat 14-slot board)
# Board shape: numpy uint8 array of 14 counts
#
#          13
#        00  12
#        01  11
#        02  10
#        03  09
#        04  08
#        05  07
#          06
#
#   0..5  = side A pits, 6  = side A store
#   7..12 = side B pits, 13 = side B store
#   pit i faces pit 12 - i

from __future__ import annotations
from typing import List, Sequence

import numpy as np

from alphacala import config

NUM_PITS   = 6
BOARD_SIZE = 14
A_STORE    = 6
B_STORE    = 13

# Candidate order per side, nearest to the store first
A_PITS = (5, 4, 3, 2, 1, 0)
B_PITS = (12, 11, 10, 9, 8, 7)

# every seed may end up in one store, so the total must fit a uint8 cell
MAX_TOTAL_SEEDS = 255
MAX_START_SEEDS = 255 // (2 * NUM_PITS)

Board = np.ndarray

# ---------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------

def new_board(seeds: int | None = None) -> Board:
    """Starting position: `seeds` in every playable pit, both stores empty."""
    if seeds is None:
        seeds = config.START_SEEDS
    if not 1 <= seeds <= MAX_START_SEEDS:
        raise ValueError(f"seeds per pit must be in 1..{MAX_START_SEEDS}, got {seeds}")
    board = np.full(BOARD_SIZE, seeds, dtype=np.uint8)
    board[A_STORE] = 0
    board[B_STORE] = 0
    return board

def board_from_list(values: Sequence[int]) -> Board:
    if len(values) != BOARD_SIZE:
        raise ValueError(f"board needs {BOARD_SIZE} cells, got {len(values)}")
    if any(v < 0 for v in values):
        raise ValueError("board cells must be non-negative")
    if sum(values) > MAX_TOTAL_SEEDS:
        raise ValueError(f"board holds {sum(values)} seeds, at most {MAX_TOTAL_SEEDS} fit a cell")
    return np.array(values, dtype=np.uint8)

# ---------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------

def is_a_pit(index: int) -> bool:
    return 0 <= index <= 5

def is_b_pit(index: int) -> bool:
    return 7 <= index <= 12

def facing_pit(index: int) -> int:
    return 12 - index

def side_pits(a_turn: bool) -> tuple:
    return A_PITS if a_turn else B_PITS

def next_pit_index(pit_index: int, a_turn: bool) -> int:
    """Next slot to sow into, skipping the opponent's store."""
    if pit_index == 12 and a_turn:
        return 0
    if pit_index == 5 and not a_turn:
        return 7
    return (pit_index + 1) % BOARD_SIZE

# ---------------------------------------------------------------------
# Move application
# ---------------------------------------------------------------------

def play_move(board: Board, pit_index: int) -> bool:
    """
    Sow the seeds of `pit_index` in place and return True when the mover
    plays again (last seed in a store).

    The pit must be a non-empty pit of the side to move; this is not checked.
    """
    a_move = pit_index <= 5

    num_seeds = int(board[pit_index])
    board[pit_index] = 0

    while num_seeds > 1:
        pit_index = next_pit_index(pit_index, a_move)
        board[pit_index] += 1
        num_seeds -= 1

    pit_index = next_pit_index(pit_index, a_move)

    if pit_index == A_STORE or pit_index == B_STORE:
        board[pit_index] += 1
        return True

    # capture: last seed lands in an own empty pit facing a non-empty one
    if board[pit_index] == 0:
        facing = facing_pit(pit_index)
        if board[facing] > 0 and is_a_pit(pit_index) == a_move:
            store = A_STORE if a_move else B_STORE
            board[store] += 1 + int(board[facing])
            board[facing] = 0
            return False

    board[pit_index] += 1
    return False

# ---------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------

def legal_moves(board: Board, a_turn: bool) -> List[int]:
    return [i for i in side_pits(a_turn) if board[i] > 0]

def is_legal_move(board: Board, pit_index: int, a_turn: bool) -> bool:
    if pit_index not in side_pits(a_turn):
        return False
    return bool(board[pit_index] > 0)

def store_difference(board: Board) -> int:
    return int(board[A_STORE]) - int(board[B_STORE])

def pit_total(board: Board, a_side: bool) -> int:
    return int(board[0:6].sum()) if a_side else int(board[7:13].sum())

def total_seeds(board: Board) -> int:
    return int(board.sum(dtype=np.int64))

def sweep_remaining(board: Board) -> Board:
    """Copy of `board` with every pit emptied into its owner's store."""
    swept = board.copy()
    swept[A_STORE] += pit_total(board, True)
    swept[B_STORE] += pit_total(board, False)
    swept[0:6] = 0
    swept[7:13] = 0
    return swept
