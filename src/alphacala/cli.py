# Terminal game: AlphaCala (side A) against a human (side B)
from __future__ import annotations
import argparse, logging
from typing import Callable, Optional, Sequence

from alphacala import config
from alphacala.agents.alpha_beta import choose_move
from alphacala.engine.core import (
    A_STORE, B_STORE, NUM_PITS, Board, is_legal_move, legal_moves, new_board,
    play_move, sweep_remaining,
)

def render_board(board: Board) -> str:
    """
    Vertical layout, side A on the left, side B on the right:

          13
        00  12
        ..  ..
        05  07
          06
    """
    def pit(index: int, indent: int = 0) -> str:
        return " " * indent + f"{int(board[index]):02d}"

    lines = [pit(B_STORE, 2)]
    for i in range(NUM_PITS):
        lines.append(pit(i) + pit(12 - i, 2))
    lines.append(pit(A_STORE, 2))
    return "\n".join(lines)

def row_to_pit(row: int) -> int:
    """Human rows 0-5 read top to bottom on side B's column."""
    return 12 - row

def _read_row(board: Board, input_fn: Callable[[str], str],
              output_fn: Callable[[str], None]) -> int:
    while True:
        raw = input_fn("Opponent move row (0-5): ")
        try:
            row = int(raw.strip())
        except ValueError:
            output_fn(f"Not a number: {raw!r}")
            continue
        if not 0 <= row < NUM_PITS:
            output_fn("Row must be between 0 and 5")
            continue
        pit = row_to_pit(row)
        if not is_legal_move(board, pit, False):
            output_fn(f"Row {row} is empty")
            continue
        return pit

def play_game(
    depth: Optional[int] = None,
    seeds: Optional[int] = None,
    engine_first: bool = True,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> Board:
    board = new_board(seeds)
    a_turn = engine_first

    while True:
        output_fn(render_board(board))

        if a_turn:
            value, move = choose_move(board, True, depth)
            if move is None:
                break
            output_fn(f"AlphaCala plays {move} (eval = {value})")
            play_again = play_move(board, move)
        else:
            if not legal_moves(board, False):
                break
            play_again = play_move(board, _read_row(board, input_fn, output_fn))

        if not play_again:
            a_turn = not a_turn

    final = sweep_remaining(board)
    a_score, b_score = int(final[A_STORE]), int(final[B_STORE])
    if a_score == b_score:
        outcome = "Draw"
    else:
        outcome = "AlphaCala wins" if a_score > b_score else "Opponent wins"
    output_fn(f"Game over: AlphaCala {a_score} - {b_score} Opponent ({outcome})")
    return final

def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play Kalah against AlphaCala.")
    parser.add_argument("--depth", type=int, default=config.SEARCH_DEPTH,
                        help="fixed search depth (default: %(default)s)")
    parser.add_argument("--seeds", type=int, default=config.START_SEEDS,
                        help="seeds per pit at the start (default: %(default)s)")
    first = parser.add_mutually_exclusive_group()
    first.add_argument("--engine-first", dest="engine_first", action="store_true", default=None)
    first.add_argument("--human-first", dest="engine_first", action="store_false", default=None)
    parser.add_argument("--verbose", action="store_true", help="log search diagnostics")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    engine_first = args.engine_first
    if engine_first is None:
        engine_first = input("Is AlphaCala playing first (y/n)? ").strip().lower().startswith("y")

    play_game(depth=args.depth, seeds=args.seeds, engine_first=engine_first)

if __name__ == "__main__":
    main()
