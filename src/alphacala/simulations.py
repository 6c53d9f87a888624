# Self-play simulations: alpha-beta engine against a random opponent
from __future__ import annotations
import argparse, logging, random, time
from typing import Callable, Dict, List, Optional

import pandas as pd
from tqdm import tqdm

from alphacala import config
from alphacala.agents.alpha_beta import choose_move
from alphacala.engine.core import (
    A_STORE, B_STORE, Board, legal_moves, new_board, play_move, sweep_remaining,
)

logger = logging.getLogger(__name__)

Strategy = Callable[[Board, bool], Optional[int]]

def random_strategy(board: Board, a_turn: bool, rng: random.Random) -> Optional[int]:
    moves = legal_moves(board, a_turn)
    return rng.choice(moves) if moves else None

def search_strategy(depth: int) -> Strategy:
    def _strategy(board: Board, a_turn: bool) -> Optional[int]:
        return choose_move(board, a_turn, depth)[1]
    return _strategy

def simulate_game(a_strategy: Strategy, b_strategy: Strategy, seeds: Optional[int] = None) -> Dict:
    """Play one game to the end; side A always opens."""
    start_time = time.time()
    board = new_board(seeds)
    a_turn = True
    moves_count = 0

    while legal_moves(board, a_turn):
        strategy = a_strategy if a_turn else b_strategy
        move = strategy(board, a_turn)
        play_again = play_move(board, move)
        moves_count += 1
        if not play_again:
            a_turn = not a_turn

    # remaining seeds go to their owner's store
    final = sweep_remaining(board)
    a_score, b_score = int(final[A_STORE]), int(final[B_STORE])

    return {
        "a_score": a_score,
        "b_score": b_score,
        "winner": "Draw" if a_score == b_score else ("A" if a_score > b_score else "B"),
        "moves": moves_count,
        "time": time.time() - start_time,
    }

def run_simulations(num_games: int = 100, depth: int = 6, seeds: Optional[int] = None,
                    seed: Optional[int] = None) -> pd.DataFrame:
    """
    Alternate the engine between sides A and B against a random opponent.
    `seed` makes the random opponent reproducible.
    """
    rng = random.Random(seed)
    engine = search_strategy(depth)

    def rand(board: Board, a_turn: bool) -> Optional[int]:
        return random_strategy(board, a_turn, rng)

    engine_name = f"AlphaBeta(d={depth})"
    pairings = [(engine_name, engine, "Random", rand),
                ("Random", rand, engine_name, engine)]

    results: List[Dict] = []
    for i in tqdm(range(num_games), desc=f"{engine_name} vs Random"):
        a_name, a_fn, b_name, b_fn = pairings[i % 2]
        result = simulate_game(a_fn, b_fn, seeds)
        results.append({
            "A_Strategy": a_name,
            "B_Strategy": b_name,
            "A_Score": result["a_score"],
            "B_Score": result["b_score"],
            "Winner": result["winner"],
            "Moves": result["moves"],
            "Time_Seconds": round(result["time"], 3),
        })
    logger.debug("finished %d games at depth %d", num_games, depth)
    return pd.DataFrame(results)

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Win rate per pairing (columns A / B / Draw)."""
    return (df.groupby(["A_Strategy", "B_Strategy"])["Winner"]
              .value_counts(normalize=True)
              .unstack()
              .fillna(0))

def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Run AlphaCala self-play simulations.")
    parser.add_argument("--games", type=int, default=100)
    parser.add_argument("--depth", type=int, default=6)
    parser.add_argument("--seeds", type=int, default=config.START_SEEDS)
    parser.add_argument("--seed", type=int, default=None, help="random opponent seed")
    parser.add_argument("--csv", default=None, help="write raw results to this file")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    df = run_simulations(args.games, args.depth, args.seeds, args.seed)
    if args.csv:
        df.to_csv(args.csv, index=False)

    print("\nSummary Statistics:")
    print(summarize(df))

if __name__ == "__main__":
    main()
