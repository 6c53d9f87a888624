# tests/test_simulations.py
import random

from alphacala.simulations import random_strategy, run_simulations, simulate_game, summarize

def test_simulate_game_random_vs_random():
    rng = random.Random(7)
    strat = lambda board, a_turn: random_strategy(board, a_turn, rng)
    result = simulate_game(strat, strat, seeds=3)
    assert result["a_score"] + result["b_score"] == 36
    assert result["winner"] in ("A", "B", "Draw")
    assert result["moves"] > 0

def test_run_simulations_alternates_sides():
    df = run_simulations(num_games=2, depth=2, seeds=3, seed=0)
    assert len(df) == 2
    assert df.loc[0, "A_Strategy"] == "AlphaBeta(d=2)"
    assert df.loc[1, "B_Strategy"] == "AlphaBeta(d=2)"
    assert ((df["A_Score"] + df["B_Score"]) == 36).all()
    assert not summarize(df).empty
