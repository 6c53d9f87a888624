# tests/conftest.py
import sys, pathlib, random
import pytest

# Add ./src to sys.path so `import alphacala...` works in tests
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC  = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

@pytest.fixture(scope="session")
def app():
    from alphacala.api.app import create_app
    app = create_app()
    app.config.update(TESTING=True)
    return app

@pytest.fixture(scope="session")
def client(app):
    return app.test_client()

@pytest.fixture
def reachable_boards():
    """Boards reached by random play from the start, with the side to move."""
    from alphacala.engine.core import legal_moves, new_board, play_move

    rng = random.Random(1234)
    boards = []
    for _ in range(20):
        board, a_turn = new_board(), True
        for _ in range(rng.randint(0, 30)):
            moves = legal_moves(board, a_turn)
            if not moves:
                break
            if not play_move(board, rng.choice(moves)):
                a_turn = not a_turn
        boards.append((board.copy(), a_turn))
    return boards
