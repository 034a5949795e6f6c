import pytest

from config import GameLevel
from console import BufferedConsole
from game_engine import DetectiveQuestGame


HALL_CLUE       = "Pegadas de lama recentes"
BIBLIOTECA_CLUE = "Página arrancada de um diário"
JARDIM_CLUE     = "Chave antiga caída entre as flores"


@pytest.fixture
def console():
    return BufferedConsole()


@pytest.fixture
def make_game(console):
    """Build a session on the built-in mansion, optionally queueing input lines."""
    def _make(level=GameLevel.MASTER, lines=()):
        console.feed(*lines)
        return DetectiveQuestGame(level=level, console=console)
    return _make


@pytest.fixture
def game(make_game):
    return make_game()
