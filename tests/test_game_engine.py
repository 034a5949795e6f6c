import pytest

from config import GameLevel
from models import FinishReason, Verdict

from conftest import BIBLIOTECA_CLUE, HALL_CLUE, JARDIM_CLUE


def test_master_session_confirms_gardener(make_game):
    game = make_game(lines=["left", "right"])
    assert game.explore() is FinishReason.LEAF
    assert game.collected_clues() == [JARDIM_CLUE, HALL_CLUE, BIBLIOTECA_CLUE]

    result = game.accuse("Jardineiro")
    assert result.count == 2
    assert result.verdict is Verdict.CONFIRMED
    assert game.state.accusation_made
    assert game.state.last_accusation is result


def test_accusation_after_early_exit_is_weak(make_game):
    game = make_game(lines=["exit"])
    game.explore()
    assert game.accuse("Jardineiro").verdict is Verdict.WEAK
    assert game.accuse("Governanta").verdict is Verdict.UNFOUNDED


def test_blank_accusation_leaves_state_untouched(make_game):
    game = make_game(lines=["exit"])
    game.explore()
    assert game.accuse("   ") is None
    assert not game.state.accusation_made


def test_suspects_listed_in_master(game):
    assert game.suspects() == ["Governanta", "Jardineiro", "Mordomo"]


def test_adventurer_collects_but_cannot_accuse(make_game):
    game = make_game(level=GameLevel.ADVENTURER, lines=["right", "right"])
    game.explore()
    assert game.collected_clues() == [
        "Copo quebrado com marca de batom",
        HALL_CLUE,
        "Retrato rasgado de uma mulher desconhecida",
    ]
    assert game.suspect_index is None
    assert game.suspects() == []
    with pytest.raises(RuntimeError):
        game.accuse("Mordomo")


def test_novice_collects_nothing(make_game):
    game = make_game(level=GameLevel.NOVICE, lines=["left", "left"])
    game.explore()
    assert game.clue_store is None
    assert game.collected_clues() == []
    assert game.state.rooms_visited == ["Hall de Entrada", "Biblioteca", "Sala de Estudo"]


def test_step_mode(game):
    game.begin_exploration()
    game.submit("left")
    assert not game.exploration_finished
    game.submit("exit")
    assert game.exploration_finished
    assert game.state.finish_reason is FinishReason.EXIT


def test_reset_rebuilds_everything(make_game):
    game = make_game(lines=["left", "right"])
    game.explore()
    game.accuse("Jardineiro")

    game.reset()
    assert game.collected_clues() == []
    assert game.state.rooms_visited == []
    assert not game.state.accusation_made
    assert not game.exploration_finished


def test_custom_associations_override_layout(console):
    from game_engine import DetectiveQuestGame

    console.feed("exit")
    game = DetectiveQuestGame(associations=[(HALL_CLUE, "Cozinheira")], console=console)
    game.explore()
    assert game.suspects() == ["Cozinheira"]
    assert game.accuse("Cozinheira").verdict is Verdict.WEAK


def test_oversized_clue_still_matches_its_suspect(console):
    from game_engine import DetectiveQuestGame
    from models import MansionLayout

    long_clue = "Pegadas " + "x" * 130
    layout = MansionLayout.model_validate({
        "root": "Porão",
        "rooms": [{"name": "Porão", "clue": long_clue}],
        "associations": [{"clue": long_clue, "suspect": "Jardineiro"}],
    })
    game = DetectiveQuestGame(layout=layout, console=console)
    assert game.explore() is FinishReason.LEAF
    assert game.collected_clues() == [long_clue[:127]]

    result = game.accuse("Jardineiro")
    assert result.count == 1
    assert result.verdict is Verdict.WEAK
