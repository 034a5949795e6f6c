import pytest

from case_data import MANSION_LAYOUT
from clue_store import ClueStore
from console import BufferedConsole
from exploration import ExplorationEngine
from mansion import build_mansion, create_room, link
from models import ExplorationStatus, FinishReason

from conftest import BIBLIOTECA_CLUE, HALL_CLUE, JARDIM_CLUE


@pytest.fixture
def store():
    return ClueStore()


def _engine(console, store, root=None):
    return ExplorationEngine(root or build_mansion(MANSION_LAYOUT), console, clue_store=store)


def test_left_then_right_reaches_leaf_and_stops(console, store):
    console.feed("left", "right", "left")
    engine = _engine(console, store)
    reason = engine.run()

    assert reason is FinishReason.LEAF
    assert engine.current.name == "Jardim"
    assert engine.visited == ["Hall de Entrada", "Biblioteca", "Jardim"]
    assert store.in_order() == sorted([HALL_CLUE, BIBLIOTECA_CLUE, JARDIM_CLUE])
    assert store.in_order() == [JARDIM_CLUE, HALL_CLUE, BIBLIOTECA_CLUE]
    # no prompt once the leaf is reached
    assert len(console.prompts) == 2
    assert "Jardim has no further passages. Exploration complete." in console.screen()


def test_missing_left_edge_keeps_room(console, store):
    engine = _engine(console, store)
    engine.start()
    engine.submit("right")
    assert engine.current.name == "Cozinha"

    status = engine.submit("left")
    assert status is ExplorationStatus.AT_ROOM
    assert engine.current.name == "Cozinha"
    assert "There is no room to the left!" in console.messages
    assert engine.available_directions() == ["right", "exit"]


def test_missing_right_edge_keeps_room(console, store):
    hall = link(create_room("Hall", "pista"), left=create_room("Sala"))
    engine = _engine(console, store, root=hall)
    engine.start()
    engine.submit("r")
    assert engine.current is hall
    assert "There is no room to the right!" in console.messages


@pytest.mark.parametrize("path", [[], ["left"], ["right"]])
def test_exit_finishes_immediately(console, store, path):
    engine = _engine(console, store)
    engine.start()
    for step in path:
        engine.submit(step)
    visited_before = engine.visited

    status = engine.submit("exit")
    assert status is ExplorationStatus.FINISHED
    assert engine.finish_reason is FinishReason.EXIT
    assert engine.visited == visited_before
    assert len(store) == len(visited_before)


def test_unknown_command_reprompts(console, store):
    engine = _engine(console, store)
    engine.start()
    engine.submit("upstairs")
    engine.submit("")
    assert engine.current.name == "Hall de Entrada"
    assert console.messages.count("Invalid option! Try again.") == 2
    assert engine.status is ExplorationStatus.AT_ROOM


@pytest.mark.parametrize("command", ["LEFT", " e ", "Esquerda", "l"])
def test_command_aliases(console, store, command):
    engine = _engine(console, store)
    engine.start()
    engine.submit(command)
    assert engine.current.name == "Biblioteca"


def test_commands_after_finish_are_ignored(console, store):
    engine = _engine(console, store)
    engine.start()
    engine.submit("exit")
    engine.submit("left")
    assert engine.visited == ["Hall de Entrada"]
    assert len(store) == 1


def test_leaf_root_finishes_on_start(console, store):
    engine = _engine(console, store, root=create_room("Cela", "Algema"))
    assert engine.start() is ExplorationStatus.FINISHED
    assert engine.finish_reason is FinishReason.LEAF
    assert store.in_order() == ["Algema"]
    assert engine.available_directions() == []


def test_room_without_clue_is_reported(console, store):
    root = link(create_room("Hall"), left=create_room("Sala"))
    engine = _engine(console, store, root=root)
    engine.start()
    assert "No clue found here." in console.messages
    assert len(store) == 0


def test_without_store_clues_are_only_shown(console):
    engine = ExplorationEngine(build_mansion(MANSION_LAYOUT), console)
    engine.start()
    assert f'You notice something: "{HALL_CLUE}"' in console.messages
    assert engine.state.clues_found == [HALL_CLUE]


def test_run_propagates_end_of_input():
    engine = ExplorationEngine(build_mansion(MANSION_LAYOUT), BufferedConsole(["left"]))
    with pytest.raises(EOFError):
        engine.run()
    assert engine.current.name == "Biblioteca"


def test_each_room_starts_a_new_screen(console, store):
    console.feed("left", "left")
    _engine(console, store).run()
    assert console.clears == 3
    assert console.messages[1] == "You are in: Sala de Estudo"
