import pytest

from config import GameLevel, normalize_command, settings_from_env


@pytest.mark.parametrize(
    "raw, command",
    [
        ("left", "left"), ("E", "left"), ("esquerda", "left"),
        ("right", "right"), (" d ", "right"), ("R", "right"),
        ("exit", "exit"), ("S", "exit"), ("sair", "exit"), ("quit", "exit"),
        ("", None), ("up", None), (None, None),
    ],
)
def test_normalize_command(raw, command):
    assert normalize_command(raw) == command


def test_level_capabilities():
    assert not GameLevel.NOVICE.collects_clues
    assert GameLevel.ADVENTURER.collects_clues
    assert not GameLevel.ADVENTURER.allows_accusation
    assert GameLevel.MASTER.allows_accusation


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("DETECTIVE_QUEST_LEVEL", raising=False)
    monkeypatch.delenv("DETECTIVE_QUEST_LOG_LEVEL", raising=False)
    settings = settings_from_env()
    assert settings.level is GameLevel.MASTER
    assert settings.log_level == "WARNING"
