"""
config.py
=========
Central configuration module for Detective Quest: The Mansion Clues.

Length limits, hash-table sizing, game levels and command aliases live here
so they can be adjusted without touching the data structures or the
exploration logic.

Usage:
    from config import CLUE_CONFIG, INDEX_CONFIG, GAME_CONFIG, GameLevel
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional


# ---------------------------------------------------------------------------
# Game levels
# ---------------------------------------------------------------------------

class GameLevel(str, Enum):
    """
    The three playable variants of the game.

    NOVICE:     walk the mansion; clues are shown but not kept.
    ADVENTURER: clues are collected into the Clue Store and listed in order.
    MASTER:     adventurer plus the Suspect Index and the accusation phase.
    """

    NOVICE     = "novice"
    ADVENTURER = "adventurer"
    MASTER     = "master"

    @property
    def collects_clues(self) -> bool:
        return self is not GameLevel.NOVICE

    @property
    def allows_accusation(self) -> bool:
        return self is GameLevel.MASTER


# ---------------------------------------------------------------------------
# Room / clue limits
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ClueConfig:
    """
    Practical size limits for room construction.

    Oversized input is truncated, never rejected.

    Attributes:
        max_clue_length:      Longest clue text kept on a room.
        max_room_name_length: Longest room name kept on a room.
    """
    max_clue_length:      int = 127
    max_room_name_length: int = 49


# ---------------------------------------------------------------------------
# Suspect index sizing
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SuspectIndexConfig:
    """
    Sizing for the clue → suspect hash table.

    Attributes:
        bucket_count:    Fixed number of chains. A small prime spreads the
                         byte-sum hash; the table never grows.
        unknown_suspect: Sentinel returned by lookups of unassociated clues.
    """
    bucket_count:    int = 11
    unknown_suspect: str = "Unknown"


# ---------------------------------------------------------------------------
# Game-level parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Top-level session settings.

    Attributes:
        default_level: Level used when neither the CLI nor the environment picks one.
        title:         Banner shown at the top of every screen.
        rule_width:    Width of the "=====" rules framing console screens.
    """
    default_level: GameLevel = GameLevel.MASTER
    title:         str = "DETECTIVE QUEST - THE MANSION CLUES"
    rule_width:    int = 46


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

CLUE_CONFIG  = ClueConfig()
INDEX_CONFIG = SuspectIndexConfig()
GAME_CONFIG  = GameConfig()


def clip_clue(text: str) -> str:
    """Clue text as rooms, the Clue Store and the Suspect Index all keep it."""
    return text[: CLUE_CONFIG.max_clue_length]


def clip_room_name(name: str) -> str:
    return name[: CLUE_CONFIG.max_room_name_length]


# ---------------------------------------------------------------------------
# Navigation commands
# ---------------------------------------------------------------------------

COMMAND_ALIASES: Dict[str, FrozenSet[str]] = {
    "left":  frozenset({"left", "l", "e", "esquerda"}),
    "right": frozenset({"right", "r", "d", "direita"}),
    "exit":  frozenset({"exit", "quit", "q", "s", "sair"}),
}
"""
Accepted spellings for each navigation command, matched case-insensitively.

The single letters e / d / s are the Portuguese shortcuts (esquerda, direita,
sair) kept for players used to the original terminal version.
"""


def normalize_command(raw: str) -> Optional[str]:
    """
    Map raw player input to "left", "right" or "exit".

    Returns None for anything unrecognised, including blank input.

    Example:
        >>> normalize_command("  E ")
        'left'
    """
    token = (raw or "").strip().lower()
    for command, aliases in COMMAND_ALIASES.items():
        if token in aliases:
            return command
    return None


# ---------------------------------------------------------------------------
# Environment (front-ends only)
# ---------------------------------------------------------------------------

LEVEL_ENV_VAR     = "DETECTIVE_QUEST_LEVEL"
LOG_LEVEL_ENV_VAR = "DETECTIVE_QUEST_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """Front-end settings resolved from the environment."""
    level:     GameLevel
    log_level: str


def settings_from_env() -> Settings:
    """
    Read the front-end settings from the process environment.

    Unknown level names fall back to GAME_CONFIG.default_level so a typo in
    .env never prevents the game from starting.
    """
    raw_level = os.environ.get(LEVEL_ENV_VAR, "").strip().lower()
    try:
        level = GameLevel(raw_level) if raw_level else GAME_CONFIG.default_level
    except ValueError:
        level = GAME_CONFIG.default_level
    log_level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").strip().upper() or "WARNING"
    return Settings(level=level, log_level=log_level)
