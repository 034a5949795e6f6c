"""
game_engine.py
==============
Core game session for Detective Quest: The Mansion Clues.

Contains:
  DetectiveQuestGame — the single orchestrating class that owns the mansion,
                       the Clue Store and the Suspect Index for one run, and
                       exposes a clean API consumed by both the CLI (cli.py)
                       and the Streamlit UI (app.py).

Public API summary:
    game = DetectiveQuestGame(level=GameLevel.MASTER, console=console)
    game.explore()              → FinishReason      (blocking, reads console)
    game.begin_exploration()    → ExplorationStatus (step mode)
    game.submit(command)        → ExplorationStatus (step mode)
    game.collected_clues()      → [clue, ...] ascending
    game.suspects()             → [name, ...]
    game.accuse(raw_name)       → AccusationResult | None
    game.reset()                → None

Logging
-------
Every significant event is emitted through the standard ``logging`` module;
the entry point decides where it goes. The logger name for this module is
``detective_quest.game_engine``.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from accusation import evaluate_accusation
from case_data import MANSION_LAYOUT
from clue_store import ClueStore
from config import GAME_CONFIG, INDEX_CONFIG, GameLevel
from console import BufferedConsole, Console
from exploration import ExplorationEngine
from mansion import build_mansion
from models import (
    AccusationResult,
    ExplorationStatus,
    FinishReason,
    GameState,
    MansionLayout,
    Room,
)
from suspect_index import SuspectIndex

logger = logging.getLogger("detective_quest.game_engine")


class DetectiveQuestGame:
    """
    One play session.

    Attributes:
        level:         Which game variant is being played.
        layout:        The validated mansion layout the session was built from.
        console:       Console collaborator shared with the exploration engine.
        state:         Current GameState.
        root:          Root room of the mansion.
        clue_store:    Collected clues (None at NOVICE level).
        suspect_index: Clue → suspect table (None below MASTER level).
        engine:        The ExplorationEngine for this session.
    """

    def __init__(
        self,
        level: GameLevel = GAME_CONFIG.default_level,
        layout: Optional[MansionLayout] = None,
        associations: Optional[Iterable[Tuple[str, str]]] = None,
        console: Optional[Console] = None,
    ) -> None:
        self.level   = GameLevel(level)
        self.layout  = layout if layout is not None else MANSION_LAYOUT
        self.console = console if console is not None else BufferedConsole()
        self._associations = (
            list(associations) if associations is not None
            else self.layout.association_pairs()
        )
        self.state = GameState()

        logger.info(
            "DetectiveQuestGame initialised — level=%s, rooms=%d, associations=%d",
            self.level.value,
            len(self.layout.rooms),
            len(self._associations),
        )
        self._build_structures()

    # ------------------------------------------------------------------
    # Internal construction
    # ------------------------------------------------------------------

    def _build_structures(self) -> None:
        """(Re)build every structure for a clean session."""
        self.root: Room = build_mansion(self.layout)
        self.clue_store: Optional[ClueStore] = (
            ClueStore() if self.level.collects_clues else None
        )
        self.suspect_index: Optional[SuspectIndex] = (
            SuspectIndex.from_pairs(self._associations, INDEX_CONFIG.bucket_count)
            if self.level.allows_accusation else None
        )
        self.engine = ExplorationEngine(
            self.root, self.console, clue_store=self.clue_store, state=self.state
        )

    # ------------------------------------------------------------------
    # Exploration
    # ------------------------------------------------------------------

    def explore(self) -> Optional[FinishReason]:
        """Run the blocking exploration loop until a leaf or exit."""
        return self.engine.run()

    def begin_exploration(self) -> ExplorationStatus:
        return self.engine.start()

    def submit(self, command: str) -> ExplorationStatus:
        return self.engine.submit(command)

    @property
    def exploration_finished(self) -> bool:
        return self.engine.finished

    def collected_clues(self) -> List[str]:
        """Collected clues in ascending order; empty at NOVICE level."""
        if self.clue_store is None:
            return []
        return self.clue_store.in_order()

    # ------------------------------------------------------------------
    # Accusation
    # ------------------------------------------------------------------

    def suspects(self) -> List[str]:
        if self.suspect_index is None:
            return []
        return self.suspect_index.suspects()

    def accuse(self, raw_name: str) -> Optional[AccusationResult]:
        """
        Evaluate an accusation against the clues collected so far.

        Returns:
            The AccusationResult, or None when the input was blank (the
            accusation is abandoned and GameState is left untouched).

        Raises:
            RuntimeError: the current level has no accusation phase.
        """
        if self.suspect_index is None:
            raise RuntimeError(f"level {self.level.value!r} has no accusation phase")

        result = evaluate_accusation(self.suspect_index, self.collected_clues(), raw_name)
        if result is not None:
            self.state.record_accusation(result)
        return result

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Start over: fresh GameState, fresh structures, same layout and level."""
        logger.info("Game reset requested — rebuilding structures.")
        self.state.reset()
        self._build_structures()
