"""
exploration.py
==============
The exploration engine: walks the mansion one room at a time.

State machine:

    NOT_STARTED --start()--> AT_ROOM(root)
    AT_ROOM(r)  --"left"/"right" with an edge--> AT_ROOM(child)
    AT_ROOM(r)  --"left"/"right" without an edge, or junk--> AT_ROOM(r)
    AT_ROOM(r)  --"exit"--> FINISHED(exit)
    AT_ROOM(leaf) on entry --> FINISHED(leaf)

Entering a room collects its clue (when a ClueStore is attached) before the
leaf check, so the clue of the final room is always kept.

The engine can be driven two ways:
    engine.run()            — blocking loop reading commands from the console
    engine.start(); engine.submit(cmd) ...  — one command at a time (Streamlit)
"""

from __future__ import annotations

import logging
from typing import List, Optional

from clue_store import ClueStore
from config import GAME_CONFIG, normalize_command
from console import Console
from models import ExplorationStatus, FinishReason, GameState, Room

logger = logging.getLogger("detective_quest.exploration")

PROMPT = "> "


class ExplorationEngine:
    """
    Drives one walk through the mansion.

    Attributes:
        root:          Room the walk starts from.
        console:       Console collaborator used for all player I/O.
        clue_store:    Where clues are collected; None means clues are only shown.
        state:         GameState updated on every room entered.
        status:        Current ExplorationStatus.
        current:       Room the player is in (None before start()).
        finish_reason: LEAF or EXIT once FINISHED.
    """

    def __init__(
        self,
        root: Room,
        console: Console,
        clue_store: Optional[ClueStore] = None,
        state: Optional[GameState] = None,
    ) -> None:
        self.root       = root
        self.console    = console
        self.clue_store = clue_store
        self.state      = state if state is not None else GameState()

        self.status: ExplorationStatus = ExplorationStatus.NOT_STARTED
        self.current: Optional[Room] = None
        self.finish_reason: Optional[FinishReason] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def finished(self) -> bool:
        return self.status is ExplorationStatus.FINISHED

    @property
    def visited(self) -> List[str]:
        return list(self.state.rooms_visited)

    def available_directions(self) -> List[str]:
        """Commands valid in the current room, in menu order."""
        if self.current is None or self.finished:
            return []
        directions = []
        if self.current.left is not None:
            directions.append("left")
        if self.current.right is not None:
            directions.append("right")
        directions.append("exit")
        return directions

    def start(self) -> ExplorationStatus:
        """Enter the root room. Calling start() twice is a no-op."""
        if self.status is not ExplorationStatus.NOT_STARTED:
            return self.status
        logger.info("Exploration started at %r.", self.root.name)
        self._enter(self.root)
        return self.status

    def submit(self, raw_command: str) -> ExplorationStatus:
        """
        Apply one player command.

        Args:
            raw_command: Text as typed; aliases and case are normalised.

        Returns:
            The status after the command.
        """
        if self.status is ExplorationStatus.NOT_STARTED:
            self.start()
        if self.finished:
            logger.warning("Command %r ignored — exploration already finished.", raw_command)
            return self.status

        command = normalize_command(raw_command)
        room    = self.current

        if command == "exit":
            self.console.display_message("\nLeaving the exploration...")
            self._finish(FinishReason.EXIT)
        elif command in ("left", "right"):
            target = room.left if command == "left" else room.right
            if target is None:
                logger.warning("No %s exit from %r.", command, room.name)
                self.console.display_message(f"There is no room to the {command}!")
                self._show_choices()
            else:
                self._enter(target)
        else:
            logger.warning("Invalid command %r in %r.", raw_command, room.name)
            self.console.display_message("Invalid option! Try again.")
            self._show_choices()
        return self.status

    def run(self) -> Optional[FinishReason]:
        """
        Blocking loop: read commands from the console until FINISHED.

        EOFError / KeyboardInterrupt from the console propagate to the caller.
        """
        self.start()
        while not self.finished:
            self.submit(self.console.read_line(PROMPT))
        return self.finish_reason

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _enter(self, room: Room) -> None:
        self.current = room
        self.status  = ExplorationStatus.AT_ROOM
        self.state.record_visit(room)
        logger.info("Entered room %r.", room.name)

        rule = "=" * GAME_CONFIG.rule_width
        self.console.clear_screen()
        self.console.display_message(rule)
        self.console.display_message(f"You are in: {room.name}")
        self.console.display_message(rule)
        self._report_clue(room)

        if room.is_leaf:
            self.console.display_message(
                f"\n{room.name} has no further passages. Exploration complete."
            )
            self._finish(FinishReason.LEAF)
        else:
            self._show_choices()

    def _report_clue(self, room: Room) -> None:
        if not room.has_clue:
            self.console.display_message("No clue found here.")
            return
        if self.clue_store is None:
            self.console.display_message(f'You notice something: "{room.clue}"')
            return
        if self.clue_store.insert(room.clue):
            logger.info("Clue collected in %r: %r", room.name, room.clue)
            self.console.display_message(f'Clue found: "{room.clue}"')
        else:
            self.console.display_message(f'Clue found: "{room.clue}" (already in your notebook)')

    def _show_choices(self) -> None:
        room = self.current
        self.console.display_message("\nChoose a path:")
        if room.left is not None:
            self.console.display_message(f" (left)  Go to {room.left.name}")
        if room.right is not None:
            self.console.display_message(f" (right) Go to {room.right.name}")
        self.console.display_message(" (exit)  Leave the exploration")

    def _finish(self, reason: FinishReason) -> None:
        self.status        = ExplorationStatus.FINISHED
        self.finish_reason = reason
        self.state.finish_reason = reason
        logger.info(
            "Exploration finished (%s) after %d rooms.",
            reason.value,
            len(self.state.rooms_visited),
        )
