"""
models.py
=========
Shared data models for Detective Quest: The Mansion Clues.

Contains:
  - RoomSpec / MansionLayout / ClueAssociation : Pydantic schemas for the
                        static startup data (and for JSON layout files).
  - Room              : Dataclass node of the mansion's navigation tree.
  - Verdict           : Classification of an accusation.
  - AccusationResult  : Outcome of one accusation request.
  - ExplorationStatus : State of the exploration state machine.
  - GameState         : Mutable dataclass tracking per-session progress.
  - FatalStructureError / LayoutError : the two fatal error types.

Keeping these in one module guarantees a single source of truth for data
shapes used across the structures, the engine and both front-ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from config import clip_clue, clip_room_name


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class FatalStructureError(RuntimeError):
    """
    A core structure (room, clue node, index entry) could not be built.

    There is no recovery: the structures are meant to exist as a whole, so
    the session is abandoned and the CLI exits with a failure status.
    """


class LayoutError(ValueError):
    """The mansion layout is malformed (bad JSON, unknown rooms, not a tree)."""


# ---------------------------------------------------------------------------
# Pydantic startup-data schemas
# ---------------------------------------------------------------------------

class RoomSpec(BaseModel):
    """
    One room as declared in a layout.

    Fields:
        name:  Unique, non-empty room name.
        clue:  Clue text; empty string means the room holds no clue.
        left:  Name of the room reached by going left, if any.
        right: Name of the room reached by going right, if any.
    """

    name:  str = Field(min_length=1)
    clue:  str = ""
    left:  Optional[str] = None
    right: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("room name must not be blank")
        return value


class ClueAssociation(BaseModel):
    """A single clue → suspect pair fed into the Suspect Index."""

    clue:    str = Field(min_length=1)
    suspect: str = Field(min_length=1)

    @field_validator("clue")
    @classmethod
    def _clip_clue(cls, value: str) -> str:
        return clip_clue(value)


class MansionLayout(BaseModel):
    """
    Validated description of a whole mansion.

    The validator guarantees the rooms form a tree rooted at `root`: every
    edge target exists, no room has two parents, and every room is reachable
    from the root (which, together with the single-parent rule, rules out
    cycles).
    """

    root:  str
    rooms: List[RoomSpec] = Field(min_length=1)
    associations: List[ClueAssociation] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_tree(self) -> "MansionLayout":
        by_name: Dict[str, RoomSpec] = {}
        clipped: Dict[str, str] = {}
        for room in self.rooms:
            if room.name in by_name:
                raise ValueError(f"duplicate room name: {room.name!r}")
            short = clip_room_name(room.name)
            if short in clipped:
                raise ValueError(
                    f"room names {clipped[short]!r} and {room.name!r} collide "
                    f"once cut to {len(short)} characters"
                )
            by_name[room.name] = room
            clipped[short] = room.name

        if self.root not in by_name:
            raise ValueError(f"root room {self.root!r} is not declared")

        parents: Dict[str, str] = {}
        for room in self.rooms:
            for target in (room.left, room.right):
                if target is None:
                    continue
                if target not in by_name:
                    raise ValueError(
                        f"room {room.name!r} links to undeclared room {target!r}"
                    )
                if target == self.root or target in parents:
                    raise ValueError(f"room {target!r} has more than one parent")
                parents[target] = room.name

        reachable = set()
        pending = [self.root]
        while pending:
            name = pending.pop()
            reachable.add(name)
            spec = by_name[name]
            pending.extend(t for t in (spec.left, spec.right) if t is not None)

        orphans = [r.name for r in self.rooms if r.name not in reachable]
        if orphans:
            raise ValueError(f"rooms unreachable from {self.root!r}: {orphans}")
        return self

    def association_pairs(self) -> List[Tuple[str, str]]:
        return [(a.clue, a.suspect) for a in self.associations]


# ---------------------------------------------------------------------------
# Mansion room
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Room:
    """
    A node of the mansion's navigation tree.

    Rooms compare by identity. `left` and `right` are excluded from the repr
    so printing a room never walks the whole subtree.

    Attributes:
        name:  Room name, unique within a mansion.
        clue:  Clue text found here; "" when the room holds none.
        left:  Room reached by going left, or None.
        right: Room reached by going right, or None.
    """

    name:  str
    clue:  str = ""
    left:  Optional["Room"] = field(default=None, repr=False)
    right: Optional["Room"] = field(default=None, repr=False)

    @property
    def has_clue(self) -> bool:
        return bool(self.clue)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


# ---------------------------------------------------------------------------
# Exploration
# ---------------------------------------------------------------------------

class ExplorationStatus(str, Enum):
    """States of the exploration state machine."""

    NOT_STARTED = "not_started"
    AT_ROOM     = "at_room"
    FINISHED    = "finished"


class FinishReason(str, Enum):
    """Why exploration reached FINISHED."""

    LEAF = "leaf"
    EXIT = "exit"


# ---------------------------------------------------------------------------
# Accusation
# ---------------------------------------------------------------------------

class Verdict(str, Enum):
    """Classification of an accusation by supporting-clue count."""

    CONFIRMED = "confirmed"
    WEAK      = "weak"
    UNFOUNDED = "unfounded"


@dataclass(frozen=True)
class AccusationResult:
    """
    Outcome of one accusation.

    Attributes:
        suspect:  The accused name, stripped of surrounding whitespace.
        count:    Collected clues whose Suspect Index entry names `suspect`.
        verdict:  Classification of `count`.
        evidence: The matching clues, in ascending order.
    """

    suspect:  str
    count:    int
    verdict:  Verdict
    evidence: Tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Game state
# ---------------------------------------------------------------------------

@dataclass
class GameState:
    """
    Mutable snapshot of a single session's progress.

    Owned by DetectiveQuestGame and mutated in place; the front-ends read it
    for status displays.

    Attributes:
        rooms_visited:    Room names in the order they were entered.
        clues_found:      Clue texts seen, in discovery order (may repeat
                          across levels that do not collect).
        finish_reason:    Set once exploration ends.
        accusation_made:  True once a non-blank accusation was evaluated.
        last_accusation:  The most recent AccusationResult, if any.
    """

    rooms_visited:   List[str] = field(default_factory=list)
    clues_found:     List[str] = field(default_factory=list)
    finish_reason:   Optional[FinishReason] = None
    accusation_made: bool = False
    last_accusation: Optional[AccusationResult] = None

    def record_visit(self, room: Room) -> None:
        """Record that `room` was entered, noting its clue if it has one."""
        self.rooms_visited.append(room.name)
        if room.has_clue:
            self.clues_found.append(room.clue)

    def record_accusation(self, result: AccusationResult) -> None:
        self.accusation_made = True
        self.last_accusation = result

    def reset(self) -> None:
        """Reset all mutable fields to their initial values for a new game."""
        self.rooms_visited   = []
        self.clues_found     = []
        self.finish_reason   = None
        self.accusation_made = False
        self.last_accusation = None
