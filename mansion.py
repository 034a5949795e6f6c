"""
mansion.py
==========
The mansion graph: a fixed binary tree of rooms.

Contains:
  create_room()   — allocate one room (name required, clue optional)
  link()          — attach left / right children to a room
  build_mansion() — wire a whole validated MansionLayout, return the root
  load_layout()   — read and validate a JSON layout file
  iter_rooms(), room_count(), find_room(), render_map() — read-only helpers

The structure itself performs no cycle checking; MansionLayout validates
topology before build_mansion() creates anything.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from pydantic import ValidationError

from config import CLUE_CONFIG, clip_clue, clip_room_name
from models import FatalStructureError, LayoutError, MansionLayout, Room

logger = logging.getLogger("detective_quest.mansion")


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def create_room(name: str, clue: Optional[str] = "") -> Room:
    """
    Create a room with no exits.

    Args:
        name: Room name; must contain something other than whitespace.
        clue: Clue text, or "" / None for a room without a clue.

    Returns:
        A new Room. Name and clue are truncated to the ClueConfig limits.

    Raises:
        ValueError:          `name` is blank.
        FatalStructureError: the room could not be allocated.
    """
    if not name or not name.strip():
        raise ValueError("room name must not be empty")

    clue = clue or ""
    if len(clue) > CLUE_CONFIG.max_clue_length:
        logger.debug("Truncating clue for room %r to %d chars.", name, CLUE_CONFIG.max_clue_length)
        clue = clip_clue(clue)
    name = clip_room_name(name)

    try:
        return Room(name=name, clue=clue)
    except MemoryError as exc:
        raise FatalStructureError(f"could not allocate room {name!r}") from exc


def link(parent: Room, left: Optional[Room] = None, right: Optional[Room] = None) -> Room:
    """Attach the given children to `parent`. Omitted sides are left as they are."""
    if left is not None:
        parent.left = left
    if right is not None:
        parent.right = right
    return parent


def build_mansion(layout: MansionLayout) -> Room:
    """
    Build every room in `layout` and wire the edges.

    Args:
        layout: A validated MansionLayout (already known to be a tree).

    Returns:
        The root room.
    """
    rooms: Dict[str, Room] = {
        spec.name: create_room(spec.name, spec.clue) for spec in layout.rooms
    }
    for spec in layout.rooms:
        link(
            rooms[spec.name],
            left=rooms[spec.left] if spec.left else None,
            right=rooms[spec.right] if spec.right else None,
        )

    logger.info(
        "Mansion built — root=%r, rooms=%d, with_clues=%d",
        layout.root,
        len(rooms),
        sum(1 for r in rooms.values() if r.has_clue),
    )
    return rooms[layout.root]


def load_layout(path: Union[str, Path]) -> MansionLayout:
    """
    Read a mansion layout from a JSON file.

    The file has the same shape as case_data.MANSION_LAYOUT:
    {"root": ..., "rooms": [...], "associations": [...]}.

    Raises:
        LayoutError: the file is unreadable or does not describe a valid tree.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LayoutError(f"cannot read layout file {path}: {exc}") from exc

    try:
        layout = MansionLayout.model_validate_json(raw)
    except ValidationError as exc:
        raise LayoutError(f"invalid layout file {path}:\n{exc}") from exc

    logger.info("Loaded layout from %s (%d rooms).", path, len(layout.rooms))
    return layout


# ---------------------------------------------------------------------------
# Read-only traversal
# ---------------------------------------------------------------------------

def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room of the subtree in pre-order (room, left, right)."""
    if root is None:
        return
    yield root
    yield from iter_rooms(root.left)
    yield from iter_rooms(root.right)


def room_count(root: Optional[Room]) -> int:
    return sum(1 for _ in iter_rooms(root))


def find_room(root: Optional[Room], name: str) -> Optional[Room]:
    for room in iter_rooms(root):
        if room.name == name:
            return room
    return None


def render_map(root: Optional[Room], indent: str = "    ") -> str:
    """
    Draw the tree as indented text, one room per line.

    Example:
        Hall de Entrada
            (L) Biblioteca
                (L) Sala de Estudo
                (R) Jardim
            (R) Cozinha
                (R) Sótão
    """
    lines: List[str] = []

    def _walk(room: Optional[Room], depth: int, tag: str) -> None:
        if room is None:
            return
        lines.append(f"{indent * depth}{tag}{room.name}")
        _walk(room.left, depth + 1, "(L) ")
        _walk(room.right, depth + 1, "(R) ")

    _walk(root, 0, "")
    return "\n".join(lines)
