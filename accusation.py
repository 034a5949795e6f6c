"""
accusation.py
=============
Deterministic, side-effect-free accusation logic.

Kept apart from the game engine so it can be unit-tested on its own: it
only needs a SuspectIndex and an iterable of collected clues.

Classification by supporting-clue count:
    2 or more → CONFIRMED
    exactly 1 → WEAK
    0         → UNFOUNDED
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from models import AccusationResult, Verdict
from suspect_index import UNKNOWN_SUSPECT, SuspectIndex

logger = logging.getLogger("detective_quest.accusation")

CONFIRMATION_THRESHOLD = 2


def count_clue_matches(index: SuspectIndex, clues: Iterable[str], suspect_name: str) -> int:
    """
    Count the clues whose Suspect Index entry is exactly `suspect_name`.

    Clues without an entry resolve to the "Unknown" sentinel and never count,
    not even when the sentinel itself is accused.
    """
    if suspect_name == UNKNOWN_SUSPECT:
        return 0
    count = 0
    for clue in clues:
        if index.lookup(clue) == suspect_name:
            count += 1
    return count


def classify(count: int) -> Verdict:
    """
    Classify an accusation by its supporting-clue count.

    Examples:
        >>> classify(0)
        <Verdict.UNFOUNDED: 'unfounded'>
        >>> classify(3)
        <Verdict.CONFIRMED: 'confirmed'>
    """
    if count >= CONFIRMATION_THRESHOLD:
        return Verdict.CONFIRMED
    if count == 1:
        return Verdict.WEAK
    return Verdict.UNFOUNDED


def evaluate_accusation(
    index: SuspectIndex,
    clues: Iterable[str],
    raw_name: str,
) -> Optional[AccusationResult]:
    """
    Evaluate a free-text accusation against the collected clues.

    Args:
        index:    The session's Suspect Index.
        clues:    Collected clue texts (any order).
        raw_name: The accused name as typed; surrounding whitespace is ignored.

    Returns:
        An AccusationResult, or None when `raw_name` is empty or whitespace
        only. None means the accusation was abandoned, which callers must
        report differently from an UNFOUNDED verdict.
    """
    suspect = (raw_name or "").strip()
    if not suspect:
        logger.warning("Blank accusation submitted — accusation phase aborted.")
        return None

    clues    = list(clues)
    count    = count_clue_matches(index, clues, suspect)
    evidence = sorted(c for c in clues if index.lookup(c) == suspect) if count else []
    verdict  = classify(count)

    logger.info("Accusation — suspect=%r, matching_clues=%d, verdict=%s", suspect, count, verdict.value)
    return AccusationResult(suspect=suspect, count=count, verdict=verdict, evidence=tuple(evidence))


def verdict_message(result: Optional[AccusationResult]) -> str:
    """Human-readable summary of an accusation outcome (None = aborted)."""
    if result is None:
        return "No one was accused. The accusation was abandoned."
    if result.verdict is Verdict.CONFIRMED:
        return (
            f"Accusation CONFIRMED: {result.count} clues point to {result.suspect}. "
            "The case is closed!"
        )
    if result.verdict is Verdict.WEAK:
        return (
            f"Accusation WEAK: only one clue points to {result.suspect}. "
            "It is not enough to convict."
        )
    return f"Accusation UNFOUNDED: no collected clue points to {result.suspect}."
