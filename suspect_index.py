"""
suspect_index.py
================
The Suspect Index: a fixed-size hash table from clue text to suspect name.

Buckets hold singly linked chains. New entries are pushed on the chain
head and lookups scan from the head, so when one clue is inserted twice
the most recent suspect wins while the older entry stays in the chain.

The hash is the sum of the clue's UTF-8 byte values modulo the bucket
count. It is weak on purpose; collisions are simply chained and the table
never resizes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from config import INDEX_CONFIG, clip_clue
from models import FatalStructureError

logger = logging.getLogger("detective_quest.suspect_index")

UNKNOWN_SUSPECT = INDEX_CONFIG.unknown_suspect


def hash_of(text: str, bucket_count: int = INDEX_CONFIG.bucket_count) -> int:
    """
    Bucket index for `text`.

    Example:
        >>> hash_of("ab", 11)   # (97 + 98) % 11
        8
    """
    return sum(text.encode("utf-8")) % bucket_count


@dataclass(eq=False)
class ChainEntry:
    clue:    str
    suspect: str
    next:    Optional["ChainEntry"] = field(default=None, repr=False)


class SuspectIndex:
    """
    Clue → suspect hash table with chained collision handling.

    Attributes:
        bucket_count: Number of chains; fixed at construction.
    """

    def __init__(self, bucket_count: int = INDEX_CONFIG.bucket_count) -> None:
        if bucket_count < 1:
            raise ValueError("bucket_count must be positive")
        self.bucket_count = bucket_count
        self._buckets: List[Optional[ChainEntry]] = [None] * bucket_count
        self._size = 0

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[str, str]],
        bucket_count: int = INDEX_CONFIG.bucket_count,
    ) -> "SuspectIndex":
        """Build an index by inserting (clue, suspect) pairs in order."""
        index = cls(bucket_count)
        for clue, suspect in pairs:
            index.insert(clue, suspect)
        logger.info(
            "Suspect index built — entries=%d, buckets=%d, longest_chain=%d",
            len(index),
            index.bucket_count,
            max(len(index.chain(i)) for i in range(index.bucket_count)),
        )
        return index

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def insert(self, clue: str, suspect: str) -> None:
        """
        Prepend a (clue, suspect) entry to the chain for `clue`.

        Keys are cut to the same length rooms keep, so an oversized clue
        still matches the text collected from its room.
        """
        clue = clip_clue(clue)
        bucket = hash_of(clue, self.bucket_count)
        try:
            self._buckets[bucket] = ChainEntry(clue, suspect, self._buckets[bucket])
        except MemoryError as exc:
            raise FatalStructureError(f"could not allocate index entry for {clue!r}") from exc
        self._size += 1
        logger.debug("Index insert: %r -> %r (bucket %d)", clue, suspect, bucket)

    def lookup(self, clue: str) -> str:
        """Return the suspect for `clue`, or UNKNOWN_SUSPECT if it has none."""
        clue = clip_clue(clue)
        entry = self._buckets[hash_of(clue, self.bucket_count)]
        while entry is not None:
            if entry.clue == clue:
                return entry.suspect
            entry = entry.next
        return UNKNOWN_SUSPECT

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def chain(self, bucket: int) -> List[Tuple[str, str]]:
        """(clue, suspect) pairs in `bucket`, head first."""
        pairs: List[Tuple[str, str]] = []
        entry = self._buckets[bucket]
        while entry is not None:
            pairs.append((entry.clue, entry.suspect))
            entry = entry.next
        return pairs

    def entries(self) -> Iterator[Tuple[str, str]]:
        for bucket in range(self.bucket_count):
            yield from self.chain(bucket)

    def suspects(self) -> List[str]:
        """Distinct suspect names, sorted."""
        return sorted({suspect for _, suspect in self.entries()})

    def clues_for(self, suspect: str) -> List[str]:
        """Clues whose current lookup resolves to `suspect`, sorted."""
        clues = {clue for clue, _ in self.entries()}
        return sorted(c for c in clues if self.lookup(c) == suspect)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.lookup(clue) != UNKNOWN_SUSPECT

    def __repr__(self) -> str:
        return f"SuspectIndex(entries={self._size}, buckets={self.bucket_count})"
