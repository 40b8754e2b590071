from __future__ import annotations

import heapq
from typing import List, Mapping

from .models import RankedWord


class _HeapEntry:
    """Heap item ordered so that the weakest ranked word is the heap minimum.

    Words rank by score descending, then alphabetically. The weakest entry
    therefore has the lowest score and, among equal scores, the greatest word.
    """

    __slots__ = ("score", "word")

    def __init__(self, score: int, word: str) -> None:
        self.score = score
        self.word = word

    def __lt__(self, other: "_HeapEntry") -> bool:
        if self.score != other.score:
            return self.score < other.score
        return self.word > other.word


class BoundedMinHeap:
    """Fixed-capacity heap that keeps the ``capacity`` best ranked words seen."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be zero or positive.")
        self.capacity = capacity
        self._entries: List[_HeapEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, word: str, score: int) -> None:
        """Insert a word, evicting the current minimum when over capacity."""
        if self.capacity == 0:
            return
        entry = _HeapEntry(score, word)
        if len(self._entries) < self.capacity:
            heapq.heappush(self._entries, entry)
        else:
            # Equivalent to push-then-pop but with a single sift.
            heapq.heappushpop(self._entries, entry)

    def drain(self) -> List[RankedWord]:
        """Return the retained words best-first and empty the heap."""
        entries = sorted(self._entries, key=lambda e: (-e.score, e.word))
        self._entries = []
        return [RankedWord(word=e.word, score=e.score) for e in entries]


def top_words_by_frequency(
    frequencies: Mapping[str, int], k: int = 10
) -> List[RankedWord]:
    """Select the ``k`` most frequent words, highest count first."""
    heap = BoundedMinHeap(k)
    for word, count in frequencies.items():
        heap.push(word, count)
    return heap.drain()


def longest_words(frequencies: Mapping[str, int], k: int = 5) -> List[RankedWord]:
    """Select the ``k`` longest distinct words, longest first."""
    heap = BoundedMinHeap(k)
    for word in frequencies:
        heap.push(word, len(word))
    return heap.drain()
