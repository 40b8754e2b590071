from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class RankedWord:
    """A word paired with the score it was ranked by (count or length)."""

    word: str
    score: int


@dataclass(slots=True)
class WordCounts:
    """Output of the fused tokenize + count pass."""

    frequencies: Counter[str]
    char_count: int

    @property
    def word_count(self) -> int:
        return len(self.frequencies)


@dataclass(frozen=True, slots=True)
class TextStats:
    """Aggregate statistics computed for a single text."""

    word_count: int
    char_count: int
    top_words: tuple[RankedWord, ...]
    longest_words: tuple[str, ...]
    elapsed_seconds: float

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_seconds * 1000.0
