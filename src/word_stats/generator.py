from __future__ import annotations

from itertools import cycle, islice
from typing import Sequence

from .config import DEFAULT_VOCABULARY


def generate_text(size: int, vocabulary: Sequence[str] | None = None) -> str:
    """Return ``size`` words drawn round-robin from ``vocabulary``, space separated."""
    words = list(DEFAULT_VOCABULARY if vocabulary is None else vocabulary)
    if not words:
        raise ValueError("vocabulary must contain at least one word.")
    if size <= 0:
        return ""
    return " ".join(islice(cycle(words), size))
