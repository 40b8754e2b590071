from __future__ import annotations

import logging
import time
from typing import Dict, Iterable

from .config import WordStatsConfig
from .frequencies import count_words
from .models import Document, TextStats
from .selection import longest_words, top_words_by_frequency

LOGGER = logging.getLogger(__name__)


def analyze(text: str, config: WordStatsConfig | None = None) -> TextStats:
    """Compute unique-word, character and top-K statistics for ``text``."""
    cfg = config or WordStatsConfig()
    start = time.perf_counter()

    counts = count_words(text, cfg.alphabet)
    top_words = top_words_by_frequency(counts.frequencies, cfg.top_words_limit)
    longest = longest_words(counts.frequencies, cfg.longest_words_limit)

    elapsed = time.perf_counter() - start
    LOGGER.debug(
        "Analyzed %d unique words (%d alphabetic chars) in %.3f ms",
        counts.word_count,
        counts.char_count,
        elapsed * 1000.0,
    )
    return TextStats(
        word_count=counts.word_count,
        char_count=counts.char_count,
        top_words=tuple(top_words),
        longest_words=tuple(ranked.word for ranked in longest),
        elapsed_seconds=elapsed,
    )


def analyze_documents(
    documents: Iterable[Document], config: WordStatsConfig | None = None
) -> Dict[str, TextStats]:
    """Analyze each document independently and key the results by doc_id."""
    results: Dict[str, TextStats] = {}
    for document in documents:
        results[document.doc_id] = analyze(document.text, config)
    return results
