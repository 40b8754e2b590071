"""
Naive multi-pass analysis kept as a benchmark reference.

Every stage walks the text on its own, the top words come from a repeated
max-scan and the longest words from a full sort of every occurrence. The
output matches :func:`word_stats.analysis.analyze` exactly, including the
tie-break order, so the two can be compared side by side.
"""

from __future__ import annotations

import time
from typing import Dict, List

from .config import WordStatsConfig
from .models import RankedWord, TextStats
from .tokenization import get_alpha_predicate, normalize_token


def analyze_naive(text: str, config: WordStatsConfig | None = None) -> TextStats:
    """Compute the same statistics as ``analyze`` using quadratic-style passes."""
    cfg = config or WordStatsConfig()
    start = time.perf_counter()

    frequencies: Dict[str, int] = {}
    for line in text.splitlines():
        for token in line.split():
            word, _ = normalize_token(token, cfg.alphabet)
            if word:
                frequencies[word] = frequencies.get(word, 0) + 1

    top_words = _scan_top_words(frequencies, cfg.top_words_limit)

    is_alpha = get_alpha_predicate(cfg.alphabet)
    char_count = 0
    for line in text.splitlines():
        for ch in line:
            if is_alpha(ch):
                char_count += 1

    all_words: List[str] = []
    for line in text.splitlines():
        for token in line.split():
            word, _ = normalize_token(token, cfg.alphabet)
            if word:
                all_words.append(word)
    all_words.sort(key=lambda w: (-len(w), w))
    longest: List[str] = []
    for word in all_words:
        if len(longest) >= cfg.longest_words_limit:
            break
        if word not in longest:
            longest.append(word)

    return TextStats(
        word_count=len(frequencies),
        char_count=char_count,
        top_words=tuple(top_words),
        longest_words=tuple(longest),
        elapsed_seconds=time.perf_counter() - start,
    )


def _scan_top_words(frequencies: Dict[str, int], k: int) -> List[RankedWord]:
    selected: List[RankedWord] = []
    for _ in range(k):
        best_word = ""
        best_count = 0
        for word, count in frequencies.items():
            if any(ranked.word == word for ranked in selected):
                continue
            if count > best_count or (count == best_count and word < best_word):
                best_word, best_count = word, count
        if best_count == 0:
            break
        selected.append(RankedWord(word=best_word, score=best_count))
    return selected
