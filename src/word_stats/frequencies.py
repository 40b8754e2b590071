from __future__ import annotations

from collections import Counter

from .models import WordCounts
from .tokenization import iter_normalized_words


def count_words(text: str, alphabet: str = "unicode") -> WordCounts:
    """Build the word frequency map and the alphabetic character total in one pass."""
    frequencies: Counter[str] = Counter()
    char_count = 0
    for word, alpha_chars in iter_normalized_words(text, alphabet):
        frequencies[word] += 1
        char_count += alpha_chars
    return WordCounts(frequencies=frequencies, char_count=char_count)
