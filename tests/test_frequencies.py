import pytest

from word_stats.frequencies import count_words
from tests.utils import SAMPLE_TEXTS, oracle_char_count, oracle_frequencies


def test_count_words_example_sentence():
    counts = count_words("the Quick quick THE fox")
    assert dict(counts.frequencies) == {"the": 2, "quick": 2, "fox": 1}
    assert counts.word_count == 3
    assert counts.char_count == 19


def test_char_count_uses_raw_tokens():
    """Letters inside tokens with punctuation still count toward the total."""
    counts = count_words("it's co-op 99")
    assert counts.char_count == 3 + 4
    assert dict(counts.frequencies) == {"its": 1, "coop": 1}


@pytest.mark.parametrize("text", SAMPLE_TEXTS)
def test_count_words_matches_brute_force(text: str):
    counts = count_words(text)
    assert counts.frequencies == oracle_frequencies(text)
    assert counts.char_count == oracle_char_count(text)


def test_ascii_alphabet_counts_only_ascii_letters():
    counts = count_words("naïve NAÏVE", alphabet="ascii")
    assert dict(counts.frequencies) == {"nave": 2}
    assert counts.char_count == 8
