import pytest

from word_stats.analysis import analyze
from word_stats.baseline import analyze_naive
from word_stats.config import WordStatsConfig
from word_stats.generator import generate_text
from tests.utils import SAMPLE_TEXTS


@pytest.mark.parametrize("text", SAMPLE_TEXTS + [generate_text(500)])
def test_naive_analysis_matches_optimized(text: str):
    """Both analyzers report identical statistics, ties included."""
    naive = analyze_naive(text)
    fast = analyze(text)
    assert naive.word_count == fast.word_count
    assert naive.char_count == fast.char_count
    assert naive.top_words == fast.top_words
    assert naive.longest_words == fast.longest_words


def test_naive_analysis_respects_limits():
    config = WordStatsConfig(top_words_limit=1, longest_words_limit=2)
    stats = analyze_naive("aa aa b ccc ccc ccc", config)
    assert [ranked.word for ranked in stats.top_words] == ["ccc"]
    assert stats.longest_words == ("ccc", "aa")
