import pytest

from word_stats.config import DEFAULT_VOCABULARY
from word_stats.generator import generate_text


def test_generate_text_cycles_vocabulary():
    text = generate_text(12)
    words = text.split(" ")
    assert len(words) == 12
    assert words[:10] == DEFAULT_VOCABULARY
    assert words[10:] == ["rust", "performance"]


def test_generate_text_is_deterministic():
    assert generate_text(100, ["a", "b"]) == generate_text(100, ["a", "b"])


def test_generate_text_non_positive_size():
    assert generate_text(0) == ""
    assert generate_text(-5) == ""


def test_generate_text_requires_vocabulary():
    with pytest.raises(ValueError):
        generate_text(3, [])
