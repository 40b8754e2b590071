from pathlib import Path

import pytest

from word_stats.config import (
    WordStatsConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_defaults():
    config = load_config()
    assert config.top_words_limit == 10
    assert config.longest_words_limit == 5
    assert config.alphabet == "unicode"
    assert len(config.vocabulary) == 10


def test_config_from_dict_ignores_unknown_keys():
    config = config_from_dict({"top_words_limit": 3, "unused": True})
    assert config.top_words_limit == 3
    assert config_from_dict(None) == WordStatsConfig()


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "longest_words_limit: 2\nalphabet: ascii\nvocabulary: [a, b]\n",
        encoding="utf-8",
    )
    config = config_from_yaml(path)
    assert config.longest_words_limit == 2
    assert config.alphabet == "ascii"
    assert config.vocabulary == ["a", "b"]


def test_config_yaml_must_be_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        config_from_yaml(path)


@pytest.mark.parametrize(
    "data",
    [
        {"top_words_limit": -1},
        {"longest_words_limit": -2},
        {"alphabet": "runes"},
        {"benchmark_size": 0},
        {"vocabulary": []},
        {"top_words_limit": "ten"},
        {"longest_words_limit": 2.5},
        {"preview_count": True},
        {"benchmark_size": None},
        {"alphabet": 7},
        {"vocabulary": None},
        {"vocabulary": "rust"},
    ],
)
def test_invalid_values_rejected(data: dict):
    with pytest.raises(ValueError):
        config_from_dict(data)


def test_to_dict_round_trips_through_config_from_dict():
    config = WordStatsConfig(top_words_limit=4)
    assert config_from_dict(config.to_dict()) == config
