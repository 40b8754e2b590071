from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

SUPPORTED_ALPHABETS = ("unicode", "ascii")

DEFAULT_VOCABULARY = [
    "rust",
    "performance",
    "optimization",
    "memory",
    "speed",
    "efficiency",
    "benchmark",
    "algorithm",
    "data",
    "structure",
]


@dataclass(slots=True)
class WordStatsConfig:
    """Configuration options for text analysis and benchmarking."""

    top_words_limit: int = 10
    longest_words_limit: int = 5
    alphabet: str = "unicode"
    benchmark_size: int = 50_000
    preview_count: int = 3
    vocabulary: List[str] = field(default_factory=lambda: list(DEFAULT_VOCABULARY))

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def validate(self) -> None:
        """Raise ValueError when a field holds an unusable value."""
        for name in (
            "top_words_limit",
            "longest_words_limit",
            "preview_count",
            "benchmark_size",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}.")
        if not isinstance(self.alphabet, str):
            raise ValueError(f"alphabet must be a string, got {self.alphabet!r}.")
        if not isinstance(self.vocabulary, list) or not all(
            isinstance(word, str) for word in self.vocabulary
        ):
            raise ValueError("vocabulary must be a list of words.")
        if self.top_words_limit < 0:
            raise ValueError("top_words_limit must be zero or positive.")
        if self.longest_words_limit < 0:
            raise ValueError("longest_words_limit must be zero or positive.")
        if self.preview_count < 0:
            raise ValueError("preview_count must be zero or positive.")
        if self.alphabet not in SUPPORTED_ALPHABETS:
            raise ValueError(
                f"Unknown alphabet '{self.alphabet}'; "
                f"expected one of {', '.join(SUPPORTED_ALPHABETS)}."
            )
        if self.benchmark_size <= 0:
            raise ValueError("benchmark_size must be positive.")
        if not self.vocabulary:
            raise ValueError("vocabulary must contain at least one word.")


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(WordStatsConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if isinstance(kwargs.get("vocabulary"), list):
        kwargs["vocabulary"] = [str(word) for word in kwargs["vocabulary"]]
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> WordStatsConfig:
    """Build a WordStatsConfig from a dictionary-like input."""
    if data is None:
        return WordStatsConfig()
    config = WordStatsConfig(**_build_kwargs(data))
    config.validate()
    return config


def config_from_yaml(path: str | Path) -> WordStatsConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> WordStatsConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return WordStatsConfig()
    return config_from_yaml(path)
