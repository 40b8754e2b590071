"""
word_stats package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .analysis import analyze, analyze_documents
from .config import WordStatsConfig, config_from_dict, config_from_yaml, load_config
from .models import Document, RankedWord, TextStats

__all__ = [
    "WordStatsConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "analyze",
    "analyze_documents",
    "Document",
    "RankedWord",
    "TextStats",
]

__version__ = "0.1.0"
