from __future__ import annotations

import re
from typing import Callable, Dict, Iterator, Tuple

from .config import SUPPORTED_ALPHABETS

TOKEN_PATTERN = re.compile(r"\S+")


def _is_ascii_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


ALPHABET_PREDICATES: Dict[str, Callable[[str], bool]] = {
    "unicode": str.isalpha,
    "ascii": _is_ascii_alpha,
}


def get_alpha_predicate(alphabet: str) -> Callable[[str], bool]:
    """Return the character classifier used for both normalization and counting."""
    try:
        return ALPHABET_PREDICATES[alphabet]
    except KeyError:
        raise ValueError(
            f"Unknown alphabet '{alphabet}'; "
            f"expected one of {', '.join(SUPPORTED_ALPHABETS)}."
        ) from None


def iter_tokens(text: str) -> Iterator[str]:
    """Yield maximal whitespace-delimited tokens without materializing a list."""
    for match in TOKEN_PATTERN.finditer(text):
        yield match.group()


def normalize_token(token: str, alphabet: str = "unicode") -> Tuple[str, int]:
    """
    Project a raw token onto its lowercase alphabetic characters.

    Returns the normalized word (possibly empty) and the number of alphabetic
    characters found in the raw token.
    """
    is_alpha = get_alpha_predicate(alphabet)
    return _normalize(token, is_alpha)


def iter_normalized_words(
    text: str, alphabet: str = "unicode"
) -> Iterator[Tuple[str, int]]:
    """
    Yield ``(word, alpha_chars)`` for every token whose normalized form is non-empty.

    Tokens that normalize to the empty string contain no alphabetic characters,
    so skipping them never loses anything from the character total.
    """
    is_alpha = get_alpha_predicate(alphabet)
    for token in iter_tokens(text):
        word, alpha_chars = _normalize(token, is_alpha)
        if word:
            yield word, alpha_chars


def _normalize(token: str, is_alpha: Callable[[str], bool]) -> Tuple[str, int]:
    kept: list[str] = []
    alpha_chars = 0
    for ch in token:
        if is_alpha(ch):
            alpha_chars += 1
            # Some letters lowercase to several code points, e.g. a combining dot.
            kept.extend(c for c in ch.lower() if is_alpha(c))
    return "".join(kept), alpha_chars
