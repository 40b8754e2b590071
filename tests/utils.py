from __future__ import annotations

from collections import Counter


def oracle_frequencies(text: str) -> Counter[str]:
    """Brute-force word counts used to cross-check the analyzer."""
    counts: Counter[str] = Counter()
    for token in text.split():
        word = "".join(
            low for ch in token if ch.isalpha() for low in ch.lower() if low.isalpha()
        )
        if word:
            counts[word] += 1
    return counts


def oracle_char_count(text: str) -> int:
    return sum(1 for token in text.split() for ch in token if ch.isalpha())


SAMPLE_TEXTS = [
    "",
    "   \t\n  ",
    "123 !!! ... 4-5-6",
    "the Quick quick THE fox",
    "Hello, world! Hello again; the world is wide.",
    "a bb ccc dddd eeeee ffffff ggggggg hhhhhhhh iiiiiiiii jjjjjjjjjj",
    "one two three four five six seven eight nine ten eleven twelve one two one",
    "Don't stop-believing: it's 2024 and e-mail is STILL here!\nNew line\tand tab",
    "Café naïve résumé CAFÉ über straße",
    "İstanbul istanbul İSTANBUL",
]
