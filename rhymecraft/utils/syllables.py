"""Spelling-based syllable estimation for words missing from the dictionary."""

from __future__ import annotations

import re


__all__ = ["estimate_syllable_count"]


_NON_LETTER_PATTERN = re.compile(r"[^a-z]")
_SPLIT_VOWEL_PATTERN = re.compile(r"ia|io|eo|ua|ui|iu|ya|yo|ye")
_VOWELS = frozenset("aeiouy")


def estimate_syllable_count(word: str) -> int:
    """Estimate the number of syllables in ``word`` from its spelling.

    Counts vowel groups (``y`` included), drops a silent final ``e`` unless the
    word ends in ``-le``, and adds one for each vowel pair that is usually
    split across syllables. Returns ``0`` for input with no letters.
    """

    cleaned = _NON_LETTER_PATTERN.sub("", (word or "").lower())
    if not cleaned:
        return 0

    count = 0
    previous_was_vowel = False
    for char in cleaned:
        is_vowel = char in _VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if cleaned.endswith("e") and not cleaned.endswith("le") and count > 1:
        count -= 1

    count += len(_SPLIT_VOWEL_PATTERN.findall(cleaned))
    return max(1, count)
