"""Rhyme keys derived from a single pronunciation.

Two keys are used. The *near* key is the bare vowel of the last phoneme
carrying any stress digit and buckets words coarsely by their final vowel
sound. The *rhyme tail* runs from the last stressed vowel to the end of the
word and drives both perfect-rhyme grouping and near-rhyme scoring.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence, Tuple

PERFECT_KEY_DELIMITER = "-"

_STRESS_SUFFIX_PATTERN = re.compile(r"[012]$")
_ANY_STRESS = frozenset("012")
_STRONG_STRESS = frozenset("12")


def strip_stress(phone: str) -> str:
    """Remove a trailing stress digit from ``phone``."""

    return _STRESS_SUFFIX_PATTERN.sub("", phone)


def _last_index_with_stress(phones: Sequence[str], accepted: frozenset) -> Optional[int]:
    for index in range(len(phones) - 1, -1, -1):
        phone = phones[index]
        if phone and phone[-1] in accepted:
            return index
    return None


def rhyme_tail_start(phones: Sequence[str]) -> Optional[int]:
    """Index where the rhyme tail of ``phones`` begins, or ``None``.

    Prefers the last primary or secondary stressed vowel. Pronunciations with
    only unstressed vowels (mostly function words such as "the" or "a", and a
    few rare entries) fall back to the last vowel of any stress so they still
    get a usable tail.
    """

    index = _last_index_with_stress(phones, _STRONG_STRESS)
    if index is None:
        index = _last_index_with_stress(phones, _ANY_STRESS)
    return index


def rhyme_tail(phones: Sequence[str]) -> Optional[Tuple[str, ...]]:
    """Return the stress-stripped phonemes from the rhyme tail start onwards."""

    start = rhyme_tail_start(phones)
    if start is None:
        return None
    return tuple(strip_stress(phone) for phone in phones[start:])


def near_key(phones: Sequence[str]) -> Optional[str]:
    """Return the last vowel of ``phones`` regardless of its stress.

    Unlike :func:`rhyme_tail` this accepts unstressed vowels straight away, so
    "cinema" buckets under ``AH`` while its rhyme tail starts at ``IH``.
    """

    index = _last_index_with_stress(phones, _ANY_STRESS)
    if index is None:
        return None
    return strip_stress(phones[index])


def perfect_key(phones: Sequence[str]) -> Optional[str]:
    """Return the rhyme tail joined into a single hashable key."""

    tail = rhyme_tail(phones)
    if tail is None:
        return None
    return PERFECT_KEY_DELIMITER.join(tail).upper()


__all__ = [
    "PERFECT_KEY_DELIMITER",
    "near_key",
    "perfect_key",
    "rhyme_tail",
    "rhyme_tail_start",
    "strip_stress",
]
