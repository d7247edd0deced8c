"""Near-rhyme candidate filtering and quality scoring."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .cmudict_loader import CMUDictLoader
from .rhyme_keys import rhyme_tail
from .settings import EngineSettings

STOPWORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "to", "of", "in", "on", "for", "at",
        "by", "from", "is", "am", "are", "be", "was", "were", "been", "being",
        "i", "me", "my", "you", "your", "yours", "we", "us", "our", "he",
        "him", "his", "she", "her", "it", "its", "they", "them", "their",
        "this", "that", "these", "those",
    }
)

_LETTERS_PATTERN = re.compile(r"^[A-Za-z-]+$")
_VOWEL_LETTER_PATTERN = re.compile(r"[aeiouy]", re.IGNORECASE)


@dataclass(frozen=True)
class ScoredCandidate:
    """A near-rhyme candidate that survived filtering, with its score."""

    word: str
    syllable_count: int
    rhyme_tail: Tuple[str, ...]
    quality: float


def is_valid_near_rhyme(candidate: str) -> bool:
    """Return ``True`` when ``candidate`` is a plausible standalone word."""

    trimmed = (candidate or "").strip()
    if not trimmed or trimmed.startswith("'"):
        return False
    normalized = trimmed.lower()
    if len(normalized) < 3 or normalized in STOPWORDS:
        return False
    if not _LETTERS_PATTERN.match(trimmed):
        return False
    return bool(_VOWEL_LETTER_PATTERN.search(trimmed))


def suffix_matches(target: Sequence[str], candidate: Sequence[str]) -> int:
    """Count equal phonemes when both tails are aligned from the end."""

    return sum(1 for a, b in zip(reversed(target), reversed(candidate)) if a == b)


def required_matches(min_length: int) -> int:
    return 2 if min_length >= 3 else 1


def rhyme_quality(target: Optional[Sequence[str]], candidate: Optional[Sequence[str]]) -> float:
    """Score how closely two rhyme tails agree, in ``[0, 1]``.

    Equal-length tails score the fraction of matching positions. Otherwise the
    shorter tail is compared against the end of the longer one and the result
    is scaled by the length ratio.
    """

    if not target or not candidate:
        return 0.0

    if len(target) == len(candidate):
        matches = sum(1 for a, b in zip(target, candidate) if a == b)
        return matches / len(target)

    min_length = min(len(target), len(candidate))
    length_penalty = min_length / max(len(target), len(candidate))
    return (suffix_matches(target, candidate) / min_length) * length_penalty


class NearRhymeFilter:
    """Four-stage filter applied to near-rhyme candidates for a query word.

    Stages run in order and all must pass: lexical validity, matching stressed
    vowel, syllable proximity, then suffix overlap with a minimum quality.
    """

    def __init__(self, loader: CMUDictLoader, settings: Optional[EngineSettings] = None) -> None:
        self.loader = loader
        self.settings = settings or EngineSettings()

    def _tail(self, word: str) -> Optional[Tuple[str, ...]]:
        best = self.loader.get_best_pronunciation(word)
        return rhyme_tail(best.phones) if best is not None else None

    def _syllables(self, word: str) -> int:
        best = self.loader.get_best_pronunciation(word)
        return best.syllable_count if best is not None else 0

    def _evaluate(
        self,
        candidate: str,
        target_tail: Optional[Tuple[str, ...]],
        target_syllables: int,
    ) -> Optional[ScoredCandidate]:
        if not is_valid_near_rhyme(candidate):
            return None

        tail = self._tail(candidate)
        if target_tail and (not tail or tail[0] != target_tail[0]):
            return None

        syllables = self._syllables(candidate)
        if abs(syllables - target_syllables) > self.settings.syllable_tolerance:
            return None

        if not target_tail:
            # Nothing to compare against; the earlier stages decide alone.
            return ScoredCandidate(candidate, syllables, tail or (), 0.0)

        minimum = self.settings.min_tail_length
        if not tail or len(tail) < minimum or len(target_tail) < minimum:
            return None

        min_length = min(len(target_tail), len(tail))
        if suffix_matches(target_tail, tail) < required_matches(min_length):
            return None

        quality = rhyme_quality(target_tail, tail)
        if quality < self.settings.quality_threshold:
            return None
        return ScoredCandidate(candidate, syllables, tail, quality)

    def score(
        self,
        word: str,
        candidates: Iterable[str],
        *,
        rank: bool = False,
    ) -> List[ScoredCandidate]:
        """Return surviving candidates with their scores.

        Input order is kept unless ``rank`` is set, in which case results are
        sorted by descending quality (ties keep input order).
        """

        target_tail = self._tail(word)
        target_syllables = self._syllables(word)

        results: List[ScoredCandidate] = []
        for candidate in candidates:
            scored = self._evaluate(candidate, target_tail, target_syllables)
            if scored is not None:
                results.append(scored)

        if rank:
            results.sort(key=lambda item: item.quality, reverse=True)
        return results

    def filter(self, word: str, candidates: Iterable[str]) -> List[str]:
        return [scored.word for scored in self.score(word, candidates)]


__all__ = [
    "NearRhymeFilter",
    "STOPWORDS",
    "ScoredCandidate",
    "is_valid_near_rhyme",
    "required_matches",
    "rhyme_quality",
    "suffix_matches",
]
