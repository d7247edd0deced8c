"""Offline generation and verification of near-rhyme regression fixtures."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from rhymecraft.core.engine import RhymeEngine
from rhymecraft.core.errors import FixtureGenerationError
from rhymecraft.core.scorer import is_valid_near_rhyme, rhyme_quality
from rhymecraft.utils.observability import get_logger
from rhymecraft.utils.syllables import estimate_syllable_count

logger = get_logger(__name__)

_LOWER_ALPHA_PATTERN = re.compile(r"^[a-z]+$")

NearRhymeCase = Dict[str, str]


@dataclass(frozen=True)
class CaseFailure:
    word: str
    reason: str
    candidate: Optional[str] = None


def _is_fixture_word(engine: RhymeEngine, word: str) -> bool:
    return len(word) > 2 and bool(_LOWER_ALPHA_PATTERN.match(word)) and engine.has_sense(word)


def generate_near_rhyme_cases(
    engine: RhymeEngine,
    count: int = 50,
    *,
    min_group: int = 4,
    min_results: int = 10,
    candidate_limit: int = 400,
) -> List[NearRhymeCase]:
    """Pick one well-rhymed, real word per perfect-rhyme group.

    Groups are visited in index order. A group qualifies when it holds at
    least ``min_group`` fixture-worthy words; its first such word becomes a
    case when it yields ``min_results`` filtered near rhymes.

    Raises:
        FixtureGenerationError: when fewer than ``count`` cases are found.
    """

    cases: List[NearRhymeCase] = []
    for words in engine.index.perfect.values():
        if len(cases) >= count:
            break
        unique = [
            word for word in dict.fromkeys(words) if _is_fixture_word(engine, word)
        ]
        if len(unique) < min_group:
            continue
        target = unique[0]
        filtered = engine.filter_near_rhymes(
            target, engine.get_near_rhyme_candidates(target, candidate_limit)
        )
        if len(filtered) < min_results:
            continue
        cases.append({"word": target})

    if len(cases) < count:
        raise FixtureGenerationError(f"Could only generate {len(cases)} of {count} cases")

    logger.info("Generated near-rhyme cases", context={"cases": len(cases)})
    return cases


def _offending_candidate(engine: RhymeEngine, word: str, candidates: Sequence[str]) -> Optional[str]:
    target_tail = engine.get_rhyme_tail(word)
    target_syllables = engine.get_syllable_count(word)
    tolerance = engine.settings.syllable_tolerance
    threshold = engine.settings.quality_threshold

    for candidate in candidates:
        if not is_valid_near_rhyme(candidate):
            return candidate
        if abs(engine.get_syllable_count(candidate) - target_syllables) > tolerance:
            return candidate
        tail = engine.get_rhyme_tail(candidate)
        if not tail or len(tail) < 2 or not target_tail:
            return candidate
        if tail[0] != target_tail[0]:
            return candidate
        if rhyme_quality(target_tail, tail) < threshold:
            return candidate
    return None


def verify_near_rhyme_cases(
    engine: RhymeEngine,
    cases: Iterable[NearRhymeCase],
    *,
    top: int = 30,
    min_results: int = 5,
    candidate_limit: int = 400,
) -> List[CaseFailure]:
    """Re-run each case and re-check the top results against every rule."""

    failures: List[CaseFailure] = []
    for case in cases:
        word = case["word"]
        candidates = engine.get_near_rhyme_candidates(word, candidate_limit)
        results = engine.filter_near_rhymes(word, candidates)[:top]

        if len(results) < min_results:
            failures.append(CaseFailure(word, f"too few near rhymes ({len(results)})"))
            continue

        bad = _offending_candidate(engine, word, results)
        if bad is not None:
            failures.append(CaseFailure(word, "bad near rhyme", bad))

    for failure in failures:
        logger.warning(
            "Near-rhyme case failed",
            context={"word": failure.word, "reason": failure.reason, "candidate": failure.candidate},
        )
    return failures


def load_cases(path: Union[str, Path]) -> List[NearRhymeCase]:
    with Path(path).open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    return [
        {"word": str(item["word"])}
        for item in payload
        if isinstance(item, dict) and item.get("word")
    ]


def save_cases(cases: Sequence[NearRhymeCase], path: Union[str, Path]) -> None:
    Path(path).write_text(json.dumps(list(cases), indent=2), encoding="utf-8")


# Phase-one sanity check -----------------------------------------------------
PERFECT_RHYME_EXPECTATIONS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("time", ("dime", "lime", "chime", "rhyme")),
    ("light", ("night", "sight", "bright")),
    ("moon", ("tune", "soon", "loon")),
    ("love", ("dove", "glove", "above")),
    ("cold", ("bold", "told", "fold")),
    ("nation", ("station", "relation", "creation")),
    ("flower", ("power", "shower", "tower")),
    ("ocean", ("motion", "notion", "lotion")),
    ("story", ("glory", "gory", "allegory")),
)

SYLLABLE_EXPECTATIONS: Tuple[Tuple[str, int], ...] = (
    ("cat", 1),
    ("love", 1),
    ("banana", 3),
    ("beautiful", 3),
    ("poetry", 3),
    ("forever", 3),
    ("memory", 3),
    ("tomorrow", 3),
)

ESTIMATE_EXPECTATIONS: Tuple[Tuple[str, int], ...] = (
    ("blorfle", 2),
    ("snorple", 2),
    ("flarion", 3),
)


@dataclass
class PhaseOneReport:
    rhyme_passes: int = 0
    rhyme_total: int = 0
    syllable_correct: int = 0
    syllable_total: int = 0
    estimate_correct: int = 0
    estimate_total: int = 0
    lines: List[str] = field(default_factory=list)

    @property
    def syllable_rate(self) -> float:
        return self.syllable_correct / self.syllable_total if self.syllable_total else 0.0

    @property
    def estimate_rate(self) -> float:
        return self.estimate_correct / self.estimate_total if self.estimate_total else 0.0

    @property
    def passed(self) -> bool:
        return (
            self.rhyme_passes == self.rhyme_total
            and self.syllable_rate >= 0.9
            and self.estimate_rate >= 0.9
        )


def run_phase_one_check(engine: RhymeEngine) -> PhaseOneReport:
    """Check perfect-rhyme grouping and syllable counts on well-known words."""

    report = PhaseOneReport()

    for word, expected in PERFECT_RHYME_EXPECTATIONS:
        group = set(engine.get_perfect_rhyme_group(word))
        hits = [candidate for candidate in expected if candidate in group]
        passed = len(hits) >= 3
        report.rhyme_total += 1
        report.rhyme_passes += int(passed)
        report.lines.append(
            f"RHYME {word}: {len(hits)}/{len(expected)} -> {'PASS' if passed else 'FAIL'}"
        )

    for word, expected in SYLLABLE_EXPECTATIONS:
        count = engine.estimate_syllable_count(word)
        report.syllable_total += 1
        report.syllable_correct += int(count == expected)
        report.lines.append(f"SYLL {word}: {count} (expected {expected})")

    for word, expected in ESTIMATE_EXPECTATIONS:
        count = estimate_syllable_count(word)
        report.estimate_total += 1
        report.estimate_correct += int(count == expected)
        report.lines.append(f"FALLBACK {word}: {count} (expected {expected})")

    return report


__all__ = [
    "CaseFailure",
    "PhaseOneReport",
    "generate_near_rhyme_cases",
    "load_cases",
    "run_phase_one_check",
    "save_cases",
    "verify_near_rhyme_cases",
]
