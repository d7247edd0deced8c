"""Inverted indexes from rhyme keys to dictionary words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Tuple

from rhymecraft.utils.observability import (
    add_span_attributes,
    create_histogram,
    get_logger,
    start_span,
    timed,
)

from .cmudict_loader import CMUDictLoader, best_pronunciation
from .rhyme_keys import near_key, perfect_key

logger = get_logger(__name__)

_BUILD_SECONDS = create_histogram(
    "rhymecraft_index_build_seconds",
    "Time spent building the near and perfect rhyme indexes.",
)


@dataclass(frozen=True)
class RhymeIndex:
    """Near-key and perfect-key buckets built from one dictionary.

    Words appear in each bucket in dictionary order. Candidate truncation in
    near-rhyme lookups depends on that order, so buckets are never re-sorted.
    """

    near: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    perfect: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def build(cls, loader: CMUDictLoader) -> "RhymeIndex":
        near: Dict[str, List[str]] = {}
        perfect: Dict[str, List[str]] = {}

        with start_span("rhymecraft.index.build") as span, timed(_BUILD_SECONDS) as elapsed:
            for word, pronunciations in loader.entries():
                best = best_pronunciation(pronunciations)
                if best is None:
                    continue

                key = near_key(best.phones)
                if key is not None:
                    near.setdefault(key, []).append(word)

                key = perfect_key(best.phones)
                if key is not None:
                    perfect.setdefault(key, []).append(word)

            add_span_attributes(
                span,
                {"near_buckets": len(near), "perfect_buckets": len(perfect)},
            )

        logger.info(
            "Built rhyme index",
            context={
                "near_buckets": len(near),
                "perfect_buckets": len(perfect),
                "seconds": round(elapsed["seconds"], 3),
            },
        )
        return cls(
            near={key: tuple(words) for key, words in near.items()},
            perfect={key: tuple(words) for key, words in perfect.items()},
        )

    def near_bucket(self, key: str) -> Tuple[str, ...]:
        return self.near.get(key, ())

    def perfect_bucket(self, key: str) -> Tuple[str, ...]:
        return self.perfect.get(key, ())


__all__ = ["RhymeIndex"]
