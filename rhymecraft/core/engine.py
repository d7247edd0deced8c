"""Rhyme engine facade combining the dictionary, indexes and filters."""

from __future__ import annotations

import threading
from typing import Iterable, List, Optional, Tuple

from rhymecraft.utils.observability import (
    add_span_attributes,
    create_counter,
    get_logger,
    start_span,
)
from rhymecraft.utils.syllables import estimate_syllable_count

from .cmudict_loader import CMUDictLoader, DictionarySource, Pronunciation, normalize_word
from .rhyme_index import RhymeIndex
from .rhyme_keys import near_key, perfect_key, rhyme_tail
from .scorer import NearRhymeFilter, ScoredCandidate
from .senses import SenseGate
from .settings import EngineSettings

logger = get_logger(__name__)

_QUERIES = create_counter(
    "rhymecraft_queries",
    "Rhyme engine queries by operation.",
    label_names=("operation",),
)
_EMPTY_RESULTS = create_counter(
    "rhymecraft_empty_results",
    "Rhyme engine queries that produced no results.",
    label_names=("operation",),
)


class RhymeEngine:
    """Owns one dictionary, its rhyme indexes and the sense shards.

    Everything is built lazily on first use and never mutated afterwards, so a
    single instance can be shared between threads. Unknown words never raise;
    they yield ``0``, ``None`` or empty lists.
    """

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        *,
        loader: Optional[CMUDictLoader] = None,
        senses: Optional[SenseGate] = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self.loader = loader or CMUDictLoader(self.settings.cmudict_path)
        self.senses = senses or SenseGate(self.settings.sense_dir)
        self.near_filter = NearRhymeFilter(self.loader, self.settings)
        self._index: Optional[RhymeIndex] = None
        self._index_lock = threading.Lock()

    # Resource management ---------------------------------------------------
    def load_dictionary(
        self,
        source: DictionarySource = None,
        *,
        text: Optional[str] = None,
    ) -> "RhymeEngine":
        """Load the dictionary and build the indexes once.

        ``source`` (a file location) or ``text`` (dictionary contents) replaces
        the configured dictionary only before the first load; afterwards the
        call is a no-op.
        """

        if not self.loader.loaded:
            if text is not None:
                self.loader.text = text
            elif source is not None:
                self.loader.source = source
                self.loader.text = None
        self.loader.load()
        self.ensure_index()
        return self

    def ensure_index(self) -> RhymeIndex:
        if self._index is None:
            with self._index_lock:
                if self._index is None:
                    self._index = RhymeIndex.build(self.loader)
        return self._index

    @property
    def index(self) -> RhymeIndex:
        return self.ensure_index()

    # Word-level lookups ----------------------------------------------------
    def get_pronunciations(self, word: str) -> List[Pronunciation]:
        return self.loader.get_pronunciations(word)

    def get_syllable_count(self, word: str) -> int:
        best = self.loader.get_best_pronunciation(word)
        return best.syllable_count if best is not None else 0

    def estimate_syllable_count(self, word: str) -> int:
        """Dictionary syllable count, falling back to a spelling estimate."""

        count = self.get_syllable_count(word)
        return count if count else estimate_syllable_count(word)

    def get_rhyme_tail(self, word: str) -> Optional[Tuple[str, ...]]:
        best = self.loader.get_best_pronunciation(word)
        return rhyme_tail(best.phones) if best is not None else None

    def has_sense(self, word: str) -> bool:
        return self.senses.has_sense(word)

    # Rhyme queries ---------------------------------------------------------
    def get_near_rhyme_candidates(self, word: str, limit: Optional[int] = None) -> List[str]:
        """Words sharing the final vowel sound of ``word``, in index order."""

        _QUERIES.labels(operation="near_candidates").inc()
        limit = self.settings.near_limit if limit is None else limit

        best = self.loader.get_best_pronunciation(word)
        key = near_key(best.phones) if best is not None else None
        if key is None or limit <= 0:
            _EMPTY_RESULTS.labels(operation="near_candidates").inc()
            return []

        # The query may resolve to another headword (can't -> cant).
        excluded = {normalize_word(word), best.word}
        bucket = self.index.near_bucket(key)
        return [candidate for candidate in bucket if candidate not in excluded][:limit]

    def filter_near_rhymes(self, word: str, candidates: Iterable[str]) -> List[str]:
        _QUERIES.labels(operation="filter").inc()
        return self.near_filter.filter(word, candidates)

    def score_near_rhymes(
        self,
        word: str,
        candidates: Iterable[str],
        *,
        rank: bool = False,
    ) -> List[ScoredCandidate]:
        _QUERIES.labels(operation="score").inc()
        return self.near_filter.score(word, candidates, rank=rank)

    def get_near_rhymes(self, word: str, limit: Optional[int] = None) -> List[str]:
        """Candidate lookup followed by filtering, as the UI layer uses it."""

        with start_span("rhymecraft.near_rhymes", {"word": word}) as span:
            candidates = self.get_near_rhyme_candidates(word, limit)
            results = self.filter_near_rhymes(word, candidates)
            add_span_attributes(
                span,
                {"candidates": len(candidates), "results": len(results)},
            )
        if not results:
            _EMPTY_RESULTS.labels(operation="near_rhymes").inc()
            logger.debug("No near rhymes", context={"word": word})
        return results

    def get_perfect_rhyme_group(self, word: str) -> List[str]:
        """All dictionary words sharing the perfect-rhyme key of ``word``."""

        _QUERIES.labels(operation="perfect_group").inc()
        best = self.loader.get_best_pronunciation(word)
        key = perfect_key(best.phones) if best is not None else None
        if key is None:
            _EMPTY_RESULTS.labels(operation="perfect_group").inc()
            return []
        return list(self.index.perfect_bucket(key))

    def is_perfect_rhyme(self, first: str, second: str) -> bool:
        first_best = self.loader.get_best_pronunciation(first)
        second_best = self.loader.get_best_pronunciation(second)
        if first_best is None or second_best is None:
            return False
        first_key = perfect_key(first_best.phones)
        return first_key is not None and first_key == perfect_key(second_best.phones)


_default_engine: Optional[RhymeEngine] = None
_default_lock = threading.Lock()


def get_default_engine() -> RhymeEngine:
    """Return a process-wide engine configured from the environment."""

    global _default_engine
    if _default_engine is None:
        with _default_lock:
            if _default_engine is None:
                _default_engine = RhymeEngine(EngineSettings.from_env())
    return _default_engine


__all__ = ["RhymeEngine", "get_default_engine"]
