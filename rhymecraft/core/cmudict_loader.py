"""Utilities for working with the CMU pronouncing dictionary."""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import cmudict

from rhymecraft.utils.observability import create_histogram, get_logger, timed

from .errors import DictionaryLoadError

logger = get_logger(__name__)

_WORD_VARIANT_PATTERN = re.compile(r"\(\d+\)$")
_LOOKUP_PATTERN = re.compile(r"[^a-z'-]")
_STRESS_DIGITS = frozenset("012")

_LOAD_SECONDS = create_histogram(
    "rhymecraft_dictionary_load_seconds",
    "Time spent reading and parsing the pronouncing dictionary.",
)

DictionarySource = Union[str, Path, None]


@dataclass(frozen=True)
class Pronunciation:
    """One dictionary pronunciation of ``word``.

    ``phones`` keeps the stress digits attached to vowel phonemes; ``stresses``
    lists those digits in order, so its length is the syllable count.
    """

    word: str
    phones: Tuple[str, ...]
    stresses: Tuple[int, ...]

    @property
    def syllable_count(self) -> int:
        return len(self.stresses)


def _strip_variant(word: str) -> str:
    return _WORD_VARIANT_PATTERN.sub("", word).lower()


def normalize_word(word: str) -> str:
    """Lowercase ``word`` and drop characters a headword never contains."""

    return _LOOKUP_PATTERN.sub("", (word or "").lower())


def parse_cmudict(source: Union[str, Iterable[str]]) -> Dict[str, List[Pronunciation]]:
    """Parse dictionary text (or an iterable of lines) into pronunciations.

    Comment lines (``;;;``), blank lines and lines without at least one
    phoneme are skipped. Variant headwords such as ``word(2)`` are folded into
    ``word`` and appended in file order.
    """

    lines = source.splitlines() if isinstance(source, str) else source
    dictionary: Dict[str, List[Pronunciation]] = {}

    for line in lines:
        if line.startswith(";;;"):
            continue
        # cmudict.dict annotates some entries with a trailing "# comment".
        entry = line.split("#", 1)[0]
        parts = entry.split()
        if len(parts) < 2:
            continue

        raw_word, *phones = parts
        word = _strip_variant(raw_word)
        if not word:
            continue

        stresses = tuple(int(phone[-1]) for phone in phones if phone[-1] in _STRESS_DIGITS)
        pronunciation = Pronunciation(word=word, phones=tuple(phones), stresses=stresses)
        dictionary.setdefault(word, []).append(pronunciation)

    return dictionary


def best_pronunciation(
    pronunciations: Sequence[Pronunciation],
) -> Optional[Pronunciation]:
    """Return the pronunciation with the most syllables, first one on ties."""

    best: Optional[Pronunciation] = None
    for pronunciation in pronunciations:
        if best is None or pronunciation.syllable_count > best.syllable_count:
            best = pronunciation
    return best


def _read_source(source: DictionarySource) -> Tuple[str, str]:
    """Return ``(description, text)`` for the file at ``source``.

    ``None`` selects the CMU dictionary bundled with the ``cmudict``
    distribution.
    """

    if source is None:
        try:
            raw = cmudict.dict_string()
        except (OSError, LookupError) as error:
            raise DictionaryLoadError("cmudict package", str(error)) from error
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as error:
                raise DictionaryLoadError("cmudict package", str(error)) from error
        return "cmudict package", raw

    path = Path(source)
    try:
        return str(path), path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise DictionaryLoadError(str(path), str(error)) from error


class CMUDictLoader:
    """Lazy, thread-safe loader for a CMU-format pronouncing dictionary.

    ``source`` is always a file location (``None`` for the packaged
    dictionary). In-memory dictionary text goes through ``text`` or
    :meth:`from_text` and takes precedence over ``source``.
    """

    def __init__(self, source: DictionarySource = None, *, text: Optional[str] = None) -> None:
        self.source: DictionarySource = source
        self.text: Optional[str] = text
        self._pronunciations: Dict[str, Tuple[Pronunciation, ...]] = {}
        self._lock = threading.Lock()
        self._loaded: bool = False

    @classmethod
    def from_text(cls, text: str) -> "CMUDictLoader":
        return cls(text=text)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> "CMUDictLoader":
        """Read and parse the dictionary once; later calls are no-ops.

        Raises:
            DictionaryLoadError: when the source is missing, unreadable or
                yields no entries at all.
        """

        if self._loaded:
            return self

        with self._lock:
            if self._loaded:
                return self

            with timed(_LOAD_SECONDS) as elapsed:
                if self.text is not None:
                    description, text = "<text>", self.text
                else:
                    description, text = _read_source(self.source)
                parsed = parse_cmudict(text)

            if not parsed:
                raise DictionaryLoadError(description, "no pronunciation entries found")

            self._pronunciations = {
                word: tuple(entries) for word, entries in parsed.items()
            }
            self._loaded = True

        logger.info(
            "Loaded pronouncing dictionary",
            context={
                "source": description,
                "words": len(self._pronunciations),
                "seconds": round(elapsed["seconds"], 3),
            },
        )
        return self

    def get_pronunciations(self, word: str) -> List[Pronunciation]:
        self.load()
        normalized = normalize_word(word)
        stored = self._pronunciations.get(normalized)
        if not stored and "'" in normalized:
            stored = self._pronunciations.get(normalized.replace("'", ""))
        return list(stored or ())

    def get_best_pronunciation(self, word: str) -> Optional[Pronunciation]:
        return best_pronunciation(self.get_pronunciations(word))

    def entries(self) -> Iterator[Tuple[str, Tuple[Pronunciation, ...]]]:
        """Yield ``(word, pronunciations)`` in dictionary order."""

        self.load()
        return iter(self._pronunciations.items())

    def words(self) -> Iterator[str]:
        self.load()
        return iter(self._pronunciations)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return bool(self.get_pronunciations(word))

    def __len__(self) -> int:
        self.load()
        return len(self._pronunciations)


__all__ = [
    "CMUDictLoader",
    "DictionarySource",
    "Pronunciation",
    "best_pronunciation",
    "normalize_word",
    "parse_cmudict",
]
