"""Word-sense lookups backed by JSON shards keyed on a two-letter prefix.

Each shard ``<prefix>.json`` maps a lowercase word to a list of senses shaped
as ``{"gloss": str, "pos": str, "synonyms": [{"word": str, "score": int}]}``.
The offline fixture tooling uses these shards to keep test targets to words
with a known meaning.
"""

from __future__ import annotations

import json
import re
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from rhymecraft.utils.observability import get_logger

logger = get_logger(__name__)

_NON_LETTER_PATTERN = re.compile(r"[^a-z]")
_PREFIX_FILLER = "_"


def _synonym_score(value: Any) -> int:
    """Coerce a stored synonym score to ``int``; missing or malformed is 0."""

    if isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


@dataclass(frozen=True)
class Sense:
    gloss: str
    pos: str
    synonyms: Tuple[Tuple[str, int], ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Sense":
        synonyms = []
        for item in payload.get("synonyms") or ():
            if isinstance(item, Mapping) and isinstance(item.get("word"), str):
                synonyms.append((item["word"], _synonym_score(item.get("score"))))
        return cls(
            gloss=str(payload.get("gloss", "")),
            pos=str(payload.get("pos", "")),
            synonyms=tuple(synonyms),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gloss": self.gloss,
            "pos": self.pos,
            "synonyms": [{"word": word, "score": score} for word, score in self.synonyms],
        }


def shard_prefix(word: str) -> str:
    """Return the shard name for ``word``: its first two letters, ``_``-padded."""

    letters = _NON_LETTER_PATTERN.sub("", (word or "").lower())
    return letters[:2].ljust(2, _PREFIX_FILLER)


class SenseGate:
    """Lazily loads sense shards from ``directory`` and caches them."""

    def __init__(self, directory: Optional[Union[str, Path]]) -> None:
        self.directory = Path(directory) if directory is not None else None
        self._shards: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def _read_shard(self, prefix: str) -> Dict[str, Any]:
        if self.directory is None:
            return {}
        path = self.directory / f"{prefix}.json"
        try:
            with path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as error:
            logger.warning(
                "Ignoring unreadable sense shard",
                context={"path": str(path), "error": str(error)},
            )
            return {}
        return payload if isinstance(payload, dict) else {}

    def _shard(self, prefix: str) -> Dict[str, Any]:
        shard = self._shards.get(prefix)
        if shard is not None:
            return shard
        with self._lock:
            shard = self._shards.get(prefix)
            if shard is None:
                shard = self._read_shard(prefix)
                self._shards[prefix] = shard
        return shard

    def get_senses(self, word: str) -> List[Sense]:
        normalized = _NON_LETTER_PATTERN.sub("", (word or "").lower())
        if not normalized:
            return []
        entries = self._shard(shard_prefix(normalized)).get(normalized) or ()
        return [Sense.from_dict(entry) for entry in entries if isinstance(entry, Mapping)]

    def has_sense(self, word: str) -> bool:
        normalized = _NON_LETTER_PATTERN.sub("", (word or "").lower())
        if not normalized:
            return False
        return bool(self._shard(shard_prefix(normalized)).get(normalized))


def write_sense_shards(
    entries: Iterable[Tuple[str, Iterable[Sense]]],
    directory: Union[str, Path],
) -> int:
    """Group ``(word, senses)`` pairs by prefix and write one shard per prefix.

    Words without senses are skipped. Returns the number of shards written.
    """

    shards: Dict[str, Dict[str, List[Dict[str, Any]]]] = {}
    for word, senses in entries:
        payload = [sense.to_dict() for sense in senses]
        if not payload:
            continue
        shards.setdefault(shard_prefix(word), {})[word] = payload

    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)
    for prefix, payload in shards.items():
        (target / f"{prefix}.json").write_text(json.dumps(payload), encoding="utf-8")

    logger.info(
        "Wrote sense shards",
        context={"directory": str(target), "shards": len(shards)},
    )
    return len(shards)


__all__ = ["Sense", "SenseGate", "shard_prefix", "write_sense_shards"]
