"""Phonetic rhyme matching built on the CMU pronouncing dictionary."""

from .cmudict_loader import (
    CMUDictLoader,
    Pronunciation,
    best_pronunciation,
    normalize_word,
    parse_cmudict,
)
from .engine import RhymeEngine, get_default_engine
from .errors import DictionaryLoadError, FixtureGenerationError, RhymeCraftError
from .rhyme_index import RhymeIndex
from .rhyme_keys import near_key, perfect_key, rhyme_tail, strip_stress
from .scorer import (
    STOPWORDS,
    NearRhymeFilter,
    ScoredCandidate,
    is_valid_near_rhyme,
    rhyme_quality,
)
from .senses import Sense, SenseGate, shard_prefix, write_sense_shards
from .settings import EngineSettings

__all__ = [
    "CMUDictLoader",
    "DictionaryLoadError",
    "EngineSettings",
    "FixtureGenerationError",
    "NearRhymeFilter",
    "Pronunciation",
    "RhymeCraftError",
    "RhymeEngine",
    "RhymeIndex",
    "STOPWORDS",
    "ScoredCandidate",
    "Sense",
    "SenseGate",
    "best_pronunciation",
    "get_default_engine",
    "is_valid_near_rhyme",
    "near_key",
    "normalize_word",
    "parse_cmudict",
    "perfect_key",
    "rhyme_quality",
    "rhyme_tail",
    "shard_prefix",
    "strip_stress",
    "write_sense_shards",
]
