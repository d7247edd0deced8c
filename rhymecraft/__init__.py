"""RhymeCraft: phonetic perfect and near-rhyme lookups for poetry tools."""

from .core import EngineSettings, RhymeEngine, get_default_engine

__all__ = ["EngineSettings", "RhymeEngine", "get_default_engine"]

__version__ = "0.1.0"
