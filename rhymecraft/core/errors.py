"""Exception hierarchy for the rhyme engine."""

from __future__ import annotations


class RhymeCraftError(RuntimeError):
    """Base class for errors raised by :mod:`rhymecraft`."""


class DictionaryLoadError(RhymeCraftError):
    """Raised when the pronouncing dictionary cannot be read or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Unable to load pronouncing dictionary from {source}: {reason}")
        self.source = source
        self.reason = reason


class FixtureGenerationError(RhymeCraftError):
    """Raised when the offline tooling cannot assemble enough test cases."""


__all__ = ["RhymeCraftError", "DictionaryLoadError", "FixtureGenerationError"]
