"""Runtime configuration for the rhyme engine."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from rhymecraft.utils.observability import get_logger

logger = get_logger(__name__)

_CMUDICT_PATH_ENV = "RHYMECRAFT_CMUDICT_PATH"
_SENSE_DIR_ENV = "RHYMECRAFT_SENSE_DIR"
_QUALITY_THRESHOLD_ENV = "RHYMECRAFT_QUALITY_THRESHOLD"
_NEAR_LIMIT_ENV = "RHYMECRAFT_NEAR_LIMIT"

DEFAULT_QUALITY_THRESHOLD = 0.45
DEFAULT_NEAR_LIMIT = 200


@dataclass(frozen=True)
class EngineSettings:
    """Tunable defaults for dictionary location and near-rhyme filtering.

    ``quality_threshold`` and the suffix match requirements were chosen
    empirically against the regression fixtures; change them together with
    the fixtures rather than in isolation.
    """

    cmudict_path: Optional[Path] = None
    sense_dir: Optional[Path] = None
    quality_threshold: float = DEFAULT_QUALITY_THRESHOLD
    near_limit: int = DEFAULT_NEAR_LIMIT
    min_tail_length: int = 2
    syllable_tolerance: int = 1

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        env = os.environ if environ is None else environ
        settings = cls()

        cmudict_path = env.get(_CMUDICT_PATH_ENV, "").strip()
        if cmudict_path:
            settings = replace(settings, cmudict_path=Path(cmudict_path))

        sense_dir = env.get(_SENSE_DIR_ENV, "").strip()
        if sense_dir:
            settings = replace(settings, sense_dir=Path(sense_dir))

        raw_threshold = env.get(_QUALITY_THRESHOLD_ENV)
        if raw_threshold:
            try:
                threshold = float(raw_threshold)
            except ValueError:
                threshold = None
            if threshold is None or not 0.0 <= threshold <= 1.0:
                logger.warning(
                    "Ignoring invalid quality threshold",
                    context={"env": _QUALITY_THRESHOLD_ENV, "value": raw_threshold},
                )
            else:
                settings = replace(settings, quality_threshold=threshold)

        raw_limit = env.get(_NEAR_LIMIT_ENV)
        if raw_limit:
            try:
                limit = int(raw_limit)
            except ValueError:
                limit = -1
            if limit < 0:
                logger.warning(
                    "Ignoring invalid near-rhyme limit",
                    context={"env": _NEAR_LIMIT_ENV, "value": raw_limit},
                )
            else:
                settings = replace(settings, near_limit=limit)

        return settings


__all__ = ["EngineSettings", "DEFAULT_QUALITY_THRESHOLD", "DEFAULT_NEAR_LIMIT"]
