"""Argument helpers shared by the scripts in ``scripts/``."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path

from rhymecraft.core.engine import RhymeEngine
from rhymecraft.core.settings import EngineSettings


def add_engine_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        "--dictionary",
        type=Path,
        help="CMU-format dictionary file (defaults to the packaged cmudict).",
    )
    parser.add_argument(
        "--senses",
        type=Path,
        help="Directory of word-sense shards (<prefix>.json).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to RHYMECRAFT_LOG_LEVEL or INFO).",
    )
    return parser


def engine_from_args(args: argparse.Namespace) -> RhymeEngine:
    """Build an engine from environment settings overridden by CLI flags."""

    settings = EngineSettings.from_env()
    if getattr(args, "dictionary", None) is not None:
        settings = replace(settings, cmudict_path=args.dictionary)
    if getattr(args, "senses", None) is not None:
        settings = replace(settings, sense_dir=args.senses)
    return RhymeEngine(settings).load_dictionary()


__all__ = ["add_engine_arguments", "engine_from_args"]
