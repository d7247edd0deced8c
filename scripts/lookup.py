#!/usr/bin/env python3
"""Print perfect and near rhymes for a word as JSON."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from rhymecraft.core.errors import DictionaryLoadError
from rhymecraft.tools.cli import add_engine_arguments, engine_from_args
from rhymecraft.utils.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up rhymes for a single word.")
    parser.add_argument("word", help="Word to rhyme.")
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum near-rhyme candidates to consider before filtering.",
    )
    parser.add_argument(
        "--scores",
        action="store_true",
        help="Include quality scores, ranked best first.",
    )
    return add_engine_arguments(parser)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        engine = engine_from_args(args)
    except DictionaryLoadError as error:
        print(error, file=sys.stderr)
        return 1

    candidates = engine.get_near_rhyme_candidates(args.word, args.limit)
    payload = {
        "word": args.word,
        "syllables": engine.get_syllable_count(args.word),
        "rhyme_tail": list(engine.get_rhyme_tail(args.word) or ()),
        "perfect": [w for w in engine.get_perfect_rhyme_group(args.word) if w != args.word.lower()],
    }
    if args.scores:
        payload["near"] = [
            {"word": item.word, "syllables": item.syllable_count, "quality": round(item.quality, 3)}
            for item in engine.score_near_rhymes(args.word, candidates, rank=True)
        ]
    else:
        payload["near"] = engine.filter_near_rhymes(args.word, candidates)

    json.dump(payload, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
