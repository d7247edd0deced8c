#!/usr/bin/env python3
"""Verify the engine still produces good near rhymes for saved cases."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from rhymecraft.core.errors import DictionaryLoadError
from rhymecraft.tools.cli import add_engine_arguments, engine_from_args
from rhymecraft.tools.fixtures import load_cases, verify_near_rhyme_cases
from rhymecraft.utils.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--cases",
        type=Path,
        default=Path("tests") / "data" / "near_rhyme_cases.json",
        help="JSON list of {\"word\": ...} cases.",
    )
    return add_engine_arguments(parser)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if not args.cases.exists():
        print(
            f"Missing {args.cases}. Run scripts/generate_near_rhyme_cases.py first.",
            file=sys.stderr,
        )
        return 1

    try:
        engine = engine_from_args(args)
    except DictionaryLoadError as error:
        print(error, file=sys.stderr)
        return 1

    cases = load_cases(args.cases)
    failures = verify_near_rhyme_cases(engine, cases)
    for failure in failures:
        detail = f": {failure.candidate}" if failure.candidate else ""
        print(f"{failure.reason} for \"{failure.word}\"{detail}", file=sys.stderr)

    if failures:
        print(f"\nNear rhyme tests failed: {len(failures)}/{len(cases)}", file=sys.stderr)
        return 1

    print(f"Near rhyme tests passed ({len(cases)} cases).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
