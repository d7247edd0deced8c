#!/usr/bin/env python3
"""Sanity-check perfect rhymes and syllable counts on well-known words."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from rhymecraft.core.errors import DictionaryLoadError
from rhymecraft.tools.cli import add_engine_arguments, engine_from_args
from rhymecraft.tools.fixtures import run_phase_one_check
from rhymecraft.utils.logging_config import configure_logging


def main(argv: Sequence[str] | None = None) -> int:
    parser = add_engine_arguments(argparse.ArgumentParser(description=__doc__))
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        engine = engine_from_args(args)
    except DictionaryLoadError as error:
        print(error, file=sys.stderr)
        return 1

    report = run_phase_one_check(engine)
    for line in report.lines:
        print(line)

    print("\nSUMMARY")
    print(f"Rhyme tests: {report.rhyme_passes}/{report.rhyme_total}")
    print(f"Syllable accuracy: {report.syllable_rate * 100:.1f}%")
    print(f"Fallback accuracy: {report.estimate_rate * 100:.1f}%")
    return 0 if report.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
