#!/usr/bin/env python3
"""Generate near-rhyme regression cases from the dictionary and sense shards."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from rhymecraft.core.errors import RhymeCraftError
from rhymecraft.tools.cli import add_engine_arguments, engine_from_args
from rhymecraft.tools.fixtures import generate_near_rhyme_cases, save_cases
from rhymecraft.utils.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("tests") / "data" / "near_rhyme_cases.json",
        help="Where to write the generated cases.",
    )
    parser.add_argument("--count", type=int, default=50, help="Number of cases to emit.")
    return add_engine_arguments(parser)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        engine = engine_from_args(args)
        cases = generate_near_rhyme_cases(engine, args.count)
    except RhymeCraftError as error:
        print(error, file=sys.stderr)
        return 1

    args.output.parent.mkdir(parents=True, exist_ok=True)
    save_cases(cases, args.output)
    print(f"Wrote {len(cases)} near-rhyme cases to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
