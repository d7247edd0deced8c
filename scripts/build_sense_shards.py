#!/usr/bin/env python3
"""Build prefix-sharded word-sense JSON files from WordNet.

Requires the ``wordnet`` extra and the NLTK WordNet corpus
(``python -m nltk.downloader wordnet``).
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple

from nltk.corpus import wordnet as wn

from rhymecraft.core.senses import Sense, write_sense_shards
from rhymecraft.utils.logging_config import configure_logging

_POS_LABELS = {"n": "noun", "v": "verb", "a": "adj", "s": "adj", "r": "adv"}


def _normalize(lemma: str) -> str:
    return " ".join(lemma.lower().replace("_", " ").split())


def iter_senses() -> Iterator[Tuple[str, List[Sense]]]:
    """Yield each WordNet lemma with its senses, keeping only senses that
    contribute at least one new synonym."""

    for lemma in sorted({_normalize(name) for name in wn.all_lemma_names()}):
        senses: List[Sense] = []
        seen: set = set()
        for sense_index, synset in enumerate(wn.synsets(lemma.replace(" ", "_"))):
            synonyms: List[Tuple[str, int]] = []
            for name in synset.lemma_names():
                word = _normalize(name)
                if word == lemma or word in seen:
                    continue
                seen.add(word)
                synonyms.append((word, 1000 - sense_index * 60 - len(synonyms) * 4))
            if synonyms:
                gloss = synset.definition().split(";")[0].strip() or "General meaning"
                senses.append(Sense(gloss, _POS_LABELS.get(synset.pos(), synset.pos()), tuple(synonyms)))
        if senses:
            yield lemma, senses


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("output", type=Path, help="Directory for the <prefix>.json shards.")
    args = parser.parse_args(argv)
    configure_logging()

    shards = write_sense_shards(iter_senses(), args.output)
    print(f"Wrote {shards} sense shards to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
