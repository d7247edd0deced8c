import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rhymecraft.core import CMUDictLoader, EngineSettings, RhymeEngine, SenseGate


SAMPLE_DICTIONARY = """\
;;; Small CMU-style dictionary used by the unit tests.
NIGHT  N AY1 T
LIGHT  L AY1 T
SIGHT  S AY1 T
BRIGHT  B R AY1 T
KITE  K AY1 T
BITE  B AY1 T
THE  DH AH0
THE(2)  DH AH1
THE(3)  DH IY0
CAT  K AE1 T
HAT  HH AE1 T
AT  AE1 T
BAT  B AE1 T
SAT  S AE1 T
CANT  K AE1 N T
THAT  DH AE1 T
CAT'S  K AE1 T S
ACROBAT  AE1 K R AH0 B AE2 T
MATTER  M AE1 T ER0
CINEMA  S IH1 N AH0 M AH0
READ  R EH1 D
READ(2)  R IY1 D
ORANGE  AO1 R AH0 N JH
ORANGE(2)  AO1 R IH0 N JH
D'ARTAGNAN  D AH0 T AE1 NG Y AH0 N # foreign french
DUH  D AH1
WAX  W AE1 K S
HMM  HH M
BROKEN

"""

NIGHT_GROUP = ("night", "light", "sight", "bright", "kite", "bite")


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_DICTIONARY


@pytest.fixture
def sample_path(tmp_path) -> Path:
    path = tmp_path / "cmudict.dict"
    path.write_text(SAMPLE_DICTIONARY, encoding="utf-8")
    return path


@pytest.fixture
def sample_loader(sample_text) -> CMUDictLoader:
    return CMUDictLoader.from_text(sample_text)


@pytest.fixture
def sense_dir(tmp_path) -> Path:
    """Sense shards that only know the words rhyming with "night"."""

    directory = tmp_path / "senses"
    directory.mkdir()
    shards: dict = {}
    for word in NIGHT_GROUP:
        shards.setdefault(word[:2], {})[word] = [
            {"gloss": f"meaning of {word}", "pos": "noun", "synonyms": []}
        ]
    for prefix, payload in shards.items():
        (directory / f"{prefix}.json").write_text(json.dumps(payload), encoding="utf-8")
    return directory


@pytest.fixture
def sample_engine(sample_text, sense_dir) -> RhymeEngine:
    engine = RhymeEngine(
        EngineSettings(),
        loader=CMUDictLoader.from_text(sample_text),
        senses=SenseGate(sense_dir),
    )
    return engine.load_dictionary()


@pytest.fixture(scope="session")
def cmu_engine() -> RhymeEngine:
    """Engine over the full CMU dictionary bundled with ``cmudict``."""

    return RhymeEngine(EngineSettings()).load_dictionary()
