import pytest

from rhymecraft.core import EngineSettings, NearRhymeFilter, is_valid_near_rhyme, rhyme_quality
from rhymecraft.core.scorer import required_matches, suffix_matches


@pytest.mark.parametrize(
    "candidate",
    ["", "   ", "'tis", "at", "the", "Those", "rock'n", "x2x", "e.g.", "brrr"],
)
def test_is_valid_near_rhyme_rejects(candidate):
    assert not is_valid_near_rhyme(candidate)


def test_is_valid_near_rhyme_accepts_plain_words():
    assert is_valid_near_rhyme("light")
    assert is_valid_near_rhyme(" Night ")
    assert is_valid_near_rhyme("gym")
    assert is_valid_near_rhyme("well-lit")


def test_rhyme_quality_equal_lengths_counts_positions():
    assert rhyme_quality(("AY", "T"), ("AY", "T")) == 1.0
    assert rhyme_quality(("AE", "T"), ("AE", "D")) == 0.5
    assert rhyme_quality(("AO", "R", "AH", "N", "JH"), ("AO", "R", "IH", "N", "JH")) == pytest.approx(0.8)


def test_rhyme_quality_unequal_lengths_aligns_from_end_with_penalty():
    assert rhyme_quality(("AE", "T"), ("AE", "N", "T")) == pytest.approx((1 / 2) * (2 / 3))
    assert rhyme_quality(("EY", "SH", "AH", "N"), ("EY", "N")) == pytest.approx(0.25)
    assert rhyme_quality(("AE", "T"), ("AE", "T", "S")) == 0.0


def test_rhyme_quality_missing_tail_is_zero():
    assert rhyme_quality(None, ("AY", "T")) == 0.0
    assert rhyme_quality(("AY", "T"), ()) == 0.0


def test_suffix_matches_and_required_matches():
    assert suffix_matches(("AO", "R", "AH", "N", "JH"), ("IH", "N", "JH")) == 2
    assert required_matches(2) == 1
    assert required_matches(3) == 2


def test_filter_keeps_input_order_and_applies_every_stage(sample_loader):
    near_filter = NearRhymeFilter(sample_loader)
    candidates = ["sat", "hat", "at", "that", "cat's", "acrobat", "cant", "bat", "matter"]

    assert near_filter.filter("cat", candidates) == ["sat", "hat", "bat"]


def test_filter_rejects_on_quality_threshold(sample_loader):
    strict = NearRhymeFilter(sample_loader)
    lenient = NearRhymeFilter(sample_loader, EngineSettings(quality_threshold=0.3))

    assert strict.filter("cat", ["cant"]) == []
    assert lenient.filter("cat", ["cant"]) == ["cant"]


def test_filter_unknown_target_only_applies_lexical_and_syllable_stages(sample_loader):
    near_filter = NearRhymeFilter(sample_loader)

    # Unknown words count as zero syllables, so one-syllable candidates pass.
    assert near_filter.filter("blorfle", ["night", "acrobat", "the"]) == ["night"]


def test_filter_rejects_unknown_candidates_for_known_target(sample_loader):
    near_filter = NearRhymeFilter(sample_loader)

    assert near_filter.filter("night", ["blight"]) == []


def test_score_exposes_quality_and_can_rank(sample_loader):
    near_filter = NearRhymeFilter(sample_loader, EngineSettings(quality_threshold=0.3))

    scored = near_filter.score("cat", ["cant", "hat"])
    assert [item.word for item in scored] == ["cant", "hat"]
    assert scored[1].quality == 1.0
    assert scored[1].rhyme_tail == ("AE", "T")
    assert scored[1].syllable_count == 1

    ranked = near_filter.score("cat", ["cant", "hat"], rank=True)
    assert [item.word for item in ranked] == ["hat", "cant"]


def test_filter_is_idempotent(sample_loader):
    near_filter = NearRhymeFilter(sample_loader)
    candidates = ["light", "sight", "the", "bite"]

    assert near_filter.filter("night", candidates) == near_filter.filter("night", candidates)


def test_filter_rejects_single_phoneme_tails_even_with_perfect_quality(sample_loader):
    near_filter = NearRhymeFilter(sample_loader, EngineSettings(quality_threshold=0.0))

    assert rhyme_quality(("AH",), ("AH",)) == 1.0
    assert near_filter.filter("the", ["duh"]) == []


def test_filter_requires_two_suffix_matches_for_long_tails(sample_loader):
    near_filter = NearRhymeFilter(sample_loader, EngineSettings(quality_threshold=0.2))
    target_tail = ("AE", "T", "ER")
    candidate_tail = ("AE", "K", "S")

    assert suffix_matches(target_tail, candidate_tail) == 1
    assert rhyme_quality(target_tail, candidate_tail) >= 0.2
    assert near_filter.filter("matter", ["wax"]) == []
