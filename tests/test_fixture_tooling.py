import pytest

from rhymecraft.core import FixtureGenerationError
from rhymecraft.tools import (
    generate_near_rhyme_cases,
    load_cases,
    run_phase_one_check,
    save_cases,
    verify_near_rhyme_cases,
)


def test_generate_picks_first_real_word_of_each_group(sample_engine):
    cases = generate_near_rhyme_cases(sample_engine, 1, min_results=3)

    assert cases == [{"word": "night"}]


def test_generate_raises_when_not_enough_cases(sample_engine):
    with pytest.raises(FixtureGenerationError):
        generate_near_rhyme_cases(sample_engine, 2, min_results=3)


def test_verify_accepts_good_cases_and_reports_thin_ones(sample_engine):
    assert verify_near_rhyme_cases(sample_engine, [{"word": "night"}]) == []

    failures = verify_near_rhyme_cases(sample_engine, [{"word": "cat"}])
    assert len(failures) == 1
    assert failures[0].word == "cat"
    assert "too few" in failures[0].reason


def test_cases_round_trip_through_json(tmp_path):
    path = tmp_path / "cases.json"
    save_cases([{"word": "night"}, {"word": "time"}], path)

    assert load_cases(path) == [{"word": "night"}, {"word": "time"}]


def test_phase_one_check_passes_on_cmu_dictionary(cmu_engine):
    report = run_phase_one_check(cmu_engine)

    assert report.rhyme_passes == report.rhyme_total
    assert report.estimate_rate == 1.0
    assert report.passed
    assert any(line.startswith("RHYME time") for line in report.lines)
