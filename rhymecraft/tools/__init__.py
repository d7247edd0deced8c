"""Offline tooling that validates the rhyme engine against fixtures."""

from .fixtures import (
    CaseFailure,
    PhaseOneReport,
    generate_near_rhyme_cases,
    load_cases,
    run_phase_one_check,
    save_cases,
    verify_near_rhyme_cases,
)

__all__ = [
    "CaseFailure",
    "PhaseOneReport",
    "generate_near_rhyme_cases",
    "load_cases",
    "run_phase_one_check",
    "save_cases",
    "verify_near_rhyme_cases",
]
