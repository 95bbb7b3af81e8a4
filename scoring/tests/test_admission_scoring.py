"""
Tests for admissions evaluation scoring under each university-type policy.
"""

import random

import pytest

from scoring.logic.admission_scoring import (
    athletics_deemphasized,
    average_score,
    counted_criteria,
    counted_traditional_criteria,
    format_average,
    format_score,
    is_within_bounds,
    max_possible,
    max_traditional_possible,
    score,
    total_score,
)
from scoring.logic.constants import ALL_CRITERIA, UniversityType
from scoring.logic.contracts import Evaluation
from scoring.logic.errors import InvalidArgument


def test_neutral_ivy_league_evaluation(make_evaluation):
    evaluation = make_evaluation("ivyLeague")
    breakdown = score(evaluation)
    assert breakdown.core_total == 9
    assert breakdown.traditional_total == 18
    assert breakdown.total_score == 27


def test_neutral_uc_evaluation_excludes_interview(make_evaluation):
    breakdown = score(make_evaluation("ucSystem"))
    assert breakdown.core_total == 9
    assert breakdown.traditional_total == 15
    assert breakdown.total_score == 24


def test_top30_counts_interview(make_evaluation):
    assert score(make_evaluation("top30", interview=6)).traditional_total == 21


@pytest.mark.parametrize("university_type", ["ivyLeague", "top30", "ucSystem"])
def test_core_factors_always_counted(make_evaluation, university_type):
    evaluation = make_evaluation(
        university_type, academic_excellence=1, impact_leadership=2, unique_narrative=6
    )
    assert score(evaluation).core_total == 9
    assert counted_criteria(university_type)[:3] == (
        "academic_excellence", "impact_leadership", "unique_narrative"
    )


def test_uc_interview_change_does_not_move_totals(make_evaluation):
    best = make_evaluation("ucSystem", interview=1)
    worst = make_evaluation("ucSystem", interview=6)
    assert score(best) == score(worst)
    assert max_possible(best) == max_possible(worst)


def test_ivy_interview_change_moves_totals(make_evaluation):
    assert total_score(make_evaluation("ivyLeague", interview=6)) - total_score(
        make_evaluation("ivyLeague", interview=1)
    ) == 5


def test_max_possible_includes_core_points(make_evaluation):
    assert max_possible(make_evaluation("ivyLeague")) == 54
    assert max_possible(make_evaluation("top30")) == 54
    assert max_possible(make_evaluation("ucSystem")) == 48


def test_max_traditional_possible_excludes_core_points(make_evaluation):
    # The traditional-only maximum shown under some report tables
    assert max_traditional_possible(make_evaluation("ivyLeague")) == 36
    assert max_traditional_possible(make_evaluation("ucSystem")) == 30
    for university_type in ("ivyLeague", "top30", "ucSystem"):
        evaluation = make_evaluation(university_type)
        assert max_possible(evaluation) - max_traditional_possible(evaluation) == 18


def test_athletics_is_always_summed(make_evaluation):
    weak = make_evaluation("ivyLeague", athletics=6)
    strong = make_evaluation("ivyLeague", athletics=1)
    assert athletics_deemphasized(weak)
    assert not athletics_deemphasized(strong)
    assert total_score(weak) - total_score(strong) == 5
    assert max_possible(weak) == max_possible(strong) == 54


def test_athletics_never_deemphasized_for_uc(make_evaluation):
    assert not athletics_deemphasized(make_evaluation("ucSystem", athletics=6))


def test_worst_scores_reach_maximum(neutral_scores):
    for university_type in UniversityType:
        evaluation = Evaluation(university_type=university_type, **{c: 6 for c in neutral_scores})
        assert total_score(evaluation) == max_possible(evaluation)


def test_score_bounds_hold_for_random_evaluations():
    rng = random.Random(20231)
    for _ in range(300):
        university_type = rng.choice(list(UniversityType))
        evaluation = Evaluation(
            university_type=university_type,
            **{c: rng.randint(1, 6) for c in ALL_CRITERIA},
        )
        breakdown = score(evaluation)
        assert 3 <= breakdown.core_total <= 18
        assert breakdown.total_score <= max_possible(evaluation)
        assert is_within_bounds(evaluation)


def test_out_of_range_scores_are_clamped(make_evaluation):
    evaluation = make_evaluation("ivyLeague", academics=9, interview=0, athletics=-3)
    assert evaluation.academics == 6
    assert evaluation.interview == 1
    assert evaluation.athletics == 1
    assert score(evaluation).total_score <= max_possible(evaluation)


def test_counted_traditional_criteria():
    assert "interview" in counted_traditional_criteria("ivyLeague")
    assert "interview" not in counted_traditional_criteria(UniversityType.UC_SYSTEM)
    assert len(counted_criteria("ucSystem")) == 8
    assert len(counted_criteria("top30")) == 9


def test_unknown_university_type_fails_fast():
    with pytest.raises(InvalidArgument):
        counted_criteria("stanford")


def test_average_and_formatting(make_evaluation):
    ivy = make_evaluation("ivyLeague")
    uc = make_evaluation("ucSystem", academics=1)
    assert average_score(ivy) == 3.0
    assert format_average(ivy) == "3.00/6"
    # (9 + 13) / 8 criteria
    assert average_score(uc) == 2.75
    assert format_score(27, 54) == "27/54"
