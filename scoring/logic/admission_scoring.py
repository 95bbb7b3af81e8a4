"""
Admission Scoring Engine

Sums evaluation criterion scores under the university-type policies:
- Core factors are counted for every type
- Traditional factors are counted except the ones a type excludes
  (UC System does not count the interview)

Scores run 1 (best) to 6 (worst), so a lower total is stronger.
"""

from typing import Any, Tuple

from .constants import (
    CORE_CRITERIA,
    TRADITIONAL_CRITERIA,
    EXCLUDED_CRITERIA,
    MAX_CRITERION_SCORE,
    ATHLETICS_DEEMPHASIS_THRESHOLD,
    ATHLETICS_DEEMPHASIS_TYPES,
)
from .contracts import Evaluation, ScoreBreakdown, parse_university_type
from .aggregator import round_gpa


def counted_traditional_criteria(university_type: Any) -> Tuple[str, ...]:
    """Traditional criteria that count toward totals for a university type."""
    university_type = parse_university_type(university_type)
    excluded = EXCLUDED_CRITERIA[university_type]
    return tuple(c for c in TRADITIONAL_CRITERIA if c not in excluded)


def counted_criteria(university_type: Any) -> Tuple[str, ...]:
    """All counted criteria, core first."""
    return CORE_CRITERIA + counted_traditional_criteria(university_type)


def score(evaluation: Evaluation) -> ScoreBreakdown:
    """
    Compute core, traditional and total scores.

    Athletics is always summed; report notes about it are cosmetic.
    """
    core_total = sum(evaluation.criterion(c) for c in CORE_CRITERIA)
    traditional_total = sum(
        evaluation.criterion(c)
        for c in counted_traditional_criteria(evaluation.university_type)
    )
    return ScoreBreakdown(
        core_total=core_total,
        traditional_total=traditional_total,
        total_score=core_total + traditional_total,
    )


def total_score(evaluation: Evaluation) -> int:
    return score(evaluation).total_score


def max_traditional_possible(evaluation: Evaluation) -> int:
    """Worst possible traditional total: 36, or 30 for UC System."""
    return len(counted_traditional_criteria(evaluation.university_type)) * MAX_CRITERION_SCORE


def max_possible(evaluation: Evaluation) -> int:
    """
    Worst possible total score, core factors included.

    Ivy League / Top 30: 18 + 36 = 54. UC System: 18 + 30 = 48.
    """
    return len(CORE_CRITERIA) * MAX_CRITERION_SCORE + max_traditional_possible(evaluation)


def average_score(evaluation: Evaluation) -> float:
    """Total divided by the number of counted criteria (9, or 8 for UC)."""
    count = len(counted_criteria(evaluation.university_type))
    return round_gpa(total_score(evaluation) / count)


def format_score(value: int, maximum: int) -> str:
    return f"{value}/{maximum}"


def format_average(evaluation: Evaluation) -> str:
    return f"{average_score(evaluation):.2f}/{MAX_CRITERION_SCORE}"


def athletics_deemphasized(evaluation: Evaluation) -> bool:
    """
    Whether reports flag athletics as weak for this evaluation.

    Display only: neither score() nor max_possible() look at this.
    """
    return (
        evaluation.university_type in ATHLETICS_DEEMPHASIS_TYPES
        and evaluation.athletics >= ATHLETICS_DEEMPHASIS_THRESHOLD
    )


def is_within_bounds(evaluation: Evaluation) -> bool:
    """Sanity check used by callers that cache totals."""
    breakdown = score(evaluation)
    core_floor = len(CORE_CRITERIA)
    core_ceiling = len(CORE_CRITERIA) * MAX_CRITERION_SCORE
    return (
        core_floor <= breakdown.core_total <= core_ceiling
        and breakdown.total_score <= max_possible(evaluation)
    )
