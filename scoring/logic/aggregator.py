"""
GPA Aggregator

Combines converted per-course values into year-level and overall averages.
Applies the special-grade exclusion and the scale-specific course filters.
"""

import logging
import math
from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional, Union

from .. import config
from .constants import (
    GradeType,
    GPAScale,
    Scope,
    GPA_SCALE_MAX,
    GPA_SCALE_LABELS,
    UC_EXCLUDED_GRADE_LEVELS,
)
from .contracts import Course, YearGPA, parse_scale
from .grade_converter import is_special_grade, course_gpa_point

logger = logging.getLogger(__name__)

ScopeKey = Union[Scope, str]


def round_gpa(value: float, places: int = config.GPA_DECIMALS) -> float:
    """Round half-up on the exact binary value, the way the UI's toFixed does."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _in_scope(course: Course, scope: ScopeKey) -> bool:
    if scope == Scope.OVERALL:
        return True
    return course.academic_year is not None and course.academic_year == str(scope)


def _resolve_scope(scope: Optional[ScopeKey]) -> ScopeKey:
    if scope is None:
        return Scope.OVERALL
    if isinstance(scope, Scope):
        return scope
    text = str(scope).strip()
    if text.lower() == Scope.OVERALL.value:
        return Scope.OVERALL
    return text


def counted_courses(
    courses: Iterable[Course],
    scale: Any,
    scope: Optional[ScopeKey] = Scope.OVERALL,
) -> List[Course]:
    """
    Courses that enter the denominator for (scale, scope).

    Drops special-grade courses, courses outside the year scope and, for the
    UC scale, 9th-grade courses.
    """
    scale = parse_scale(scale)
    scope = _resolve_scope(scope)

    selected = []
    for course in courses:
        if not _in_scope(course, scope):
            continue
        if is_special_grade(course.grade):
            logger.debug(f"Skipping special grade {course.grade!r} ({course.name or course.id})")
            continue
        if scale == GPAScale.UC_WEIGHTED and course.grade_level in UC_EXCLUDED_GRADE_LEVELS:
            continue
        selected.append(course)
    return selected


def hundred_point_average(courses: Iterable[Course]) -> Optional[float]:
    """
    Mean of raw 100-point grades.

    Returns None (not applicable) when no course counts or any counted
    course is letter-graded.
    """
    valid = [c for c in courses if not is_special_grade(c.grade)]
    if not valid:
        return None
    if any(c.grade_type != GradeType.HUNDRED_POINT for c in valid):
        return None

    points = [course_gpa_point(c, GPAScale.HUNDRED_POINT) for c in valid]
    return round_gpa(math.fsum(points) / len(points))


def aggregate(
    courses: Iterable[Course],
    scale: Any,
    scope: Optional[ScopeKey] = Scope.OVERALL,
) -> Optional[float]:
    """
    Average GPA for a scale over a scope.

    Args:
        courses: Course records (any order)
        scale: GPA scale
        scope: Scope.OVERALL or an academic-year key such as "2023-2024"

    Returns:
        Mean rounded to 2 decimals; 0 for an empty scope. On the 100-point
        scale, None when the scope is empty or mixes grade types.
    """
    scale = parse_scale(scale)
    selected = counted_courses(courses, scale, scope)

    if scale == GPAScale.HUNDRED_POINT:
        average = hundred_point_average(selected)
        if average is None:
            logger.debug(f"100-point average not applicable for scope {scope!r}")
        return average

    if not selected:
        return 0.0

    points = [course_gpa_point(c, scale) for c in selected]
    return round_gpa(math.fsum(points) / len(points))


def year_gpa(courses: Iterable[Course], academic_year: str, scale: Any) -> Optional[float]:
    return aggregate(courses, scale, academic_year)


def overall_gpa(courses: Iterable[Course], scale: Any) -> Optional[float]:
    return aggregate(courses, scale, Scope.OVERALL)


def academic_years(courses: Iterable[Course]) -> List[str]:
    """Distinct academic years present on the record, in sorted order."""
    return sorted({c.academic_year for c in courses if c.academic_year})


def yearly_gpas(courses: Iterable[Course], scale: Any) -> List[YearGPA]:
    """One aggregate per academic year. Each year is independent of the others."""
    courses = list(courses)
    scale = parse_scale(scale)
    return [
        YearGPA(
            academic_year=year,
            value=aggregate(courses, scale, year),
            course_count=len(counted_courses(courses, scale, year)),
        )
        for year in academic_years(courses)
    ]


def course_type_distribution(courses: Iterable[Course]) -> Dict[str, int]:
    """Count of courses per course type."""
    counts = Counter(c.course_type.value for c in courses)
    return dict(counts)


def gpa_scale_max(scale: Any) -> str:
    return GPA_SCALE_MAX[parse_scale(scale)]


def gpa_scale_label(scale: Any) -> str:
    return GPA_SCALE_LABELS[parse_scale(scale)]
