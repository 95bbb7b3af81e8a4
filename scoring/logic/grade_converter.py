"""
Grade Converter

Maps a single course's grade to a GPA point value under a chosen scale.
Every scale is one branch of gpa_point(); the per-scale differences live in
the lookup tables in constants.py.
"""

import math
import re
from typing import Any, Optional

from .constants import (
    GradeType,
    CourseType,
    GPAScale,
    GRADE_TO_GPA,
    GRADE_TO_GPA_433,
    PERCENTAGE_BANDS,
    FAILING_GPA,
    A_PLUS_PERCENTAGE,
    A_PLUS_GPA_433,
    COURSE_TYPE_BONUS,
    UC_COURSE_TYPE_BONUS,
    SPECIAL_GRADES,
)
from .contracts import Course, parse_grade_type, parse_course_type, parse_scale

_TOKEN_STRIP = re.compile(r"[\s/_\-]+")
_SPECIAL_KEYS = frozenset(_TOKEN_STRIP.sub("", g).lower() for g in SPECIAL_GRADES)


def is_special_grade(grade: Any) -> bool:
    """True for In Progress / Pass/Fail / Drop, however they are spelled."""
    if grade is None:
        return False
    return _TOKEN_STRIP.sub("", str(grade)).lower() in _SPECIAL_KEYS


def parse_percentage(grade: Any) -> Optional[float]:
    """
    Read a numeric grade. Returns None when the text is not a number.

    Like the form layer, a leading number is accepted ("92%", "88.5 ", "1e2").
    """
    if grade is None:
        return None
    if isinstance(grade, (int, float)) and not isinstance(grade, bool):
        value = float(grade)
    else:
        match = re.match(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", str(grade))
        if not match:
            return None
        value = float(match.group(1))
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def percentage_to_gpa(percentage: float) -> float:
    """Convert a 100-point grade to the 4.0 band it falls in."""
    for minimum, gpa in PERCENTAGE_BANDS:
        if percentage >= minimum:
            return gpa
    return FAILING_GPA


def letter_to_gpa(letter: str, scale: GPAScale = GPAScale.UNWEIGHTED_4) -> float:
    """Look up a letter grade; unknown letters count as 0."""
    table = GRADE_TO_GPA_433 if scale == GPAScale.COLLEGE_4_33 else GRADE_TO_GPA
    return table.get(str(letter).strip().upper(), 0.0)


def _base_point(grade: str, grade_type: GradeType, scale: GPAScale) -> float:
    if grade_type == GradeType.HUNDRED_POINT:
        percentage = parse_percentage(grade)
        if percentage is None:
            # no-confidence zero: unparseable input, not a true failing grade
            return 0.0
        if scale == GPAScale.COLLEGE_4_33 and percentage >= A_PLUS_PERCENTAGE:
            return A_PLUS_GPA_433
        return percentage_to_gpa(percentage)
    return letter_to_gpa(grade, scale)


def gpa_point(
    grade: Any,
    course_type: Any = CourseType.REGULAR,
    grade_type: Any = GradeType.LETTER,
    scale: Any = GPAScale.WEIGHTED_4,
) -> Optional[float]:
    """
    Convert one grade to a point value on the given scale.

    Args:
        grade: Letter token, numeric string or special token
        course_type: Regular / Honors / AP/IB
        grade_type: letter or 100-point
        scale: Target GPA scale

    Returns:
        Point value. Special tokens return 0 (callers exclude them from
        denominators). On the 100-point scale a letter-graded course has no
        value and returns None.

    Raises:
        InvalidArgument: unrecognised course type, grade type or scale
    """
    scale = parse_scale(scale)
    grade_type = parse_grade_type(grade_type)
    course_type = parse_course_type(course_type)

    if is_special_grade(grade):
        return 0.0

    grade = "" if grade is None else str(grade).strip()

    if scale == GPAScale.HUNDRED_POINT:
        if grade_type != GradeType.HUNDRED_POINT:
            return None
        percentage = parse_percentage(grade)
        return 0.0 if percentage is None else percentage

    base = _base_point(grade, grade_type, scale)

    if scale == GPAScale.WEIGHTED_4:
        return base + COURSE_TYPE_BONUS[course_type]
    if scale == GPAScale.UC_WEIGHTED:
        return base + UC_COURSE_TYPE_BONUS[course_type]
    # Unweighted and college scales ignore course type
    return base


def course_gpa_point(course: Course, scale: Any) -> Optional[float]:
    """gpa_point() for a Course record."""
    return gpa_point(course.grade, course.course_type, course.grade_type, scale)


def cached_gpa_value(course: Course) -> float:
    """
    The weighted value the application stores on the course as `gpa_value`.
    """
    return course_gpa_point(course, GPAScale.WEIGHTED_4)
