"""
Tests for input contract validation: enum parsing, grade levels and
criterion score clamping.
"""

import pytest
from pydantic import ValidationError

from scoring import config
from scoring.logic.constants import CourseType, GradeType, UniversityType
from scoring.logic.contracts import (
    Course,
    Evaluation,
    clamp_criterion_score,
    normalize_grade_level,
    parse_university_type,
)
from scoring.logic.errors import InvalidArgument


def test_course_defaults():
    course = Course(grade="A")
    assert course.grade_type == GradeType.LETTER
    assert course.course_type == CourseType.REGULAR
    assert course.grade_level is None
    assert course.academic_year is None


def test_course_missing_enum_values_use_record_defaults():
    course = Course(grade="90", grade_type=None, course_type="")
    assert course.grade_type == GradeType.LETTER
    assert course.course_type == CourseType.REGULAR


def test_course_unknown_course_type_is_rejected():
    with pytest.raises(ValidationError):
        Course(grade="A", course_type="Remedial")


def test_course_numeric_grade_is_kept_as_text():
    assert Course(grade=88, grade_type="100-point").grade == "88"


def test_course_is_immutable():
    course = Course(grade="A")
    with pytest.raises(ValidationError):
        course.grade = "B"


@pytest.mark.parametrize("raw, expected", [
    (9, "9"), ("10", "10"), ("11th", "11"), ("Grade 12", "12"),
    ("Freshman", "9"), ("junior", "11"), ("", None), (None, None), ("8", "8"),
])
def test_normalize_grade_level(raw, expected):
    assert normalize_grade_level(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("ivyLeague", UniversityType.IVY_LEAGUE),
    ("IvyLeague", UniversityType.IVY_LEAGUE),
    ("IVY_LEAGUE", UniversityType.IVY_LEAGUE),
    ("Top30", UniversityType.TOP_30),
    ("UCSystem", UniversityType.UC_SYSTEM),
    ("uc-system", UniversityType.UC_SYSTEM),
])
def test_parse_university_type(raw, expected):
    assert parse_university_type(raw) == expected


@pytest.mark.parametrize("raw", ["stanford", "", None, 3])
def test_parse_university_type_rejects_unknown(raw):
    with pytest.raises(InvalidArgument):
        parse_university_type(raw)


def test_evaluation_requires_known_university_type():
    with pytest.raises(ValidationError):
        Evaluation(university_type="liberalArts")


def test_evaluation_missing_scores_default_to_midpoint():
    evaluation = Evaluation(university_type="top30", academics=None)
    assert evaluation.academics == 3
    assert evaluation.unique_narrative == 3


def test_clamp_criterion_score():
    assert clamp_criterion_score(4, "academics") == 4
    assert clamp_criterion_score("2", "academics") == 2
    assert clamp_criterion_score(5.0, "academics") == 5
    assert clamp_criterion_score(12, "academics") == 6
    assert clamp_criterion_score(0, "academics") == 1


@pytest.mark.parametrize("raw", ["great", 2.5, True])
def test_clamp_criterion_score_rejects_non_integers(raw):
    with pytest.raises(InvalidArgument):
        clamp_criterion_score(raw, "academics")


def test_strict_mode_rejects_out_of_range(monkeypatch):
    monkeypatch.setattr(config, "STRICT_SCORES", True)
    with pytest.raises(InvalidArgument) as excinfo:
        clamp_criterion_score(7, "interview")
    assert excinfo.value.field == "interview"
    with pytest.raises(ValidationError):
        Evaluation(university_type="ivyLeague", interview=7)
    assert Evaluation(university_type="ivyLeague", interview=6).interview == 6


def test_clamping_logs_a_warning(caplog):
    with caplog.at_level("WARNING", logger="scoring.logic.contracts"):
        Evaluation(university_type="ivyLeague", academics=10)
    assert "Clamped out-of-range academics 10 to 6" in caplog.text


def test_huge_integer_scores_are_clamped():
    assert Evaluation(university_type="ivyLeague", academics=10**400).academics == 6
    assert Evaluation(university_type="ivyLeague", academics=-(10**400)).academics == 1


def test_infinite_score_is_rejected():
    with pytest.raises(InvalidArgument):
        clamp_criterion_score(float("inf"), "academics")
    with pytest.raises(ValidationError):
        Evaluation(university_type="ivyLeague", athletics="1e400")
