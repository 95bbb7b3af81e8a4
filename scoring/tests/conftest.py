import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from scoring.logic.contracts import Course, Evaluation  # noqa: E402


@pytest.fixture
def transcript():
    """A small four-year record with one of each special grade."""
    return [
        Course(grade="A", course_type="Regular", grade_level="9", academic_year="2021-2022"),
        Course(grade="B+", course_type="Honors", grade_level="9", academic_year="2021-2022"),
        Course(grade="A-", course_type="AP/IB", grade_level="10", academic_year="2022-2023"),
        Course(grade="B", course_type="Regular", grade_level="10", academic_year="2022-2023"),
        Course(grade="In Progress", course_type="AP/IB", grade_level="11", academic_year="2023-2024"),
        Course(grade="A+", course_type="Honors", grade_level="11", academic_year="2023-2024"),
        Course(grade="Pass/Fail", course_type="Regular", grade_level="12", academic_year="2024-2025"),
        Course(grade="Drop", course_type="Regular", grade_level="12", academic_year="2024-2025"),
        Course(grade="B-", course_type="Regular", grade_level="12"),
    ]


@pytest.fixture
def hundred_point_transcript():
    return [
        Course(grade="95", grade_type="100-point", grade_level="10", academic_year="2022-2023"),
        Course(grade="85", grade_type="100-point", grade_level="10", academic_year="2022-2023"),
        Course(grade="In Progress", grade_type="100-point", grade_level="11", academic_year="2023-2024"),
        Course(grade="78", grade_type="100-point", course_type="Honors", grade_level="11", academic_year="2023-2024"),
    ]


@pytest.fixture
def neutral_scores():
    """Every criterion at the neutral midpoint."""
    return {
        "academic_excellence": 3,
        "impact_leadership": 3,
        "unique_narrative": 3,
        "academics": 3,
        "extracurriculars": 3,
        "athletics": 3,
        "personal_qualities": 3,
        "recommendations": 3,
        "interview": 3,
    }


@pytest.fixture
def make_evaluation(neutral_scores):
    def _make(university_type="ivyLeague", **overrides):
        return Evaluation(university_type=university_type, **{**neutral_scores, **overrides})
    return _make
