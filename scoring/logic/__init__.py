"""
Scoring Logic Module

Provides the deterministic GPA conversion/aggregation and admissions scoring engine.
"""

from .constants import (
    GradeType,
    CourseType,
    GPAScale,
    UniversityType,
    Scope,
)
from .contracts import (
    Course,
    Evaluation,
    ScoreBreakdown,
    ScoreRow,
    CriterionNarrative,
    EvaluationReport,
    YearGPA,
    GPASummary,
)
from .errors import ScoringError, InvalidArgument
from .grade_converter import gpa_point, is_special_grade, percentage_to_gpa
from .aggregator import aggregate, year_gpa, overall_gpa, hundred_point_average
from .admission_scoring import score, max_possible, max_traditional_possible
from .engine import ScoringEngine, get_gpa_summary, get_evaluation_report

__all__ = [
    # Main engine
    "ScoringEngine",
    "get_gpa_summary",
    "get_evaluation_report",

    # Operations
    "gpa_point",
    "is_special_grade",
    "percentage_to_gpa",
    "aggregate",
    "year_gpa",
    "overall_gpa",
    "hundred_point_average",
    "score",
    "max_possible",
    "max_traditional_possible",

    # Contracts
    "Course",
    "Evaluation",
    "ScoreBreakdown",
    "ScoreRow",
    "CriterionNarrative",
    "EvaluationReport",
    "YearGPA",
    "GPASummary",

    # Enums
    "GradeType",
    "CourseType",
    "GPAScale",
    "UniversityType",
    "Scope",

    # Errors
    "ScoringError",
    "InvalidArgument",
]
