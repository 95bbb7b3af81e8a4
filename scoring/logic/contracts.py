"""
Data Contracts for the Scoring Engine

Defines Pydantic models for Course and Evaluation (input) and the score,
GPA and report structures (output).
These contracts are the API boundary for the scoring engine.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .. import config
from .constants import (
    GradeType,
    CourseType,
    GPAScale,
    UniversityType,
    GRADE_TYPE_ALIASES,
    COURSE_TYPE_ALIASES,
    GPA_SCALE_ALIASES,
    UNIVERSITY_TYPE_ALIASES,
    GRADE_LEVEL_ALIASES,
    ALL_CRITERIA,
    MIN_CRITERION_SCORE,
    MAX_CRITERION_SCORE,
)
from .errors import InvalidArgument

logger = logging.getLogger(__name__)

_ALIAS_STRIP = re.compile(r"[\s\-_/.]+")


def _alias_key(value: str) -> str:
    return _ALIAS_STRIP.sub("", value).lower()


def coerce_enum(enum_cls: Type, value: Any, aliases: Dict[str, Any], field: str):
    """
    Resolve a stored value, member name or known alias to an enum member.

    Raises:
        InvalidArgument: value is not recognised
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        text = value.strip()
        for member in enum_cls:
            if text == member.value or text == member.name:
                return member
        key = _alias_key(text)
        if key in aliases:
            return aliases[key]
        for member in enum_cls:
            if key == _alias_key(member.value) or key == _alias_key(member.name):
                return member
    raise InvalidArgument(
        f"Unrecognised {field} {value!r}; expected one of {[m.value for m in enum_cls]}",
        field=field,
    )


def parse_grade_type(value: Any) -> GradeType:
    return coerce_enum(GradeType, value, GRADE_TYPE_ALIASES, "grade_type")


def parse_course_type(value: Any) -> CourseType:
    return coerce_enum(CourseType, value, COURSE_TYPE_ALIASES, "course_type")


def parse_scale(value: Any) -> GPAScale:
    return coerce_enum(GPAScale, value, GPA_SCALE_ALIASES, "scale")


def parse_university_type(value: Any) -> UniversityType:
    return coerce_enum(UniversityType, value, UNIVERSITY_TYPE_ALIASES, "university_type")


def normalize_grade_level(value: Any) -> Optional[str]:
    """Map 9/'9th'/'Grade 9'/'Freshman' style tags to '9'..'12'."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return GRADE_LEVEL_ALIASES.get(_alias_key(text), text)


def clamp_criterion_score(value: Any, field: str) -> int:
    """
    Validate one 1-6 criterion score.

    Missing scores take the neutral midpoint. Out-of-range scores are
    clamped to the nearest bound, or rejected when STRICT_SCORES is on.
    """
    if value is None or value == "":
        return config.DEFAULT_CRITERION_SCORE
    if isinstance(value, bool):
        raise InvalidArgument(f"{field} must be an integer score, got {value!r}", field=field)
    if isinstance(value, int):
        score = value
    else:
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            raise InvalidArgument(f"{field} must be an integer score, got {value!r}", field=field)
        if number != number or not number.is_integer():
            raise InvalidArgument(f"{field} must be a whole number, got {value!r}", field=field)
        score = int(number)

    if MIN_CRITERION_SCORE <= score <= MAX_CRITERION_SCORE:
        return score
    if config.STRICT_SCORES:
        raise InvalidArgument(
            f"{field} must be between {MIN_CRITERION_SCORE} and {MAX_CRITERION_SCORE}, got {score}",
            field=field,
        )
    clamped = min(max(MIN_CRITERION_SCORE, score), MAX_CRITERION_SCORE)
    logger.warning(f"Clamped out-of-range {field} {score} to {clamped}")
    return clamped


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class Course(BaseModel):
    """
    A single course from a student's academic record.

    `grade` is a letter token ("A+".."F"), a numeric string (0-100) or one
    of the special tokens In Progress / Pass/Fail / Drop.
    `gpa_value` is the cached weighted value stored with the record; the
    engine always recomputes and never reads it.
    """
    model_config = ConfigDict(frozen=True)

    grade: str
    grade_type: GradeType = GradeType.LETTER
    course_type: CourseType = CourseType.REGULAR
    grade_level: Optional[str] = None
    academic_year: Optional[str] = None

    # Record metadata (not used in calculations)
    id: Optional[str] = None
    name: Optional[str] = None
    semester: Optional[str] = None
    student_id: Optional[str] = None
    gpa_value: Optional[float] = None

    @field_validator("grade", mode="before")
    @classmethod
    def _grade_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("grade_type", mode="before")
    @classmethod
    def _grade_type(cls, value: Any) -> GradeType:
        if value is None or value == "":
            return GradeType.LETTER
        return parse_grade_type(value)

    @field_validator("course_type", mode="before")
    @classmethod
    def _course_type(cls, value: Any) -> CourseType:
        if value is None or value == "":
            return CourseType.REGULAR
        return parse_course_type(value)

    @field_validator("grade_level", mode="before")
    @classmethod
    def _grade_level(cls, value: Any) -> Optional[str]:
        return normalize_grade_level(value)

    @field_validator("academic_year", mode="before")
    @classmethod
    def _academic_year(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None


class Evaluation(BaseModel):
    """
    Admissions evaluation of one student against one university type.
    Every criterion is scored 1 (best) to 6 (worst).
    """
    model_config = ConfigDict(frozen=True)

    university_type: UniversityType

    # Core admission factors
    academic_excellence: int = 3
    impact_leadership: int = 3
    unique_narrative: int = 3

    # Traditional factors
    academics: int = 3
    extracurriculars: int = 3
    athletics: int = 3
    personal_qualities: int = 3
    recommendations: int = 3
    interview: int = 3

    # Record metadata
    id: Optional[str] = None
    student_id: Optional[str] = None
    student_name: Optional[str] = None
    evaluation_date: Optional[str] = None
    comments: str = ""
    admin_id: Optional[str] = None

    @field_validator("university_type", mode="before")
    @classmethod
    def _university_type(cls, value: Any) -> UniversityType:
        return parse_university_type(value)

    @field_validator(*ALL_CRITERIA, mode="before")
    @classmethod
    def _criterion(cls, value: Any, info) -> int:
        return clamp_criterion_score(value, info.field_name)

    def criterion(self, name: str) -> int:
        return getattr(self, name)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class ScoreBreakdown(BaseModel):
    """Summed evaluation scores. Lower is better."""
    model_config = ConfigDict(frozen=True)

    core_total: int
    traditional_total: int
    total_score: int


class ScoreRow(BaseModel):
    """One line of a report scores table."""
    criterion: str
    label: str
    score: str
    note: str = ""


class CriterionNarrative(BaseModel):
    """Description text for one scored criterion."""
    criterion: str
    label: str
    score: int
    description: str


class EvaluationReport(BaseModel):
    """
    Everything a report/PDF renderer needs for one evaluation.
    The renderer owns layout and text; these are just the numbers and labels.
    """
    university_type: UniversityType
    university_display: str
    student_name: Optional[str] = None
    evaluation_date: Optional[str] = None

    breakdown: ScoreBreakdown
    max_possible: int
    max_traditional_possible: int
    average_score: float
    formatted_score: str
    formatted_average: str

    rows: List[ScoreRow] = Field(default_factory=list)
    core_narratives: List[CriterionNarrative] = Field(default_factory=list)
    traditional_narratives: List[CriterionNarrative] = Field(default_factory=list)
    comments: str = ""
    engine_version: str = config.ENGINE_VERSION


class YearGPA(BaseModel):
    """Aggregate for one academic year."""
    academic_year: str
    value: Optional[float] = None
    course_count: int = 0


class GPASummary(BaseModel):
    """Overall and per-year aggregates for one GPA scale."""
    scale: GPAScale
    label: str
    scale_max: str
    overall: Optional[float] = None
    yearly: List[YearGPA] = Field(default_factory=list)
    counted_courses: int = 0
    excluded_courses: int = 0
    course_type_distribution: Dict[str, int] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)
    engine_version: str = config.ENGINE_VERSION
