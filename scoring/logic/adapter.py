"""
Record Adapter for the Scoring Engine

Reads stored course/evaluation rows (snake_case columns, as the persistence
layer returns them) and form payloads, and produces the cached values the
persistence layer writes back.

This is a pure READ + TRANSFORM layer:
- NO scoring rules
- NO storage calls
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from .. import config
from .constants import (
    UniversityType,
    ALL_CRITERIA,
    CRITERION_COLUMNS,
    CRITERION_KEYS,
    DEFAULT_UNIVERSITY_TYPE,
)
from .contracts import Course, Evaluation, parse_university_type
from .errors import InvalidArgument
from .grade_converter import cached_gpa_value
from .admission_scoring import total_score

logger = logging.getLogger(__name__)

COURSE_FIELDS = (
    "id",
    "name",
    "grade",
    "grade_type",
    "course_type",
    "grade_level",
    "academic_year",
    "semester",
    "student_id",
    "gpa_value",
)

EVALUATION_META_FIELDS = (
    "id",
    "student_id",
    "student_name",
    "evaluation_date",
    "comments",
    "admin_id",
)


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


def _text_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def course_from_record(record: Dict[str, Any]) -> Course:
    """
    Build a Course from a stored row.

    Raises:
        InvalidArgument: missing grade or unrecognised enum values
    """
    if "grade" not in record:
        raise InvalidArgument("Course record has no grade", field="grade")

    data = {key: record.get(key) for key in COURSE_FIELDS if key in record}
    for key in ("id", "student_id"):
        if key in data:
            data[key] = _text_or_none(data[key])
    try:
        return Course(**data)
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid course record: {_validation_message(exc)}") from exc


def courses_from_records(records: Iterable[Dict[str, Any]]) -> List[Course]:
    return [course_from_record(r) for r in records]


def _criterion_value(record: Dict[str, Any], criterion: str) -> Any:
    # Stored rows use *_score columns; form payloads carry a camel-case criteria dict
    column = CRITERION_COLUMNS[criterion]
    if column in record:
        return record[column]
    criteria = record.get("criteria") or {}
    if CRITERION_KEYS[criterion] in criteria:
        return criteria[CRITERION_KEYS[criterion]]
    return record.get(criterion)


def evaluation_from_record(
    record: Dict[str, Any],
    university_type: Any = None,
) -> Evaluation:
    """
    Build an Evaluation from a stored row or form payload.

    The row's own university_type wins over the argument. Rows written before
    the column existed carry none and are read as Ivy League.

    Raises:
        InvalidArgument: unrecognised university type or invalid score
    """
    raw_type = record.get("university_type") or university_type
    if not raw_type:
        logger.debug(f"Evaluation {record.get('id')} has no university type, using {DEFAULT_UNIVERSITY_TYPE.value}")
        raw_type = DEFAULT_UNIVERSITY_TYPE

    data: Dict[str, Any] = {"university_type": parse_university_type(raw_type)}
    for criterion in ALL_CRITERIA:
        data[criterion] = _criterion_value(record, criterion)
    for key in EVALUATION_META_FIELDS:
        if record.get(key) is not None:
            data[key] = str(record[key])

    try:
        return Evaluation(**data)
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid evaluation record: {_validation_message(exc)}") from exc


def evaluations_from_records(
    records: Iterable[Dict[str, Any]],
    university_type: Any = None,
) -> List[Evaluation]:
    return [evaluation_from_record(r, university_type) for r in records]


def evaluation_to_record(evaluation: Evaluation) -> Dict[str, Any]:
    """
    Column dict for storing an evaluation, including the cached total_score.

    UC System rows store the unused interview at the neutral midpoint.
    """
    record: Dict[str, Any] = {"university_type": evaluation.university_type.value}
    for criterion in ALL_CRITERIA:
        record[CRITERION_COLUMNS[criterion]] = evaluation.criterion(criterion)
    if evaluation.university_type == UniversityType.UC_SYSTEM:
        record[CRITERION_COLUMNS["interview"]] = config.DEFAULT_CRITERION_SCORE

    record["total_score"] = total_score(evaluation)
    for key in EVALUATION_META_FIELDS:
        value = getattr(evaluation, key)
        if value is not None:
            record[key] = value
    return record


def course_cache_fields(course: Course) -> Dict[str, Any]:
    """Cached values stored back onto a course row."""
    return {"gpa_value": cached_gpa_value(course)}


def group_evaluations_by_type(
    evaluations: Optional[Iterable[Evaluation]],
) -> Dict[UniversityType, List[Evaluation]]:
    """Group evaluations by university type, keeping input order within groups."""
    groups: Dict[UniversityType, List[Evaluation]] = {}
    for evaluation in evaluations or []:
        groups.setdefault(evaluation.university_type, []).append(evaluation)
    return groups


def unique_university_types(
    evaluations: Optional[Iterable[Evaluation]],
) -> List[UniversityType]:
    """University types in first-seen order."""
    return list(group_evaluations_by_type(evaluations).keys())
