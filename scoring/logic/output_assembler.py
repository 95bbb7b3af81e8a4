"""
Output Assembler

Transforms engine numbers into the report contracts consumed by the table
and PDF export layers. Layout and rendering stay with those layers.
"""

import logging
from typing import Iterable, List

from .constants import CORE_CRITERIA, GPAScale
from .contracts import (
    Course,
    Evaluation,
    ScoreRow,
    CriterionNarrative,
    EvaluationReport,
    GPASummary,
    parse_scale,
)
from .admission_scoring import (
    score,
    max_possible,
    max_traditional_possible,
    average_score,
    format_score,
    format_average,
    counted_traditional_criteria,
    athletics_deemphasized,
)
from .aggregator import (
    aggregate,
    yearly_gpas,
    counted_courses,
    course_type_distribution,
    gpa_scale_label,
    gpa_scale_max,
)
from .criteria_catalog import (
    criteria_label,
    criteria_description,
    university_type_display,
)

logger = logging.getLogger(__name__)

ATHLETICS_NOTE = "Weak athletics profile for this university type"


def assemble_score_rows(evaluation: Evaluation) -> List[ScoreRow]:
    """
    Rows for the scores table: counted traditional criteria, then the total.
    """
    university_type = evaluation.university_type
    rows: List[ScoreRow] = []

    for criterion in counted_traditional_criteria(university_type):
        note = ""
        if criterion == "athletics" and athletics_deemphasized(evaluation):
            note = ATHLETICS_NOTE
        rows.append(ScoreRow(
            criterion=criterion,
            label=criteria_label(criterion, university_type),
            score=str(evaluation.criterion(criterion)),
            note=note,
        ))

    breakdown = score(evaluation)
    rows.append(ScoreRow(
        criterion="total",
        label=criteria_label("total", university_type),
        score=format_score(breakdown.total_score, max_possible(evaluation)),
    ))
    return rows


def _narratives(evaluation: Evaluation, criteria: Iterable[str]) -> List[CriterionNarrative]:
    narratives = []
    for criterion in criteria:
        value = evaluation.criterion(criterion)
        description = criteria_description(criterion, value, evaluation.university_type)
        if not description:
            continue
        narratives.append(CriterionNarrative(
            criterion=criterion,
            label=criteria_label(criterion, evaluation.university_type),
            score=value,
            description=description,
        ))
    return narratives


def assemble_evaluation_report(evaluation: Evaluation) -> EvaluationReport:
    """
    Build the full report payload for one evaluation.
    """
    breakdown = score(evaluation)
    maximum = max_possible(evaluation)

    return EvaluationReport(
        university_type=evaluation.university_type,
        university_display=university_type_display(evaluation.university_type),
        student_name=evaluation.student_name,
        evaluation_date=evaluation.evaluation_date,
        breakdown=breakdown,
        max_possible=maximum,
        max_traditional_possible=max_traditional_possible(evaluation),
        average_score=average_score(evaluation),
        formatted_score=format_score(breakdown.total_score, maximum),
        formatted_average=format_average(evaluation),
        rows=assemble_score_rows(evaluation),
        core_narratives=_narratives(evaluation, CORE_CRITERIA),
        traditional_narratives=_narratives(
            evaluation, counted_traditional_criteria(evaluation.university_type)
        ),
        comments=evaluation.comments,
    )


def assemble_gpa_summary(courses: Iterable[Course], scale=GPAScale.WEIGHTED_4) -> GPASummary:
    """
    Overall and per-year aggregates for one scale.
    """
    courses = list(courses)
    scale = parse_scale(scale)
    counted = counted_courses(courses, scale)
    warnings: List[str] = []

    overall = aggregate(courses, scale)
    if overall is None:
        warnings.append("100-point average is not applicable: courses are missing or not all 100-point graded.")
        logger.warning(f"100-point average not applicable for {len(courses)} courses")

    if scale == GPAScale.UC_WEIGHTED and courses and not counted:
        warnings.append("No 10th-12th grade courses to include in the UC GPA.")

    return GPASummary(
        scale=scale,
        label=gpa_scale_label(scale),
        scale_max=gpa_scale_max(scale),
        overall=overall,
        yearly=yearly_gpas(courses, scale),
        counted_courses=len(counted),
        excluded_courses=len(courses) - len(counted),
        course_type_distribution=course_type_distribution(courses),
        warnings=warnings,
    )
