"""
Scoring Engine

Main facade that combines the converter, aggregator, admissions scoring and
output assembly for the form and report layers.

Pipeline flow:
1. Records - Accept Course/Evaluation contracts or stored rows
2. Conversion - Grade to point value per scale
3. Aggregation - Per-year and overall averages
4. Scoring - Core/traditional/total and maximum possible
5. Output Assembly - GPASummary / EvaluationReport
"""

import logging
import time
from typing import Any, Dict, Iterable, List, Optional

from .. import config
from .constants import GPAScale, Scope
from .contracts import (
    Course,
    Evaluation,
    ScoreBreakdown,
    GPASummary,
    EvaluationReport,
)
from .grade_converter import gpa_point
from .aggregator import aggregate
from .admission_scoring import score, max_possible, is_within_bounds
from .output_assembler import assemble_gpa_summary, assemble_evaluation_report
from .adapter import courses_from_records, evaluation_from_record

logger = logging.getLogger(__name__)


class ScoringEngine:
    """
    Stateless scoring facade.

    Holds only its version string, so one instance can be shared by any
    number of concurrent callers.
    """

    def __init__(self):
        self.version = config.ENGINE_VERSION

    def gpa_point(
        self,
        grade: Any,
        course_type: Any = "Regular",
        grade_type: Any = "letter",
        scale: Any = GPAScale.WEIGHTED_4,
    ) -> Optional[float]:
        """Inline value for the course form."""
        return gpa_point(grade, course_type, grade_type, scale)

    def aggregate(
        self,
        courses: Iterable[Course],
        scale: Any = GPAScale.WEIGHTED_4,
        scope: Any = Scope.OVERALL,
    ) -> Optional[float]:
        return aggregate(courses, scale, scope)

    def gpa_summary(
        self,
        courses: Iterable[Course],
        scale: Any = GPAScale.WEIGHTED_4,
    ) -> GPASummary:
        """
        Overall and per-year GPA for one scale.

        Args:
            courses: Course records
            scale: GPA scale to report

        Returns:
            GPASummary
        """
        start_time = time.perf_counter()
        courses = list(courses)
        summary = assemble_gpa_summary(courses, scale)
        elapsed = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"GPA summary ({summary.scale.value}): overall={summary.overall} "
            f"over {summary.counted_courses}/{len(courses)} courses in {elapsed:.2f}ms"
        )
        return summary

    def gpa_summaries(
        self,
        courses: Iterable[Course],
        scales: Optional[Iterable[Any]] = None,
    ) -> Dict[GPAScale, GPASummary]:
        """One summary per scale (every scale by default)."""
        courses = list(courses)
        return {
            summary.scale: summary
            for summary in (self.gpa_summary(courses, s) for s in (scales or list(GPAScale)))
        }

    def score_evaluation(self, evaluation: Evaluation) -> ScoreBreakdown:
        breakdown = score(evaluation)
        if not is_within_bounds(evaluation):
            # Contracts clamp every criterion, so this means a policy table is wrong
            logger.error(
                f"Evaluation {evaluation.id} total {breakdown.total_score} exceeds "
                f"maximum {max_possible(evaluation)}"
            )
        return breakdown

    def evaluation_report(self, evaluation: Evaluation) -> EvaluationReport:
        """
        Numbers, labels and narratives for one evaluation.
        """
        report = assemble_evaluation_report(evaluation)
        logger.info(
            f"Evaluation report for {evaluation.student_name or evaluation.student_id or 'anonymous'} "
            f"({evaluation.university_type.value}): {report.formatted_score}"
        )
        return report

    def gpa_summary_from_records(
        self,
        records: Iterable[Dict[str, Any]],
        scale: Any = GPAScale.WEIGHTED_4,
    ) -> GPASummary:
        """
        Convenience method for persisted course rows.
        """
        return self.gpa_summary(courses_from_records(records), scale)

    def evaluation_report_from_record(
        self,
        record: Dict[str, Any],
        university_type: Any = None,
    ) -> EvaluationReport:
        """
        Convenience method for a persisted evaluation row.
        """
        return self.evaluation_report(evaluation_from_record(record, university_type))

    def evaluation_reports(self, evaluations: Iterable[Evaluation]) -> List[EvaluationReport]:
        return [self.evaluation_report(e) for e in evaluations]


# Convenience functions for simple usage
def get_gpa_summary(
    courses: Iterable[Course],
    scale: Any = GPAScale.WEIGHTED_4,
) -> GPASummary:
    """
    Convenience function to get a GPA summary.
    """
    return ScoringEngine().gpa_summary(courses, scale)


def get_evaluation_report(evaluation: Evaluation) -> EvaluationReport:
    """
    Convenience function to get an evaluation report.
    """
    return ScoringEngine().evaluation_report(evaluation)
