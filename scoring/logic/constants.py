"""
Scoring Engine Constants

Defines all grade tables, course-type bonuses, GPA scales, admissions criteria
and score bounds used by the scoring engine.
All values are deterministic lookup data.
"""

from enum import Enum
from typing import Dict, List, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class GradeType(str, Enum):
    """How a course grade is recorded."""
    LETTER = "letter"
    HUNDRED_POINT = "100-point"


class CourseType(str, Enum):
    """Course rigor level; drives the weighted bonus."""
    REGULAR = "Regular"
    HONORS = "Honors"
    AP_IB = "AP/IB"


class GPAScale(str, Enum):
    """Named conversion policies from a grade to a point value."""
    WEIGHTED_4 = "weighted-us"
    UNWEIGHTED_4 = "unweighted-us"
    UC_WEIGHTED = "uc-gpa"
    COLLEGE_4_0 = "college-gpa-4.0"
    COLLEGE_4_33 = "college-gpa-4.33"
    HUNDRED_POINT = "100-point"


class UniversityType(str, Enum):
    """Policy selector for admissions scoring."""
    IVY_LEAGUE = "ivyLeague"
    TOP_30 = "top30"
    UC_SYSTEM = "ucSystem"


class Scope(str, Enum):
    """Aggregation scope other than a specific academic year."""
    OVERALL = "overall"


# =============================================================================
# ENUM ALIASES
# =============================================================================
# Keys are compared after lowercasing and stripping spaces, '-', '_', '/', '.'

GRADE_TYPE_ALIASES: Dict[str, GradeType] = {
    "letter": GradeType.LETTER,
    "lettergrade": GradeType.LETTER,
    "100point": GradeType.HUNDRED_POINT,
    "hundredpoint": GradeType.HUNDRED_POINT,
    "percentage": GradeType.HUNDRED_POINT,
    "numeric": GradeType.HUNDRED_POINT,
}

COURSE_TYPE_ALIASES: Dict[str, CourseType] = {
    "regular": CourseType.REGULAR,
    "honors": CourseType.HONORS,
    "honours": CourseType.HONORS,
    "apib": CourseType.AP_IB,
    "ap": CourseType.AP_IB,
    "ib": CourseType.AP_IB,
}

GPA_SCALE_ALIASES: Dict[str, GPAScale] = {
    "weighted4": GPAScale.WEIGHTED_4,
    "weightedus": GPAScale.WEIGHTED_4,
    "weighted": GPAScale.WEIGHTED_4,
    "unweighted4": GPAScale.UNWEIGHTED_4,
    "unweightedus": GPAScale.UNWEIGHTED_4,
    "unweighted": GPAScale.UNWEIGHTED_4,
    "ucweighted": GPAScale.UC_WEIGHTED,
    "ucgpa": GPAScale.UC_WEIGHTED,
    "college40": GPAScale.COLLEGE_4_0,
    "collegegpa40": GPAScale.COLLEGE_4_0,
    "college433": GPAScale.COLLEGE_4_33,
    "collegegpa433": GPAScale.COLLEGE_4_33,
    "hundredpoint": GPAScale.HUNDRED_POINT,
    "100point": GPAScale.HUNDRED_POINT,
}

UNIVERSITY_TYPE_ALIASES: Dict[str, UniversityType] = {
    "ivyleague": UniversityType.IVY_LEAGUE,
    "ivy": UniversityType.IVY_LEAGUE,
    "top30": UniversityType.TOP_30,
    "top2030": UniversityType.TOP_30,
    "ucsystem": UniversityType.UC_SYSTEM,
    "uc": UniversityType.UC_SYSTEM,
}


# =============================================================================
# GRADE TABLES
# =============================================================================

# Letter grade to 4.0 GPA (A+ is capped at 4.0)
GRADE_TO_GPA: Dict[str, float] = {
    "A+": 4.0, "A": 4.0, "A-": 3.7,
    "B+": 3.3, "B": 3.0, "B-": 2.7,
    "C+": 2.3, "C": 2.0, "C-": 1.7,
    "D+": 1.3, "D": 1.0, "D-": 0.7,
    "F": 0.0,
}

# Letter grade to 4.33 GPA (only A+ differs)
GRADE_TO_GPA_433: Dict[str, float] = {**GRADE_TO_GPA, "A+": 4.33}

# Percentage breakpoints, checked top-down: (minimum percentage, GPA)
PERCENTAGE_BANDS: List[Tuple[float, float]] = [
    (97, 4.0),   # A+
    (93, 4.0),   # A
    (90, 3.7),   # A-
    (87, 3.3),   # B+
    (83, 3.0),   # B
    (80, 2.7),   # B-
    (77, 2.3),   # C+
    (73, 2.0),   # C
    (70, 1.7),   # C-
    (67, 1.3),   # D+
    (63, 1.0),   # D
    (60, 0.7),   # D-
]
FAILING_GPA = 0.0

# 4.33 scale: an A+ percentage earns the extra third of a point
A_PLUS_PERCENTAGE = 97
A_PLUS_GPA_433 = 4.33

# Bonus points for course types on the weighted 4.0 scale
COURSE_TYPE_BONUS: Dict[CourseType, float] = {
    CourseType.REGULAR: 0.0,
    CourseType.HONORS: 0.5,
    CourseType.AP_IB: 1.0,
}

# UC GPA specific bonus (Honors weighs as much as AP/IB)
UC_COURSE_TYPE_BONUS: Dict[CourseType, float] = {
    CourseType.REGULAR: 0.0,
    CourseType.HONORS: 1.0,
    CourseType.AP_IB: 1.0,
}

# Special grade designations that don't count in GPA
SPECIAL_GRADES: Tuple[str, ...] = ("In Progress", "Pass/Fail", "Drop")

# UC GPA only counts courses from grades 10-12
UC_EXCLUDED_GRADE_LEVELS = frozenset({"9"})

# Class-year tags normalised to grade levels
GRADE_LEVEL_ALIASES: Dict[str, str] = {
    "9": "9", "9th": "9", "grade9": "9", "freshman": "9", "g9": "9",
    "10": "10", "10th": "10", "grade10": "10", "sophomore": "10", "g10": "10",
    "11": "11", "11th": "11", "grade11": "11", "junior": "11", "g11": "11",
    "12": "12", "12th": "12", "grade12": "12", "senior": "12", "g12": "12",
}


# =============================================================================
# GPA SCALE DISPLAY
# =============================================================================

GPA_SCALE_MAX: Dict[GPAScale, str] = {
    GPAScale.WEIGHTED_4: "4.0",
    GPAScale.UNWEIGHTED_4: "4.0",
    GPAScale.UC_WEIGHTED: "4.0",
    GPAScale.COLLEGE_4_0: "4.0",
    GPAScale.COLLEGE_4_33: "4.33",
    GPAScale.HUNDRED_POINT: "100",
}

GPA_SCALE_LABELS: Dict[GPAScale, str] = {
    GPAScale.WEIGHTED_4: "Weighted GPA-US",
    GPAScale.UNWEIGHTED_4: "Unweighted GPA-US",
    GPAScale.UC_WEIGHTED: "UC GPA",
    GPAScale.COLLEGE_4_0: "US College GPA (4.0)",
    GPAScale.COLLEGE_4_33: "US College GPA (4.33)",
    GPAScale.HUNDRED_POINT: "100-Point Average",
}


# =============================================================================
# ADMISSIONS CRITERIA
# =============================================================================

# Reversed scoring: 1 is best, 6 is worst
MIN_CRITERION_SCORE = 1
MAX_CRITERION_SCORE = 6

CORE_CRITERIA: Tuple[str, ...] = (
    "academic_excellence",
    "impact_leadership",
    "unique_narrative",
)

TRADITIONAL_CRITERIA: Tuple[str, ...] = (
    "academics",
    "extracurriculars",
    "athletics",
    "personal_qualities",
    "recommendations",
    "interview",
)

ALL_CRITERIA: Tuple[str, ...] = CORE_CRITERIA + TRADITIONAL_CRITERIA

# Criteria never counted for a university type
EXCLUDED_CRITERIA: Dict[UniversityType, frozenset] = {
    UniversityType.IVY_LEAGUE: frozenset(),
    UniversityType.TOP_30: frozenset(),
    UniversityType.UC_SYSTEM: frozenset({"interview"}),
}

# Athletics at or above this score is shown as de-emphasised on reports
# for these types. Display only: totals and maxima are unaffected.
ATHLETICS_DEEMPHASIS_THRESHOLD = 4
ATHLETICS_DEEMPHASIS_TYPES = frozenset({UniversityType.IVY_LEAGUE, UniversityType.TOP_30})

# Stored column name for each criterion
CRITERION_COLUMNS: Dict[str, str] = {
    criterion: f"{criterion}_score" for criterion in ALL_CRITERIA
}

# Camel-case keys used by the description catalog and form payloads
CRITERION_KEYS: Dict[str, str] = {
    "academic_excellence": "academicExcellence",
    "impact_leadership": "impactLeadership",
    "unique_narrative": "uniqueNarrative",
    "academics": "academics",
    "extracurriculars": "extracurriculars",
    "athletics": "athletics",
    "personal_qualities": "personalQualities",
    "recommendations": "recommendations",
    "interview": "interview",
}

# Stored history predates the university type column
DEFAULT_UNIVERSITY_TYPE = UniversityType.IVY_LEAGUE
