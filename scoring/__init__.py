"""
College counseling scoring engine: GPA conversion and aggregation across
scales, and admissions evaluation scoring per university type.
"""

from .config import ENGINE_VERSION as __version__
