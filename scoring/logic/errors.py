"""
Scoring Engine Errors

All failures are local and raised synchronously to the caller.
"""


class ScoringError(Exception):
    """Base class for errors raised by the scoring engine."""


class InvalidArgument(ScoringError, ValueError):
    """
    Raised for unrecognised enum values, malformed records and
    (in strict mode) criterion scores outside the 1-6 range.
    """

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field
