"""
Configuration for the scoring engine.

Values are read from the environment (a local .env file is loaded first),
so the same engine can run strict in CI and lenient behind the forms.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

ENGINE_VERSION = "1.0.0"

# Log level applied by configure_logging()
LOG_LEVEL = os.getenv("SCORING_LOG_LEVEL", "INFO").upper()

# When true, criterion scores outside 1-6 raise instead of being clamped
STRICT_SCORES = os.getenv("SCORING_STRICT_SCORES", "false").strip().lower() in ("1", "true", "yes", "on")

# Aggregates are reported with two decimals
GPA_DECIMALS = 2

# Neutral midpoint used for missing criterion scores and the UC interview
DEFAULT_CRITERION_SCORE = 3


def configure_logging(level: str = None) -> None:
    """Set up root logging the same way the application does at startup."""
    resolved = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(
        level=resolved,
        format="%(levelname)s - %(name)s - %(message)s",
    )
