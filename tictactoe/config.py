"""
Settings for the game front ends.
Each value can be overridden with the environment variable of the same name
prefixed with TICTACTOE_.
"""

import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)


def _env_int(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning("ignoring %s=%r, not an integer", name, raw)
        return default


# where the X / O / draw tally is kept between runs
SCORES_PATH = Path(os.getenv(
    "TICTACTOE_SCORES_PATH",
    str(Path.home() / ".tictactoe" / "scores.json"),
)).expanduser()

# pause before the computer answers in the Qt window (ms)
AI_DELAY_MS = max(0, _env_int("TICTACTOE_AI_DELAY_MS", 500))

LOG_LEVEL = os.getenv("TICTACTOE_LOG_LEVEL", "WARNING").upper()


def setup_logging(level=None):
    """
    basic console logging for the entry points
    """
    level = level or LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
