"""
Score persistence for the X / O / draw tally.

Stores expose load_scores() and save_scores(tally). Failures never reach the
caller: a bad read gives a zeroed tally and a bad write is logged.
"""

import json
import logging
from pathlib import Path

log = logging.getLogger(__name__)

SCORE_KEYS = ('X', 'O', 'draw')


def zero_scores():
    return {key: 0 for key in SCORE_KEYS}


def clean_scores(data):
    """
    keep only known keys with non-negative int counts
    """
    scores = zero_scores()
    if not isinstance(data, dict):
        return scores
    for key in SCORE_KEYS:
        value = data.get(key)
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            scores[key] = value
    return scores


class JsonScoreStore:
    """
    tally kept as a flat json object on disk
    """
    def __init__(self, path):
        self.path = Path(path)

    def load_scores(self):
        """Load the tally, or zeros if the file is missing or broken."""
        if not self.path.exists():
            return zero_scores()
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("could not read scores from %s: %s", self.path, e)
            return zero_scores()
        return clean_scores(data)

    def save_scores(self, scores):
        """Write the tally; errors are logged, not raised."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(clean_scores(scores), f, indent=2)
        except OSError as e:
            log.warning("could not save scores to %s: %s", self.path, e)
            return False
        return True


class MemoryScoreStore:
    """
    in-process tally, nothing written anywhere
    """
    def __init__(self, initial=None):
        self.scores = clean_scores(initial)
        self.saves = 0

    def load_scores(self):
        return dict(self.scores)

    def save_scores(self, scores):
        self.scores = clean_scores(scores)
        self.saves += 1
        return True
