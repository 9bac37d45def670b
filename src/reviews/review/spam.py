"""Spam risk scoring for submitted reviews.

A small deterministic heuristic: independent penalties are summed and the
total is clamped to 1.0. The score is computed once, when a review is
submitted, and drives the ordering of the moderation queue.
"""

import re
from enum import Enum

SHOUTING_PENALTY = 0.3
REPEATED_PUNCTUATION_PENALTY = 0.2
SHORT_COMMENT_PENALTY = 0.3
DENYLIST_PENALTY = 0.2
REPEATED_CHARACTER_PENALTY = 0.2

MIN_COMMENT_LENGTH = 10

DENYLISTED_PHRASES = ("fake", "scam", "terrible", "worst", "never buy")

_UPPERCASE = re.compile(r"[A-Z]")
_REPEATED_PUNCTUATION = re.compile(r"[!?]{2,}")
_REPEATED_CHARACTER = re.compile(r"(.)\1{3,}")


class SpamLevel(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Minimum score for a pending review to be listed under a spam level
SPAM_LEVEL_THRESHOLDS = {
    SpamLevel.HIGH: 0.7,
    SpamLevel.MEDIUM: 0.4,
    SpamLevel.LOW: 0.0,
}


def uppercase_ratio(comment: str) -> float:
    if not comment:
        return 0.0
    return len(_UPPERCASE.findall(comment)) / len(comment)


def matched_phrases(title: str, comment: str) -> list[str]:
    """Denylisted phrases found in the title or the comment (case-insensitive)."""
    title = (title or "").lower()
    comment = (comment or "").lower()
    return [phrase for phrase in DENYLISTED_PHRASES if phrase in comment or phrase in title]


def spam_score(title: str, comment: str) -> float:
    """Score review text for spam risk, in [0.0, 1.0]."""
    comment = comment or ""
    score = 0.0

    if uppercase_ratio(comment) > 0.5:
        score += SHOUTING_PENALTY

    if _REPEATED_PUNCTUATION.search(comment):
        score += REPEATED_PUNCTUATION_PENALTY

    # Each matching phrase counts separately
    score += DENYLIST_PENALTY * len(matched_phrases(title, comment))

    if len(comment) < MIN_COMMENT_LENGTH:
        score += SHORT_COMMENT_PENALTY

    if _REPEATED_CHARACTER.search(comment):
        score += REPEATED_CHARACTER_PENALTY

    return round(min(score, 1.0), 2)


def threshold_for(spam_level) -> float:
    """Return the minimum score for a spam level given as a `SpamLevel` or its value."""
    return SPAM_LEVEL_THRESHOLDS[SpamLevel(spam_level)]
