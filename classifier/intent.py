"""Intent detection: is this text actually asking for help?

A literal question mark short-circuits everything. Otherwise weighted regex
groups accumulate an intent score, gratitude/announcement style phrasing
subtracts from it, and the remainder is scaled into a confidence.
"""

from __future__ import annotations

import logging

from shared.types import IntentType

from .models import IntentResult
from .tables import ClassifierTables

logger = logging.getLogger(__name__)

QUESTION_THRESHOLD = 0.2
MULTI_SIGNAL_BOOST = 1.15
MAX_INDICATORS = 3


def question_text(title: str, content: str) -> str:
    """Combined lower-cased text every component scans.

    Raises:
        TypeError: If title or content is not a string.
    """
    return (title + " " + content).lower()


def scale_confidence(score: float) -> float:
    """Map a non-negative intent score onto [0, 1].

    Strong scores are scaled gently, weak ones harshly, so a single
    low-weight hit stays well below the question threshold.
    """
    if score >= 1.5:
        return min(score / 2.5, 1.0)
    if score >= 0.8:
        return score / 2.0
    return score / 3.0


class IntentDetector:
    """Decides whether a title/content pair is a genuine question."""

    def __init__(self, tables: ClassifierTables) -> None:
        self._tables = tables

    def detect(self, title: str, content: str) -> IntentResult:
        text = question_text(title, content)

        if "?" in text:
            return IntentResult(
                is_question=True,
                confidence=1.0,
                type=IntentType.explicit_question,
                indicators=("question mark",),
            )

        exclusion = self.exclusion_score(text)

        total = 0.0
        indicators: list[str] = []
        detected = IntentType.unknown
        highest_weight = 0.0

        for group in self._tables.intent_groups:
            hits = group.count(text)
            if not hits:
                continue
            total += hits * group.weight
            indicators.append(group.label)
            if group.weight > highest_weight:
                highest_weight = group.weight
                detected = group.intent_type or IntentType.unknown

        score = max(0.0, total - exclusion)
        confidence = scale_confidence(score) if score > 0 else 0.0
        if len(indicators) > 1:
            confidence = min(confidence * MULTI_SIGNAL_BOOST, 1.0)

        logger.debug(
            "Intent score %.2f (exclusion %.2f) -> %s %.2f",
            score,
            exclusion,
            detected.value,
            confidence,
        )

        return IntentResult(
            is_question=confidence > QUESTION_THRESHOLD,
            confidence=round(confidence, 2),
            type=detected,
            indicators=tuple(indicators[:MAX_INDICATORS]),
        )

    def exclusion_score(self, text: str) -> float:
        """Penalty for thanks, announcements, celebrations and plain statements."""
        return sum(group.count(text) * group.weight for group in self._tables.exclusion_groups)
