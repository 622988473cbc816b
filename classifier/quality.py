"""Question quality scoring with improvement suggestions."""

from __future__ import annotations

from .intent import IntentDetector
from .models import QualityReport
from .tables import ClassifierTables

BASE_SCORE = 100
MAX_SCORE = 100

MIN_TITLE_LENGTH = 10
MAX_TITLE_LENGTH = 100
MIN_CONTENT_LENGTH = 20
MAX_CONTENT_LENGTH = 2000

UNCLEAR_INTENT_CONFIDENCE = 0.3
CLEAR_INTENT_CONFIDENCE = 0.7


class QualityAssessor:
    """Scores how answerable a question is, starting from 100.

    Penalties are applied in a fixed order and each adds one suggestion:
    short title (-15), long title (-10), unclear request (-8), short
    content (-20), long content (-10), missing context (-15). A clearly
    detected question earns +5. The result is clamped to [0, 100].
    """

    def __init__(self, tables: ClassifierTables, detector: IntentDetector | None = None) -> None:
        self._tables = tables
        self._detector = detector or IntentDetector(tables)

    def assess(self, title: str, content: str) -> QualityReport:
        intent = self._detector.detect(title, content)
        suggestions: list[str] = []
        score = BASE_SCORE

        if len(title) < MIN_TITLE_LENGTH:
            suggestions.append("Title is too short. Consider adding more details.")
            score -= 15
        if len(title) > MAX_TITLE_LENGTH:
            suggestions.append("Title is too long. Keep it concise and focused.")
            score -= 10

        # Softer than demanding a literal question mark
        if not intent.is_question and intent.confidence < UNCLEAR_INTENT_CONFIDENCE:
            suggestions.append("Consider clarifying what specific help or information you need.")
            score -= 8

        if len(content) < MIN_CONTENT_LENGTH:
            suggestions.append("Add more details about your situation for better answers.")
            score -= 20
        if len(content) > MAX_CONTENT_LENGTH:
            suggestions.append("Consider breaking down your question into smaller, focused questions.")
            score -= 10

        lowered = content.lower()
        if not any(keyword in lowered for keyword in self._tables.context_keywords):
            suggestions.append("Include relevant context (dog age, breed, duration of issue, etc.).")
            score -= 15

        if intent.is_question and intent.confidence > CLEAR_INTENT_CONFIDENCE:
            score += 5

        return QualityReport(score=max(0, min(score, MAX_SCORE)), suggestions=tuple(suggestions))
