"""Category matching against the fixed question taxonomy."""

from __future__ import annotations

import logging

from shared.types import Category

from .intent import IntentDetector, question_text
from .models import CategoryMatch, CategorySuggestion, IntentResult
from .tables import (
    DEFAULT_INTENT_CONTEXT,
    SEMANTIC_SCORE_CAP,
    CategoryDefinition,
    ClassifierTables,
)

logger = logging.getLogger(__name__)

KEYWORD_SCORE = 0.1
PATTERN_SCORE = 0.5
MAX_SECONDARY = 2

DEFAULT_SUGGESTION = CategorySuggestion(
    category=Category.general,
    confidence=0.1,
    reason="Default category assigned",
)


def confidence_bucket(score: float) -> str:
    if score > 0.7:
        return "High confidence"
    if score > 0.4:
        return "Moderate confidence"
    return "Low confidence"


class CategoryMatcher:
    """Scores a question against every category and ranks the results.

    Equal scores keep the taxonomy's declaration order (health, behavior,
    food, training, local, general).
    """

    def __init__(self, tables: ClassifierTables) -> None:
        self._tables = tables

    def match(
        self,
        title: str,
        content: str,
        intent: IntentResult | None = None,
    ) -> CategoryMatch:
        """Rank categories for a question.

        Args:
            title: Question title
            content: Question body
            intent: Precomputed intent; detected here when omitted.

        Returns:
            CategoryMatch with the primary and up to two secondary categories.
        """
        if intent is None:
            intent = IntentDetector(self._tables).detect(title, content)

        text = question_text(title, content)
        scored: list[tuple[CategoryDefinition, float]] = []
        for definition in self._tables.categories:
            score = self.score(definition, text, intent)
            if score > 0:
                scored.append((definition, score))

        if not scored:
            return CategoryMatch(primary=DEFAULT_SUGGESTION, is_default=True)

        ranked = sorted(
            scored,
            key=lambda item: (-item[1], self._tables.priority(item[0].name)),
        )
        suggestions = [
            CategorySuggestion(
                category=definition.name,
                confidence=min(score, 1.0),
                reason=self.reason(definition, score, intent),
            )
            for definition, score in ranked
        ]

        logger.debug(
            "Category scores: %s",
            ", ".join(f"{d.name.value}={s:.2f}" for d, s in ranked),
        )

        return CategoryMatch(
            primary=suggestions[0],
            secondary=tuple(suggestions[1 : 1 + MAX_SECONDARY]),
        )

    def score(self, definition: CategoryDefinition, text: str, intent: IntentResult) -> float:
        """Weighted keyword + pattern + semantic score for one category."""
        keyword_score = sum(
            KEYWORD_SCORE * sum(1 for _ in pattern.finditer(text))
            for pattern in definition.keyword_patterns
        )
        pattern_score = sum(
            PATTERN_SCORE for pattern in definition.patterns if pattern.search(text)
        )
        semantic = self.semantic_score(definition, text, intent)
        return (keyword_score + pattern_score + semantic) * definition.weight

    def semantic_score(
        self, definition: CategoryDefinition, text: str, intent: IntentResult
    ) -> float:
        score = sum(group.count(text) * group.weight for group in definition.semantic_groups)
        for boost in self._tables.intent_boosts:
            if intent.type == boost.intent_type and definition.name in boost.categories:
                score += boost.boost
        return min(score, SEMANTIC_SCORE_CAP)

    def reason(self, definition: CategoryDefinition, score: float, intent: IntentResult) -> str:
        context = self._tables.intent_contexts.get(intent.type, DEFAULT_INTENT_CONTEXT)
        return f"{confidence_bucket(score)}: {definition.description} - {context}"
