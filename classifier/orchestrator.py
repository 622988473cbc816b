"""Composes intent, category and tag detection into one categorization.

`CategorizationOrchestrator.process()` is the entry point for callers such
as the question-submission handler: it never raises and returns a fixed
low-confidence result if anything inside the engine fails.
"""

from __future__ import annotations

import logging

from shared.types import CategorizationMethod, Category

from .categories import CategoryMatcher
from .intent import IntentDetector
from .models import (
    CategorizationResult,
    CategorySuggestion,
    IntentResult,
    QualityReport,
    TemplateMatch,
)
from .quality import QualityAssessor
from .tables import ClassifierTables
from .tags import TagSuggester
from .templates import TemplateMatcher

logger = logging.getLogger(__name__)

INTENT_CONFIDENCE_BOOST = 0.1
SEMANTIC_THRESHOLD = 0.6


def fallback_result() -> CategorizationResult:
    """Degraded result returned when categorization fails."""
    return CategorizationResult(
        primary_category=CategorySuggestion(
            category=Category.general,
            confidence=0.1,
            reason="Fallback categorization due to processing error",
        ),
        secondary_categories=(),
        suggested_tags=(),
        overall_confidence=0.1,
        method=CategorizationMethod.keyword,
    )


def fallback_quality_report() -> QualityReport:
    """Degraded report returned when quality assessment fails."""
    return QualityReport(
        score=0,
        suggestions=("Quality assessment unavailable due to processing error",),
    )


class CategorizationOrchestrator:
    """Single entry point over all classifier components.

    Holds no per-call state; one instance can serve concurrent callers.
    """

    def __init__(self, tables: ClassifierTables) -> None:
        self._tables = tables
        self._intent = IntentDetector(tables)
        self._categories = CategoryMatcher(tables)
        self._tags = TagSuggester(tables)
        self._quality = QualityAssessor(tables, self._intent)
        self._templates = TemplateMatcher(tables)

    @property
    def tables(self) -> ClassifierTables:
        return self._tables

    def categorize(self, title: str, content: str) -> CategorizationResult:
        """Categorize a question. Errors propagate; see process()."""
        intent = self._intent.detect(title, content)
        match = self._categories.match(title, content, intent)

        tag_category = None if match.is_default else match.primary.category
        tags = self._tags.suggest(title, content, tag_category)

        overall = match.primary.confidence
        if intent.is_question:
            overall = min(overall + intent.confidence * INTENT_CONFIDENCE_BOOST, 1.0)

        method = (
            CategorizationMethod.semantic_ai
            if overall > SEMANTIC_THRESHOLD
            else CategorizationMethod.enhanced_keyword
        )

        return CategorizationResult(
            primary_category=match.primary,
            secondary_categories=match.secondary,
            suggested_tags=tags,
            overall_confidence=overall,
            method=method,
            intent_data=intent,
        )

    def process(self, title: str, content: str) -> CategorizationResult:
        """Categorize a question without ever raising.

        Any internal failure is logged and replaced by fallback_result().
        Retrying is pointless: the computation is deterministic.
        """
        try:
            result = self.categorize(title, content)
        except Exception:
            logger.exception("Categorization failed, returning fallback result")
            return fallback_result()

        logger.debug(
            "Categorized question as %s (%.0f%%, %s)",
            result.primary_category.category.value,
            result.overall_confidence * 100,
            result.method.value,
        )
        return result

    def review_quality(self, title: str, content: str) -> QualityReport:
        """Assess quality without ever raising; see process()."""
        try:
            return self._quality.assess(title, content)
        except Exception:
            logger.exception("Quality assessment failed, returning fallback report")
            return fallback_quality_report()

    def analyze(self, title: str, content: str) -> tuple[CategorizationResult, QualityReport]:
        """Fail-open categorization and quality report for one question."""
        return self.process(title, content), self.review_quality(title, content)

    def detect_intent(self, title: str, content: str) -> IntentResult:
        return self._intent.detect(title, content)

    def assess_quality(self, title: str, content: str) -> QualityReport:
        return self._quality.assess(title, content)

    def match_template(self, category: Category | str, title: str, content: str) -> TemplateMatch:
        return self._templates.match(category, title, content)
