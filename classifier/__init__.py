"""Rule-based question categorization and intent detection engine."""

from .categories import CategoryMatcher
from .intent import IntentDetector
from .models import (
    CategorizationResult,
    CategoryMatch,
    CategorySuggestion,
    IntentResult,
    QualityReport,
    TagSuggestion,
    TemplateMatch,
)
from .orchestrator import CategorizationOrchestrator, fallback_quality_report, fallback_result
from .quality import QualityAssessor
from .tables import ClassifierTables, build_tables
from .tags import TagSuggester
from .templates import TemplateMatcher

__all__ = [
    # Tables
    "ClassifierTables",
    "build_tables",
    # Components
    "IntentDetector",
    "CategoryMatcher",
    "QualityAssessor",
    "TagSuggester",
    "TemplateMatcher",
    "CategorizationOrchestrator",
    "fallback_result",
    "fallback_quality_report",
    # Results
    "CategorizationResult",
    "CategoryMatch",
    "CategorySuggestion",
    "IntentResult",
    "QualityReport",
    "TagSuggestion",
    "TemplateMatch",
]
