"""Result records produced by the classifier components.

All records are frozen and created fresh per call. `to_dict()` gives the
flat JSON-serializable form used at the API boundary.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from shared.types import CategorizationMethod, Category, IntentType

from .tables import QuestionTemplate


def _plain(value: Any) -> Any:
    """Convert tuples to lists recursively so dumps match the wire schema."""
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class CategorySuggestion:
    category: Category
    confidence: float
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True)
class TagSuggestion:
    tag: str
    relevance: float

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True)
class IntentResult:
    """Outcome of intent detection.

    Attributes:
        is_question: Whether the text reads as a request for help or information.
        confidence: Certainty in [0, 1], rounded to two decimals.
        type: Label of the strongest matched signal.
        indicators: Up to three descriptions of matched signals, in table order.
    """

    is_question: bool
    confidence: float
    type: IntentType
    indicators: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True)
class CategoryMatch:
    """Primary and up to two runner-up categories.

    `is_default` is set when no category scored and the primary is the
    built-in general fallback.
    """

    primary: CategorySuggestion
    secondary: tuple[CategorySuggestion, ...] = ()
    is_default: bool = False


@dataclass(frozen=True)
class CategorizationResult:
    primary_category: CategorySuggestion
    secondary_categories: tuple[CategorySuggestion, ...]
    suggested_tags: tuple[TagSuggestion, ...]
    overall_confidence: float
    method: CategorizationMethod
    intent_data: IntentResult | None = None

    @property
    def is_fallback(self) -> bool:
        return self.method is CategorizationMethod.keyword

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True)
class QualityReport:
    """Writing-quality score (0-100) and improvement suggestions."""

    score: int
    suggestions: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        if self.score >= 80:
            return "Great question!"
        if self.score >= 60:
            return "Good question"
        if self.score >= 40:
            return "Needs improvement"
        return "Poor quality"

    def to_dict(self) -> dict[str, Any]:
        data = _plain(asdict(self))
        data["label"] = self.label
        return data


@dataclass(frozen=True)
class TemplateMatch:
    template: QuestionTemplate | None = None
    match_score: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        if self.template is None:
            return {"template": None, "match_score": self.match_score}
        return {
            "template": {
                "name": self.template.name,
                "category": self.template.category,
                "fields": list(self.template.fields),
            },
            "match_score": self.match_score,
        }
