"""Pydantic schemas for API request/response validation.

Response models mirror the engine's result records field for field, so a
record's `to_dict()` validates directly into its schema.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from shared.types import CategorizationMethod, Category, IntentType


# =============================================================================
# Request Schemas
# =============================================================================


class QuestionInput(BaseModel):
    """A submitted question. Both fields may be empty but not missing."""

    title: str
    content: str


class TemplateMatchRequest(QuestionInput):
    """Question plus the category whose templates should be searched."""

    category: Category


# =============================================================================
# Response Schemas
# =============================================================================


class CategorySuggestionSchema(BaseModel):
    category: Category
    confidence: float = Field(ge=0.0, le=1.0)
    reason: str


class TagSuggestionSchema(BaseModel):
    tag: str
    relevance: float = Field(ge=0.0, le=1.0)


class IntentSchema(BaseModel):
    is_question: bool
    confidence: float = Field(ge=0.0, le=1.0)
    type: IntentType
    indicators: list[str]


class CategorizationResponse(BaseModel):
    """Categorization of one question.

    `auto_approved` is true when overall confidence exceeds the configured
    threshold; callers may store such categorizations without review.
    """

    primary_category: CategorySuggestionSchema
    secondary_categories: list[CategorySuggestionSchema]
    suggested_tags: list[TagSuggestionSchema]
    overall_confidence: float = Field(ge=0.0, le=1.0)
    method: CategorizationMethod
    intent_data: IntentSchema | None = None
    auto_approved: bool = False


class QualityResponse(BaseModel):
    score: int = Field(ge=0, le=100)
    suggestions: list[str]
    label: str


class AnalysisResponse(BaseModel):
    """Categorization and quality report for one question."""

    categorization: CategorizationResponse
    quality: QualityResponse


class BatchAnalysisResponse(BaseModel):
    """Response for the /analyze/batch endpoint.

    Always returns HTTP 200. Items whose categorization fell back to the
    degraded result are counted in `degraded`; callers must not retry them.
    """

    processed: int
    degraded: int
    results: list[AnalysisResponse]


class TemplateSchema(BaseModel):
    name: str
    category: Category
    fields: list[str]


class TemplateMatchResponse(BaseModel):
    template: TemplateSchema | None = None
    match_score: float = Field(ge=0.0, le=1.0)


class CategoryInfo(BaseModel):
    name: Category
    description: str
    weight: float


class HealthResponse(BaseModel):
    status: str = "ok"
