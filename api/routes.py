"""FastAPI route handlers for the question classifier API.

Handlers are plain functions: classification is CPU-bound and FastAPI
runs them in its threadpool. Components are read from `app.state` through
dependencies so tests can override them.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from classifier import (
    CategorizationOrchestrator,
    CategorizationResult,
    fallback_quality_report,
)
from shared.types import CategorizationMethod

from .config import APIConfig
from .schemas import (
    AnalysisResponse,
    BatchAnalysisResponse,
    CategorizationResponse,
    CategoryInfo,
    HealthResponse,
    IntentSchema,
    QualityResponse,
    QuestionInput,
    TemplateMatchRequest,
    TemplateMatchResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_orchestrator(request: Request) -> CategorizationOrchestrator:
    return request.app.state.orchestrator


def get_config(request: Request) -> APIConfig:
    return request.app.state.config


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()


@router.get("/categories", response_model=list[CategoryInfo])
def list_categories(
    orchestrator: CategorizationOrchestrator = Depends(get_orchestrator),
) -> list[CategoryInfo]:
    """List the taxonomy in tie-break priority order."""
    return [
        CategoryInfo(name=d.name, description=d.description, weight=d.weight)
        for d in orchestrator.tables.categories
    ]


@router.post("/intent", response_model=IntentSchema)
def detect_intent(
    question: QuestionInput,
    orchestrator: CategorizationOrchestrator = Depends(get_orchestrator),
) -> IntentSchema:
    intent = orchestrator.detect_intent(question.title, question.content)
    return IntentSchema.model_validate(intent.to_dict())


@router.post("/categorize", response_model=CategorizationResponse)
def categorize(
    question: QuestionInput,
    orchestrator: CategorizationOrchestrator = Depends(get_orchestrator),
    config: APIConfig = Depends(get_config),
) -> CategorizationResponse:
    """Categorize a question.

    Never fails on engine errors: a degraded categorization (method
    "keyword") is a valid response and must not be retried.
    """
    result = orchestrator.process(question.title, question.content)
    return _categorization_response(result, config)


@router.post("/quality", response_model=QualityResponse)
def assess_quality(
    question: QuestionInput,
    orchestrator: CategorizationOrchestrator = Depends(get_orchestrator),
) -> QualityResponse:
    report = orchestrator.review_quality(question.title, question.content)
    return QualityResponse.model_validate(report.to_dict())


@router.post("/analyze", response_model=AnalysisResponse)
def analyze(
    question: QuestionInput,
    orchestrator: CategorizationOrchestrator = Depends(get_orchestrator),
    config: APIConfig = Depends(get_config),
) -> AnalysisResponse:
    """Categorize a question and score its quality in one call."""
    return _analyze(question, orchestrator, config)


@router.post("/analyze/batch", response_model=BatchAnalysisResponse)
def analyze_batch(
    questions: list[QuestionInput],
    orchestrator: CategorizationOrchestrator = Depends(get_orchestrator),
    config: APIConfig = Depends(get_config),
) -> BatchAnalysisResponse:
    """Analyze a batch of questions in the order received.

    Each question is handled independently. Always returns HTTP 200 with
    the number of items with a degraded categorization or quality report.
    """
    results = [_analyze(question, orchestrator, config) for question in questions]
    degraded = sum(1 for r in results if _is_degraded(r))
    if degraded:
        logger.warning("%d of %d analyses degraded", degraded, len(results))

    return BatchAnalysisResponse(
        processed=len(questions),
        degraded=degraded,
        results=results,
    )


@router.post("/templates/match", response_model=TemplateMatchResponse)
def match_template(
    body: TemplateMatchRequest,
    orchestrator: CategorizationOrchestrator = Depends(get_orchestrator),
) -> TemplateMatchResponse:
    match = orchestrator.match_template(body.category, body.title, body.content)
    return TemplateMatchResponse.model_validate(match.to_dict())


def _analyze(
    question: QuestionInput,
    orchestrator: CategorizationOrchestrator,
    config: APIConfig,
) -> AnalysisResponse:
    result, report = orchestrator.analyze(question.title, question.content)
    return AnalysisResponse(
        categorization=_categorization_response(result, config),
        quality=QualityResponse.model_validate(report.to_dict()),
    )


def _is_degraded(analysis: AnalysisResponse) -> bool:
    if analysis.categorization.method is CategorizationMethod.keyword:
        return True
    return analysis.quality.suggestions == list(fallback_quality_report().suggestions)


def _categorization_response(
    result: CategorizationResult, config: APIConfig
) -> CategorizationResponse:
    return CategorizationResponse.model_validate(
        {
            **result.to_dict(),
            "auto_approved": result.overall_confidence > config.auto_approve_threshold,
        }
    )
