"""Question classifier HTTP API."""

from .config import APIConfig, load_config
from .main import create_app, run
from .routes import router
from .schemas import (
    AnalysisResponse,
    BatchAnalysisResponse,
    CategorizationResponse,
    IntentSchema,
    QualityResponse,
    QuestionInput,
    TemplateMatchRequest,
    TemplateMatchResponse,
)

__all__ = [
    # Configuration
    "APIConfig",
    "load_config",
    # Application
    "create_app",
    "run",
    "router",
    # Schemas
    "AnalysisResponse",
    "BatchAnalysisResponse",
    "CategorizationResponse",
    "IntentSchema",
    "QualityResponse",
    "QuestionInput",
    "TemplateMatchRequest",
    "TemplateMatchResponse",
]
