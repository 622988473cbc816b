"""Tests for API routes."""

from unittest import mock

import pytest
from fastapi.testclient import TestClient

from api.config import APIConfig
from api.main import create_app
from api.routes import get_orchestrator
from classifier import CategorizationOrchestrator
from classifier.quality import QualityAssessor

FOOD_QUESTION = {
    "title": "What food should I give my Labrador puppy?",
    "content": "My 4 month old Labrador puppy won't eat kibble and seems hungry all the time.",
}
GIBBERISH = {"title": "asdf qwer zxcv", "content": "lorem ipsum dolor"}
QUALITY_FALLBACK = "Quality assessment unavailable due to processing error"


@pytest.fixture
def app():
    """App with default configuration."""
    return create_app(APIConfig())


@pytest.fixture
def client(app):
    """Test client for the default app."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def failing_client(app, tables):
    """Client whose orchestrator fails inside categorize()."""
    orchestrator = CategorizationOrchestrator(tables)
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator

    with mock.patch.object(orchestrator, "categorize", side_effect=RuntimeError("boom")):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def failing_quality_client(client):
    """Client whose quality assessor raises on every call."""
    with mock.patch.object(QualityAssessor, "assess", side_effect=RuntimeError("boom")):
        yield client


class TestHealthAndCategories:
    """Tests for GET /health and GET /categories."""

    def test_health(self, client):
        """Health endpoint reports ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_categories_in_priority_order(self, client):
        """Categories are listed in tie-break priority order."""
        response = client.get("/categories")
        assert response.status_code == 200
        data = response.json()
        assert [c["name"] for c in data] == [
            "health",
            "behavior",
            "food",
            "training",
            "local",
            "general",
        ]
        assert data[-1]["weight"] == 0.5


class TestIntent:
    """Tests for POST /intent."""

    def test_explicit_question(self, client):
        """A question mark yields a certain explicit question."""
        response = client.post("/intent", json=FOOD_QUESTION)
        assert response.status_code == 200
        data = response.json()
        assert data["is_question"] is True
        assert data["confidence"] == 1.0
        assert data["type"] == "explicit_question"
        assert data["indicators"] == ["question mark"]

    def test_missing_field_rejected(self, client):
        """Bodies without content fail validation."""
        response = client.post("/intent", json={"title": "only a title"})
        assert response.status_code == 422


class TestCategorize:
    """Tests for POST /categorize."""

    def test_food_question(self, client):
        """Feeding question is categorized as food and auto-approved."""
        response = client.post("/categorize", json=FOOD_QUESTION)
        assert response.status_code == 200
        data = response.json()
        assert data["primary_category"]["category"] == "food"
        assert data["method"] == "semantic_ai"
        assert data["overall_confidence"] == 1.0
        assert data["auto_approved"] is True
        tags = [t["tag"] for t in data["suggested_tags"]]
        assert "labrador" in tags
        assert "puppy" in tags

    def test_default_category(self, client):
        """Unmatched text falls back to the general default."""
        response = client.post("/categorize", json=GIBBERISH)
        assert response.status_code == 200
        data = response.json()
        assert data["primary_category"] == {
            "category": "general",
            "confidence": 0.1,
            "reason": "Default category assigned",
        }
        assert data["secondary_categories"] == []
        assert data["suggested_tags"] == []
        assert data["auto_approved"] is False

    def test_auto_approve_threshold_from_config(self):
        """Auto-approval requires confidence strictly above the threshold."""
        app = create_app(APIConfig(auto_approve_threshold=1.0))
        with TestClient(app) as client:
            response = client.post("/categorize", json=FOOD_QUESTION)
        assert response.json()["auto_approved"] is False

    def test_engine_failure_returns_fallback(self, failing_client):
        """Engine errors produce the degraded result with HTTP 200."""
        response = failing_client.post("/categorize", json=FOOD_QUESTION)
        assert response.status_code == 200
        data = response.json()
        assert data["method"] == "keyword"
        assert data["primary_category"]["reason"] == (
            "Fallback categorization due to processing error"
        )
        assert data["intent_data"] is None
        assert data["auto_approved"] is False


class TestQuality:
    """Tests for POST /quality."""

    def test_minimal_submission(self, client):
        """One-letter title with no content scores 42."""
        response = client.post("/quality", json={"title": "x", "content": ""})
        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 42
        assert len(data["suggestions"]) == 4
        assert data["label"] == "Needs improvement"

    def test_assessor_failure_returns_fallback(self, failing_quality_client):
        """Assessor errors produce the degraded report with HTTP 200."""
        response = failing_quality_client.post("/quality", json=FOOD_QUESTION)
        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 0
        assert data["suggestions"] == [QUALITY_FALLBACK]


class TestAnalyze:
    """Tests for POST /analyze and POST /analyze/batch."""

    def test_analyze_single(self, client):
        """Single analysis returns categorization and quality."""
        response = client.post("/analyze", json=FOOD_QUESTION)
        assert response.status_code == 200
        data = response.json()
        assert data["categorization"]["primary_category"]["category"] == "food"
        assert 0 <= data["quality"]["score"] <= 100

    def test_analyze_survives_quality_failure(self, failing_quality_client):
        """Quality failure still returns the categorization."""
        response = failing_quality_client.post("/analyze", json=FOOD_QUESTION)
        assert response.status_code == 200
        data = response.json()
        assert data["categorization"]["primary_category"]["category"] == "food"
        assert data["quality"]["suggestions"] == [QUALITY_FALLBACK]

    def test_batch_empty(self, client):
        """Empty batch is processed with zero counts."""
        response = client.post("/analyze/batch", json=[])
        assert response.status_code == 200
        assert response.json() == {"processed": 0, "degraded": 0, "results": []}

    def test_batch_preserves_order(self, client):
        """Results come back in request order."""
        response = client.post("/analyze/batch", json=[FOOD_QUESTION, GIBBERISH])
        assert response.status_code == 200
        data = response.json()
        assert data["processed"] == 2
        assert data["degraded"] == 0
        categories = [r["categorization"]["primary_category"]["category"] for r in data["results"]]
        assert categories == ["food", "general"]

    def test_batch_counts_degraded(self, failing_client):
        """Failed categorizations are counted as degraded."""
        response = failing_client.post("/analyze/batch", json=[FOOD_QUESTION, GIBBERISH])
        assert response.status_code == 200
        data = response.json()
        assert data["processed"] == 2
        assert data["degraded"] == 2

    def test_batch_counts_quality_failures(self, failing_quality_client):
        """Failed quality assessments are counted as degraded, not raised."""
        response = failing_quality_client.post(
            "/analyze/batch", json=[{"title": "a", "content": "b"}]
        )
        assert response.status_code == 200
        data = response.json()
        assert data["processed"] == 1
        assert data["degraded"] == 1
        assert data["results"][0]["quality"]["score"] == 0


class TestTemplateMatch:
    """Tests for POST /templates/match."""

    def test_match(self, client):
        """Health question about sickness matches symptom_check."""
        response = client.post(
            "/templates/match",
            json={"category": "health", "title": "My dog is sick", "content": ""},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["template"]["name"] == "symptom_check"
        assert data["template"]["fields"][0] == "symptoms"
        assert data["match_score"] == 0.8

    def test_no_match(self, client):
        """Category without templates returns an empty match."""
        response = client.post(
            "/templates/match",
            json={"category": "food", "title": "kibble", "content": ""},
        )
        assert response.json() == {"template": None, "match_score": 0.0}

    def test_unknown_category_rejected(self, client):
        """Categories outside the taxonomy fail validation."""
        response = client.post(
            "/templates/match",
            json={"category": "grooming", "title": "x", "content": ""},
        )
        assert response.status_code == 422
