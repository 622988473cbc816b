"""Tests for category matching."""

import dataclasses

import pytest

from classifier.categories import CategoryMatcher, confidence_bucket
from classifier.models import IntentResult
from shared.types import Category, IntentType

UNKNOWN_INTENT = IntentResult(is_question=False, confidence=0.0, type=IntentType.unknown)
PROBLEM_INTENT = IntentResult(is_question=False, confidence=0.2, type=IntentType.problem_statement)
HELP_INTENT = IntentResult(is_question=True, confidence=0.4, type=IntentType.help_request)


@pytest.fixture
def matcher(tables):
    return CategoryMatcher(tables)


class TestConfidenceBucket:
    """Tests for confidence_bucket."""

    def test_buckets(self) -> None:
        """Scores map onto the three confidence wordings."""
        assert confidence_bucket(0.71) == "High confidence"
        assert confidence_bucket(0.7) == "Moderate confidence"
        assert confidence_bucket(0.41) == "Moderate confidence"
        assert confidence_bucket(0.4) == "Low confidence"


class TestScoring:
    """Per-category score components."""

    def test_keyword_counts_each_occurrence(self, matcher, tables) -> None:
        """Each keyword occurrence adds 0.1."""
        score = matcher.score(tables.category(Category.local), "city city city", UNKNOWN_INTENT)
        assert score == pytest.approx(0.3)

    def test_keywords_match_whole_words_only(self, matcher, tables) -> None:
        """Keywords inside longer words don't count."""
        score = matcher.score(tables.category(Category.local), "velocity cityscape", UNKNOWN_INTENT)
        assert score == 0

    def test_pattern_counts_once(self, matcher, tables) -> None:
        """A pattern adds 0.5 however often it matches."""
        # "(best|good) (vet|trainer) in" matches twice but scores once
        text = "best trainer in town, best trainer in town"
        score = matcher.score(tables.category(Category.local), text, UNKNOWN_INTENT)
        assert score == pytest.approx(0.5)

    def test_general_weight_halves_score(self, matcher, tables) -> None:
        """General category scores at half weight."""
        score = matcher.score(tables.category(Category.general), "adoption budget", UNKNOWN_INTENT)
        assert score == pytest.approx(0.1)

    def test_semantic_score_capped(self, matcher, tables) -> None:
        """Semantic score never exceeds 0.8."""
        text = "vomiting vomiting fever fever"
        semantic = matcher.semantic_score(tables.category(Category.health), text, UNKNOWN_INTENT)
        assert semantic == pytest.approx(0.8)

    def test_problem_statement_boosts_health_and_behavior(self, matcher, tables) -> None:
        """Problem statements boost health and behavior by 0.2."""
        for category in (Category.health, Category.behavior):
            semantic = matcher.semantic_score(tables.category(category), "", PROBLEM_INTENT)
            assert semantic == pytest.approx(0.2)
        for category in (Category.food, Category.training):
            assert matcher.semantic_score(tables.category(category), "", PROBLEM_INTENT) == 0

    def test_help_request_boosts_training_and_food(self, matcher, tables) -> None:
        """Help requests boost training and food by 0.15."""
        for category in (Category.training, Category.food):
            semantic = matcher.semantic_score(tables.category(category), "", HELP_INTENT)
            assert semantic == pytest.approx(0.15)
        assert matcher.semantic_score(tables.category(Category.health), "", HELP_INTENT) == 0

    def test_boost_counts_towards_cap(self, matcher, tables) -> None:
        """Intent boost is added before the semantic cap."""
        text = "vomiting vomiting"
        semantic = matcher.semantic_score(tables.category(Category.health), text, PROBLEM_INTENT)
        assert semantic == pytest.approx(0.8)


class TestMatch:
    """Ranking, defaults and reasons."""

    def test_food_question(self, matcher) -> None:
        """Feeding question ranks food first."""
        match = matcher.match(
            "What food should I give my Labrador puppy?",
            "My 4 month old Labrador puppy won't eat kibble and seems hungry all the time.",
        )
        assert match.primary.category == Category.food
        assert match.primary.confidence == 1.0
        assert match.primary.reason == (
            "High confidence: Nutrition or feeding topic detected - question detected"
        )
        assert [s.category for s in match.secondary] == [Category.general]
        assert match.is_default is False

    def test_nothing_scores_gives_default(self, matcher) -> None:
        """No scoring category yields the general default."""
        match = matcher.match("asdf qwer zxcv", "lorem ipsum dolor")
        assert match.is_default is True
        assert match.primary.category == Category.general
        assert match.primary.confidence == 0.1
        assert match.primary.reason == "Default category assigned"
        assert match.secondary == ()

    def test_intent_detected_when_not_given(self, matcher) -> None:
        """Intent is detected when not passed in."""
        match = matcher.match("big problem", "")
        assert match.primary.reason.endswith("problem requiring help")

    def test_secondary_limited_to_two_and_excludes_primary(self, matcher) -> None:
        """At most two secondaries, never the primary."""
        match = matcher.match(
            "Vet in Mumbai for training and food",
            "My dog is aggressive, sick, and needs a new diet and adoption advice",
        )
        assert len(match.secondary) == 2
        assert match.primary.category not in [s.category for s in match.secondary]

    def test_confidence_clamped(self, matcher) -> None:
        """Reported confidence is capped at 1.0."""
        match = matcher.match("vomiting fever diarrhea", "sick sick vet vet pain")
        assert match.primary.category == Category.health
        assert match.primary.confidence == 1.0


class TestTieBreak:
    """Equal scores fall back to the taxonomy order."""

    def test_equal_scores_follow_category_order(self, matcher) -> None:
        """Ties rank in taxonomy order."""
        # sleep -> health 0.1, city -> local 0.1
        match = matcher.match("city sleep", "", UNKNOWN_INTENT)
        assert match.primary.category == Category.health
        assert [s.category for s in match.secondary] == [Category.local]

    def test_problem_boost_tie(self, matcher) -> None:
        """Boost-only tie puts health before behavior."""
        match = matcher.match("big problem", "", PROBLEM_INTENT)
        assert match.primary.category == Category.health
        assert match.primary.confidence == pytest.approx(0.2)
        assert match.primary.reason == (
            "Low confidence: Health-related query detected - problem requiring help"
        )
        assert [s.category for s in match.secondary] == [Category.behavior]

    def test_priority_comes_from_table_order(self, tables) -> None:
        """Reordered tables change the tie-break."""
        reordered = dataclasses.replace(tables, categories=tuple(reversed(tables.categories)))
        match = CategoryMatcher(reordered).match("city sleep", "", UNKNOWN_INTENT)
        assert match.primary.category == Category.local
