"""Shared type definitions for the question classifier engine and API.

These enums inherit from both `str` and `Enum` to ensure JSON serializability.
This allows `json.dumps(Category.health)` to work directly without custom encoders.
"""

from enum import Enum


class Category(str, Enum):
    """Closed taxonomy of question categories.

    Declaration order is the tie-break priority used when two categories
    score equally.
    """

    health = "health"
    behavior = "behavior"
    food = "food"
    training = "training"
    local = "local"
    general = "general"


class IntentType(str, Enum):
    """Label of the strongest intent signal found in a question."""

    explicit_question = "explicit_question"
    interrogative = "interrogative"
    urgent_request = "urgent_request"
    help_request = "help_request"
    seeking_guidance = "seeking_guidance"
    need_statement = "need_statement"
    comparison_request = "comparison_request"
    selection_query = "selection_query"
    location_query = "location_query"
    experience_request = "experience_request"
    validation_seeking = "validation_seeking"
    problem_statement = "problem_statement"
    malfunction = "malfunction"
    pet_issue = "pet_issue"
    hinglish_question = "hinglish_question"
    hinglish_need = "hinglish_need"
    indian_cultural = "indian_cultural"
    hinglish_misc = "hinglish_misc"
    unknown = "unknown"


class CategorizationMethod(str, Enum):
    """How a categorization result was produced.

    - semantic_ai: high overall confidence (> 0.6)
    - enhanced_keyword: keyword/pattern scoring with lower confidence
    - keyword: degraded fallback after a processing error
    """

    semantic_ai = "semantic_ai"
    enhanced_keyword = "enhanced_keyword"
    keyword = "keyword"
