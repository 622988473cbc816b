"""Tag suggestions: breed, age group, urgency and category tags."""

from __future__ import annotations

import re

from shared.types import Category

from .intent import question_text
from .models import TagSuggestion
from .tables import ClassifierTables

MAX_TAGS = 5

BREED_RELEVANCE = 0.9
AGE_RELEVANCE = 0.8
URGENT_RELEVANCE = 1.0
CATEGORY_RELEVANCE = 0.6


class TagSuggester:
    """Proposes up to five unique tags for a question."""

    def __init__(self, tables: ClassifierTables) -> None:
        self._tables = tables

    def suggest(
        self,
        title: str,
        content: str,
        primary_category: Category | None = None,
    ) -> tuple[TagSuggestion, ...]:
        """Suggest tags, highest relevance first.

        Args:
            title: Question title
            content: Question body
            primary_category: Adds that category's static tags when given.

        Returns:
            At most MAX_TAGS suggestions with distinct tag values. Among equal
            relevance, detection order is kept.
        """
        text = question_text(title, content)
        candidates: list[TagSuggestion] = []

        for breed in self._tables.breeds:
            if breed in text:
                candidates.append(TagSuggestion(re.sub(r"\s+", "-", breed), BREED_RELEVANCE))

        for bucket, keywords in self._tables.age_buckets:
            if any(keyword in text for keyword in keywords):
                candidates.append(TagSuggestion(bucket, AGE_RELEVANCE))

        if any(keyword in text for keyword in self._tables.urgent_keywords):
            candidates.append(TagSuggestion("urgent", URGENT_RELEVANCE))

        if primary_category is not None:
            for tag in self._tables.category_tags.get(primary_category, ()):
                candidates.append(TagSuggestion(tag, CATEGORY_RELEVANCE))

        unique: dict[str, TagSuggestion] = {}
        for suggestion in candidates:
            unique.setdefault(suggestion.tag, suggestion)

        ranked = sorted(unique.values(), key=lambda s: s.relevance, reverse=True)
        return tuple(ranked[:MAX_TAGS])
