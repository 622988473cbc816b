"""Structured question templates per category."""

from __future__ import annotations

from shared.types import Category

from .models import TemplateMatch
from .tables import ClassifierTables

TEMPLATE_MATCH_SCORE = 0.8


class TemplateMatcher:
    """Finds the first template of a category whose pattern fits the question."""

    def __init__(self, tables: ClassifierTables) -> None:
        self._tables = tables

    def match(self, category: Category | str, title: str, content: str) -> TemplateMatch:
        """Return the matching template, or an empty match with score 0.

        Args:
            category: Category to pick templates from. Unknown names and
                categories without templates yield an empty match.
            title: Question title
            content: Question body
        """
        text = f"{title} {content}"
        for template in self._tables.templates:
            if template.category != category:
                continue
            if template.pattern.search(text):
                return TemplateMatch(template=template, match_score=TEMPLATE_MATCH_SCORE)
        return TemplateMatch()
