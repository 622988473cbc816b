"""Shared types and utilities for the classifier engine and API."""

from .types import CategorizationMethod, Category, IntentType

__all__ = ["Category", "IntentType", "CategorizationMethod"]
