"""Pydantic models defining shared data contracts."""

from forkful.models.recipe import Category, Ingredient, Recipe, User, parse_prep_minutes
from forkful.models.search import FilterState, SearchState, SortKey, SuggestionMode

__all__ = [
    "Category",
    "Ingredient",
    "Recipe",
    "User",
    "parse_prep_minutes",
    "FilterState",
    "SearchState",
    "SortKey",
    "SuggestionMode",
]
