"""Free-text, category and duration filtering plus result ordering.

All functions are pure: they build new lists and never touch their inputs.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from forkful.models.recipe import Recipe
from forkful.models.search import FilterState, SortKey

from .suggestions import match_recipe


def _within_duration(recipe: Recipe, max_minutes: Optional[int]) -> bool:
    # Recipes without a readable prep time are never excluded by the bound.
    if max_minutes is None or recipe.prep_minutes is None:
        return True
    return recipe.prep_minutes <= max_minutes


def _in_category(recipe: Recipe, category: Optional[str]) -> bool:
    if category is None:
        return True
    return recipe.category is not None and recipe.category.lower() == category.lower()


def apply_filters(
    recipes: Iterable[Recipe],
    query: str = "",
    filters: Optional[FilterState] = None,
) -> List[Recipe]:
    """Keep recipes that match the query, the category and the duration bound."""

    filters = filters or FilterState()
    needle = query.strip()
    return [
        recipe
        for recipe in recipes
        if (not needle or match_recipe(recipe, needle))
        and _in_category(recipe, filters.category)
        and _within_duration(recipe, filters.max_duration_minutes)
    ]


def _title_key(recipe: Recipe) -> tuple[str, str]:
    return (recipe.title.lower(), recipe.title)


def sort_results(recipes: Sequence[Recipe], sort_key: SortKey = SortKey.NEWEST) -> List[Recipe]:
    """Order results for display.

    QUICKEST sorts by prep minutes ascending with unparseable times last.
    NEWEST and POPULAR are placeholders (ascending and descending title) since
    records carry no creation time or popularity count.
    """

    if sort_key is SortKey.QUICKEST:
        return sorted(
            recipes,
            key=lambda recipe: (recipe.prep_minutes is None, recipe.prep_minutes or 0),
        )
    if sort_key is SortKey.POPULAR:
        return sorted(recipes, key=_title_key, reverse=True)
    return sorted(recipes, key=_title_key)


def filter_and_sort(
    recipes: Iterable[Recipe],
    query: str = "",
    filters: Optional[FilterState] = None,
) -> List[Recipe]:
    filters = filters or FilterState()
    return sort_results(apply_filters(recipes, query, filters), filters.sort_key)


__all__ = ["apply_filters", "filter_and_sort", "sort_results"]
