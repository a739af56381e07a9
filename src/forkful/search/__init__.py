"""Client-side search, suggestion and filter/sort/pagination engine."""

from __future__ import annotations

from .controller import ControllerState, Key, SearchInputController, Selection
from .index import RecipeIndex
from .pagination import PaginationWindow
from .pipeline import apply_filters, filter_and_sort, sort_results
from .suggestions import SuggestionEngine, build_vocabulary, match_recipe
from .urlsync import (
    build_search_location,
    edit_location,
    read_search_param,
    recipe_location,
    seed_from_location,
)

__all__ = [
    "ControllerState",
    "Key",
    "SearchInputController",
    "Selection",
    "RecipeIndex",
    "PaginationWindow",
    "apply_filters",
    "filter_and_sort",
    "sort_results",
    "SuggestionEngine",
    "build_vocabulary",
    "match_recipe",
    "build_search_location",
    "edit_location",
    "read_search_param",
    "recipe_location",
    "seed_from_location",
]
