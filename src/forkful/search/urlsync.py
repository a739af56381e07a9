"""Seed search state from the shareable `search` query parameter.

Seeding happens once, when a view mounts. Typing afterwards does not rewrite
the address; only a submitted query navigates to a new search location.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional
from urllib.parse import parse_qs, quote, urlsplit

logger = logging.getLogger(__name__)

SEARCH_PARAM = "search"
RECIPES_ROUTE = "/recipes"


def read_search_param(location: str) -> Optional[str]:
    """Return the non-empty `search` value from a URL, path or query string."""

    if not location:
        return None
    query = urlsplit(location).query if ("?" in location or "://" in location) else location
    values = parse_qs(query.lstrip("?"), keep_blank_values=True).get(SEARCH_PARAM)
    if not values or not values[0]:
        return None
    return values[0]


def build_search_location(query: str, route: str = RECIPES_ROUTE) -> str:
    return f"{route}?{SEARCH_PARAM}={quote(query, safe='')}"


def recipe_location(recipe_id: str) -> str:
    return f"/recipe/{quote(recipe_id, safe='')}"


def edit_location(recipe_id: str) -> str:
    return f"/edit/{quote(recipe_id, safe='')}"


def seed_from_location(
    location: str,
    seed_query: Callable[[str], None],
    scroll_to_top: Optional[Callable[[], None]] = None,
) -> bool:
    """Seed a query from `location`; returns True when the view counts as searched."""

    query = read_search_param(location)
    if query is None:
        return False
    logger.debug("Seeding search from location query=%r", query)
    seed_query(query)
    if scroll_to_top is not None:
        scroll_to_top()
    return True


__all__ = [
    "RECIPES_ROUTE",
    "SEARCH_PARAM",
    "build_search_location",
    "edit_location",
    "read_search_param",
    "recipe_location",
    "seed_from_location",
]
