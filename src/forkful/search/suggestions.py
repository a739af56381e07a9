"""Matching predicate, vocabulary and suggestion generation."""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Optional, Protocol, Sequence

from forkful.models.recipe import Recipe
from forkful.models.search import SuggestionMode

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTION_LIMIT = 8


class SnapshotSource(Protocol):
    @property
    def snapshot(self) -> Sequence[Recipe]: ...


def match_recipe(recipe: Recipe, query: str) -> bool:
    """Return True when the query occurs, ignoring case, in a matchable field.

    Matchable fields are the title, each ingredient, the style and the mood.
    This is the only matching rule: suggestions and result filtering both use it.
    """

    needle = query.lower()
    if needle in recipe.title.lower():
        return True
    if any(needle in ingredient.lower() for ingredient in recipe.ingredients):
        return True
    if recipe.style is not None and needle in recipe.style.lower():
        return True
    return recipe.mood is not None and needle in recipe.mood.lower()


def build_vocabulary(recipes: Iterable[Recipe]) -> FrozenSet[str]:
    """Distinct titles, ingredients, styles and moods (exact-string dedup)."""

    terms: set[str] = set()
    for recipe in recipes:
        terms.add(recipe.title)
        terms.update(recipe.ingredients)
        if recipe.style is not None:
            terms.add(recipe.style)
        if recipe.mood is not None:
            terms.add(recipe.mood)
    return frozenset(terms)


class SuggestionEngine:
    """Answer substring queries against the current snapshot of a source."""

    def __init__(self, source: SnapshotSource) -> None:
        self._source = source
        self._vocabulary_for: Optional[Sequence[Recipe]] = None
        self._vocabulary: tuple[str, ...] = ()

    def vocabulary(self) -> tuple[str, ...]:
        """Sorted vocabulary, rebuilt only when the snapshot object changes."""

        snapshot = self._source.snapshot
        if snapshot is not self._vocabulary_for:
            self._vocabulary = tuple(sorted(build_vocabulary(snapshot)))
            self._vocabulary_for = snapshot
            logger.debug("Rebuilt vocabulary with %d terms", len(self._vocabulary))
        return self._vocabulary

    def matching_recipes(self, query: str) -> List[Recipe]:
        return [recipe for recipe in self._source.snapshot if match_recipe(recipe, query)]

    def suggest(
        self,
        query: str,
        mode: SuggestionMode = SuggestionMode.VOCABULARY,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> List[str]:
        if not query.strip() or limit <= 0:
            return []

        if mode is SuggestionMode.TITLE:
            return [recipe.title for recipe in self.matching_recipes(query)][:limit]

        needle = query.lower()
        return [term for term in self.vocabulary() if needle in term.lower()][:limit]

    def resolve(self, suggestion: str) -> Optional[Recipe]:
        """Map a chosen suggestion to the first recipe carrying that exact title."""

        for recipe in self.matching_recipes(suggestion):
            if recipe.title == suggestion:
                return recipe
        return None


__all__ = ["DEFAULT_SUGGESTION_LIMIT", "SuggestionEngine", "build_vocabulary", "match_recipe"]
