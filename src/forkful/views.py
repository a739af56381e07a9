"""View-level composition of the search engine.

Each view owns its own index, search state and filter state; they are created
on mount and thrown away on unmount.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional

from forkful import metrics
from forkful.api.repositories import CategoryRepository, IngredientRepository, RecipeRepository
from forkful.authoring import CategoryCatalog
from forkful.config import get_settings
from forkful.errors import FetchError, NotOwner
from forkful.models.recipe import Category, Ingredient, Recipe
from forkful.models.search import FilterState, SuggestionMode
from forkful.search.controller import SearchInputController, Selection
from forkful.search.index import RecipeIndex, RecipeSource, Snapshot
from forkful.search.pagination import PaginationWindow
from forkful.search.pipeline import apply_filters, filter_and_sort
from forkful.search.suggestions import SuggestionEngine
from forkful.search.urlsync import (
    RECIPES_ROUTE,
    build_search_location,
    edit_location,
    recipe_location,
    seed_from_location,
)
from forkful.session import SessionContext

logger = logging.getLogger(__name__)

Navigator = Callable[[str], None]


class RecipeBrowser:
    """Search box, filters and a paged result list over one recipe snapshot.

    With `require_search=True` the view behaves like a dedicated search page:
    nothing is listed until a query has been submitted (or seeded from the
    address). Otherwise an empty query lists every recipe that passes the
    filters.
    """

    def __init__(
        self,
        source: RecipeSource,
        *,
        require_search: bool = False,
        page_size: Optional[int] = None,
        suggestion_limit: Optional[int] = None,
        scroll_to_top: Optional[Callable[[], None]] = None,
    ) -> None:
        settings = get_settings()
        self.index = RecipeIndex(source)
        self.engine = SuggestionEngine(self.index)
        self.controller = SearchInputController(
            self.engine,
            mode=SuggestionMode.VOCABULARY,
            limit=suggestion_limit if suggestion_limit is not None else settings.suggestion_limit,
            on_submit=self._handle_submit,
        )
        self.filters = FilterState()
        self.pagination: PaginationWindow[Recipe] = PaginationWindow(page_size or settings.page_size)
        self.require_search = require_search
        self.has_searched = False
        self.error: Optional[str] = None
        self._scroll_to_top = scroll_to_top
        self._results_key: Optional[tuple[Any, ...]] = None
        self._results_snapshot: Optional[Snapshot] = None
        self._results: List[Recipe] = []

    # -- lifecycle --------------------------------------------------------

    def mount(self, location: str = "") -> bool:
        """Seed from the address, then fetch; returns False when the fetch failed."""

        self.index.mount()
        if seed_from_location(location, self.controller.reset, self._scroll_to_top):
            self.has_searched = True
        return self.reload()

    def reload(self) -> bool:
        try:
            self.index.load()
        except FetchError as exc:
            self.error = exc.message
            return False
        self.error = None
        return True

    def unmount(self) -> None:
        self.index.unmount()

    @property
    def loading(self) -> bool:
        return self.index.loading

    # -- inputs -----------------------------------------------------------

    def set_filters(self, **changes: Any) -> FilterState:
        payload = self.filters.model_dump()
        payload.update(changes)
        self.filters = FilterState(**payload)
        return self.filters

    def _handle_submit(self, query: str) -> None:
        self.has_searched = True
        metrics.SEARCHES.labels(kind="submit").inc()
        logger.info("Search submitted query=%r", query)

    # -- outputs ----------------------------------------------------------

    @property
    def results(self) -> List[Recipe]:
        """Filtered, sorted results; the paging window resets whenever they change."""

        return self._refresh()

    def _refresh(self) -> List[Recipe]:
        snapshot = self.index.snapshot
        query = self.controller.query_text
        gated = self.require_search and (not self.has_searched or not query.strip())
        key = (query, self.filters, gated)
        if key != self._results_key or snapshot is not self._results_snapshot:
            self._results = [] if gated else filter_and_sort(snapshot, query, self.filters)
            self._results_key = key
            self._results_snapshot = snapshot
        self.pagination.sync(self._results)
        return self._results

    @property
    def visible_results(self) -> List[Recipe]:
        self._refresh()
        return self.pagination.visible()

    @property
    def has_more(self) -> bool:
        self._refresh()
        return self.pagination.has_more

    def load_more(self) -> List[Recipe]:
        self._refresh()
        self.pagination.load_more()
        return self.pagination.visible()


class NavigationSearch:
    """Global search bar: recipe titles as suggestions, navigation on commit."""

    def __init__(
        self,
        source: RecipeSource,
        navigate: Navigator,
        *,
        suggestion_limit: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self.index = RecipeIndex(source)
        self.engine = SuggestionEngine(self.index)
        self.controller = SearchInputController(
            self.engine,
            mode=SuggestionMode.TITLE,
            limit=suggestion_limit if suggestion_limit is not None else settings.suggestion_limit,
            on_submit=self._handle_submit,
            on_select=self._handle_select,
        )
        self._navigate = navigate

    def mount(self) -> None:
        self.index.mount()
        try:
            self.index.load()
        except FetchError:
            # Suggestions stay empty; the bar itself keeps working.
            logger.debug("Navigation search running without suggestions")

    def unmount(self) -> None:
        self.index.unmount()

    def _handle_submit(self, query: str) -> None:
        metrics.SEARCHES.labels(kind="submit").inc()
        self._navigate(build_search_location(query))

    def _handle_select(self, selection: Selection) -> None:
        if selection.recipe is None:
            logger.debug("Suggestion %r no longer resolves to a recipe", selection.text)
            return
        metrics.SEARCHES.labels(kind="select").inc()
        self._navigate(recipe_location(selection.recipe.id))


class CategoryBrowser:
    """Recipes grouped by a toggleable category, plus category creation."""

    def __init__(self, source: RecipeSource, categories: CategoryRepository) -> None:
        self.index = RecipeIndex(source)
        self.catalog = CategoryCatalog(categories)
        self.selected: Optional[str] = None
        self.error: Optional[str] = None

    def mount(self) -> bool:
        self.index.mount()
        ok = True
        try:
            self.index.load()
        except FetchError as exc:
            self.error = exc.message
            ok = False
        try:
            self.catalog.refresh()
        except FetchError as exc:
            logger.warning("Failed to fetch categories: %s", exc)
            self.error = self.error or exc.message
            ok = False
        return ok

    def unmount(self) -> None:
        self.index.unmount()

    def toggle(self, category: str) -> Optional[str]:
        self.selected = None if self.selected == category else category
        return self.selected

    @property
    def recipes(self) -> List[Recipe]:
        return apply_filters(self.index.snapshot, "", FilterState(category=self.selected))

    def add_category(self, name: str) -> Category:
        return self.catalog.add(name)


UNKNOWN_QUANTITY = "quantity unknown"
NO_RECIPES_MESSAGE = "You haven't created any recipes yet."


@dataclass(frozen=True)
class IngredientLine:
    """A recipe ingredient paired with the pantry quantity, if one is known."""

    name: str
    quantity: Optional[str] = None

    @property
    def label(self) -> str:
        return f"{self.name} ({self.quantity or UNKNOWN_QUANTITY})"


def instruction_steps(instructions: str) -> List[str]:
    """Split free-text instructions into sentences, one numbered step each."""

    return [f"{part.strip()}." for part in instructions.split(".") if part.strip()]


def resolve_ingredients(names: Iterable[str], pantry: Iterable[Ingredient]) -> List[IngredientLine]:
    quantities: dict[str, Optional[str]] = {}
    for item in pantry:
        # First pantry entry wins when names collide.
        quantities.setdefault(item.name.lower(), item.quantity)
    return [IngredientLine(name, quantities.get(name.lower())) for name in names]


class RecipeDetailView:
    """One recipe with pantry quantities, numbered steps and owner actions."""

    def __init__(
        self,
        recipes: RecipeRepository,
        ingredients: IngredientRepository,
        session: SessionContext,
        navigate: Navigator,
    ) -> None:
        self._recipes = recipes
        self._ingredients = ingredients
        self._session = session
        self._navigate = navigate
        self.recipe: Optional[Recipe] = None
        self.pantry: List[Ingredient] = []
        self.error: Optional[str] = None

    def mount(self, recipe_id: str) -> bool:
        """Fetch the recipe; on failure go back to the recipe list."""

        try:
            self.recipe = self._recipes.fetch_by_id(recipe_id)
        except FetchError as exc:
            logger.warning("Failed to fetch recipe id=%s: %s", recipe_id, exc)
            self.recipe = None
            self.error = exc.message
            self._navigate(RECIPES_ROUTE)
            return False
        try:
            self.pantry = self._ingredients.fetch_all()
        except FetchError as exc:
            # Quantities are optional decoration.
            logger.warning("Failed to fetch ingredients: %s", exc)
            self.pantry = []
        self.error = None
        return True

    @property
    def ingredient_lines(self) -> List[IngredientLine]:
        if self.recipe is None:
            return []
        return resolve_ingredients(self.recipe.ingredients, self.pantry)

    @property
    def steps(self) -> List[str]:
        return instruction_steps(self.recipe.instructions) if self.recipe else []

    @property
    def can_edit(self) -> bool:
        return self.recipe is not None and self.recipe.is_owned_by(self._session.user_id)

    def edit(self) -> None:
        recipe = self._owned_recipe()
        self._navigate(edit_location(recipe.id))

    def delete(self) -> None:
        """Delete the recipe and return to the list; only its creator may do this."""

        recipe = self._owned_recipe()
        self._recipes.delete(recipe.id)
        self.recipe = None
        self._navigate(RECIPES_ROUTE)

    def _owned_recipe(self) -> Recipe:
        if self.recipe is None or not self.can_edit:
            raise NotOwner("Error", "Only the recipe's creator can change it.")
        return self.recipe


class MyRecipesView:
    """The signed-in user's own recipes, with delete."""

    def __init__(self, recipes: RecipeRepository, session: SessionContext) -> None:
        self._repository = recipes
        self._session = session
        self.recipes: List[Recipe] = []
        self.loading = False
        self.error: Optional[str] = None

    def mount(self) -> bool:
        self.loading = True
        try:
            fetched = self._repository.fetch_mine()
        except FetchError as exc:
            logger.warning("Failed to fetch user recipes: %s", exc)
            self.error = exc.message
            return False
        finally:
            self.loading = False
        user_id = self._session.user_id
        self.recipes = [recipe for recipe in fetched if recipe.is_owned_by(user_id)]
        self.error = None
        return True

    @property
    def empty_message(self) -> Optional[str]:
        if self.loading or self.error or self.recipes:
            return None
        return NO_RECIPES_MESSAGE

    def delete(self, recipe_id: str) -> None:
        recipe = next((item for item in self.recipes if item.id == recipe_id), None)
        if recipe is None or not recipe.is_owned_by(self._session.user_id):
            raise NotOwner("Error", "Only the recipe's creator can change it.")
        self._repository.delete(recipe_id)
        self.recipes = [item for item in self.recipes if item.id != recipe_id]


__all__ = [
    "CategoryBrowser",
    "IngredientLine",
    "MyRecipesView",
    "NavigationSearch",
    "RecipeBrowser",
    "RecipeDetailView",
    "instruction_steps",
    "resolve_ingredients",
]
