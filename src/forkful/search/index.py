"""In-memory snapshot of the recipe collection."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol, Tuple

from forkful.errors import FetchError
from forkful.models.recipe import Recipe

logger = logging.getLogger(__name__)

Snapshot = Tuple[Recipe, ...]


class RecipeSource(Protocol):
    def fetch_all(self) -> List[Recipe]: ...


class RecipeIndex:
    """Hold the latest complete snapshot fetched from a recipe source.

    The snapshot is an immutable tuple that is swapped as a whole on every
    successful load, so a reader sees either the old or the new collection.
    A failed load keeps the previous snapshot (empty before the first load)
    and re-raises the FetchError for the caller to display. A response that
    arrives after `unmount()`, or after a newer load started, is dropped.
    """

    def __init__(self, source: Optional[RecipeSource] = None, recipes: Iterable[Recipe] = ()) -> None:
        self._source = source
        self._snapshot: Snapshot = tuple(recipes)
        self._mounted = True
        self._generation = 0
        self.last_error: Optional[FetchError] = None
        self.loading = False

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def mounted(self) -> bool:
        return self._mounted

    def __len__(self) -> int:
        return len(self._snapshot)

    def mount(self) -> None:
        self._mounted = True

    def unmount(self) -> None:
        """Tear down: forget the snapshot and ignore any response still in flight."""

        self._mounted = False
        self._generation += 1
        self._snapshot = ()
        self.loading = False

    def get(self, recipe_id: str) -> Optional[Recipe]:
        for recipe in self._snapshot:
            if recipe.id == recipe_id:
                return recipe
        return None

    def load(self) -> Optional[Snapshot]:
        """Fetch the full collection and replace the snapshot.

        Returns the new snapshot, or None when the response was discarded
        because the index was torn down or superseded while waiting.
        """

        if self._source is None:
            raise RuntimeError("RecipeIndex has no recipe source configured.")
        if not self._mounted:
            logger.debug("Ignoring load request on an unmounted index")
            return None

        self._generation += 1
        generation = self._generation
        self.loading = True
        try:
            snapshot: Snapshot = tuple(self._source.fetch_all())
            _check_unique_ids(snapshot)
        except FetchError as exc:
            if not self._is_current(generation):
                logger.debug("Discarding late fetch failure: %s", exc)
                return None
            self.last_error = exc
            logger.warning(
                "Recipe load failed; keeping %d cached recipes: %s", len(self._snapshot), exc
            )
            raise
        finally:
            if generation == self._generation:
                self.loading = False

        if not self._is_current(generation):
            logger.debug("Discarding late response with %d recipes", len(snapshot))
            return None

        self._snapshot = snapshot
        self.last_error = None
        logger.info("Loaded %d recipes", len(snapshot))
        return snapshot

    def _is_current(self, generation: int) -> bool:
        return self._mounted and generation == self._generation


def _check_unique_ids(snapshot: Snapshot) -> None:
    seen: set[str] = set()
    for recipe in snapshot:
        if recipe.id in seen:
            raise FetchError("recipes", f"Duplicate recipe id in collection: {recipe.id}")
        seen.add(recipe.id)


__all__ = ["RecipeIndex", "RecipeSource", "Snapshot"]
