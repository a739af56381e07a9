"""Repositories for recipes, categories and ingredients.

Every list endpoint returns the full collection; no filtering or paging is
requested from the service.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from forkful.errors import FetchError
from forkful.models.recipe import Category, Ingredient, Recipe

from .client import ApiClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse_one(resource: str, payload: Any, model: Type[ModelT]) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise FetchError(resource, f"Malformed {resource} record: {exc.error_count()} error(s)") from exc


def _parse_list(resource: str, payload: Any, model: Type[ModelT]) -> List[ModelT]:
    if not isinstance(payload, list):
        raise FetchError(resource, f"Expected a list of {resource}")
    return [_parse_one(resource, entry, model) for entry in payload]


class RecipeRepository:
    """Recipe CRUD against `/api/recipe`."""

    resource = "recipes"

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def fetch_all(self) -> List[Recipe]:
        payload = self._api.request_json(self.resource, "GET", "/api/recipe")
        recipes = _parse_list(self.resource, payload, Recipe)
        logger.debug("Fetched %d recipes", len(recipes))
        return recipes

    def fetch_by_id(self, recipe_id: str) -> Recipe:
        payload = self._api.request_json(self.resource, "GET", f"/api/recipe/{recipe_id}")
        # Some deployments wrap the record as {"recipe": {...}}.
        if isinstance(payload, dict) and isinstance(payload.get("recipe"), dict):
            payload = payload["recipe"]
        return _parse_one(self.resource, payload, Recipe)

    def fetch_mine(self) -> List[Recipe]:
        """Recipes created by the session's user."""

        payload = self._api.request_json(self.resource, "GET", "/api/recipe/my")
        return _parse_list(self.resource, payload, Recipe)

    def create(self, payload: Mapping[str, Any]) -> Optional[Recipe]:
        body = self._api.request_json(self.resource, "POST", "/api/recipe", json_body=dict(payload))
        logger.info("Created recipe title=%s", payload.get("title"))
        return _parse_one(self.resource, body, Recipe) if isinstance(body, dict) and body else None

    def update(self, recipe_id: str, payload: Mapping[str, Any]) -> Optional[Recipe]:
        body = self._api.request_json(
            self.resource, "PUT", f"/api/recipe/{recipe_id}", json_body=dict(payload)
        )
        logger.info("Updated recipe id=%s", recipe_id)
        return _parse_one(self.resource, body, Recipe) if isinstance(body, dict) and body else None

    def delete(self, recipe_id: str) -> None:
        self._api.send(self.resource, "DELETE", f"/api/recipe/{recipe_id}")
        logger.info("Deleted recipe id=%s", recipe_id)


class CategoryRepository:
    """Category listing and creation against `/api/category`."""

    resource = "categories"

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def fetch_all(self) -> List[Category]:
        payload = self._api.request_json(self.resource, "GET", "/api/category")
        return _parse_list(self.resource, payload, Category)

    def create(self, name: str) -> Category:
        self._api.request_json(
            self.resource, "POST", "/api/category", json_body={"categoryName": name}
        )
        logger.info("Created category name=%s", name)
        return Category(name=name)


class IngredientRepository:
    """Pantry ingredients against `/api/ingredient`."""

    resource = "ingredients"

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def fetch_all(self) -> List[Ingredient]:
        payload = self._api.request_json(self.resource, "GET", "/api/ingredient")
        return _parse_list(self.resource, payload, Ingredient)

    def create(self, name: str, quantity: str) -> Optional[Ingredient]:
        body = self._api.request_json(
            self.resource,
            "POST",
            "/api/ingredient",
            json_body={"name": name, "quantity": quantity},
        )
        logger.info("Created ingredient name=%s", name)
        return _parse_one(self.resource, body, Ingredient) if isinstance(body, dict) and body else None

    def delete(self, ingredient_id: str) -> None:
        self._api.send(self.resource, "DELETE", f"/api/ingredient/{ingredient_id}")
        logger.info("Deleted ingredient id=%s", ingredient_id)


__all__ = ["RecipeRepository", "CategoryRepository", "IngredientRepository"]
