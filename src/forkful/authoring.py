"""Client-side checks for recipe, category and ingredient submissions.

Everything here rejects bad input before any request is sent.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from forkful.api.repositories import CategoryRepository, IngredientRepository, RecipeRepository
from forkful.errors import CategoryConflict, ValidationFailure
from forkful.models.recipe import Category, Ingredient, Recipe

logger = logging.getLogger(__name__)

INGREDIENT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")


class RecipeDraft(BaseModel):
    """Form contents for a new or edited recipe."""

    title: str = ""
    description: str = ""
    category: str = ""
    prep_time: str = ""
    image: str = ""
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)

    model_config = ConfigDict(str_strip_whitespace=True)

    def validate_for_submit(self) -> None:
        """Raise ValidationFailure with a user-facing message on bad input."""

        if not (self.title and self.description and self.category and self.prep_time):
            raise ValidationFailure("Missing Information", "Please fill in all required fields.")
        if not self.ingredient_ids() or not self.steps():
            raise ValidationFailure("Missing Steps", "Please provide ingredients and instructions.")
        for ingredient_id in self.ingredient_ids():
            if not INGREDIENT_ID_RE.match(ingredient_id):
                raise ValidationFailure("Error", f"Invalid ingredient ID: {ingredient_id}")

    def ingredient_ids(self) -> List[str]:
        return [entry.strip() for entry in self.ingredients if entry.strip()]

    def steps(self) -> List[str]:
        return [entry.strip() for entry in self.instructions if entry.strip()]

    def to_payload(self) -> dict[str, Any]:
        self.validate_for_submit()
        return {
            "title": self.title,
            "description": self.description,
            "instructions": "\n".join(self.steps()),
            "prepTime": self.prep_time,
            "category": self.category,
            "ingredients": self.ingredient_ids(),
            "image": self.image,
        }

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeDraft":
        """Prefill an edit form from an existing recipe."""

        return cls(
            title=recipe.title,
            description=recipe.description,
            category=recipe.category or "",
            prep_time=recipe.prep_time or "",
            image=recipe.image or "",
            ingredients=list(recipe.ingredients),
            instructions=recipe.instructions.splitlines(),
        )


def submit_recipe(
    repository: RecipeRepository,
    draft: RecipeDraft,
    recipe_id: Optional[str] = None,
) -> Optional[Recipe]:
    """Validate locally, then create (or update when `recipe_id` is given)."""

    payload = draft.to_payload()
    if recipe_id is None:
        return repository.create(payload)
    return repository.update(recipe_id, payload)


class CategoryCatalog:
    """Known category names plus guarded creation."""

    def __init__(self, repository: CategoryRepository, names: Iterable[str] = ()) -> None:
        self._repository = repository
        self._names: List[str] = list(names)

    @property
    def names(self) -> List[str]:
        return list(self._names)

    def refresh(self) -> List[str]:
        self._names = [category.name for category in self._repository.fetch_all()]
        return self.names

    def check(self, name: str) -> str:
        """Return the trimmed name or raise CategoryConflict."""

        trimmed = name.strip()
        if not trimmed:
            raise CategoryConflict("Error", "Category name cannot be empty.")
        lowered = trimmed.lower()
        if any(existing.lower() == lowered for existing in self._names):
            logger.debug("Rejected duplicate category name=%r", trimmed)
            raise CategoryConflict("Error", "Category already exists.")
        return trimmed

    def add(self, name: str) -> Category:
        trimmed = self.check(name)
        category = self._repository.create(trimmed)
        # Appended locally; no re-fetch.
        self._names.append(trimmed)
        return category


def add_ingredient(repository: IngredientRepository, name: str, quantity: str) -> Optional[Ingredient]:
    if not name.strip() or not str(quantity).strip():
        raise ValidationFailure("Incomplete", "Please complete all ingredient fields.")
    return repository.create(name.strip(), str(quantity).strip())


__all__ = [
    "CategoryCatalog",
    "INGREDIENT_ID_RE",
    "RecipeDraft",
    "add_ingredient",
    "submit_recipe",
]
