"""HTTP clients for the remote recipe collection service."""

from __future__ import annotations

from .auth import AuthClient
from .client import ApiClient
from .repositories import CategoryRepository, IngredientRepository, RecipeRepository

__all__ = [
    "ApiClient",
    "AuthClient",
    "CategoryRepository",
    "IngredientRepository",
    "RecipeRepository",
]
