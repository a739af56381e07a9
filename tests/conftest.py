"""Shared pytest fixtures for the Forkful test suite."""

from __future__ import annotations

from typing import Generator, List

import pytest
from fastapi.testclient import TestClient

from forkful.api.client import ApiClient
from forkful.config import get_settings
from forkful.models.recipe import Recipe
from forkful.session import SessionContext
from tests.fakes import BackendState, create_fake_backend, sample_records


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Ensure each test sees default settings regardless of the host environment."""

    for key in (
        "FORKFUL_API_BASE_URL",
        "FORKFUL_SESSION_TOKEN",
        "FORKFUL_PAGE_SIZE",
        "FORKFUL_SUGGESTION_LIMIT",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def backend() -> BackendState:
    """Mutable state behind the fake collection service."""

    return BackendState(recipes=sample_records())


@pytest.fixture()
def http_client(backend) -> Generator[TestClient, None, None]:
    with TestClient(create_fake_backend(backend)) as client:
        yield client


@pytest.fixture()
def session() -> SessionContext:
    return SessionContext()


@pytest.fixture()
def api(http_client, session) -> ApiClient:
    """API client wired to the fake service."""

    return ApiClient(session=session, client=http_client)


@pytest.fixture()
def two_recipes() -> List[Recipe]:
    """Lasagna and Pancakes, the pair most search tests start from."""

    return [
        Recipe.model_validate(
            {
                "_id": "r1",
                "title": "Lasagna",
                "ingredients": ["Pasta", "Cheese"],
                "style": "Italian",
                "category": "Dinner",
                "prepTime": "45 minutes",
            }
        ),
        Recipe.model_validate(
            {
                "_id": "r2",
                "title": "Pancakes",
                "ingredients": ["Flour"],
                "mood": "Breakfast",
                "category": "Breakfast",
                "prepTime": "15 minutes",
            }
        ),
    ]
