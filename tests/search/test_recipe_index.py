"""Tests for the recipe snapshot holder."""

from __future__ import annotations

import pytest

from forkful.errors import FetchError
from forkful.models.recipe import Recipe
from forkful.search.index import RecipeIndex


class StubSource:
    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = 0
        self.during_fetch = None

    def fetch_all(self):
        self.calls += 1
        if self.during_fetch is not None:
            self.during_fetch()
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_load_replaces_snapshot_wholesale(two_recipes):
    source = StubSource(two_recipes, two_recipes[:1])
    index = RecipeIndex(source)

    first = index.load()
    assert first == tuple(two_recipes)
    assert index.snapshot is first

    second = index.load()
    assert index.snapshot is second
    assert len(index) == 1
    # The earlier snapshot object is untouched.
    assert len(first) == 2


def test_failed_load_keeps_previous_snapshot(two_recipes):
    error = FetchError("recipes", "Failed to load recipes", status_code=500)
    index = RecipeIndex(StubSource(two_recipes, error))
    index.load()

    with pytest.raises(FetchError):
        index.load()

    assert index.snapshot == tuple(two_recipes)
    assert index.last_error is error
    assert not index.loading


def test_failed_first_load_leaves_empty_snapshot():
    index = RecipeIndex(StubSource(FetchError("recipes", "down")))
    with pytest.raises(FetchError):
        index.load()
    assert index.snapshot == ()


def test_response_after_unmount_is_discarded(two_recipes):
    source = StubSource(two_recipes)
    index = RecipeIndex(source)
    source.during_fetch = index.unmount

    assert index.load() is None
    assert index.snapshot == ()


def test_failure_after_unmount_is_discarded():
    source = StubSource(FetchError("recipes", "down"))
    index = RecipeIndex(source)
    source.during_fetch = index.unmount

    assert index.load() is None
    assert index.last_error is None


def test_unmounted_index_does_not_fetch(two_recipes):
    source = StubSource(two_recipes)
    index = RecipeIndex(source)
    index.unmount()

    assert index.load() is None
    assert source.calls == 0


def test_duplicate_ids_are_rejected():
    duplicate = [Recipe(id="1", title="A"), Recipe(id="1", title="B")]
    index = RecipeIndex(StubSource(duplicate))
    with pytest.raises(FetchError):
        index.load()
    assert index.snapshot == ()


def test_get_by_id(two_recipes):
    index = RecipeIndex(recipes=two_recipes)
    assert index.get("r2").title == "Pancakes"
    assert index.get("missing") is None


def test_response_superseded_by_newer_load_is_discarded(two_recipes):
    source = StubSource(two_recipes, two_recipes[:1])
    index = RecipeIndex(source)

    def reload_once():
        source.during_fetch = None
        assert index.load() == tuple(two_recipes)

    source.during_fetch = reload_once

    assert index.load() is None
    assert index.snapshot == tuple(two_recipes)
    assert source.calls == 2
    assert not index.loading


def test_unexpected_source_error_clears_loading_flag(two_recipes):
    index = RecipeIndex(StubSource(ValueError("bad payload")), recipes=two_recipes)

    with pytest.raises(ValueError):
        index.load()

    assert not index.loading
    assert index.last_error is None
    assert index.snapshot == tuple(two_recipes)
