"""Tests for filtering and ordering of results."""

from __future__ import annotations

import pytest

from forkful.models.recipe import Recipe
from forkful.models.search import FilterState, SortKey
from forkful.search.pipeline import apply_filters, filter_and_sort, sort_results


def _titles(recipes):
    return [recipe.title for recipe in recipes]


def test_category_filter_with_empty_query(two_recipes):
    result = filter_and_sort(two_recipes, "", FilterState(category="Breakfast"))
    assert _titles(result) == ["Pancakes"]


@pytest.mark.parametrize("category", [None, "", "all", "ALL"])
def test_unset_category_keeps_everything(two_recipes, category):
    assert len(apply_filters(two_recipes, "", FilterState(category=category))) == 2


def test_category_match_ignores_case(two_recipes):
    assert _titles(apply_filters(two_recipes, "", FilterState(category="dinner"))) == ["Lasagna"]


def test_duration_bound_keeps_quick_recipes():
    recipes = [
        Recipe(id="a", title="Quick", prep_time="15 minutes"),
        Recipe(id="b", title="Slow", prep_time="45 minutes"),
    ]
    result = apply_filters(recipes, "", FilterState(max_duration_minutes=20))
    assert _titles(result) == ["Quick"]


def test_unparseable_prep_time_is_not_excluded():
    recipes = [
        Recipe(id="a", title="Vague", prep_time="a while"),
        Recipe(id="b", title="Missing"),
        Recipe(id="c", title="Slow", prep_time=90),
    ]
    result = apply_filters(recipes, "", FilterState(max_duration_minutes=30))
    assert _titles(result) == ["Vague", "Missing"]


def test_query_is_trimmed_and_case_insensitive(two_recipes):
    assert _titles(filter_and_sort(two_recipes, "  FLOUR ")) == ["Pancakes"]


def test_quickest_sort_is_non_decreasing_with_unknown_last():
    recipes = [
        Recipe(id="a", title="A", prep_time="30 min"),
        Recipe(id="b", title="B", prep_time="soon"),
        Recipe(id="c", title="C", prep_time=5),
        Recipe(id="d", title="D", prep_time="12.5"),
        Recipe(id="e", title="E", prep_time="30"),
    ]
    result = sort_results(recipes, SortKey.QUICKEST)
    minutes = [recipe.prep_minutes for recipe in result if recipe.prep_minutes is not None]

    assert minutes == sorted(minutes)
    assert result[-1].title == "B"
    # Equal times keep their input order.
    assert _titles(result)[2:4] == ["A", "E"]


def test_newest_and_popular_are_title_placeholders():
    recipes = [
        Recipe(id="1", title="banana bread"),
        Recipe(id="2", title="Apple pie"),
        Recipe(id="3", title="Cherry tart"),
    ]
    assert _titles(sort_results(recipes, SortKey.NEWEST)) == ["Apple pie", "banana bread", "Cherry tart"]
    assert _titles(sort_results(recipes, SortKey.POPULAR)) == ["Cherry tart", "banana bread", "Apple pie"]


def test_pipeline_does_not_mutate_inputs(two_recipes):
    original = list(two_recipes)
    filters = FilterState(category="all", sort_key=SortKey.POPULAR)

    result = filter_and_sort(two_recipes, "", filters)

    assert two_recipes == original
    assert result is not two_recipes
    assert _titles(result) == ["Pancakes", "Lasagna"]
