"""CLI tests driven through typer's runner against the fake service."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from forkful import cli
from forkful.api.client import ApiClient

runner = CliRunner()


@pytest.fixture(autouse=True)
def fake_api(monkeypatch, http_client):
    # Keep INFO log lines off the captured output so stdout stays pure JSON.
    monkeypatch.setenv("FORKFUL_LOG_LEVEL", "WARNING")
    monkeypatch.setattr(cli, "ApiClient", lambda: ApiClient(client=http_client))


def test_suggest_vocabulary_mode():
    result = runner.invoke(cli.app, ["suggest", "pa"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == ["Pad Thai", "Pancakes", "Pasta"]


def test_suggest_title_mode_with_limit():
    result = runner.invoke(cli.app, ["suggest", "pa", "--mode", "title", "--limit", "2"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == ["Lasagna", "Pancakes"]


def test_search_with_filters_and_pages():
    result = runner.invoke(cli.app, ["search", "--sort", "quickest", "--pages", "2"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["total"] == 4
    assert payload["has_more"] is False
    assert [row["title"] for row in payload["results"]] == [
        "Caprese Salad",
        "Pancakes",
        "Lasagna",
        "Pad Thai",
    ]


def test_search_query_and_duration_bound():
    result = runner.invoke(cli.app, ["search", "tomato", "--max-minutes", "20"])
    assert result.exit_code == 0, result.output
    assert [row["title"] for row in json.loads(result.stdout)["results"]] == ["Caprese Salad"]


def test_fetch_failure_exits_non_zero(backend):
    backend.fail_status = 500
    result = runner.invoke(cli.app, ["search", "soup"])
    assert result.exit_code == 1


def test_categories_and_add_category(backend):
    result = runner.invoke(cli.app, ["categories"])
    assert result.exit_code == 0, result.output
    assert result.stdout.split() == ["Breakfast", "Dinner", "Lunch"]

    result = runner.invoke(cli.app, ["add-category", "Dessert"])
    assert result.exit_code == 0, result.output
    assert "Dessert" in backend.categories

    result = runner.invoke(cli.app, ["add-category", "breakfast"])
    assert result.exit_code == 1
