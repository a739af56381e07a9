"""Command-line interface for Forkful."""

from __future__ import annotations

import json
from typing import Any, NoReturn, Optional

import typer

from forkful.api.client import ApiClient
from forkful.api.repositories import CategoryRepository, RecipeRepository
from forkful.authoring import CategoryCatalog
from forkful.config import get_settings
from forkful.errors import FetchError, ValidationFailure
from forkful.logging_utils import configure_logging
from forkful.models.recipe import Recipe
from forkful.models.search import SortKey, SuggestionMode
from forkful.views import RecipeBrowser

app = typer.Typer(help="Browse and search the recipe collection.")


def _build_api() -> ApiClient:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format, [settings.session_token or ""])
    return ApiClient()


def _echo_json(payload: Any, pretty: bool) -> None:
    typer.echo(json.dumps(payload, indent=2 if pretty else None, sort_keys=pretty))


def _fail(exc: Exception) -> NoReturn:
    typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _summary(recipe: Recipe) -> dict[str, Any]:
    return {
        "id": recipe.id,
        "title": recipe.title,
        "category": recipe.category,
        "prep_time": recipe.prep_time,
        "prep_minutes": recipe.prep_minutes,
    }


@app.command()
def suggest(
    query: str = typer.Argument(..., help="Text typed into the search box."),
    mode: SuggestionMode = typer.Option(SuggestionMode.VOCABULARY, "--mode", help="vocabulary or title."),
    limit: Optional[int] = typer.Option(None, "--limit", help="Maximum number of suggestions."),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """Show the dropdown suggestions for QUERY."""

    with _build_api() as api:
        browser = RecipeBrowser(RecipeRepository(api))
        if not browser.mount():
            _fail(RuntimeError(browser.error))
        limit = limit if limit is not None else get_settings().suggestion_limit
        _echo_json(browser.engine.suggest(query, mode, limit), pretty)


@app.command()
def search(
    query: str = typer.Argument("", help="Free-text query; empty lists everything."),
    category: Optional[str] = typer.Option(None, "--category", help="Only this category."),
    max_minutes: Optional[int] = typer.Option(None, "--max-minutes", help="Upper prep-time bound."),
    sort: SortKey = typer.Option(SortKey.NEWEST, "--sort", help="newest, quickest or popular."),
    pages: int = typer.Option(1, "--pages", min=1, help="Number of result pages to reveal."),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """Filter, sort and page the recipe collection."""

    with _build_api() as api:
        browser = RecipeBrowser(RecipeRepository(api))
        if not browser.mount():
            _fail(RuntimeError(browser.error))
        browser.controller.set_text(query)
        browser.controller.enter()
        browser.set_filters(category=category, max_duration_minutes=max_minutes, sort_key=sort)
        for _ in range(pages - 1):
            browser.load_more()
        _echo_json(
            {
                "total": len(browser.results),
                "has_more": browser.has_more,
                "results": [_summary(recipe) for recipe in browser.visible_results],
            },
            pretty,
        )


@app.command()
def mine(pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON.")) -> None:
    """List recipes created by the session's user."""

    with _build_api() as api:
        try:
            recipes = RecipeRepository(api).fetch_mine()
        except FetchError as exc:
            _fail(exc)
        _echo_json([_summary(recipe) for recipe in recipes], pretty)


@app.command()
def categories() -> None:
    """List category names."""

    with _build_api() as api:
        catalog = CategoryCatalog(CategoryRepository(api))
        try:
            names = catalog.refresh()
        except FetchError as exc:
            _fail(exc)
        for name in names:
            typer.echo(name)


@app.command("add-category")
def add_category(name: str = typer.Argument(..., help="New category name.")) -> None:
    """Create a category unless it is empty or already exists."""

    with _build_api() as api:
        catalog = CategoryCatalog(CategoryRepository(api))
        try:
            catalog.refresh()
            category = catalog.add(name)
        except (FetchError, ValidationFailure) as exc:
            _fail(exc)
        typer.secho(f'Category "{category.name}" added.', fg=typer.colors.GREEN)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the `forkful` console script."""
    app(prog_name="forkful", args=argv)


if __name__ == "__main__":
    main()
