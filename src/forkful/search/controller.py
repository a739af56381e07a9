"""Keyboard- and pointer-driven state machine behind a search box.

States:

* IDLE: dropdown closed (query empty, no suggestions, or dismissed).
* EDITING: dropdown open, nothing highlighted (highlight index -1).
* HIGHLIGHTING: dropdown open with highlight index in [0, count).

Arrow keys wrap around the suggestion list. Text changes, commits and
dismissals always clear the highlight. Only `reset()` clears the typed text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from forkful.models.recipe import Recipe
from forkful.models.search import SearchState, SuggestionMode

from .suggestions import DEFAULT_SUGGESTION_LIMIT, SuggestionEngine

logger = logging.getLogger(__name__)

NO_HIGHLIGHT = -1


class ControllerState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    HIGHLIGHTING = "highlighting"


class Key(str, Enum):
    ARROW_DOWN = "ArrowDown"
    ARROW_UP = "ArrowUp"
    ENTER = "Enter"
    ESCAPE = "Escape"


@dataclass(frozen=True)
class Selection:
    """A committed suggestion and the recipe it resolves to, if any."""

    text: str
    recipe: Optional[Recipe] = None


SubmitHandler = Callable[[str], None]
SelectHandler = Callable[[Selection], None]


class SearchInputController:
    """Track query text, dropdown visibility and highlight for one search box.

    Suggestions are derived on demand from the engine, so they always reflect
    the current query and the current snapshot.

    When no `on_select` handler is given, committing a suggestion copies it into
    the query and submits it, which is what a plain search page wants. A
    navigation bar passes `on_select` to jump straight to the chosen recipe.
    """

    def __init__(
        self,
        engine: SuggestionEngine,
        *,
        mode: SuggestionMode = SuggestionMode.VOCABULARY,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
        on_submit: Optional[SubmitHandler] = None,
        on_select: Optional[SelectHandler] = None,
        initial_query: str = "",
    ) -> None:
        self._engine = engine
        self.mode = mode
        self.limit = limit
        self._on_submit = on_submit
        self._on_select = on_select
        self._query = initial_query
        self._open = False
        self._highlight = NO_HIGHLIGHT

    # -- observable state -------------------------------------------------

    @property
    def query_text(self) -> str:
        return self._query

    @property
    def suggestions(self) -> List[str]:
        return self._engine.suggest(self._query, self.mode, self.limit)

    @property
    def is_open(self) -> bool:
        return self._open and bool(self.suggestions)

    @property
    def highlight_index(self) -> int:
        if self._highlight >= len(self.suggestions):
            return NO_HIGHLIGHT
        return self._highlight

    @property
    def machine_state(self) -> ControllerState:
        if not self.is_open:
            return ControllerState.IDLE
        if self.highlight_index == NO_HIGHLIGHT:
            return ControllerState.EDITING
        return ControllerState.HIGHLIGHTING

    @property
    def state(self) -> SearchState:
        suggestions = tuple(self.suggestions)
        is_open = self._open and bool(suggestions)
        highlight = self._highlight if self._highlight < len(suggestions) else NO_HIGHLIGHT
        return SearchState(
            query_text=self._query,
            is_open=is_open,
            highlight_index=highlight if is_open else NO_HIGHLIGHT,
            suggestions=suggestions,
        )

    # -- transitions ------------------------------------------------------

    def set_text(self, text: str) -> None:
        """Text changed: open when the new query has suggestions."""

        self._query = text
        self._highlight = NO_HIGHLIGHT
        self._open = bool(text.strip()) and bool(self.suggestions)

    def focus(self) -> None:
        """Reopen the dropdown for a non-blank query."""

        if self._query.strip():
            self._open = bool(self.suggestions)

    def press(self, key: Key | str) -> None:
        key = Key(key)
        if key is Key.ARROW_DOWN:
            self.arrow_down()
        elif key is Key.ARROW_UP:
            self.arrow_up()
        elif key is Key.ENTER:
            self.enter()
        else:
            self.escape()

    def arrow_down(self) -> None:
        count = self._navigable_count()
        if not count:
            return
        self._highlight = (self.highlight_index + 1) % count

    def arrow_up(self) -> None:
        count = self._navigable_count()
        if not count:
            return
        current = self.highlight_index
        if current == NO_HIGHLIGHT:
            current = count
        self._highlight = (current - 1 + count) % count

    def enter(self) -> None:
        """Commit the highlighted suggestion, or submit the raw query."""

        suggestions = self.suggestions
        index = self.highlight_index
        if self._open and suggestions and index != NO_HIGHLIGHT:
            self._commit(suggestions[index])
            return
        self._close()
        logger.debug("Submitting query=%r", self._query)
        if self._on_submit is not None:
            self._on_submit(self._query)

    def escape(self) -> None:
        self._close()

    def dismiss(self) -> None:
        """Interaction outside the widget's region."""

        self._close()

    def hover(self, index: int) -> None:
        if self.is_open and 0 <= index < len(self.suggestions):
            self._highlight = index

    def activate(self, index: int) -> None:
        """Pointer activation of the suggestion at `index`."""

        suggestions = self.suggestions
        if not 0 <= index < len(suggestions):
            raise IndexError(f"No suggestion at index {index}")
        self._commit(suggestions[index])

    def reset(self, query: str = "") -> None:
        """External reset: the only transition that replaces the typed text."""

        self._query = query
        self._close()

    # -- internals --------------------------------------------------------

    def _navigable_count(self) -> int:
        if not self._open:
            return 0
        return len(self.suggestions)

    def _close(self) -> None:
        self._open = False
        self._highlight = NO_HIGHLIGHT

    def _commit(self, suggestion: str) -> None:
        selection = Selection(text=suggestion, recipe=self._engine.resolve(suggestion))
        self._close()
        recipe_id = selection.recipe.id if selection.recipe else None
        logger.debug("Committing suggestion=%r recipe_id=%s", suggestion, recipe_id)
        if self._on_select is not None:
            self._on_select(selection)
            return
        self._query = suggestion
        if self._on_submit is not None:
            self._on_submit(suggestion)


__all__ = ["ControllerState", "Key", "NO_HIGHLIGHT", "SearchInputController", "Selection"]
