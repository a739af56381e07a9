"""Search and filter state models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SortKey(str, Enum):
    """Result orderings offered by the browse view.

    Records carry no timestamp or popularity signal, so NEWEST and POPULAR are
    stand-ins: ascending and descending title order respectively.
    """

    NEWEST = "newest"
    QUICKEST = "quickest"
    POPULAR = "popular"


class SuggestionMode(str, Enum):
    """Vocabulary-mode yields matching terms; title-mode yields matching recipe titles."""

    VOCABULARY = "vocabulary"
    TITLE = "title"


class FilterState(BaseModel):
    """Category, duration bound and sort key for one browse view."""

    category: Optional[str] = None
    max_duration_minutes: Optional[int] = Field(default=None)
    sort_key: SortKey = SortKey.NEWEST

    model_config = ConfigDict(frozen=True)

    @field_validator("category", mode="before")
    @classmethod
    def _unset_category(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        if not text or text.lower() == "all":
            return None
        return text

    @field_validator("max_duration_minutes", mode="before")
    @classmethod
    def _unset_duration(cls, value: Any) -> Optional[int]:
        # A cleared numeric input arrives as 0 or "".
        if value in (None, ""):
            return None
        minutes = int(value)
        return minutes if minutes > 0 else None


@dataclass(frozen=True)
class SearchState:
    """Snapshot of one search widget's observable state."""

    query_text: str = ""
    is_open: bool = False
    highlight_index: int = -1
    suggestions: tuple[str, ...] = ()

    @property
    def highlighted(self) -> Optional[str]:
        if 0 <= self.highlight_index < len(self.suggestions):
            return self.suggestions[self.highlight_index]
        return None
