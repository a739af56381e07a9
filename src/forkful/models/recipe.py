"""Recipe collection data models.

Records arrive from the collection service with loosely-typed optional fields
(`style`, `mood`, `category` may be missing, blank or null; ingredients may be
plain strings or `{"name": ...}` objects; `prepTime` may be text or a number).
All of that is normalized here, once, so that consumers never need presence
checks of their own.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

_WIRE_KEYS = {
    "_id": "id",
    "createdBy": "created_by",
    "prepTime": "prep_time",
    "categoryName": "name",
}


def parse_prep_minutes(value: Any) -> Optional[int]:
    """Return the leading integer of a prep-time value, or None if there is none.

    Mirrors how the service's clients have always read the field: "15 minutes"
    is 15, 20 is 20, 12.5 is 12 and "about an hour" does not parse.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def _blank_to_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _rename_wire_keys(data: dict[str, Any]) -> dict[str, Any]:
    payload = dict(data)
    for wire_key, field_name in _WIRE_KEYS.items():
        if wire_key in payload and field_name not in payload:
            payload[field_name] = payload.pop(wire_key)
    return payload


def _ingredient_text(entry: Any) -> Optional[str]:
    if isinstance(entry, dict):
        entry = entry.get("name") or entry.get("_id") or entry.get("id")
    if entry is None:
        return None
    text = str(entry).strip()
    return text or None


class Recipe(BaseModel):
    """A recipe record as held in a snapshot. Never mutated after construction."""

    id: str
    title: str = Field(min_length=1)
    description: str = ""
    category: Optional[str] = None
    ingredients: list[str] = Field(default_factory=list)
    style: Optional[str] = None
    mood: Optional[str] = None
    instructions: str = ""
    prep_time: Optional[str] = None
    prep_minutes: Optional[int] = None
    image: Optional[str] = None
    created_by: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        payload = _rename_wire_keys(data)

        if payload.get("id") is not None:
            payload["id"] = str(payload["id"])
        if isinstance(payload.get("title"), str):
            payload["title"] = payload["title"].strip()
        for key in ("category", "style", "mood", "image", "created_by"):
            payload[key] = _blank_to_none(payload.get(key))
        for key in ("description", "instructions"):
            payload[key] = payload.get(key) or ""

        raw_ingredients = payload.get("ingredients") or []
        if not isinstance(raw_ingredients, (list, tuple)):
            raise ValueError("ingredients must be a list of names or ingredient objects")
        payload["ingredients"] = [
            text for text in (_ingredient_text(entry) for entry in raw_ingredients) if text
        ]

        raw_prep = payload.get("prep_time")
        if "prep_minutes" not in payload:
            payload["prep_minutes"] = parse_prep_minutes(raw_prep)
        payload["prep_time"] = _blank_to_none(raw_prep)
        return payload

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        """Return True when the given user created this recipe."""

        return bool(user_id) and self.created_by == user_id


class Category(BaseModel):
    """A recipe category; names are unique ignoring case."""

    name: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data.strip()}
        if isinstance(data, dict):
            payload = _rename_wire_keys(data)
            if isinstance(payload.get("name"), str):
                payload["name"] = payload["name"].strip()
            return payload
        return data


class Ingredient(BaseModel):
    """A pantry ingredient owned by the remote repository."""

    id: str
    name: str
    quantity: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        payload = _rename_wire_keys(data)
        if payload.get("id") is not None:
            payload["id"] = str(payload["id"])
        if payload.get("quantity") is not None:
            payload["quantity"] = str(payload["quantity"])
        return payload


class User(BaseModel):
    """The signed-in account as reported by the identity endpoint."""

    id: str
    username: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        payload = _rename_wire_keys(data)
        if payload.get("id") is None and payload.get("userId") is not None:
            payload["id"] = payload.pop("userId")
        if payload.get("id") is not None:
            payload["id"] = str(payload["id"])
        return payload
