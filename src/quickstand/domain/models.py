"""Pydantic models for the persisted configuration document.

The JSON file uses camelCase keys (``defaultStandupId``, ``createdAt``,
``updatedAt``); Python code uses the snake_case attribute names. Models are
mutable because services follow a load-mutate-save cycle on a freshly
loaded document.

INVARIANT: Map order is insertion order and is never sorted. The first
standup in ``standups`` is the fallback default.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_MODEL_CONFIG = ConfigDict(populate_by_name=True, validate_assignment=True)


class Repository(BaseModel):
    """A git working tree registered with quickstand."""

    model_config = _MODEL_CONFIG

    id: str
    path: str
    name: str
    active: bool = True


class Standup(BaseModel):
    """A named group of repositories tracked together.

    Attributes:
        repositories: Member repository IDs, in the order they were added.
        created_at: ISO-8601 UTC instant of creation.
        updated_at: ISO-8601 UTC instant of the last field or membership change.
    """

    model_config = _MODEL_CONFIG

    id: str
    name: str
    description: str | None = None
    repositories: list[str] = Field(default_factory=list)
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")


class ConfigDocument(BaseModel):
    """The single aggregate persisted to ``config.json``."""

    model_config = _MODEL_CONFIG

    standups: dict[str, Standup] = Field(default_factory=dict)
    repositories: dict[str, Repository] = Field(default_factory=dict)
    default_standup_id: str | None = Field(default=None, alias="defaultStandupId")

    def to_json_dict(self) -> dict[str, Any]:
        """Serializable form with file keys.

        Optional fields holding ``None`` are omitted, so an explicit ``null``
        in a hand-edited file is dropped on the next save. Loading either form
        gives the same document.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def find_repository_by_path(self, path: str) -> Repository | None:
        for repository in self.repositories.values():
            if repository.path == path:
                return repository
        return None

    def find_standup_by_name(self, name: str, *, exclude_id: str | None = None) -> Standup | None:
        """Case-insensitive name lookup, optionally ignoring one standup."""
        wanted = name.lower()
        for standup in self.standups.values():
            if standup.id != exclude_id and standup.name.lower() == wanted:
                return standup
        return None


def resolve_default_standup_id(doc: ConfigDocument) -> str | None:
    """Return the effective default standup ID, or None if no standups exist.

    An explicit ``default_standup_id`` wins when it still points at an
    existing standup; otherwise the first standup in insertion order is used.
    """
    if doc.default_standup_id and doc.default_standup_id in doc.standups:
        return doc.default_standup_id
    return next(iter(doc.standups), None)
