"""StandupService — standup CRUD plus default selection and membership edits.

INVARIANT: Standup names are unique case-insensitively.
INVARIANT: ``default_standup_id`` never points at a removed standup.
INVARIANT: ``updated_at`` advances on every change to a standup's fields
or membership.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from quickstand.domain.ids import generate_id
from quickstand.domain.models import Standup, resolve_default_standup_id
from quickstand.services import errors
from quickstand.services._helpers import now_iso
from quickstand.services.base import BaseService, service_op
from quickstand.services.result import ServiceResult

_UPDATABLE_FIELDS = ("name", "description")


def standup_data(standup: Standup) -> dict[str, Any]:
    """Result payload for a single standup."""
    return standup.model_dump(mode="json")


class StandupService(BaseService):
    """Create, inspect, and edit standups in the configuration document."""

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    @service_op
    def create_standup(self, name: str, *, description: str | None = None) -> ServiceResult:
        """Create a standup. The first standup in the document becomes the default."""
        op = "create_standup"
        with self._store.transaction() as txn:
            doc = txn.doc
            if doc.find_standup_by_name(name) is not None:
                return errors.standup_exists(op, name)

            now = now_iso()
            standup = Standup(
                id=generate_id(),
                name=name,
                description=description,
                repositories=[],
                created_at=now,
                updated_at=now,
            )
            doc.standups[standup.id] = standup
            if len(doc.standups) == 1:
                doc.default_standup_id = standup.id
            txn.mark_changed()

        return ServiceResult(ok=True, op=op, data=standup_data(standup))

    @service_op
    def get_standup(self, standup_id: str | None = None) -> ServiceResult:
        """Fetch a standup by ID; an empty ID means the default standup."""
        op = "get_standup"
        doc = self._store.load()
        if not standup_id:
            standup_id = resolve_default_standup_id(doc)
            if standup_id is None:
                return errors.standup_not_found(op, "default")

        standup = doc.standups.get(standup_id)
        if standup is None:
            return errors.standup_not_found(op, standup_id)
        return ServiceResult(ok=True, op=op, data=standup_data(standup))

    @service_op
    def update_standup(self, standup_id: str, *, changes: dict[str, Any]) -> ServiceResult:
        """Apply *changes* (``name``, ``description``) and bump ``updated_at``.

        Unknown keys and values of the wrong type are skipped and reported
        as warnings.
        """
        op = "update_standup"
        warnings: list[str] = []
        fields_changed: list[str] = []

        with self._store.transaction() as txn:
            doc = txn.doc
            standup = doc.standups.get(standup_id)
            if standup is None:
                return errors.standup_not_found(op, standup_id)

            new_name = changes.get("name")
            if isinstance(new_name, str):
                clash = doc.find_standup_by_name(new_name, exclude_id=standup_id)
                if clash is not None:
                    return errors.standup_exists(op, new_name)

            for key, value in changes.items():
                if key not in _UPDATABLE_FIELDS:
                    warnings.append(f"Cannot change field: {key}")
                    continue
                if value is None:
                    continue
                try:
                    setattr(standup, key, value)
                except ValidationError:
                    warnings.append(f"Invalid value for field: {key}")
                    continue
                fields_changed.append(key)

            standup.updated_at = now_iso()
            txn.mark_changed()

        data = standup_data(standup)
        data["fields_changed"] = fields_changed
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @service_op
    def remove_standup(self, standup_id: str) -> ServiceResult:
        """Delete a standup. Member repositories are kept."""
        op = "remove_standup"
        with self._store.transaction() as txn:
            doc = txn.doc
            standup = doc.standups.pop(standup_id, None)
            if standup is None:
                return errors.standup_not_found(op, standup_id)

            if doc.default_standup_id == standup_id:
                doc.default_standup_id = resolve_default_standup_id(doc)
            txn.mark_changed()

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": standup_id,
                "name": standup.name,
                "default_standup_id": doc.default_standup_id,
            },
        )

    @service_op
    def list_standups(self) -> ServiceResult:
        """All standups in insertion order."""
        doc = self._store.load()
        default_id = resolve_default_standup_id(doc)
        items = []
        for standup in doc.standups.values():
            item = standup_data(standup)
            item["default"] = standup.id == default_id
            items.append(item)
        data = {"items": items, "count": len(items)}
        return ServiceResult(ok=True, op="list_standups", data=data)

    # ------------------------------------------------------------------
    # Default standup
    # ------------------------------------------------------------------

    @service_op
    def set_default_standup(self, standup_id: str) -> ServiceResult:
        op = "set_default_standup"
        with self._store.transaction() as txn:
            standup = txn.doc.standups.get(standup_id)
            if standup is None:
                return errors.standup_not_found(op, standup_id)
            txn.doc.default_standup_id = standup_id
            txn.mark_changed()
        return ServiceResult(ok=True, op=op, data=standup_data(standup))

    @service_op
    def get_default_standup(self) -> ServiceResult:
        """The explicit default if it still exists, else the first standup."""
        op = "get_default_standup"
        doc = self._store.load()
        default_id = resolve_default_standup_id(doc)
        if default_id is None:
            return errors.standup_not_found(op, "default")
        return ServiceResult(ok=True, op=op, data=standup_data(doc.standups[default_id]))

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    @service_op
    def add_repository_to_standup(self, standup_id: str, repository_id: str) -> ServiceResult:
        """Append *repository_id* to the standup. A no-op if already a member."""
        op = "add_repository_to_standup"
        with self._store.transaction() as txn:
            doc = txn.doc
            standup = doc.standups.get(standup_id)
            if standup is None:
                return errors.standup_not_found(op, standup_id)
            if repository_id not in doc.repositories:
                return errors.repository_not_found(op, repository_id)

            changed = repository_id not in standup.repositories
            if changed:
                standup.repositories.append(repository_id)
                standup.updated_at = now_iso()
                txn.mark_changed()

        data = standup_data(standup)
        data["changed"] = changed
        return ServiceResult(ok=True, op=op, data=data)

    @service_op
    def remove_repository_from_standup(self, standup_id: str, repository_id: str) -> ServiceResult:
        """Drop *repository_id* from the standup. A no-op if not a member."""
        op = "remove_repository_from_standup"
        with self._store.transaction() as txn:
            doc = txn.doc
            standup = doc.standups.get(standup_id)
            if standup is None:
                return errors.standup_not_found(op, standup_id)
            if repository_id not in doc.repositories:
                return errors.repository_not_found(op, repository_id)

            changed = repository_id in standup.repositories
            if changed:
                standup.repositories.remove(repository_id)
                standup.updated_at = now_iso()
                txn.mark_changed()

        data = standup_data(standup)
        data["changed"] = changed
        return ServiceResult(ok=True, op=op, data=data)
