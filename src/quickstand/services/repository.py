"""RepositoryService — repository CRUD with standup-membership side effects.

INVARIANT: Repository paths are stored absolute and are unique on add.
INVARIANT: Removing a repository removes its ID from every standup.

Note: ``update_repository`` re-validates a changed path as a git working
tree but does not re-check it against other repositories' paths.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import ValidationError

from quickstand.domain.ids import generate_id
from quickstand.domain.models import Repository
from quickstand.infrastructure import git
from quickstand.services import errors
from quickstand.services._helpers import now_iso, resolve_path
from quickstand.services.base import BaseService, service_op
from quickstand.services.result import ServiceResult

_UPDATABLE_FIELDS = ("name", "active", "path")


def repository_data(repository: Repository) -> dict[str, Any]:
    """Result payload for a single repository."""
    return repository.model_dump(mode="json")


class RepositoryService(BaseService):
    """Register, inspect, and remove git repositories."""

    @service_op
    def add_repository(
        self,
        path: str,
        *,
        name: str | None = None,
        standup_id: str | None = None,
    ) -> ServiceResult:
        """Register the git working tree at *path*.

        Pipeline: RESOLVE → VALIDATE → NAME → ATTACH → PERSIST

        If *standup_id* is given the new repository is also appended to that
        standup's membership.
        """
        op = "add_repository"
        repo_path = resolve_path(path)

        # ── VALIDATE ─────────────────────────────────────────
        if not git.is_git_repository(repo_path):
            return errors.invalid_repository(op, repo_path)

        with self._store.transaction() as txn:
            doc = txn.doc
            if doc.find_repository_by_path(repo_path) is not None:
                return errors.repository_exists(op, repo_path)

            standup = None
            if standup_id:
                standup = doc.standups.get(standup_id)
                if standup is None:
                    return errors.standup_not_found(op, standup_id)

            # ── NAME ─────────────────────────────────────────
            repository = Repository(
                id=generate_id(),
                path=repo_path,
                name=name or git.get_repository_name(repo_path),
                active=True,
            )
            doc.repositories[repository.id] = repository

            # ── ATTACH ───────────────────────────────────────
            if standup is not None and repository.id not in standup.repositories:
                standup.repositories.append(repository.id)
                standup.updated_at = now_iso()

            txn.mark_changed()

        data = repository_data(repository)
        if standup is not None:
            data["standup_id"] = standup.id
        return ServiceResult(ok=True, op=op, data=data)

    @service_op
    def get_repository(self, repository_id: str) -> ServiceResult:
        op = "get_repository"
        doc = self._store.load()
        repository = doc.repositories.get(repository_id)
        if repository is None:
            return errors.repository_not_found(op, repository_id)
        return ServiceResult(ok=True, op=op, data=repository_data(repository))

    @service_op
    def update_repository(self, repository_id: str, *, changes: dict[str, Any]) -> ServiceResult:
        """Apply *changes* (``name``, ``active``, ``path``) to a repository.

        A new path is resolved and must be a git working tree. Unknown keys
        and values of the wrong type are skipped and reported as warnings.
        """
        op = "update_repository"
        warnings: list[str] = []
        fields_changed: list[str] = []

        with self._store.transaction() as txn:
            repository = txn.doc.repositories.get(repository_id)
            if repository is None:
                return errors.repository_not_found(op, repository_id)

            for key, value in changes.items():
                if key not in _UPDATABLE_FIELDS:
                    warnings.append(f"Cannot change field: {key}")
                    continue
                if value is None:
                    continue
                if key == "path":
                    if not isinstance(value, (str, os.PathLike)):
                        warnings.append(f"Invalid value for field: {key}")
                        continue
                    value = resolve_path(value)
                    if not git.is_git_repository(value):
                        return errors.invalid_repository(op, value)
                try:
                    setattr(repository, key, value)
                except ValidationError:
                    warnings.append(f"Invalid value for field: {key}")
                    continue
                fields_changed.append(key)

            txn.mark_changed()

        data = repository_data(repository)
        data["fields_changed"] = fields_changed
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @service_op
    def remove_repository(self, repository_id: str) -> ServiceResult:
        """Delete a repository and scrub its ID from every standup."""
        op = "remove_repository"
        with self._store.transaction() as txn:
            doc = txn.doc
            if repository_id not in doc.repositories:
                return errors.repository_not_found(op, repository_id)

            affected: list[str] = []
            for standup in doc.standups.values():
                if repository_id in standup.repositories:
                    standup.repositories = [r for r in standup.repositories if r != repository_id]
                    standup.updated_at = now_iso()
                    affected.append(standup.id)

            repository = doc.repositories.pop(repository_id)
            txn.mark_changed()

        return ServiceResult(
            ok=True,
            op=op,
            data={"id": repository_id, "path": repository.path, "standups_updated": affected},
        )

    @service_op
    def list_repositories(self, standup_id: str | None = None) -> ServiceResult:
        """All repositories, or a standup's members in membership order.

        Member IDs that no longer resolve to a repository are skipped.
        """
        op = "list_repositories"
        doc = self._store.load()
        if standup_id:
            standup = doc.standups.get(standup_id)
            if standup is None:
                return errors.standup_not_found(op, standup_id)
            repositories = [
                doc.repositories[rid] for rid in standup.repositories if rid in doc.repositories
            ]
        else:
            repositories = list(doc.repositories.values())

        items = [repository_data(r) for r in repositories]
        return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})
