"""Error taxonomy shared by the standup and repository services.

Each builder returns a failed :class:`ServiceResult` for *op*. The message
text is stable and ``detail`` names the offending value.
"""

from __future__ import annotations

from quickstand.services.result import ServiceResult

REPOSITORY_NOT_FOUND = "REPOSITORY_NOT_FOUND"
INVALID_REPOSITORY = "INVALID_REPOSITORY"
REPOSITORY_EXISTS = "REPOSITORY_EXISTS"
STANDUP_NOT_FOUND = "STANDUP_NOT_FOUND"
STANDUP_EXISTS = "STANDUP_EXISTS"
CONFIG_ERROR = "CONFIG_ERROR"


def repository_not_found(op: str, repository_id: str) -> ServiceResult:
    message = f"Repository with ID {repository_id} not found"
    return ServiceResult.failure(op, REPOSITORY_NOT_FOUND, message, id=repository_id)


def invalid_repository(op: str, path: str) -> ServiceResult:
    message = f"Invalid git repository at path: {path}"
    return ServiceResult.failure(op, INVALID_REPOSITORY, message, path=path)


def repository_exists(op: str, path: str) -> ServiceResult:
    message = f"Repository already exists for path: {path}"
    return ServiceResult.failure(op, REPOSITORY_EXISTS, message, path=path)


def standup_not_found(op: str, standup_id: str) -> ServiceResult:
    message = f"Standup with ID {standup_id} not found"
    return ServiceResult.failure(op, STANDUP_NOT_FOUND, message, id=standup_id)


def standup_exists(op: str, name: str) -> ServiceResult:
    message = f"Standup already exists with name: {name}"
    return ServiceResult.failure(op, STANDUP_EXISTS, message, name=name)


def config_error(op: str, message: str, path: str) -> ServiceResult:
    return ServiceResult.failure(op, CONFIG_ERROR, message, path=path)
