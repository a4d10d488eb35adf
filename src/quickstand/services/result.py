"""Result types returned by every standup and repository operation.

Domain failures (unknown IDs, invalid paths, name clashes) come back as a
failed result rather than an exception, so command code only formats the
result and picks an exit code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` is one of the constants in :mod:`quickstand.services.errors`;
    ``detail`` names the offending ``id``, ``path`` or ``name``.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation, named by ``op`` (the service method name).

    On success ``data`` holds the affected standup or repository (or an
    ``items``/``count`` listing) and ``warnings`` may list ignored inputs.
    On failure ``error`` is set and ``data`` is empty.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
