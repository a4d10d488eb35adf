"""BaseService — shared foundation for the standup and repository services.

Every service receives a :class:`ConfigStore` at construction time and owns
its load-mutate-save boundary via ``self._store.transaction()``.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Concatenate, ParamSpec, TypeVar

from quickstand.infrastructure.config_store import ConfigStore, ConfigStoreError
from quickstand.services.errors import config_error
from quickstand.services.result import ServiceResult

logger = logging.getLogger(__name__)

_P = ParamSpec("_P")
_S = TypeVar("_S", bound="BaseService")


class BaseService:
    """Base for service-layer classes.

    Usage::

        class StandupService(BaseService):
            @service_op
            def create_standup(self, name: str) -> ServiceResult:
                with self._store.transaction() as txn:
                    ...
    """

    def __init__(self, store: ConfigStore) -> None:
        self._store = store


def service_op(
    func: Callable[Concatenate[_S, _P], ServiceResult],
) -> Callable[Concatenate[_S, _P], ServiceResult]:
    """Decorator: turn a :class:`ConfigStoreError` into a ``CONFIG_ERROR`` result.

    The operation name is the method name. Domain failures are already
    results; only filesystem failures from the store are caught here.
    """
    op = func.__name__

    @functools.wraps(func)
    def wrapper(self: _S, *args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
        try:
            result = func(self, *args, **kwargs)
        except ConfigStoreError as exc:
            logger.debug("%s failed: %s", op, exc)
            return config_error(op, str(exc), str(self._store.path))
        logger.debug("%s complete: ok=%s", op, result.ok)
        return result

    return wrapper
