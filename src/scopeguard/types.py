from __future__ import annotations

from typing import Protocol, TypeVar


class Callback(Protocol):
    """Describe a cleanup callable invoked with no arguments.

    Any return value is ignored. Plain functions, lambdas, bound methods,
    ``functools.partial`` objects and instances defining ``__call__`` satisfy
    this protocol.
    """

    def __call__(self) -> object: ...  # noqa: D102


CallbackT = TypeVar("CallbackT", bound=Callback)
"""Concrete callback type preserved by ``make_guard`` and ``ScopeGuard``."""
