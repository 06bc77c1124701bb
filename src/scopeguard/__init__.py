from scopeguard.exceptions import (
    ScopeGuardCopyError,
    ScopeGuardError,
    ScopeGuardInvalidCallbackError,
)
from scopeguard.guard import ScopeGuard, make_guard
from scopeguard.types import Callback

__all__ = [
    "Callback",
    "ScopeGuard",
    "ScopeGuardCopyError",
    "ScopeGuardError",
    "ScopeGuardInvalidCallbackError",
    "make_guard",
]
