from __future__ import annotations

import inspect

from scopeguard.exceptions import ScopeGuardInvalidCallbackError


class CallbackValidator:
    """Validates guard callbacks before a guard takes ownership of them."""

    def validate_callback(self, callback: object) -> None:
        """Validate that a callback can be invoked with zero arguments."""
        if not callable(callback):
            msg = f"Guard callback must be callable, got {callback!r}."
            raise ScopeGuardInvalidCallbackError(msg)

        try:
            signature = inspect.signature(callback)
        except (TypeError, ValueError):
            # Some builtins expose no signature; trust the caller.
            return

        try:
            signature.bind()
        except TypeError as error:
            msg = f"Guard callback {callback!r} must accept zero arguments: {error}."
            raise ScopeGuardInvalidCallbackError(msg) from error
