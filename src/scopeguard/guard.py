from __future__ import annotations

import logging
import types
import warnings
from typing import Any, Generic, NoReturn

from typing_extensions import Self

from scopeguard.defaults import DEFAULT_WARN_ON_UNFINALIZED
from scopeguard.exceptions import ScopeGuardCopyError
from scopeguard.types import CallbackT
from scopeguard.validators import CallbackValidator

logger = logging.getLogger(__name__)

_callback_validator = CallbackValidator()


class ScopeGuard(Generic[CallbackT]):
    """Run a callback exactly once when the guarded ``with`` block exits.

    The block may exit by falling through, by ``return``/``break``, or by an
    exception unwinding through it; in every case the callback runs on the
    exiting call stack before control moves on. Exceptions raised by the
    callback propagate out of the ``with`` statement unchanged, and an
    exception already in flight is never suppressed.

    A guard is either armed or disarmed. It starts armed and becomes disarmed
    when it is finalized, relocated or dismissed. Nothing re-arms it.

    Guards cannot be copied. Ownership of the callback moves to another guard
    with ``relocate``, which leaves the source disarmed.

    Examples:
        .. code-block:: python

            with make_guard(connection.rollback):
                connection.execute(statement)

            with contextlib.ExitStack() as outer:
                with make_guard(release_lock) as guard:
                    outer.enter_context(guard.relocate())
                # release_lock has not run yet
            # release_lock ran once

    """

    __slots__ = ("_active", "_callback", "_warn_on_unfinalized")

    def __init__(
        self,
        callback: CallbackT,
        *,
        warn_on_unfinalized: bool = DEFAULT_WARN_ON_UNFINALIZED,
    ) -> None:
        """Take ownership of a zero-argument callback without invoking it.

        Args:
            callback: Cleanup callable, invoked with no arguments on finalization.
            warn_on_unfinalized: Emit a ``ResourceWarning`` if the guard is
                garbage-collected while still armed.

        Raises:
            ScopeGuardInvalidCallbackError: If ``callback`` is not callable
                with zero arguments.

        """
        _callback_validator.validate_callback(callback)
        self._callback: CallbackT = callback
        self._warn_on_unfinalized = warn_on_unfinalized
        self._active = True

    def relocate(self) -> Self:
        """Transfer the callback and activation state to a new guard.

        The returned guard is armed iff this guard was armed. This guard is
        disarmed afterwards, so only the returned guard can fire the callback.
        """
        destination = type(self).__new__(type(self))
        destination._callback = self._callback
        destination._warn_on_unfinalized = self._warn_on_unfinalized
        destination._active = self._active
        if self._active:
            logger.debug("Relocated scope guard for callback %r", self._callback)
        self._active = False
        return destination

    def dismiss(self) -> None:
        """Disarm the guard so that finalization does not invoke the callback."""
        if self._active:
            logger.debug("Dismissed scope guard for callback %r", self._callback)
        self._active = False

    def _finalize(self) -> None:
        if not self._active:
            return
        # Disarm before invoking so a raising callback can never fire twice.
        self._active = False
        logger.debug("Finalizing scope guard, invoking callback %r", self._callback)
        self._callback()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        self._finalize()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        self._finalize()

    def __copy__(self) -> NoReturn:
        msg = "ScopeGuard cannot be copied; use relocate() to transfer ownership."
        raise ScopeGuardCopyError(msg)

    def __deepcopy__(self, memo: dict[int, Any]) -> NoReturn:
        msg = "ScopeGuard cannot be deep-copied; use relocate() to transfer ownership."
        raise ScopeGuardCopyError(msg)

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        msg = "ScopeGuard cannot be pickled."
        raise ScopeGuardCopyError(msg)

    def __del__(self) -> None:
        if getattr(self, "_active", False) and getattr(self, "_warn_on_unfinalized", False):
            warnings.warn(
                f"Scope guard for {self._callback!r} was garbage-collected while armed; "
                "the callback was not invoked.",
                ResourceWarning,
                source=self,
            )

    def __repr__(self) -> str:
        return f"ScopeGuard({self._callback!r})"


def make_guard(
    callback: CallbackT,
    *,
    warn_on_unfinalized: bool = DEFAULT_WARN_ON_UNFINALIZED,
) -> ScopeGuard[CallbackT]:
    """Create an armed guard for ``callback``, keeping its concrete type.

    Examples:
        .. code-block:: python

            with make_guard(lambda: shutil.rmtree(workdir)):
                build(workdir)

    """
    return ScopeGuard(callback, warn_on_unfinalized=warn_on_unfinalized)
