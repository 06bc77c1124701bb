"""Errors: what the guard raises, and what it lets through.

The guard never swallows, wraps, or logs errors from the guarded block or
from the callback. Its own errors cover invalid callbacks and copying.
"""

from __future__ import annotations

import copy

from scopeguard import ScopeGuardCopyError, ScopeGuardInvalidCallbackError, make_guard


def close(handle: int) -> None:
    del handle


def main() -> None:
    try:
        make_guard(close)  # type: ignore[arg-type]
    except ScopeGuardInvalidCallbackError as error:
        print(f"invalid_callback={type(error).__name__}")  # => invalid_callback=ScopeGuardInvalidCallbackError

    with make_guard(lambda: None) as guard:
        try:
            copy.copy(guard)
        except ScopeGuardCopyError as error:
            print(f"copy_rejected={type(error).__name__}")  # => copy_rejected=ScopeGuardCopyError

    def fail_cleanup() -> None:
        msg = "cleanup failed"
        raise RuntimeError(msg)

    try:
        with make_guard(fail_cleanup):
            msg = "body failed"
            raise ValueError(msg)
    except RuntimeError as error:
        print(f"raised={error}")  # => raised=cleanup failed
        print(f"context={error.__context__}")  # => context=body failed


if __name__ == "__main__":
    main()
