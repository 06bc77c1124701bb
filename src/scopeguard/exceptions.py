class ScopeGuardError(Exception):
    """Represent a base class for all scopeguard-specific failures.

    Catch this type when you want to handle any scopeguard error path without
    matching each concrete exception class individually. Exceptions raised by
    guarded callbacks are never wrapped in this type.
    """


class ScopeGuardInvalidCallbackError(ScopeGuardError, TypeError):
    """Signal a callback that cannot be invoked with zero arguments.

    Raised by ``make_guard`` and ``ScopeGuard`` at construction time when the
    supplied object is not callable or its signature requires arguments.

    Typical fixes include wrapping the call in a ``lambda`` or binding the
    arguments up front with ``functools.partial``.
    """


class ScopeGuardCopyError(ScopeGuardError, TypeError):
    """Signal an attempt to duplicate a guard.

    Raised by ``copy.copy``, ``copy.deepcopy`` and pickling of a ``ScopeGuard``.
    Two guards holding the same armed callback could fire it twice.

    Typical fix is transferring ownership with ``ScopeGuard.relocate`` instead.
    """
