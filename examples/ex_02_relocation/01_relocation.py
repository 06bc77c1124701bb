"""Relocation and dismissal: move cleanup to a longer-lived scope, or cancel it.

``relocate()`` hands the callback to a new guard and disarms the old one, so
exactly one of them can ever fire. ``dismiss()`` disarms a guard in place,
which is the usual commit-or-rollback pattern.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import ExitStack

from scopeguard import ScopeGuard, make_guard


class Connection:
    def __init__(self) -> None:
        self.log: list[str] = []

    def rollback(self) -> None:
        self.log.append("rollback")

    def commit(self) -> None:
        self.log.append("commit")


def transfer(connection: Connection, *, fail: bool) -> None:
    with make_guard(connection.rollback) as rollback:
        connection.log.append("debit")
        if fail:
            msg = "insufficient funds"
            raise ValueError(msg)
        connection.log.append("credit")
        connection.commit()
        rollback.dismiss()


def open_session(log: list[str]) -> ScopeGuard[Callable[[], None]]:
    with make_guard(lambda: log.append("session-closed")) as guard:
        log.append("session-opened")
        return guard.relocate()


def main() -> None:
    released: list[str] = []
    with ExitStack() as outer:
        with make_guard(lambda: released.append("X")) as g1:
            outer.enter_context(g1.relocate())
        print(f"after_inner_scope={released}")  # => after_inner_scope=[]
    print(f"after_outer_scope={released}")  # => after_outer_scope=['X']

    committed = Connection()
    transfer(committed, fail=False)
    print(f"success={committed.log}")  # => success=['debit', 'credit', 'commit']

    failed = Connection()
    try:
        transfer(failed, fail=True)
    except ValueError:
        print(f"failure={failed.log}")  # => failure=['debit', 'rollback']

    log: list[str] = []
    session = open_session(log)
    with session:
        log.append("query")
    print(f"session={log}")  # => session=['session-opened', 'query', 'session-closed']


if __name__ == "__main__":
    main()
