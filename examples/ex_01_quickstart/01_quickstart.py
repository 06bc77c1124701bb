"""Quickstart: register cleanup next to the acquisition it protects.

The guard's callback runs exactly once when the ``with`` block exits, whether
the block falls through, returns early, or is unwound by an exception.
"""

from __future__ import annotations

from contextlib import ExitStack

from scopeguard import make_guard


class TempDirectory:
    def __init__(self, name: str) -> None:
        self.name = name
        self.removed = False

    def remove(self) -> None:
        self.removed = True


def build(workdir: TempDirectory, *, fail: bool) -> str:
    with make_guard(workdir.remove):
        if fail:
            msg = "compiler crashed"
            raise RuntimeError(msg)
        return f"artifact-from-{workdir.name}"


def main() -> None:
    count = 0

    def increment() -> None:
        nonlocal count
        count += 1

    with make_guard(increment):
        print(f"inside_scope_count={count}")  # => inside_scope_count=0
    print(f"after_scope_count={count}")  # => after_scope_count=1

    ok_dir = TempDirectory("ok")
    artifact = build(ok_dir, fail=False)
    print(f"artifact={artifact} removed={ok_dir.removed}")  # => artifact=artifact-from-ok removed=True

    failed_dir = TempDirectory("failed")
    try:
        build(failed_dir, fail=True)
    except RuntimeError as error:
        print(f"error={error} removed={failed_dir.removed}")  # => error=compiler crashed removed=True

    order: list[str] = []
    with ExitStack() as stack:
        for name in ("A", "B", "C"):
            stack.enter_context(make_guard(lambda name=name: order.append(name)))
    print(f"exit_order={','.join(order)}")  # => exit_order=C,B,A


if __name__ == "__main__":
    main()
