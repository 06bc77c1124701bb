"""Shared pytest fixtures for scopeguard tests."""

from collections.abc import Callable

import pytest


@pytest.fixture()
def events() -> list[str]:
    """Ordered log of callback invocations."""
    return []


@pytest.fixture()
def record(events: list[str]) -> Callable[[str], Callable[[], None]]:
    """Factory for callbacks that append their name to ``events``."""

    def make_callback(name: str) -> Callable[[], None]:
        def callback() -> None:
            events.append(name)

        return callback

    return make_callback
