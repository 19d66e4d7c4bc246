"""Fixtures for observing how often callbacks are invoked."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

# pylint: disable=redefined-outer-name


@dataclass
class CallRecorder:
    """Callable that records every call and returns a fixed value.

    Attributes:
        returns: Value handed back to the caller on every call.
        calls: Positional arguments of each call, in order.
    """

    returns: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def count(self) -> int:
        """Number of times the recorder has been called."""
        return len(self.calls)


@pytest.fixture
def recorder() -> Callable[..., CallRecorder]:
    """Factory fixture: build a fresh `CallRecorder`.

    Example:
        ```py
        def test_something(recorder):
            factory = recorder(returns=42)
            ...
            assert factory.count == 1
        ```
    """

    def _make(returns: Any = None) -> CallRecorder:
        return CallRecorder(returns=returns)

    return _make
