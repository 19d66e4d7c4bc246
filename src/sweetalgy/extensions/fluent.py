"""Chainable conditional actions and null-coalescing for any value.

Every helper here (except `with_default`) returns its receiver unchanged,
with the same identity, so several calls can be nested to configure an
object in a single expression::

    button = apply_if(
        apply(Button(), lambda b: b.set_label("OK")),
        is_dark_mode,
        lambda b: b.set_theme("dark"),
    )

Absent collaborators are tolerated: a None action is a no-op and a None
condition counts as "not met".
"""

import inspect
import logging
from collections.abc import Callable
from typing import TypeVar, overload

from sweetalgy.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def apply(value: T, action: Callable[[T], object] | None) -> T:
    """Call `action(value)` and return `value`.

    Args:
        value: The receiver.
        action: Called once with `value`; None is a no-op.

    Returns:
        The original `value`.
    """
    if action is not None:
        action(value)
    return value


def _accepts_value(condition: Callable[..., object]) -> bool:
    """Return True if `condition` needs a positional argument.

    Callables that can be called bare, including those whose positional
    parameters all have defaults, are zero-argument conditions.
    """
    try:
        signature = inspect.signature(condition)
    except (TypeError, ValueError):
        # no introspectable signature (some builtins); assume a predicate
        return True
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if param.kind in _POSITIONAL_KINDS and param.default is param.empty:
            return True
    return False


@overload
def apply_if(value: T, condition: bool, action: Callable[[T], object] | None) -> T: ...
@overload
def apply_if(
    value: T, condition: Callable[[], bool], action: Callable[[T], object] | None
) -> T: ...
@overload
def apply_if(
    value: T, condition: Callable[[T], bool], action: Callable[[T], object] | None
) -> T: ...
def apply_if(value, condition, action):
    """Call `action(value)` when `condition` holds, then return `value`.

    `condition` may be:

    * a bool, used as is;
    * a callable that can be called bare (every positional parameter has a
      default), evaluated once at call time with no arguments;
    * a callable with a required positional parameter or ``*args``,
      evaluated once with `value`.

    Callable conditions are not evaluated when `value` is None; the call is
    then a no-op. A None condition is treated as False.

    Args:
        value: The receiver.
        condition: Decides whether `action` runs.
        action: Called once with `value` when the condition holds; None is a no-op.

    Returns:
        The original `value`.
    """
    if condition is None:
        return value
    if callable(condition):
        if value is None:
            return value
        met = condition(value) if _accepts_value(condition) else condition()
    else:
        met = bool(condition)
    if met and action is not None:
        action(value)
    return value


def on_absent(value: T | None, action: Callable[[], object] | None) -> T | None:
    """Call the zero-argument `action` if `value` is None; return `value`."""
    if value is None and action is not None:
        action()
    return value


def on_present(value: T | None, action: Callable[[T], object] | None) -> T | None:
    """Call `action(value)` if `value` is not None; return `value`."""
    if value is not None and action is not None:
        action(value)
    return value


def with_default(value: T | None, default_factory: Callable[[], T]) -> T:
    """Return `value`, or the result of `default_factory()` when it is None.

    The factory is only invoked for an absent value.

    Args:
        value: The candidate value.
        default_factory: Zero-argument callable producing the fallback.

    Returns:
        `value` if it is not None; otherwise the factory's result.

    Raises:
        InvalidArgumentError: If `default_factory` is None.
    """
    if default_factory is None:
        raise InvalidArgumentError("default_factory", "a default factory is required")
    if value is not None:
        return value
    logger.debug("Value absent; falling back to %r", default_factory)
    return default_factory()
