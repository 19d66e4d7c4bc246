"""Emptiness checks and duplicate detection over iterables."""

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from sweetalgy.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")
R = TypeVar("R")

_NOTHING = object()


@dataclass(frozen=True, slots=True)
class Grouping(Generic[K, T]):
    """Elements of a sequence that share the same key.

    Iterating a grouping yields its items in their original order.
    """

    key: K
    items: tuple[T, ...]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def _require_sequence(seq: Iterable[T] | None, argument: str = "seq") -> Iterable[T]:
    if seq is None:
        raise InvalidArgumentError(argument, "expected an iterable, got None")
    return seq


def is_empty_or_absent(seq: Iterable[T] | None) -> bool:
    """Return True if `seq` is None or yields no element.

    A None argument is never iterated. For one-shot iterators at most one
    element is consumed.
    """
    if seq is None:
        return True
    return next(iter(seq), _NOTHING) is _NOTHING


def is_present_and_nonempty(seq: Iterable[T] | None) -> bool:
    """Return True if `seq` is not None and yields at least one element."""
    return not is_empty_or_absent(seq)


def _group_by(seq: Iterable[T], key_fn: Callable[[T], K]) -> list[tuple[K, list[T]]]:
    """Group `seq` by key equality, in order of first occurrence.

    Hashable keys are looked up in a dict. Unhashable keys (lists, dicts, ...)
    are compared with ``==`` against the other unhashable keys seen so far.
    """
    groups: list[tuple[K, list[T]]] = []
    by_hash: dict[Hashable, list[T]] = {}
    unhashable: list[tuple[K, list[T]]] = []
    for item in seq:
        key = key_fn(item)
        try:
            members = by_hash.get(key)  # type: ignore[arg-type]
            hashable = True
        except TypeError:
            members = next((m for k, m in unhashable if k == key), None)
            hashable = False
        if members is None:
            members = []
            groups.append((key, members))
            if hashable:
                by_hash[key] = members  # type: ignore[index]
            else:
                unhashable.append((key, members))
        members.append(item)
    return groups


def duplicates(seq: Iterable[T]) -> list[T]:
    """Return every element that occurs more than once in `seq`.

    Each repeated element appears exactly once in the result, no matter how
    often it is repeated. Elements are compared with their native equality;
    they do not need to be hashable.

    Args:
        seq: The elements to inspect.

    Returns:
        One representative per repeated element, in order of first
        occurrence; empty if nothing repeats.

    Raises:
        InvalidArgumentError: If `seq` is None.
    """
    groups = _group_by(_require_sequence(seq), lambda item: item)
    found = [key for key, members in groups if len(members) > 1]
    logger.debug("%d of %d distinct items are duplicated", len(found), len(groups))
    return found


def duplicates_by(
    seq: Iterable[T],
    key_fn: Callable[[T], K],
    result_fn: Callable[[Grouping[K, T]], R],
) -> list[R]:
    """Group `seq` by `key_fn` and map each group with repeats through `result_fn`.

    Args:
        seq: The elements to inspect.
        key_fn: Computes the grouping key of an element. Keys are compared
            with their native equality and need not be hashable.
        result_fn: Receives each `Grouping` holding more than one element.

    Returns:
        The mapped groups, ordered by the first occurrence of their key.

    Raises:
        InvalidArgumentError: If `seq`, `key_fn` or `result_fn` is None.
    """
    _require_sequence(seq)
    if key_fn is None:
        raise InvalidArgumentError("key_fn", "a key function is required")
    if result_fn is None:
        raise InvalidArgumentError("result_fn", "a result function is required")

    groups = _group_by(seq, key_fn)
    repeated = [
        Grouping(key, tuple(members)) for key, members in groups if len(members) > 1
    ]
    logger.debug("%d of %d keys are duplicated", len(repeated), len(groups))
    return [result_fn(group) for group in repeated]


def count_absent_items(seq: Iterable[T | None]) -> int:
    """Count the elements of `seq` that are None.

    Raises:
        InvalidArgumentError: If `seq` itself is None.
    """
    return sum(1 for item in _require_sequence(seq) if item is None)
