"""Hypothesis property tests for sweetalgy.extensions.sequences.

Properties:

- **No repeats, no duplicates**: sequences of unique elements report nothing.
- **Soundness & completeness**: `duplicates` returns exactly the elements that
  occur at least twice.
- **Key grouping**: `duplicates_by` with the identity key agrees with
  `duplicates`, and every reported group has more than one member.
- **Unhashable elements**: lists are grouped by `==` like hashable values.
- **Emptiness**: `is_empty_or_absent` agrees with `len() == 0`.
"""

from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sweetalgy.extensions.sequences import (
    count_absent_items,
    duplicates,
    duplicates_by,
    is_empty_or_absent,
)

pytestmark = [pytest.mark.property]

small_ints = st.lists(st.integers(min_value=-20, max_value=20), max_size=60)


@given(st.lists(st.integers(), unique=True))
def test_unique_sequences_have_no_duplicates(values):
    """Sequences without repeats yield an empty result."""
    assert duplicates(values) == []


@given(small_ints)
def test_duplicates_are_exactly_the_repeated_values(values):
    """Every reported value repeats, and every repeated value is reported."""
    counts = Counter(values)
    result = duplicates(values)
    assert set(result) == {v for v, n in counts.items() if n >= 2}
    assert len(result) == len(set(result))


@given(small_ints)
def test_duplicates_by_identity_matches_duplicates(values):
    """Grouping by identity finds the same values as `duplicates`."""
    groups = duplicates_by(values, lambda v: v, lambda g: g)
    assert [g.key for g in groups] == duplicates(values)
    assert len(groups) == len({g.key for g in groups})
    for group in groups:
        assert len(group) == values.count(group.key) > 1


@given(small_ints)
def test_duplicates_by_groups_hold_only_matching_keys(values):
    """Members of a reported group all share its key."""
    for group in duplicates_by(values, lambda v: v % 4, lambda g: g):
        assert all(item % 4 == group.key for item in group)


@given(st.lists(st.lists(st.integers(min_value=0, max_value=3), max_size=2), max_size=20))
def test_unhashable_duplicates_match_equality_count(values):
    """Unhashable elements repeat exactly when == finds another equal element."""
    expected = []
    for value in values:
        if values.count(value) > 1 and value not in expected:
            expected.append(value)
    assert duplicates(values) == expected


@given(st.lists(st.none() | st.integers(), max_size=30))
def test_count_absent_items_matches_count(values):
    """Counting absent items agrees with list.count(None)."""
    assert count_absent_items(values) == values.count(None)


@given(st.lists(st.integers(), max_size=5))
def test_is_empty_or_absent_matches_length(values):
    """Emptiness agrees with the length of a concrete list."""
    assert is_empty_or_absent(values) == (len(values) == 0)
