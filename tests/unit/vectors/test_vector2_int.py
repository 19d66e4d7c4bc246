"""Unit tests for sweetalgy.vectors.vector2_int."""

import pytest

from sweetalgy.vectors import Vector2Int, Vector3, Vector3Int, vector2_int

ORIGINAL = Vector2Int(6, -7)


@pytest.mark.parametrize(
    "helper, amount, expected",
    [
        (vector2_int.add_x, 3, Vector2Int(9, -7)),
        (vector2_int.add_y, 3, Vector2Int(6, -4)),
        (vector2_int.subtract_x, 3, Vector2Int(3, -7)),
        (vector2_int.subtract_y, 3, Vector2Int(6, -10)),
        (vector2_int.multiply_x, 2, Vector2Int(12, -7)),
        (vector2_int.multiply_y, 2, Vector2Int(6, -14)),
        (vector2_int.divide_x, 4, Vector2Int(1, -7)),
        (vector2_int.divide_y, 2, Vector2Int(6, -3)),
        (vector2_int.with_x, 0, Vector2Int(0, -7)),
        (vector2_int.with_y, 0, Vector2Int(6, 0)),
    ],
)
def test_single_axis_helpers(helper, amount, expected):
    """Each helper touches exactly one component; division truncates toward zero."""
    result = helper(ORIGINAL, amount)
    assert result == expected
    assert all(type(c) is int for c in (result.x, result.y))


def test_clone_is_equal_but_distinct():
    """clone returns an equal, separate instance."""
    copy = vector2_int.clone(ORIGINAL)
    assert copy == ORIGINAL
    assert copy is not ORIGINAL


def test_divide_by_zero_raises():
    """Integer division by zero raises ZeroDivisionError."""
    with pytest.raises(ZeroDivisionError):
        vector2_int.divide_y(ORIGINAL, 0)


def test_to_vector3_float():
    """Conversion to Vector3 yields float components."""
    assert vector2_int.to_vector3_xy(ORIGINAL) == Vector3(6.0, -7.0, 0.0)
    assert vector2_int.to_vector3_xz(ORIGINAL, 1.5) == Vector3(6.0, 1.5, -7.0)
    assert type(vector2_int.to_vector3_xy(ORIGINAL).x) is float


def test_to_vector3_int():
    """Conversion to Vector3Int places the extra axis."""
    assert vector2_int.to_vector3_int_xy(ORIGINAL) == Vector3Int(6, -7, 0)
    assert vector2_int.to_vector3_int_xy(ORIGINAL, 2) == Vector3Int(6, -7, 2)
    assert vector2_int.to_vector3_int_xz(ORIGINAL) == Vector3Int(6, 0, -7)
    assert vector2_int.to_vector3_int_xz(ORIGINAL, 2) == Vector3Int(6, 2, -7)
