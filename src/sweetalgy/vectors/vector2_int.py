"""Component-wise helpers for `Vector2Int`.

Division truncates toward zero, so ``divide_x(Vector2Int(-7, 0), 2)`` has
an x component of -3.
"""

from .rounding import divide_int
from .value_objects import Vector2Int, Vector3, Vector3Int


def add_x(v: Vector2Int, x: int) -> Vector2Int:
    return Vector2Int(v.x + x, v.y)


def add_y(v: Vector2Int, y: int) -> Vector2Int:
    return Vector2Int(v.x, v.y + y)


def subtract_x(v: Vector2Int, x: int) -> Vector2Int:
    return Vector2Int(v.x - x, v.y)


def subtract_y(v: Vector2Int, y: int) -> Vector2Int:
    return Vector2Int(v.x, v.y - y)


def multiply_x(v: Vector2Int, x: int) -> Vector2Int:
    return Vector2Int(v.x * x, v.y)


def multiply_y(v: Vector2Int, y: int) -> Vector2Int:
    return Vector2Int(v.x, v.y * y)


def divide_x(v: Vector2Int, x: int) -> Vector2Int:
    return Vector2Int(divide_int(v.x, x), v.y)


def divide_y(v: Vector2Int, y: int) -> Vector2Int:
    return Vector2Int(v.x, divide_int(v.y, y))


def clone(v: Vector2Int) -> Vector2Int:
    """Return an equal but distinct vector."""
    return Vector2Int(v.x, v.y)


def with_x(v: Vector2Int, x: int) -> Vector2Int:
    return Vector2Int(x, v.y)


def with_y(v: Vector2Int, y: int) -> Vector2Int:
    return Vector2Int(v.x, y)


def to_vector3_xy(v: Vector2Int, z: float = 0.0) -> Vector3:
    """Place `v` in the XY plane of a float `Vector3` at depth `z`."""
    return Vector3(float(v.x), float(v.y), z)


def to_vector3_xz(v: Vector2Int, y: float = 0.0) -> Vector3:
    """Place `v` in the XZ plane of a float `Vector3` at height `y`."""
    return Vector3(float(v.x), y, float(v.y))


def to_vector3_int_xy(v: Vector2Int, z: int = 0) -> Vector3Int:
    return Vector3Int(v.x, v.y, z)


def to_vector3_int_xz(v: Vector2Int, y: int = 0) -> Vector3Int:
    return Vector3Int(v.x, y, v.y)
