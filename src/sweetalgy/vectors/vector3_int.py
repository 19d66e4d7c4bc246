"""Component-wise helpers for `Vector3Int`."""

from .rounding import divide_int
from .value_objects import Vector2, Vector2Int, Vector3Int


def add_x(v: Vector3Int, x: int) -> Vector3Int:
    return Vector3Int(v.x + x, v.y, v.z)


def add_y(v: Vector3Int, y: int) -> Vector3Int:
    return Vector3Int(v.x, v.y + y, v.z)


def add_z(v: Vector3Int, z: int) -> Vector3Int:
    return Vector3Int(v.x, v.y, v.z + z)


def subtract_x(v: Vector3Int, x: int) -> Vector3Int:
    return Vector3Int(v.x - x, v.y, v.z)


def subtract_y(v: Vector3Int, y: int) -> Vector3Int:
    return Vector3Int(v.x, v.y - y, v.z)


def subtract_z(v: Vector3Int, z: int) -> Vector3Int:
    return Vector3Int(v.x, v.y, v.z - z)


def multiply_x(v: Vector3Int, x: int) -> Vector3Int:
    return Vector3Int(v.x * x, v.y, v.z)


def multiply_y(v: Vector3Int, y: int) -> Vector3Int:
    return Vector3Int(v.x, v.y * y, v.z)


def multiply_z(v: Vector3Int, z: int) -> Vector3Int:
    return Vector3Int(v.x, v.y, v.z * z)


def divide_x(v: Vector3Int, x: int) -> Vector3Int:
    """Divide the x component, truncating toward zero."""
    return Vector3Int(divide_int(v.x, x), v.y, v.z)


def divide_y(v: Vector3Int, y: int) -> Vector3Int:
    """Divide the y component, truncating toward zero."""
    return Vector3Int(v.x, divide_int(v.y, y), v.z)


def divide_z(v: Vector3Int, z: int) -> Vector3Int:
    """Divide the z component, truncating toward zero."""
    return Vector3Int(v.x, v.y, divide_int(v.z, z))


def clone(v: Vector3Int) -> Vector3Int:
    return Vector3Int(v.x, v.y, v.z)


def with_x(v: Vector3Int, x: int) -> Vector3Int:
    return Vector3Int(x, v.y, v.z)


def with_y(v: Vector3Int, y: int) -> Vector3Int:
    return Vector3Int(v.x, y, v.z)


def with_z(v: Vector3Int, z: int) -> Vector3Int:
    return Vector3Int(v.x, v.y, z)


def with_xy(v: Vector3Int, x: int, y: int) -> Vector3Int:
    return Vector3Int(x, y, v.z)


def with_xz(v: Vector3Int, x: int, z: int) -> Vector3Int:
    return Vector3Int(x, v.y, z)


def with_yz(v: Vector3Int, y: int, z: int) -> Vector3Int:
    return Vector3Int(v.x, y, z)


def to_vector2_xy(v: Vector3Int) -> Vector2:
    return Vector2(float(v.x), float(v.y))


def to_vector2_xz(v: Vector3Int) -> Vector2:
    return Vector2(float(v.x), float(v.z))


def to_vector2_yz(v: Vector3Int) -> Vector2:
    return Vector2(float(v.y), float(v.z))


def to_vector2_int_xy(v: Vector3Int) -> Vector2Int:
    return Vector2Int(v.x, v.y)


def to_vector2_int_xz(v: Vector3Int) -> Vector2Int:
    return Vector2Int(v.x, v.z)


def to_vector2_int_yz(v: Vector3Int) -> Vector2Int:
    return Vector2Int(v.y, v.z)
