"""Component-wise helpers for `Vector2`.

Every helper returns a new vector; the receiver is never modified.
Dividing by 0.0 raises ZeroDivisionError rather than producing inf or nan.
"""

from .rounding import ceil_to_int as _ceil
from .rounding import floor_to_int as _floor
from .rounding import round_to_int as _round
from .rounding import truncate_to_int as _trunc
from .value_objects import Vector2, Vector2Int, Vector3, Vector3Int

# ============================================================================
#                          Single-axis arithmetic
# ============================================================================


def add_x(v: Vector2, x: float) -> Vector2:
    return Vector2(v.x + x, v.y)


def add_y(v: Vector2, y: float) -> Vector2:
    return Vector2(v.x, v.y + y)


def subtract_x(v: Vector2, x: float) -> Vector2:
    return Vector2(v.x - x, v.y)


def subtract_y(v: Vector2, y: float) -> Vector2:
    return Vector2(v.x, v.y - y)


def multiply_x(v: Vector2, x: float) -> Vector2:
    return Vector2(v.x * x, v.y)


def multiply_y(v: Vector2, y: float) -> Vector2:
    return Vector2(v.x, v.y * y)


def divide_x(v: Vector2, x: float) -> Vector2:
    return Vector2(v.x / x, v.y)


def divide_y(v: Vector2, y: float) -> Vector2:
    return Vector2(v.x, v.y / y)


# ============================================================================
#                              Copies & replacement
# ============================================================================


def clone(v: Vector2) -> Vector2:
    """Return an equal but distinct vector."""
    return Vector2(v.x, v.y)


def with_x(v: Vector2, x: float) -> Vector2:
    return Vector2(x, v.y)


def with_y(v: Vector2, y: float) -> Vector2:
    return Vector2(v.x, y)


# ============================================================================
#                                 Conversions
# ============================================================================


def to_vector3_xy(v: Vector2, z: float = 0.0) -> Vector3:
    """Place `v` in the XY plane at depth `z`."""
    return Vector3(v.x, v.y, z)


def to_vector3_xz(v: Vector2, y: float = 0.0) -> Vector3:
    """Place `v` in the XZ plane at height `y`; `v.y` becomes the z component."""
    return Vector3(v.x, y, v.y)


def to_vector2_int(v: Vector2) -> Vector2Int:
    """Truncate both components toward zero."""
    return Vector2Int(_trunc(v.x), _trunc(v.y))


def to_vector3_int_xy(v: Vector2, z: int = 0) -> Vector3Int:
    """Truncate to the XY plane of a `Vector3Int` at depth `z`."""
    return Vector3Int(_trunc(v.x), _trunc(v.y), z)


def to_vector3_int_xz(v: Vector2, y: int = 0) -> Vector3Int:
    """Truncate to the XZ plane of a `Vector3Int` at height `y`."""
    return Vector3Int(_trunc(v.x), y, _trunc(v.y))


def floor_to_int(v: Vector2) -> Vector2Int:
    return Vector2Int(_floor(v.x), _floor(v.y))


def ceil_to_int(v: Vector2) -> Vector2Int:
    return Vector2Int(_ceil(v.x), _ceil(v.y))


def round_to_int(v: Vector2) -> Vector2Int:
    return Vector2Int(_round(v.x), _round(v.y))


def floor_to_int_xy(v: Vector2, z: int = 0) -> Vector3Int:
    return Vector3Int(_floor(v.x), _floor(v.y), z)


def floor_to_int_xz(v: Vector2, y: int = 0) -> Vector3Int:
    return Vector3Int(_floor(v.x), y, _floor(v.y))


def ceil_to_int_xy(v: Vector2, z: int = 0) -> Vector3Int:
    return Vector3Int(_ceil(v.x), _ceil(v.y), z)


def ceil_to_int_xz(v: Vector2, y: int = 0) -> Vector3Int:
    return Vector3Int(_ceil(v.x), y, _ceil(v.y))


def round_to_int_xy(v: Vector2, z: int = 0) -> Vector3Int:
    return Vector3Int(_round(v.x), _round(v.y), z)


def round_to_int_xz(v: Vector2, y: int = 0) -> Vector3Int:
    return Vector3Int(_round(v.x), y, _round(v.y))
