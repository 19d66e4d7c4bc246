"""Component-wise helpers for `Vector3`.

Every helper returns a new vector; the receiver is never modified.
Dividing by 0.0 raises ZeroDivisionError rather than producing inf or nan.
Projections drop one axis and keep the other two in order, so
``to_vector2_xz(Vector3(1, 2, 3))`` is ``Vector2(1, 3)``.
"""

from .rounding import ceil_to_int as _ceil
from .rounding import floor_to_int as _floor
from .rounding import round_to_int as _round
from .rounding import truncate_to_int as _trunc
from .value_objects import Vector2, Vector2Int, Vector3, Vector3Int

# ============================================================================
#                          Single-axis arithmetic
# ============================================================================


def add_x(v: Vector3, x: float) -> Vector3:
    return Vector3(v.x + x, v.y, v.z)


def add_y(v: Vector3, y: float) -> Vector3:
    return Vector3(v.x, v.y + y, v.z)


def add_z(v: Vector3, z: float) -> Vector3:
    return Vector3(v.x, v.y, v.z + z)


def subtract_x(v: Vector3, x: float) -> Vector3:
    return Vector3(v.x - x, v.y, v.z)


def subtract_y(v: Vector3, y: float) -> Vector3:
    return Vector3(v.x, v.y - y, v.z)


def subtract_z(v: Vector3, z: float) -> Vector3:
    return Vector3(v.x, v.y, v.z - z)


def multiply_x(v: Vector3, x: float) -> Vector3:
    return Vector3(v.x * x, v.y, v.z)


def multiply_y(v: Vector3, y: float) -> Vector3:
    return Vector3(v.x, v.y * y, v.z)


def multiply_z(v: Vector3, z: float) -> Vector3:
    return Vector3(v.x, v.y, v.z * z)


def divide_x(v: Vector3, x: float) -> Vector3:
    return Vector3(v.x / x, v.y, v.z)


def divide_y(v: Vector3, y: float) -> Vector3:
    return Vector3(v.x, v.y / y, v.z)


def divide_z(v: Vector3, z: float) -> Vector3:
    return Vector3(v.x, v.y, v.z / z)


# ============================================================================
#                              Copies & replacement
# ============================================================================


def clone(v: Vector3) -> Vector3:
    """Return an equal but distinct vector."""
    return Vector3(v.x, v.y, v.z)


def with_x(v: Vector3, x: float) -> Vector3:
    return Vector3(x, v.y, v.z)


def with_y(v: Vector3, y: float) -> Vector3:
    return Vector3(v.x, y, v.z)


def with_z(v: Vector3, z: float) -> Vector3:
    return Vector3(v.x, v.y, z)


def with_xy(v: Vector3, x: float, y: float) -> Vector3:
    return Vector3(x, y, v.z)


def with_xz(v: Vector3, x: float, z: float) -> Vector3:
    return Vector3(x, v.y, z)


def with_yz(v: Vector3, y: float, z: float) -> Vector3:
    return Vector3(v.x, y, z)


# ============================================================================
#                                 Projections
# ============================================================================


def to_vector2_xy(v: Vector3) -> Vector2:
    return Vector2(v.x, v.y)


def to_vector2_xz(v: Vector3) -> Vector2:
    return Vector2(v.x, v.z)


def to_vector2_yz(v: Vector3) -> Vector2:
    return Vector2(v.y, v.z)


def to_vector2_int_xy(v: Vector3) -> Vector2Int:
    """Truncate x and y toward zero."""
    return Vector2Int(_trunc(v.x), _trunc(v.y))


def to_vector2_int_xz(v: Vector3) -> Vector2Int:
    """Truncate x and z toward zero."""
    return Vector2Int(_trunc(v.x), _trunc(v.z))


def to_vector2_int_yz(v: Vector3) -> Vector2Int:
    """Truncate y and z toward zero."""
    return Vector2Int(_trunc(v.y), _trunc(v.z))


def to_vector3_int(v: Vector3) -> Vector3Int:
    """Truncate every component toward zero."""
    return Vector3Int(_trunc(v.x), _trunc(v.y), _trunc(v.z))


# ============================================================================
#                                  Rounding
# ============================================================================


def floor_to_int_xy(v: Vector3) -> Vector2Int:
    return Vector2Int(_floor(v.x), _floor(v.y))


def floor_to_int_xz(v: Vector3) -> Vector2Int:
    return Vector2Int(_floor(v.x), _floor(v.z))


def floor_to_int_yz(v: Vector3) -> Vector2Int:
    return Vector2Int(_floor(v.y), _floor(v.z))


def ceil_to_int_xy(v: Vector3) -> Vector2Int:
    return Vector2Int(_ceil(v.x), _ceil(v.y))


def ceil_to_int_xz(v: Vector3) -> Vector2Int:
    return Vector2Int(_ceil(v.x), _ceil(v.z))


def ceil_to_int_yz(v: Vector3) -> Vector2Int:
    return Vector2Int(_ceil(v.y), _ceil(v.z))


def round_to_int_xy(v: Vector3) -> Vector2Int:
    return Vector2Int(_round(v.x), _round(v.y))


def round_to_int_xz(v: Vector3) -> Vector2Int:
    return Vector2Int(_round(v.x), _round(v.z))


def round_to_int_yz(v: Vector3) -> Vector2Int:
    return Vector2Int(_round(v.y), _round(v.z))


def floor_to_int(v: Vector3) -> Vector3Int:
    return Vector3Int(_floor(v.x), _floor(v.y), _floor(v.z))


def ceil_to_int(v: Vector3) -> Vector3Int:
    return Vector3Int(_ceil(v.x), _ceil(v.y), _ceil(v.z))


def round_to_int(v: Vector3) -> Vector3Int:
    return Vector3Int(_round(v.x), _round(v.y), _round(v.z))
