"""Immutable 2D/3D vector value types.

These carry only their components. Component-wise helpers live in the
per-type modules (`vector2`, `vector2_int`, `vector3`, `vector3_int`).
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector2:
    """Value object for a 2D vector with float components."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Vector2Int:
    """Value object for a 2D vector with integer components."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Vector3:
    """Value object for a 3D vector with float components."""

    x: float
    y: float
    z: float


@dataclass(frozen=True, slots=True)
class Vector3Int:
    """Value object for a 3D vector with integer components."""

    x: int
    y: int
    z: int
