"""Small 2D/3D vector value types and component-wise helpers.

The value types are re-exported here for convenience. Helpers are grouped
by receiver type and imported as modules, since the same helper name
(``add_x``, ``clone``, ...) exists for every type::

    from sweetalgy.vectors import Vector3, vector3

    grounded = vector3.with_y(Vector3(1.5, 7.0, -2.0), 0.0)
    cell = vector3.floor_to_int_xz(grounded)
"""

from .value_objects import Vector2, Vector2Int, Vector3, Vector3Int

__all__ = ["Vector2", "Vector2Int", "Vector3", "Vector3Int"]
