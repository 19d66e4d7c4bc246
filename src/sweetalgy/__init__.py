"""SweetAlgy

Fluent helper functions for everyday Python code: null/empty checks and
duplicate detection over iterables, chainable conditional actions, and
component-wise helpers for small 2D/3D vector value types.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
