"""Global pytest fixtures for SweetAlgy."""

pytest_plugins = [
    "tests.fixtures.recorders",
]
