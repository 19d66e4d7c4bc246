"""SweetAlgy test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/function.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Helpers are pure, so unit tests need no fakes beyond call recorders.
- Property-based tests live beside the unit tests they complement and use
  @pytest.mark.property.
- Markers: unit, property
"""
