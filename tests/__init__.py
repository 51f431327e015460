"""toolbox test suite.

Folder taxonomy
- unit/      : Isolated, fast checks of a single module/class/function.
- fixtures/  : Shared fakes and pytest fixtures (no tests here).

General guidance
- Keep unit tests fast and deterministic (no real I/O).
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
