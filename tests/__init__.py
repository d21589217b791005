"""RECORDCHECK test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : The CLI exercised end-to-end through Click's CliRunner.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit tests fast and deterministic; prefer fakes over mocks at boundaries.
- Functional tests assert user-observable output, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, functional, property
"""
