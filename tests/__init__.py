"""UNITCRAFT test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real components wired together (bootstrap).
- functional/   : User-visible flows tested end-to-end through the CLI.
- helpers/      : Shared fakes and utilities (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Functional asserts user-observable results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.

Testing approach (bottom to top of the pyramid: unit, component integration,
component end-to-end, system integration, user acceptance, exploratory)
- Higher levels have fewer but larger test cases, less automation, less
  white-box knowledge, more external dependencies and longer runtimes.
- Unit tests give a basis for confident refactoring, show others how the code
  works, and flag code that is hard to test. They are derived directly from
  the implementation logic and run without containers: just objects and doubles.
- Further reading: https://martinfowler.com/articles/practical-test-pyramid.html
"""
