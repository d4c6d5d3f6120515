"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- One test module per source module; one test class per operation
  (``TestClassifyWeight``), named after what is tested, not ``test_1``.
- Build the object under test per test (fixtures), never share instances.
- Arrange, act, assert; one behavior per test. If one action has several
  outcomes, arrange and act in a fixture and assert each outcome separately.
- No real I/O; use fakes or ``unittest.mock`` at collaborator boundaries,
  and only as much as the test needs.
"""
