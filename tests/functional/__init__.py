"""Functional tests.

Purpose
- Validate user-visible behavior at the system boundary (the `unitcraft` CLI).

Guidelines
- Treat the system as a black box; avoid asserting internal state.
- Invoke the CLI in-process with `click.testing.CliRunner`.
- One flow/concern per test; check stdout, stderr and exit codes.
"""
