"""Integration tests.

Purpose
- Exercise real components wired together by `unitcraft.bootstrap`.

Guidelines
- Use the production adapters; no doubles.
- Mark as 'integration'.
"""
