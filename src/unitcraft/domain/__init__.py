"""Domain layer for UNITCRAFT.

Contains the example components (complexity tracker, weighted entry, size
classifier), their value objects and errors. Nothing here performs I/O,
logs, or holds process-wide state.

Dependency rule: do not import from `unitcraft.adapters` or
`unitcraft.entrypoints`.
"""
