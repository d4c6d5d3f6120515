"""Service layer for UNITCRAFT.

Implements the use-cases that drive outbound ports. Calls domain objects and
the interfaces defined in `unitcraft.interfaces`.

Dependency rule: may import `unitcraft.domain` and `unitcraft.interfaces`, but
not `unitcraft.adapters` or `unitcraft.entrypoints`.
"""
