"""Adapters (infrastructure) for UNITCRAFT.

Provide concrete implementations of the interfaces in `unitcraft.interfaces`.

Dependency rule: may import `unitcraft.domain`; the domain must not import this
package.
"""
