"""Interfaces (application boundary) for UNITCRAFT.

Defines framework-free contracts (ABCs) shared by the service layer and
adapters, such as the `Actor` capability.

Dependency rule: this package is independent; do not import from any
`unitcraft.*` modules. It may be imported by `unitcraft.service_layer`,
`unitcraft.adapters`, and `unitcraft.bootstrap`.
"""
