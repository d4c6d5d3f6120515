"""Entrypoints (inbound adapters) for UNITCRAFT.

Expose the library to the outside world through the `unitcraft` CLI. Parse and
validate inputs, call domain and service-layer code, and present results.

Dependency rule: may import `unitcraft.service_layer` and `unitcraft.domain`;
reach adapters only through `unitcraft.bootstrap`.
"""
