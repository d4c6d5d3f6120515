"""UNITCRAFT

A small library of example domain objects (a complexity tracker, a weighted
key/value entry, a size-code classifier and an actor caller) paired with a
test suite that shows how to structure, name and scope unit tests.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
