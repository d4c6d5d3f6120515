"""Application wiring."""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
