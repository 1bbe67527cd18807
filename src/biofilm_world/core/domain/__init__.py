"""Computation domains."""

from biofilm_world.core.domain.models import Domain

__all__ = [
    "Domain",
]
