"""Bulk solute reservoirs."""

from biofilm_world.core.bulk.models import Bulk

__all__ = [
    "Bulk",
]
