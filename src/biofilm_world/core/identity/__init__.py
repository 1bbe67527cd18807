"""Entity identity: reserved names shared across modules."""

from biofilm_world.core.identity.models import ReservedName

__all__ = [
    "ReservedName",
]
