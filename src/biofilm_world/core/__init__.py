"""Core entities: bulks, domains, and reserved names.

Architecture Note:
    core/ holds the leaf entities. They know how to build themselves from a
    configuration section and nothing about the World that owns them.
"""

from biofilm_world.core.bulk import Bulk
from biofilm_world.core.domain import Domain
from biofilm_world.core.identity import ReservedName
from biofilm_world.core.types import SoluteIndex

__all__ = [
    "Bulk",
    "Domain",
    "ReservedName",
    "SoluteIndex",
]
