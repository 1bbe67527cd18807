"""World state and lookups.

Architecture Note:
    world/ is the stateful layer: it owns the bulks and domains built from
    configuration and answers the queries the solvers make. core/ entities
    never call back into it.
"""

from biofilm_world.world.context import SimulationContext
from biofilm_world.world.history import StabilityHistory
from biofilm_world.world.result import (
    ConstructionFailure,
    Found,
    InitReport,
    Lookup,
    Missing,
    Phase,
)
from biofilm_world.world.world import World

__all__ = [
    "World",
    "SimulationContext",
    "StabilityHistory",
    "Found",
    "Missing",
    "Lookup",
    "Phase",
    "ConstructionFailure",
    "InitReport",
]
