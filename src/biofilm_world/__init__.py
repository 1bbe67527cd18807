"""biofilm_world: registry of the bulks and computation domains of a biofilm simulation.

Usage:
    from biofilm_world import SimulationContext, World, XmlSource

    context = SimulationContext(solutes={"oxygen": 0, "glucose": 1})
    root = XmlSource.from_string(protocol_text)

    world = World()
    report = world.init(context, root)

    dt = world.get_bulk_time_constraint()
    oxygen_levels = world.get_all_bulk_value(0)
"""

__version__ = "0.1.0"

# Configuration
from biofilm_world.config import (
    ConfigSource,
    MappingSource,
    WorldSettings,
    XmlSource,
)

# Core entities
from biofilm_world.core import (
    Bulk,
    Domain,
    ReservedName,
    SoluteIndex,
)

# Errors
from biofilm_world.errors import (
    ConfigurationError,
    DuplicateNameError,
    EmptyWorldError,
    WorldError,
)

# Diagnostics
from biofilm_world.tracing import (
    LoguruSink,
    LogSink,
    configure_logging,
)

# World
from biofilm_world.world import (
    Found,
    InitReport,
    Lookup,
    Missing,
    SimulationContext,
    World,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "WorldSettings",
    "ConfigSource",
    "MappingSource",
    "XmlSource",
    # Core
    "Bulk",
    "Domain",
    "ReservedName",
    "SoluteIndex",
    # Errors
    "WorldError",
    "ConfigurationError",
    "DuplicateNameError",
    "EmptyWorldError",
    # Tracing
    "LogSink",
    "LoguruSink",
    "configure_logging",
    # World
    "World",
    "SimulationContext",
    "InitReport",
    "Found",
    "Missing",
    "Lookup",
]
