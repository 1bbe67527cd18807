"""Diagnostics for world construction and queries.

Usage:
    from biofilm_world.tracing import LoguruSink, configure_logging

    configure_logging("DEBUG")
    world = World(sink=LoguruSink())
"""

from biofilm_world.tracing.protocol import LogSink
from biofilm_world.tracing.sink import LoguruSink, configure_logging

__all__ = [
    "LogSink",
    "LoguruSink",
    "configure_logging",
]
