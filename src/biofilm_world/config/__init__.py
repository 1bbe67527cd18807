"""Configuration: runtime settings and configuration sources.

Usage:
    from biofilm_world.config import WorldSettings, XmlSource

    settings = WorldSettings(log_level="DEBUG")
    root = XmlSource.from_string(protocol_text)
"""

from biofilm_world.config.settings import WorldSettings
from biofilm_world.config.source import ConfigSource, MappingSource, XmlSource

__all__ = [
    "WorldSettings",
    "ConfigSource",
    "MappingSource",
    "XmlSource",
]
