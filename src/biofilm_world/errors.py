"""Exception hierarchy for world construction and queries."""

from __future__ import annotations


class WorldError(Exception):
    """Base class for all biofilm_world errors."""


class ConfigurationError(WorldError):
    """Raised when a configuration section cannot be turned into an entity."""


class DuplicateNameError(ConfigurationError):
    """Raised when a bulk or domain name is registered twice."""

    def __init__(self, kind: str, name: str):
        super().__init__(f"{kind} '{name}' is already registered")
        self.kind = kind
        self.name = name


class EmptyWorldError(WorldError):
    """Raised when an aggregate over bulks is requested and none exist."""
