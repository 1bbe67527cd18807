"""Simulation-wide state handed to entity constructors."""

from __future__ import annotations

from dataclasses import dataclass, field

from biofilm_world.config.settings import WorldSettings
from biofilm_world.core.types import SoluteIndex
from biofilm_world.errors import ConfigurationError


@dataclass
class SimulationContext:
    """What a bulk or domain may need from the running simulation.

    Attributes:
        solutes: Solute dictionary, name to index.
        is_chemostat: Whether the scenario is a chemostat. Owned by the caller:
            the world never reads it. Whoever needs the chemostat checks it and
            looks up the bulk called ReservedName.CHEMOSTAT.
        settings: Runtime settings.
    """

    solutes: dict[str, SoluteIndex] = field(default_factory=dict)
    is_chemostat: bool = False
    settings: WorldSettings = field(default_factory=WorldSettings)

    def solute_index(self, name: str) -> SoluteIndex:
        """Look up a solute by name.

        Raises:
            ConfigurationError: If the solute is not in the dictionary.
        """
        try:
            return self.solutes[name]
        except KeyError:
            raise ConfigurationError(f"unknown solute {name!r}") from None
