"""Domain: a named spatial region the biofilm grows in.

The grid and solvers live elsewhere; here a domain is the name that solute
grids join on plus the raw params the grid builder reads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from biofilm_world.errors import ConfigurationError

if TYPE_CHECKING:
    from biofilm_world.config.source import ConfigSource
    from biofilm_world.world.context import SimulationContext

GRID_PARAMS = ("resolution", "nI", "nJ", "nK", "boundaryLayer", "biofilmDiffusivity")


@dataclass(slots=True)
class Domain:
    """Computation domain created from one ``computationDomain`` section."""

    name: str
    params: dict[str, str] = field(default_factory=dict)

    def get_name(self) -> str:
        return self.name

    @classmethod
    def from_section(cls, context: SimulationContext, section: ConfigSource) -> Domain:
        """Build a domain, keeping known grid params verbatim.

        Raises:
            ConfigurationError: If the section has no name attribute.
        """
        name = (section.get_attribute("name") or "").strip()
        if not name:
            raise ConfigurationError("computationDomain section has no name attribute")
        params = {}
        for key in GRID_PARAMS:
            value = section.get_param(key)
            if value is not None:
                params[key] = value
        return cls(name=name, params=params)
