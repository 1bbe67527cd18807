"""Bulk: a named, well-mixed solute reservoir.

A bulk is a source or sink of solutes for the biofilm. It tracks a sparse
set of concentrations keyed by solute index and the largest time step that
keeps the explicit update of those concentrations stable.

Usage:
    bulk = Bulk.from_section(context, section)
    if bulk.contains(oxygen):
        level = bulk.get_value(oxygen)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from biofilm_world.core.identity import ReservedName
from biofilm_world.core.types import SoluteIndex
from biofilm_world.errors import ConfigurationError

if TYPE_CHECKING:
    from biofilm_world.config.source import ConfigSource
    from biofilm_world.world.context import SimulationContext


@dataclass(slots=True)
class Bulk:
    """Solute reservoir created from one ``bulk`` section."""

    name: str
    concentrations: dict[SoluteIndex, float] = field(default_factory=dict)
    time_constraint: float = math.inf
    default_time_constraint: float = math.inf

    @property
    def is_chemostat(self) -> bool:
        return self.name == ReservedName.CHEMOSTAT

    def name_equals(self, name: str) -> bool:
        """Case-sensitive exact name match."""
        return self.name == name

    def contains(self, solute_index: SoluteIndex) -> bool:
        return solute_index in self.concentrations

    def get_value(self, solute_index: SoluteIndex) -> float:
        """Concentration of a tracked solute.

        Raises:
            KeyError: If the bulk does not track solute_index.
        """
        return self.concentrations[solute_index]

    def set_value(self, solute_index: SoluteIndex, value: float) -> None:
        self.concentrations[solute_index] = value

    def get_time_constraint(self) -> float:
        return self.time_constraint

    def update_rates(self, rates: dict[SoluteIndex, float]) -> float:
        """Recompute the time constraint from concentration change rates.

        The constraint is the time needed to change 100% of a bulk
        concentration: min over tracked solutes of |S / rate|. Solutes with a
        zero rate, at zero concentration, or that the bulk does not track, do
        not constrain.

        Args:
            rates: Rate of change per solute index.

        Returns:
            The new time constraint.
        """
        bounds = [
            abs(self.concentrations[index] / rate)
            for index, rate in rates.items()
            if rate != 0.0 and self.concentrations.get(index, 0.0) != 0.0
        ]
        self.time_constraint = min(bounds, default=self.default_time_constraint)
        return self.time_constraint

    @classmethod
    def from_section(cls, context: SimulationContext, section: ConfigSource) -> Bulk:
        """Build a bulk from a ``bulk`` section.

        Expected shape:
            <bulk name="tank">
                <param name="timeConstraint">0.5</param>
                <solute name="oxygen"><param name="Sbulk">8.0</param></solute>
            </bulk>

        Raises:
            ConfigurationError: Missing name, unknown solute, or a value that is
                not a finite non-negative number (timeConstraint must be > 0).
        """
        name = (section.get_attribute("name") or "").strip()
        if not name:
            raise ConfigurationError("bulk section has no name attribute")

        default_tc = context.settings.default_time_constraint
        concentrations: dict[SoluteIndex, float] = {}
        for solute in section.get_children_parsers("solute"):
            solute_name = (solute.get_attribute("name") or "").strip()
            index = context.solute_index(solute_name)
            concentrations[index] = _parse_float(solute.get_param("Sbulk"), f"{name}/{solute_name}")

        raw_tc = section.get_param("timeConstraint")
        if raw_tc is None:
            time_constraint = default_tc
        else:
            time_constraint = _parse_float(raw_tc, name)
            if time_constraint == 0.0:
                raise ConfigurationError(f"bulk {name}: timeConstraint must be positive")
        return cls(
            name=name,
            concentrations=concentrations,
            time_constraint=time_constraint,
            default_time_constraint=default_tc,
        )


def _parse_float(raw: str | None, where: str) -> float:
    if raw is None:
        return 0.0
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"bulk {where}: expected a number, got {raw!r}") from e
    if not math.isfinite(value) or value < 0.0:
        raise ConfigurationError(
            f"bulk {where}: expected a finite non-negative number, got {raw!r}"
        )
    return value
