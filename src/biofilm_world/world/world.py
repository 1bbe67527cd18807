"""World: registry of the bulks and computation domains of a simulation.

Usage:
    world = World()
    report = world.init(context, root)

    # Link a solute grid to its domain
    domain = world.get_domain("biofilm").unwrap()

    # Bound the next integration step
    dt = min(dt, world.get_bulk_time_constraint())
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from biofilm_world.config.source import ConfigSource
from biofilm_world.core.bulk import Bulk
from biofilm_world.core.domain import Domain
from biofilm_world.core.types import SoluteIndex
from biofilm_world.errors import DuplicateNameError, EmptyWorldError
from biofilm_world.tracing import LoguruSink, LogSink
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

EntityT = TypeVar("EntityT", Bulk, Domain)


class World:
    """The bulks and computation domains defined in one simulation.

    Only one world exists per run. It may hold several bulks and several
    domains, each with a different name. Both collections keep
    configuration order; the first bulk seeds the stability aggregate.

    Not thread-safe: the simulation loop serializes access.
    """

    def __init__(self, sink: LogSink | None = None):
        self._sink: LogSink = sink or LoguruSink()
        self._domains: list[Domain] = []
        self._bulks: list[Bulk] = []
        self._bulk_time = StabilityHistory()

    @property
    def domain_list(self) -> tuple[Domain, ...]:
        return tuple(self._domains)

    @property
    def bulk_list(self) -> tuple[Bulk, ...]:
        return tuple(self._bulks)

    @property
    def bulk_time(self) -> StabilityHistory:
        return self._bulk_time

    def init(self, context: SimulationContext, root: ConfigSource) -> InitReport:
        """Create and register the bulks and domains described under root.

        The two phases are isolated: a failure while creating bulks is
        reported and domain creation still runs, and the other way round.
        Inside a phase the first failure ends that phase; entities built
        before it stay registered.

        Args:
            context: Simulation state passed to each constructor.
            root: The world section of the protocol.

        Returns:
            Report of the failures caught, one per failed phase.
        """
        report = InitReport()
        self._build_phase(
            Phase.BULKS,
            root,
            lambda: context.settings.bulk_section,
            lambda section: Bulk.from_section(context, section),
            self._bulks,
            report,
        )
        self._build_phase(
            Phase.DOMAINS,
            root,
            lambda: context.settings.domain_section,
            lambda section: Domain.from_section(context, section),
            self._domains,
            report,
        )
        return report

    def _build_phase(
        self,
        phase: str,
        root: ConfigSource,
        section_name: Callable[[], str],
        build: Callable[[ConfigSource], EntityT],
        registry: list[EntityT],
        report: InitReport,
    ) -> None:
        kind = "bulk" if phase == Phase.BULKS else "domain"
        try:
            for section in root.get_children_parsers(section_name()):
                entity = build(section)
                if any(existing.name == entity.name for existing in registry):
                    raise DuplicateNameError(kind, entity.name)
                registry.append(entity)
        except Exception as e:
            failure = ConstructionFailure(phase=phase, error=e)
            self._sink.write_error(e, failure.context)
            report.failures.append(failure)

    def get_domain(self, name: str) -> Lookup[Domain]:
        """Return the domain called name.

        One use is linking solute grids to a domain. A miss is logged and
        returned as Missing.
        """
        for domain in self._domains:
            if domain.get_name() == name:
                return Found(domain)
        self._sink.write_log_always(f"World.get_domain() found no domain called {name}")
        return Missing("domain", name)

    def get_bulk(self, name: str) -> Lookup[Bulk]:
        """Return the bulk called name, or Missing (logged)."""
        bulk = self._find_bulk(name)
        if bulk is None:
            self._sink.write_log_always(f"World.get_bulk() found no bulk called {name}")
            return Missing("bulk", name)
        return Found(bulk)

    def contains_bulk(self, name: str) -> bool:
        """Whether a bulk called name exists. Logs nothing."""
        return self._find_bulk(name) is not None

    def _find_bulk(self, name: str) -> Bulk | None:
        for bulk in self._bulks:
            if bulk.name_equals(name):
                return bulk
        return None

    def get_bulk_time_constraint(self) -> float:
        """Largest time step that keeps every bulk's explicit update stable.

        This is the most restrictive bulk's own constraint. The result is
        pushed onto bulk_time, so bulk_time.previous keeps the value from
        the call before.

        Raises:
            EmptyWorldError: If no bulk is registered.
        """
        if not self._bulks:
            raise EmptyWorldError("cannot compute a bulk time constraint without bulks")
        bound = self._bulks[0].get_time_constraint()
        for bulk in self._bulks:
            bound = min(bound, bulk.get_time_constraint())
        return self._bulk_time.push(bound)

    def get_all_bulk_value(self, solute_index: SoluteIndex) -> list[float]:
        """Concentration of a solute in every bulk, in bulk order.

        Bulks that do not track the solute contribute 0.0, so the result
        always has one entry per bulk.
        """
        return [
            bulk.get_value(solute_index) if bulk.contains(solute_index) else 0.0
            for bulk in self._bulks
        ]

    def get_max_bulk_value(self, solute_index: SoluteIndex) -> float:
        """Highest concentration of a solute over all bulks (0.0 if none)."""
        return max(self.get_all_bulk_value(solute_index), default=0.0)
