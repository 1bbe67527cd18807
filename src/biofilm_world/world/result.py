"""Results of world lookups and world construction.

Usage:
    lookup = world.get_domain("biofilm")
    if lookup.is_found():
        domain = lookup.unwrap()

    report = world.init(context, root)
    for failure in report.failures:
        print(failure.phase, failure.error)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, NoReturn, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Found(Generic[T]):
    """A lookup that matched."""

    value: T

    def is_found(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def value_or(self, default: T | None) -> T | None:
        return self.value


@dataclass(frozen=True, slots=True)
class Missing:
    """A lookup that matched nothing.

    Callers decide whether the miss is fatal for them.
    """

    kind: str
    name: str

    def is_found(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise LookupError(f"no {self.kind} called {self.name!r}")

    def value_or(self, default: Any) -> Any:
        return default


Lookup = Found[T] | Missing


class Phase:
    """Construction phases of World.init()."""

    BULKS = "bulks"
    DOMAINS = "domains"


@dataclass(frozen=True, slots=True)
class ConstructionFailure:
    """An error caught while building one phase of the world."""

    phase: str
    error: Exception

    @property
    def context(self) -> str:
        return f"World.init() while creating {self.phase}"


@dataclass
class InitReport:
    """Failures captured by World.init(). Empty means everything was built."""

    failures: list[ConstructionFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def phases_failed(self) -> frozenset[str]:
        return frozenset(f.phase for f in self.failures)
