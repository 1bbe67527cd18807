"""Protocol for the error/log sink the world reports to.

The world decides what to report; the sink decides where it goes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    """Destination for world diagnostics.

    Usage:
        sink.write_error(exc, "World.init() while creating bulks")
        sink.write_log_always("World.get_bulk() found no bulk called tank")
    """

    def write_error(self, error: BaseException, context: str) -> None:
        """Record a recoverable error.

        Args:
            error: The exception that was caught.
            context: Where it was caught, e.g. the construction phase.
        """
        ...

    def write_log_always(self, message: str) -> None:
        """Record a message that must not be filtered out by log level."""
        ...
