"""AnalyticsBackend protocol for delivering commands to a Google Analytics library.

A backend is resolved once, when the tracker is built, and stays fixed for the
tracker's lifetime. Backends deliver already-translated commands and never
interpret them.

Usage:
    backend = detect_backend(host)
    if backend.kind is BackendKind.UNIVERSAL:
        backend.dispatch(Command(name="send", args=[{"hitType": "pageview"}]))
"""

from enum import Enum
from typing import Protocol, runtime_checkable

from gabridge.core.hits import Command


class BackendKind(str, Enum):
    """The closed set of backend variants."""

    UNIVERSAL = "universal"
    CLASSIC = "classic"
    NONE = "none"


@runtime_checkable
class AnalyticsBackend(Protocol):
    """Protocol for a host-installed analytics library.

    Implementations are fire-and-forget: delivery is synchronous, nothing is
    awaited or confirmed.
    """

    @property
    def kind(self) -> BackendKind:
        """Which command protocol this backend speaks."""
        ...

    def dispatch(self, command: Command) -> None:
        """Hand one command to the analytics library.

        Args:
            command: A fully translated (and possibly namespaced) command.
        """
        ...
