"""Null backend for hosts without any Google Analytics library.

Satisfies AnalyticsBackend so a tracker can always be constructed; every
command is discarded.
"""

from gabridge.core.hits import Command
from gabridge.core.protocols.backend import AnalyticsBackend, BackendKind


class NullBackend(AnalyticsBackend):
    """No-op backend used when detection finds nothing."""

    @property
    def kind(self) -> BackendKind:
        return BackendKind.NONE

    def dispatch(self, command: Command) -> None:
        """No-op: nothing is installed to receive the command."""
        return None
