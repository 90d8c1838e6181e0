"""Fake analytics backend for testing."""

from typing import Optional

from gabridge.core.hits import Command
from gabridge.core.protocols.backend import BackendKind


class FakeBackend:
    """In-memory test double for AnalyticsBackend.

    Records every dispatched command for assertions. Pretends to be a
    Universal backend unless told otherwise.

    Usage:
        backend = FakeBackend()
        tracker = GoogleAnalyticsTracker(backend, settings)
        tracker.page_track("/home")
        assert backend.names() == ["send"]
    """

    def __init__(
        self,
        kind: BackendKind = BackendKind.UNIVERSAL,
        should_raise: Optional[Exception] = None,
    ) -> None:
        """Initialize with an empty command log.

        Args:
            kind: Protocol the fake claims to speak.
            should_raise: If set, raised from every dispatch after recording.
        """
        self._kind = kind
        self._should_raise = should_raise
        self.commands: list[Command] = []

    @property
    def kind(self) -> BackendKind:
        return self._kind

    def dispatch(self, command: Command) -> None:
        """Record the command."""
        self.commands.append(command)
        if self._should_raise is not None:
            raise self._should_raise

    # Test helpers

    def names(self) -> list[str]:
        """Command names in dispatch order."""
        return [c.name for c in self.commands]

    def get(self, name: str) -> Command:
        """Return the first command with the given name, or raise AssertionError."""
        for command in self.commands:
            if command.name == name:
                return command
        raise AssertionError(f"No command '{name}' dispatched. Dispatched: {self.names()}")

    def last(self) -> Command:
        """Return the most recently dispatched command."""
        if not self.commands:
            raise AssertionError("No commands dispatched")
        return self.commands[-1]

    def clear(self) -> None:
        """Reset dispatched commands."""
        self.commands.clear()
