"""Fake tracking provider for testing."""

from typing import Any, Callable, Optional

from gabridge.core.config import GoogleAnalyticsSettings


class FakeAnalyticsProvider:
    """Test implementation of AnalyticsProvider.

    Records which handlers were registered at which registration point.

    Usage:
        provider = FakeAnalyticsProvider()
        tracker.register(provider)
        assert provider.has("page_track")
        provider.get("page_track")("/home", {})
    """

    def __init__(self, settings: Optional[GoogleAnalyticsSettings] = None) -> None:
        """Initialize with empty registrations."""
        self.settings = settings if settings is not None else GoogleAnalyticsSettings()
        self.registrations: list[tuple[str, Callable[..., Any]]] = []

    def register_page_track(self, handler: Callable[..., Any]) -> None:
        self.registrations.append(("page_track", handler))

    def register_event_track(self, handler: Callable[..., Any]) -> None:
        self.registrations.append(("event_track", handler))

    def register_exception_track(self, handler: Callable[..., Any]) -> None:
        self.registrations.append(("exception_track", handler))

    def register_set_username(self, handler: Callable[..., Any]) -> None:
        self.registrations.append(("set_username", handler))

    def register_set_user_properties(self, handler: Callable[..., Any]) -> None:
        self.registrations.append(("set_user_properties", handler))

    def register_user_timings(self, handler: Callable[..., Any]) -> None:
        self.registrations.append(("user_timings", handler))

    def register_transaction_track(self, handler: Callable[..., Any]) -> None:
        self.registrations.append(("transaction_track", handler))

    # Test helpers

    def has(self, hook: str) -> bool:
        """Check if a handler was registered for the hook."""
        return any(name == hook for name, _ in self.registrations)

    def get(self, hook: str) -> Callable[..., Any]:
        """Return the first handler registered for the hook, or raise AssertionError."""
        for name, handler in self.registrations:
            if name == hook:
                return handler
        raise AssertionError(
            f"No handler registered for '{hook}'. "
            f"Registered: {[name for name, _ in self.registrations]}"
        )

    @property
    def hooks(self) -> list[str]:
        """Registration points in registration order."""
        return [name for name, _ in self.registrations]
