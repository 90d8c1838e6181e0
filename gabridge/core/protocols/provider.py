"""AnalyticsProvider protocol: the inbound registration contract.

The surrounding tracking framework (route-change listening, page and event
hooks) owns when hits happen. It exposes one registration point per hit kind
and a settings object the host may mutate at any time. The tracker registers a
handler at each point.

Usage:
    tracker.register(provider)
    provider.page_track("/home", {})  # framework-side call reaches the tracker
"""

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from gabridge.core.config import GoogleAnalyticsSettings

PageTrackHandler = Callable[[str, Optional[dict]], None]
EventTrackHandler = Callable[[Any, Optional[dict]], None]
ExceptionTrackHandler = Callable[[Any, Any], None]
SetUsernameHandler = Callable[[Optional[str]], None]
PropertiesHandler = Callable[[Any], None]


@runtime_checkable
class AnalyticsProvider(Protocol):
    """Registration points offered by the tracking framework."""

    settings: GoogleAnalyticsSettings

    def register_page_track(self, handler: PageTrackHandler) -> None:
        """Register ``fn(path, properties)``."""
        ...

    def register_event_track(self, handler: EventTrackHandler) -> None:
        """Register ``fn(action, properties)``."""
        ...

    def register_exception_track(self, handler: ExceptionTrackHandler) -> None:
        """Register ``fn(error, cause)``."""
        ...

    def register_set_username(self, handler: SetUsernameHandler) -> None:
        """Register ``fn(user_id)``."""
        ...

    def register_set_user_properties(self, handler: PropertiesHandler) -> None:
        """Register ``fn(properties)``."""
        ...

    def register_user_timings(self, handler: PropertiesHandler) -> None:
        """Register ``fn(properties)``."""
        ...

    def register_transaction_track(self, handler: PropertiesHandler) -> None:
        """Register ``fn(transaction)``."""
        ...
