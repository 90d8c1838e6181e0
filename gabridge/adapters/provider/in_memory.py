"""In-memory tracking provider.

Minimal stand-in for a tracking framework: keeps the registered handlers per
hit kind and fans each call out to all of them. Useful for hosts that have no
framework of their own and want to call ``provider.page_track(...)`` directly.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from gabridge.core.config import GoogleAnalyticsSettings

logger = logging.getLogger(__name__)


class InMemoryAnalyticsProvider:
    """In-memory registry implementing the AnalyticsProvider protocol.

    Usage:
        provider = InMemoryAnalyticsProvider()
        install(provider, host)
        provider.page_track("/home")
    """

    def __init__(self, settings: Optional[GoogleAnalyticsSettings] = None) -> None:
        """Initialize with no handlers.

        Args:
            settings: Shared settings exposed to the host. A fresh instance
                is created when omitted.
        """
        self.settings = settings if settings is not None else GoogleAnalyticsSettings()
        self._handlers: Dict[str, List[Callable[..., Any]]] = {}

    # ------------------------------------------------------------------
    # Registration points
    # ------------------------------------------------------------------

    def register_page_track(self, handler: Callable[..., Any]) -> None:
        self._register("page_track", handler)

    def register_event_track(self, handler: Callable[..., Any]) -> None:
        self._register("event_track", handler)

    def register_exception_track(self, handler: Callable[..., Any]) -> None:
        self._register("exception_track", handler)

    def register_set_username(self, handler: Callable[..., Any]) -> None:
        self._register("set_username", handler)

    def register_set_user_properties(self, handler: Callable[..., Any]) -> None:
        self._register("set_user_properties", handler)

    def register_user_timings(self, handler: Callable[..., Any]) -> None:
        self._register("user_timings", handler)

    def register_transaction_track(self, handler: Callable[..., Any]) -> None:
        self._register("transaction_track", handler)

    # ------------------------------------------------------------------
    # Framework-side calls
    # ------------------------------------------------------------------

    def page_track(self, path: str, properties: Optional[dict] = None) -> None:
        self._emit("page_track", path, properties or {})

    def event_track(self, action: Any, properties: Optional[dict] = None) -> None:
        self._emit("event_track", action, properties or {})

    def exception_track(self, error: Any, cause: Any = None) -> None:
        self._emit("exception_track", error, cause)

    def set_username(self, user_id: Optional[str]) -> None:
        self._emit("set_username", user_id)

    def set_user_properties(self, properties: Any) -> None:
        self._emit("set_user_properties", properties)

    def user_timings(self, properties: Any) -> None:
        self._emit("user_timings", properties)

    def transaction_track(self, transaction: Any) -> None:
        self._emit("transaction_track", transaction)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _register(self, hook: str, handler: Callable[..., Any]) -> None:
        self._handlers.setdefault(hook, []).append(handler)
        logger.debug("Provider: registered handler for '%s'", hook)

    def _emit(self, hook: str, *args: Any) -> None:
        handlers = self._handlers.get(hook, [])
        if not handlers:
            logger.debug("Provider: no handlers for '%s'", hook)
            return

        # One failing handler must not stop the others
        for handler in handlers:
            try:
                handler(*args)
            except Exception as e:
                logger.error("Provider: handler failed for '%s': %s", hook, e, exc_info=e)
