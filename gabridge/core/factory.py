"""Tracker factory.

All construction logic lives here: probe the host once, fall back to the null
backend when nothing is installed, and hand the shared settings to the
tracker by reference.
"""

import logging
from typing import Any, Callable, Mapping, Optional

from gabridge.adapters.backend.detect import detect_backend
from gabridge.adapters.backend.null import NullBackend
from gabridge.core.config import GoogleAnalyticsSettings
from gabridge.core.config import settings as default_settings
from gabridge.core.exceptions import ConfigurationError
from gabridge.core.protocols.backend import AnalyticsBackend
from gabridge.core.protocols.provider import AnalyticsProvider
from gabridge.core.service import GoogleAnalyticsTracker

logger = logging.getLogger(__name__)


def create_backend(host: Mapping[str, Any]) -> AnalyticsBackend:
    """Detect the host's backend, or return the null backend when there is none."""
    try:
        return detect_backend(host)
    except ConfigurationError as e:
        logger.warning("%s at bootstrap. All tracking calls will be ignored.", e.message)
        return NullBackend()


def create_tracker(
    host: Mapping[str, Any],
    settings: Optional[GoogleAnalyticsSettings] = None,
    location: Optional[Callable[[], Optional[str]]] = None,
) -> GoogleAnalyticsTracker:
    """Build a tracker for the host environment.

    Args:
        host: Mapping of global names to probe (see ``detect_backend``).
        settings: Shared settings. Defaults to the module-level singleton.
        location: Returns the current page path, if the host knows it.
    """
    return GoogleAnalyticsTracker(
        create_backend(host),
        settings if settings is not None else default_settings,
        location=location,
    )


def install(
    provider: AnalyticsProvider,
    host: Mapping[str, Any],
    location: Optional[Callable[[], Optional[str]]] = None,
) -> GoogleAnalyticsTracker:
    """Build a tracker on the provider's settings and register it with the provider."""
    tracker = create_tracker(host, settings=provider.settings, location=location)
    tracker.register(provider)
    return tracker
