"""Detect which Google Analytics library the host has installed.

The host environment is a mapping of global names, the way a page's
``window`` object would be:

    host = {"GoogleAnalyticsObject": "ga", "ga": ga_function}   # Universal
    host = {"_gaq": []}                                           # Classic

Detection is a one-shot probe. A library installed after the probe is never
picked up by the tracker built from it.
"""

import logging
from typing import Any, Mapping, Optional

from gabridge.adapters.backend.classic import ClassicAnalyticsBackend
from gabridge.adapters.backend.universal import UniversalAnalyticsBackend
from gabridge.core.exceptions import ConfigurationError
from gabridge.core.protocols.backend import AnalyticsBackend

logger = logging.getLogger(__name__)

# Set by the analytics.js snippet to the name of its global command function
UNIVERSAL_NAMESPACE_KEY = "GoogleAnalyticsObject"
CLASSIC_QUEUE_KEY = "_gaq"


def detect_universal(host: Mapping[str, Any]) -> Optional[UniversalAnalyticsBackend]:
    """Return a Universal backend if the configured namespace resolves to a callable."""
    namespace = host.get(UNIVERSAL_NAMESPACE_KEY)
    if not namespace or not isinstance(namespace, str):
        return None
    ga = host.get(namespace)
    if not callable(ga):
        return None
    return UniversalAnalyticsBackend(ga, namespace=namespace)


def detect_classic(host: Mapping[str, Any]) -> Optional[ClassicAnalyticsBackend]:
    """Return a Classic backend if a command queue is present, empty or not."""
    queue = host.get(CLASSIC_QUEUE_KEY)
    if queue is None:
        return None
    try:
        return ClassicAnalyticsBackend(queue)
    except TypeError as e:
        logger.warning("Ignoring unusable %s: %s", CLASSIC_QUEUE_KEY, e)
        return None


def detect_backend(host: Mapping[str, Any]) -> AnalyticsBackend:
    """Probe the host once and return the backend to use.

    Classic is checked first and Universal second, so a page carrying both
    ends up on Universal.

    Raises:
        ConfigurationError: If neither library is present.
    """
    backend: Optional[AnalyticsBackend] = detect_classic(host)

    universal = detect_universal(host)
    if universal is not None:
        backend = universal

    if backend is None:
        raise ConfigurationError()

    logger.info("Detected %s Analytics backend", backend.kind.value)
    return backend
