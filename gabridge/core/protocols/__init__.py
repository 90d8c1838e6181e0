"""Core protocols for dependency injection."""

from gabridge.core.protocols.backend import AnalyticsBackend, BackendKind
from gabridge.core.protocols.provider import AnalyticsProvider

__all__ = [
    "AnalyticsBackend",
    "AnalyticsProvider",
    "BackendKind",
]
