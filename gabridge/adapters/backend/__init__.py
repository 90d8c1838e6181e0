"""Analytics backend adapters."""

from gabridge.adapters.backend.classic import ClassicAnalyticsBackend
from gabridge.adapters.backend.detect import detect_backend
from gabridge.adapters.backend.fake import FakeBackend
from gabridge.adapters.backend.null import NullBackend
from gabridge.adapters.backend.universal import UniversalAnalyticsBackend

__all__ = [
    "ClassicAnalyticsBackend",
    "FakeBackend",
    "NullBackend",
    "UniversalAnalyticsBackend",
    "detect_backend",
]
