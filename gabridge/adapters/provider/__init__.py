"""Tracking provider adapters."""

from gabridge.adapters.provider.fake import FakeAnalyticsProvider
from gabridge.adapters.provider.in_memory import InMemoryAnalyticsProvider

__all__ = ["FakeAnalyticsProvider", "InMemoryAnalyticsProvider"]
