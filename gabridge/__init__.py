"""Dispatch vendor-neutral analytics hits to Google Analytics.

Usage:
    from gabridge import create_tracker, settings

    tracker = create_tracker({"GoogleAnalyticsObject": "ga", "ga": ga})
    tracker.page_track("/home")
"""

from gabridge.core.config import GoogleAnalyticsSettings, HitType, Transport, settings
from gabridge.core.factory import create_tracker, install
from gabridge.core.hits import Command, HitDescriptor, Product, Transaction
from gabridge.core.normalizer import custom_data
from gabridge.core.service import GoogleAnalyticsTracker

__all__ = [
    "Command",
    "GoogleAnalyticsSettings",
    "GoogleAnalyticsTracker",
    "HitDescriptor",
    "HitType",
    "Product",
    "Transaction",
    "Transport",
    "create_tracker",
    "custom_data",
    "install",
    "settings",
]
