"""Configuration module for gabridge.

Usage:
    from gabridge.core.config import settings, HitType

    # The host mutates settings at any time; the next call sees the change
    settings.additional_account_names = ["rollup"]
    settings.additional_account_hit_types[HitType.EVENT.value] = False
"""

from gabridge.core.config.enums import USER_ID_TOGGLE, HitType, Transport
from gabridge.core.config.settings import GoogleAnalyticsSettings

__all__ = [
    "GoogleAnalyticsSettings",
    "HitType",
    "Transport",
    "USER_ID_TOGGLE",
    "settings",
]

# Singleton settings instance
settings = GoogleAnalyticsSettings()
