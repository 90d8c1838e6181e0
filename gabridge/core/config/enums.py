"""Configuration enums for type-safe settings.

These enums provide type safety for configuration values and for the hit
vocabulary shared by the translators and the replication toggles.
They inherit from str so values compare and serialize as plain strings.
"""

from enum import Enum


class Transport(str, Enum):
    """Transport mechanism requested from the Universal Analytics library."""

    BEACON = "beacon"
    XHR = "xhr"
    IMAGE = "image"


class HitType(str, Enum):
    """Canonical hit types.

    The values double as keys of ``additional_account_hit_types``.
    """

    PAGEVIEW = "pageview"
    EVENT = "event"
    EXCEPTION = "exception"
    TIMING = "timing"
    SET_USER_PROPERTIES = "setUserProperties"
    ECOMMERCE_REQUIRE = "ecommerceRequire"
    ECOMMERCE_ADD_TRANSACTION = "ecommerceAddTransaction"
    ECOMMERCE_ADD_ITEM = "ecommerceAddItem"
    ECOMMERCE_SEND = "ecommerceSend"


# Replication toggle that controls whether userId survives onto account copies
USER_ID_TOGGLE = "userId"
