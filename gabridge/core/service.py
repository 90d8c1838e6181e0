"""Google Analytics tracker service.

Public entry points for every hit kind. Each operation builds canonical
hits, validates them, translates them for the installed backend and fans
them out to additional accounts. Operations never raise: analytics failures
are logged and swallowed so they cannot interrupt the host application.
"""

import functools
import logging
import traceback
from typing import Any, Callable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from gabridge.core.config import GoogleAnalyticsSettings, HitType
from gabridge.core.exceptions import HitValidationError
from gabridge.core.hits import HitDescriptor, Transaction
from gabridge.core.normalizer import (
    coerce_hit_callback,
    coerce_non_interaction,
    custom_data,
    parse_int,
)
from gabridge.core.protocols.backend import AnalyticsBackend, BackendKind
from gabridge.core.protocols.provider import AnalyticsProvider
from gabridge.core.replication import replicate
from gabridge.core.translator import CommandTranslator, translator_for

logger = logging.getLogger(__name__)

DEFAULT_EVENT_CATEGORY = "Event"
EXCEPTION_CATEGORY = "Exceptions"
REQUIRED_TIMING_FIELDS = ("timingCategory", "timingVar", "timingValue")


def _fire_and_forget(method: Callable[..., None]) -> Callable[..., None]:
    """Turn every failure inside a public operation into a log line."""

    @functools.wraps(method)
    def wrapper(self: "GoogleAnalyticsTracker", *args: Any, **kwargs: Any) -> None:
        try:
            method(self, *args, **kwargs)
        except HitValidationError as e:
            logger.warning("%s: %s. Hit ignored.", method.__name__, e)
        except Exception as e:
            logger.error("Failed to track '%s': %s", method.__name__, e, exc_info=True)

    return wrapper


def _describe_exception(error: Any) -> Tuple[str, Optional[str]]:
    """Return (action, label) for an exception hit: its one-line summary and its traceback."""
    if isinstance(error, BaseException):
        summary = traceback.format_exception_only(type(error), error)[-1].strip()
        stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        return summary, stack
    return str(error), None


class GoogleAnalyticsTracker:
    """Tracks hits against one Google Analytics backend.

    The backend is fixed at construction. Settings are held by reference and
    read on every call, so host-side changes apply from the next call on.
    A tracker built on a ``NONE`` backend accepts every call and dispatches
    nothing.

    Usage:
        tracker = GoogleAnalyticsTracker(backend, settings)
        tracker.page_track("/checkout")
        tracker.event_track("click", {"category": "cta", "value": "3"})
    """

    def __init__(
        self,
        backend: AnalyticsBackend,
        settings: GoogleAnalyticsSettings,
        location: Optional[Callable[[], Optional[str]]] = None,
    ) -> None:
        """Initialize the tracker.

        Args:
            backend: The installed analytics library (see ``detect_backend``).
            settings: Shared settings, read at call time.
            location: Returns the current page path. Defaults to the last path
                passed to ``page_track``.
        """
        self._backend = backend
        self.settings = settings
        self._location = location
        self._current_page: Optional[str] = None
        self._translator: Optional[CommandTranslator] = (
            None if backend.kind is BackendKind.NONE else translator_for(backend.kind)
        )

    @property
    def backend(self) -> AnalyticsBackend:
        return self._backend

    @property
    def current_page(self) -> Optional[str]:
        if self._location is not None:
            return self._location()
        return self._current_page

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    @_fire_and_forget
    def page_track(self, path: str, properties: Optional[Mapping[str, Any]] = None) -> None:
        """Track a pageview.

        Args:
            path: Value of the Page dimension, e.g. '/home'.
            properties: Optional custom dimensions/metrics for the hit.
        """
        self._current_page = path
        if self.settings.disable_page_tracking:
            return

        self._dispatch(
            HitDescriptor(
                hit_type=HitType.PAGEVIEW,
                fields={**custom_data(properties), "page": path},
            )
        )

    @_fire_and_forget
    def event_track(self, action: Any, properties: Optional[Mapping[str, Any]] = None) -> None:
        """Track an event.

        Args:
            action: Required event action. ``0`` is a valid action.
            properties: ``category`` (defaults to 'Event'), ``label``, ``value``
                (coerced to int), ``nonInteraction``, ``page``, ``hitCallback``
                and any custom dimensions/metrics.
        """
        if self.settings.disable_event_tracking:
            return
        if action is None or action == "":
            raise HitValidationError("action", "Missing required argument")

        properties = properties or {}
        self._dispatch(
            HitDescriptor(
                hit_type=HitType.EVENT,
                fields={
                    **custom_data(properties),
                    "eventCategory": properties.get("category") or DEFAULT_EVENT_CATEGORY,
                    "eventAction": action,
                    "eventLabel": properties.get("label"),
                    "eventValue": parse_int(properties.get("value")),
                    "nonInteraction": coerce_non_interaction(properties),
                    "page": properties.get("page") or self.current_page,
                    "hitCallback": coerce_hit_callback(properties.get("hitCallback")),
                },
            )
        )

    @_fire_and_forget
    def exception_track(self, error: Any, cause: Any = None) -> None:
        """Track an error as a non-interaction event in the 'Exceptions' category.

        Args:
            error: The exception. Its summary becomes the action, its traceback the label.
            cause: Accepted for the framework's handler signature; not sent.
        """
        action, label = _describe_exception(error)
        self._dispatch(
            HitDescriptor(
                hit_type=HitType.EXCEPTION,
                fields={
                    "eventCategory": EXCEPTION_CATEGORY,
                    "eventAction": action,
                    "eventLabel": label,
                    "nonInteraction": True,
                    "page": self.current_page,
                },
            )
        )

    @_fire_and_forget
    def user_timings(self, properties: Any) -> None:
        """Track a user timing.

        Args:
            properties: Requires ``timingCategory``, ``timingVar`` and
                ``timingValue``; accepts ``timingLabel``, ``optSampleRate``
                and ``page``.
        """
        if not isinstance(properties, Mapping):
            raise HitValidationError("properties", "Required argument is missing or not a mapping")
        for name in REQUIRED_TIMING_FIELDS:
            if properties.get(name) is None:
                raise HitValidationError(name, "Argument properties missing required property")

        self._dispatch(
            HitDescriptor(
                hit_type=HitType.TIMING,
                fields={
                    "timingCategory": properties["timingCategory"],
                    "timingVar": properties["timingVar"],
                    "timingValue": properties["timingValue"],
                    "timingLabel": properties.get("timingLabel"),
                    "optSampleRate": properties.get("optSampleRate"),
                    "page": properties.get("page") or self.current_page,
                },
            )
        )

    @_fire_and_forget
    def transaction_track(self, transaction: Any) -> None:
        """Track an ecommerce purchase.

        Emits, in order: the plugin require, the transaction, one item per
        product, and the send. Nothing is dispatched if validation fails.

        Args:
            transaction: A ``Transaction`` or a mapping with camelCase keys.
        """
        validated = self._validate_transaction(transaction)
        for hit in self._transaction_hits(validated):
            self._dispatch(hit)

    @_fire_and_forget
    def set_username(self, user_id: Any) -> None:
        """Attach a User ID to every subsequent hit."""
        self.settings.user_id = None if user_id is None else str(user_id)

    @_fire_and_forget
    def set_user_properties(self, properties: Optional[Mapping[str, Any]]) -> None:
        """Set custom dimensions/metrics on the tracker for subsequent hits."""
        if not properties:
            return
        fields = custom_data(properties)
        if not fields:
            logger.debug("set_user_properties: no custom dimensions or metrics in properties")
            return

        self._dispatch(HitDescriptor(hit_type=HitType.SET_USER_PROPERTIES, fields=fields))

    def register(self, provider: AnalyticsProvider) -> None:
        """Register every operation with the tracking framework's registration points."""
        provider.register_page_track(self.page_track)
        provider.register_event_track(self.event_track)
        provider.register_exception_track(self.exception_track)
        provider.register_set_username(self.set_username)
        provider.register_set_user_properties(self.set_user_properties)
        provider.register_user_timings(self.user_timings)
        provider.register_transaction_track(self.transaction_track)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _validate_transaction(self, transaction: Any) -> Transaction:
        try:
            return Transaction.model_validate(transaction)
        except ValidationError as e:
            error = e.errors()[0]
            field_name = ".".join(str(part) for part in error["loc"]) or "transaction"
            raise HitValidationError(field_name, error["msg"]) from e

    def _transaction_hits(self, transaction: Transaction) -> List[HitDescriptor]:
        hits = [
            HitDescriptor(hit_type=HitType.ECOMMERCE_REQUIRE),
            HitDescriptor(hit_type=HitType.ECOMMERCE_ADD_TRANSACTION, fields=transaction.fields()),
        ]
        for product in transaction.products:
            hits.append(
                HitDescriptor(
                    hit_type=HitType.ECOMMERCE_ADD_ITEM,
                    fields={**product.fields(), "transactionId": transaction.id},
                )
            )
        hits.append(
            HitDescriptor(
                hit_type=HitType.ECOMMERCE_SEND,
                fields={
                    **transaction.custom_dimensions_metrics,
                    "transactionId": transaction.id,
                    "currencyCode": transaction.currency_code,
                    "page": self.current_page,
                },
            )
        )
        return hits

    def _dispatch(self, hit: HitDescriptor) -> None:
        if self._translator is None:
            logger.debug("No analytics backend; dropping %s hit", hit.hit_type.value)
            return

        for command in self._translator.translate(hit, self.settings):
            for replica in replicate(command, hit.hit_type, self.settings):
                self._backend.dispatch(replica)
