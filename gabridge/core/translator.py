"""Translate canonical hits into backend-native commands.

One translator per command protocol. Each keeps a dispatch table keyed by
``HitType``; adding a translatable hit = one new method + one entry in
``_handlers``. A hit type missing from a table is unsupported on that
protocol: ``translate`` logs it and returns no commands.
"""

import logging
from typing import Any, Callable, Dict, List

from gabridge.core.config import GoogleAnalyticsSettings, HitType
from gabridge.core.exceptions import UnsupportedOperationError
from gabridge.core.hits import Command, HitDescriptor
from gabridge.core.protocols.backend import BackendKind

logger = logging.getLogger(__name__)

_Handler = Callable[[HitDescriptor, GoogleAnalyticsSettings], List[Command]]

ENHANCED_ECOMMERCE_CATEGORY = "Enhanced Ecommerce"
ENHANCED_ECOMMERCE_ACTION = "Purchase"


def _compact(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


class CommandTranslator:
    """Base translator: table lookup plus the shared error policy."""

    protocol: str = ""

    def __init__(self) -> None:
        """Subclasses fill in the dispatch table."""
        self._handlers: Dict[HitType, _Handler] = {}

    def translate(self, hit: HitDescriptor, settings: GoogleAnalyticsSettings) -> List[Command]:
        """Translate one hit into zero or more commands.

        Never raises for untranslatable hits; those are logged and dropped.
        """
        try:
            handler = self._handler_for(hit)
        except UnsupportedOperationError as e:
            logger.warning("%s. Hit ignored.", e.message)
            return []
        return handler(hit, settings)

    def _handler_for(self, hit: HitDescriptor) -> _Handler:
        handler = self._handlers.get(hit.hit_type)
        if handler is None:
            raise UnsupportedOperationError(hit.hit_type.value, self.protocol)
        return handler


class UniversalTranslator(CommandTranslator):
    """analytics.js syntax: ``ga(command, ...fields)``.

    Canonical field names already match the analytics.js field reference, so
    most hits map onto a ``send`` command almost unchanged. Ecommerce hits
    switch between the ``ecommerce`` and ``ec`` plugins on
    ``settings.enhanced_ecommerce``.
    """

    protocol = "Universal"

    def __init__(self) -> None:
        """Wire the dispatch table."""
        super().__init__()
        self._handlers = {
            HitType.PAGEVIEW: self._handle_pageview,
            HitType.EVENT: self._handle_event,
            HitType.EXCEPTION: self._handle_event,
            HitType.TIMING: self._handle_timing,
            HitType.SET_USER_PROPERTIES: self._handle_set,
            HitType.ECOMMERCE_REQUIRE: self._handle_require,
            HitType.ECOMMERCE_ADD_TRANSACTION: self._handle_add_transaction,
            HitType.ECOMMERCE_ADD_ITEM: self._handle_add_item,
            HitType.ECOMMERCE_SEND: self._handle_ecommerce_send,
        }

    # ------------------------------------------------------------------
    # Hits
    # ------------------------------------------------------------------

    def _handle_pageview(
        self, hit: HitDescriptor, settings: GoogleAnalyticsSettings
    ) -> List[Command]:
        return [self._send("pageview", hit.fields, settings)]

    def _handle_event(self, hit: HitDescriptor, settings: GoogleAnalyticsSettings) -> List[Command]:
        # Exceptions go out as ordinary events
        return [self._send("event", hit.fields, settings)]

    def _handle_timing(
        self, hit: HitDescriptor, settings: GoogleAnalyticsSettings
    ) -> List[Command]:
        return [self._send("timing", hit.fields, settings)]

    def _handle_set(self, hit: HitDescriptor, settings: GoogleAnalyticsSettings) -> List[Command]:
        return [self._with_hit_fields(Command(name="set", args=[_compact(hit.fields)]), settings)]

    # ------------------------------------------------------------------
    # Ecommerce
    # ------------------------------------------------------------------

    def _handle_require(
        self, hit: HitDescriptor, settings: GoogleAnalyticsSettings
    ) -> List[Command]:
        plugin = "ec" if settings.enhanced_ecommerce else "ecommerce"
        # No field bag on require: userId and transport are not injected
        return [Command(name="require", args=[plugin])]

    def _handle_add_transaction(
        self, hit: HitDescriptor, settings: GoogleAnalyticsSettings
    ) -> List[Command]:
        fields = _compact(hit.fields)
        if settings.enhanced_ecommerce:
            command = Command(name="ec:setAction", args=["purchase", fields])
        else:
            command = Command(name="ecommerce:addTransaction", args=[fields])
        return [self._with_hit_fields(command, settings)]

    def _handle_add_item(
        self, hit: HitDescriptor, settings: GoogleAnalyticsSettings
    ) -> List[Command]:
        fields = _compact(hit.fields)
        transaction_id = fields.pop("transactionId", None)
        if settings.enhanced_ecommerce:
            command = Command(name="ec:addProduct", args=[fields])
        else:
            # The basic plugin keys items by transaction; the product id becomes the SKU
            item = {**fields, "id": transaction_id, "sku": fields.get("id")}
            command = Command(name="ecommerce:addItem", args=[_compact(item)])
        return [self._with_hit_fields(command, settings)]

    def _handle_ecommerce_send(
        self, hit: HitDescriptor, settings: GoogleAnalyticsSettings
    ) -> List[Command]:
        if not settings.enhanced_ecommerce:
            return [Command(name="ecommerce:send")]

        # Enhanced ecommerce data only leaves the browser bundled with an ordinary hit
        custom = {
            key: value
            for key, value in hit.fields.items()
            if key not in ("transactionId", "currencyCode")
        }
        bundle = HitDescriptor(
            hit_type=HitType.EVENT,
            fields={
                **custom,
                "eventCategory": ENHANCED_ECOMMERCE_CATEGORY,
                "eventAction": ENHANCED_ECOMMERCE_ACTION,
                "nonInteraction": True,
            },
        )
        return self._handle_event(bundle, settings)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _send(
        self, hit_type: str, fields: Dict[str, Any], settings: GoogleAnalyticsSettings
    ) -> Command:
        bag = _compact({**fields, "hitType": hit_type})
        return self._with_hit_fields(Command(name="send", args=[bag]), settings)

    def _with_hit_fields(self, command: Command, settings: GoogleAnalyticsSettings) -> Command:
        """Attach settings-level fields to the command's field bag."""
        for bag in command.field_bags():
            if settings.user_id:
                bag["userId"] = settings.user_id
            if settings.transport is not None:
                bag["transport"] = settings.transport.value
        return command


class ClassicTranslator(CommandTranslator):
    """ga.js syntax: ``_gaq.push([command, ...positional values])``.

    Classic Analytics has no field bags, custom dimensions, transport or
    plugins. ``setUserProperties`` is therefore absent from the table.
    """

    protocol = "Classic"

    def __init__(self) -> None:
        """Wire the dispatch table."""
        super().__init__()
        self._handlers = {
            HitType.PAGEVIEW: self._handle_pageview,
            HitType.EVENT: self._handle_event,
            HitType.EXCEPTION: self._handle_event,
            HitType.TIMING: self._handle_timing,
            HitType.ECOMMERCE_REQUIRE: self._handle_require,
            HitType.ECOMMERCE_ADD_TRANSACTION: self._handle_add_transaction,
            HitType.ECOMMERCE_ADD_ITEM: self._handle_add_item,
            HitType.ECOMMERCE_SEND: self._handle_ecommerce_send,
        }

    def _handle_pageview(
        self, hit: HitDescriptor, settings: GoogleAnalyticsSettings
    ) -> List[Command]:
        return [Command(name="_trackPageview", args=[hit.get("page")])]

    def _handle_event(self, hit: HitDescriptor, settings: GoogleAnalyticsSettings) -> List[Command]:
        return [
            Command(
                name="_trackEvent",
                args=[
                    hit.get("eventCategory"),
                    hit.get("eventAction"),
                    hit.get("eventLabel"),
                    hit.get("eventValue"),
                    hit.get("nonInteraction"),
                ],
            )
        ]

    def _handle_timing(
        self, hit: HitDescriptor, settings: GoogleAnalyticsSettings
    ) -> List[Command]:
        return [
            Command(
                name="_trackTiming",
                args=[
                    hit.get("timingCategory"),
                    hit.get("timingVar"),
                    hit.get("timingValue"),
                    hit.get("timingLabel"),
                    hit.get("optSampleRate"),
                ],
            )
        ]

    def _handle_require(
        self, hit: HitDescriptor, settings: GoogleAnalyticsSettings
    ) -> List[Command]:
        # ga.js ships ecommerce built in
        return []

    def _handle_add_transaction(
        self, hit: HitDescriptor, settings: GoogleAnalyticsSettings
    ) -> List[Command]:
        return [
            Command(
                name="_addTrans",
                args=[
                    hit.get("id"),
                    hit.get("affiliation"),
                    hit.get("revenue"),
                    hit.get("tax"),
                    hit.get("shipping"),
                    hit.get("billingCity"),
                    hit.get("billingRegion"),
                    hit.get("billingCountry"),
                ],
            )
        ]

    def _handle_add_item(
        self, hit: HitDescriptor, settings: GoogleAnalyticsSettings
    ) -> List[Command]:
        return [
            Command(
                name="_addItem",
                args=[
                    hit.get("transactionId"),
                    hit.get("id"),
                    hit.get("name"),
                    hit.get("category"),
                    hit.get("price"),
                    hit.get("quantity"),
                ],
            )
        ]

    def _handle_ecommerce_send(
        self, hit: HitDescriptor, settings: GoogleAnalyticsSettings
    ) -> List[Command]:
        commands = []
        currency_code = hit.get("currencyCode")
        if currency_code:
            commands.append(Command(name="_set", args=["currencyCode", currency_code]))
        commands.append(Command(name="_trackTrans"))
        return commands


def translator_for(kind: BackendKind) -> CommandTranslator:
    """Return the translator for a backend kind.

    Raises:
        UnsupportedOperationError: For ``BackendKind.NONE``, which has no protocol.
    """
    if kind is BackendKind.UNIVERSAL:
        return UniversalTranslator()
    if kind is BackendKind.CLASSIC:
        return ClassicTranslator()
    raise UnsupportedOperationError("*", kind.value)
