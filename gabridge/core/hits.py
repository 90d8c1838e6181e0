"""Canonical hit and command models.

A ``HitDescriptor`` is the backend-agnostic shape of one outgoing hit; the
translators turn it into ``Command`` values that a backend delivers verbatim.
``Transaction`` and ``Product`` validate ecommerce payloads before any hit is
built from them.
"""

import copy
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from gabridge.core.config.enums import HitType
from gabridge.core.normalizer import custom_data


class HitDescriptor(BaseModel):
    """One canonical hit. Field names follow the Universal Analytics field reference."""

    model_config = ConfigDict(frozen=True)

    hit_type: HitType
    fields: Dict[str, Any] = Field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Shorthand for ``fields.get``."""
        return self.fields.get(key, default)


class Command(BaseModel):
    """Backend-native command: a command name followed by positional arguments.

    Universal delivery is ``ga(name, *args)``; Classic delivery is
    ``_gaq.push([name, *args])``. Arguments are strings, numbers, bools,
    field maps or None.
    """

    name: str
    args: List[Any] = Field(default_factory=list)

    def field_bags(self) -> Iterator[Dict[str, Any]]:
        """Yield every field map among the arguments."""
        for arg in self.args:
            if isinstance(arg, dict):
                yield arg

    def namespaced(self, account_name: str) -> "Command":
        """Return an independent copy addressed to the named tracker."""
        return Command(name=f"{account_name}.{self.name}", args=copy.deepcopy(self.args))

    def as_call_args(self) -> tuple:
        return (self.name, *self.args)

    def as_queue_entry(self) -> list:
        return [self.name, *self.args]


class _EcommerceModel(BaseModel):
    """Accepts camelCase keys, keeps unknown keys (custom data, extras) as-is."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    @property
    def custom_dimensions_metrics(self) -> Dict[str, Any]:
        return custom_data(self.model_extra or {})


class Product(_EcommerceModel):
    """A purchased product. Values pass through as given."""

    id: Optional[Any] = None
    name: Optional[Any] = None
    price: Optional[Any] = None
    brand: Optional[Any] = None
    category: Optional[Any] = None
    variant: Optional[Any] = None
    quantity: Optional[Any] = None
    coupon: Optional[Any] = None
    currency_code: Optional[Any] = None

    def fields(self) -> Dict[str, Any]:
        """Product fields keyed by their wire names, without empty values."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Transaction(_EcommerceModel):
    """A completed purchase and its products."""

    id: Any
    affiliation: Optional[Any] = None
    revenue: Optional[Any] = None
    tax: Optional[Any] = None
    shipping: Optional[Any] = None
    coupon: Optional[Any] = None
    currency_code: Optional[Any] = None
    billing_city: Optional[Any] = None
    billing_region: Optional[Any] = None
    billing_country: Optional[Any] = None
    products: List[Product] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def _id_required(cls, value: Any) -> Any:
        if value is None or value == "":
            raise ValueError("transaction id is required")
        return value

    @field_validator("products", mode="before")
    @classmethod
    def _none_means_no_products(cls, value: Any) -> Any:
        return [] if value is None else value

    def fields(self) -> Dict[str, Any]:
        """Transaction-level fields keyed by their wire names, products excluded."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude={"products"})
