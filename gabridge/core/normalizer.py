"""Field normalization helpers shared by the tracker and the translators."""

import re
from typing import Any, Callable, Dict, Mapping, Optional

CUSTOM_DATA_PREFIXES = ("dimension", "metric")

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def custom_data(properties: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Extract custom dimensions and metrics from a property bag.

    Keys qualify on a plain prefix match, so ``dimension1``, ``metric155`` and
    ``dimensionFoo`` are all kept. The input is never modified.

    Args:
        properties: Arbitrary properties from a tracking call, or None.

    Returns:
        A new dict holding only the custom dimension/metric entries.
    """
    if not properties:
        return {}
    return {
        key: value
        for key, value in properties.items()
        if isinstance(key, str) and key.startswith(CUSTOM_DATA_PREFIXES)
    }


def parse_int(value: Any) -> int:
    """Coerce ``value`` to an int the way ``parseInt(value, 10)`` would.

    The leading integer of the textual form wins ("3" -> 3, "12px" -> 12,
    7.9 -> 7); anything without one coerces to 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def coerce_non_interaction(properties: Mapping[str, Any]) -> Any:
    """Read ``nonInteraction``, falling back to the lowercase ``noninteraction`` alias."""
    if "nonInteraction" in properties:
        return properties["nonInteraction"]
    return properties.get("noninteraction")


def coerce_hit_callback(value: Any) -> Optional[Callable[..., Any]]:
    """Keep ``hitCallback`` only when it is callable."""
    return value if callable(value) else None
