# This project was developed with assistance from AI tools.
"""Boundary coercion for loosely typed calculator input.

Pure functions that turn form-field strings, URL query values and host-page
payloads into the numbers and units the engine accepts. Nothing here raises:
unparseable numbers become NaN, malformed units become None.
"""

import logging
import math
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qs

from ..schemas.calculator import Unit

logger = logging.getLogger(__name__)

_NUMBER_NOISE = re.compile(r"[$,%\s]")


def to_number(value: Any) -> float:
    """Coerce a loosely typed value to float.

    Examples:
        >>> to_number("$650,000")
        650000.0
        >>> to_number("")
        0.0
        >>> math.isnan(to_number("abc"))
        True
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, int | float):
        try:
            return float(value)
        except OverflowError:
            # int beyond double range
            return math.copysign(math.inf, value)
    if isinstance(value, str):
        cleaned = _NUMBER_NOISE.sub("", value)
        if not cleaned:
            return 0.0
        try:
            return float(cleaned)
        except ValueError:
            return math.nan
    return math.nan


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-empty value among ``keys``.

    Query-string mappings hold lists; their first element is used.
    """
    for key in keys:
        value = data.get(key)
        if isinstance(value, list):
            value = value[0] if value else None
        if value is not None and value != "":
            return value
    return None


def normalize_unit(data: Mapping[str, Any] | None) -> Unit | None:
    """Build a Unit from an untrusted mapping, or None if the price is unusable."""
    if not data:
        return None

    price = to_number(_first(data, "price"))
    if not math.isfinite(price) or price <= 0:
        logger.debug("Rejecting unit with unusable price: %r", data.get("price"))
        return None

    tax_rate = None
    raw_rate = _first(data, "tax_rate", "taxRate")
    if raw_rate is not None:
        rate = to_number(raw_rate)
        if math.isfinite(rate) and rate >= 0:
            tax_rate = rate

    return Unit(
        price=price,
        tax_rate=tax_rate,
        unit_id=str(_first(data, "unit_id", "unitId") or ""),
        plan=str(_first(data, "plan") or ""),
    )


def unit_from_query(query: str | Mapping[str, Any]) -> Unit | None:
    """Decode a unit from URL query parameters (``?price=650000&unit_id=Lot-12``)."""
    if isinstance(query, str):
        params: Mapping[str, Any] = parse_qs(query.lstrip("?"))
    else:
        params = query
    if _first(params, "price") is None:
        return None
    return normalize_unit(params)
