"""Miscellaneous helper functions."""

from __future__ import annotations

import datetime as dt
import re
from typing import Any, Iterable, Mapping, Optional
from urllib.parse import urlparse

# Location prefixes FastAPI puts in front of request validation errors
_LOC_SOURCES = {"body", "path", "query", "header", "cookie"}


def parse_iso_datetime(value: str | None) -> Optional[dt.datetime]:
    """Parse an ISO8601 datetime string into a :class:`datetime` object.

    The standard ``datetime.fromisoformat`` helper does not accept a lowercase
    ``z`` as the UTC designator. Some clients send timestamps that end
    with ``z`` instead of the canonical ``Z``. This function normalises that
    case and returns ``None`` if the value cannot be parsed.
    """
    if not value:
        return None
    try:
        if value.endswith("z"):
            value = value[:-1] + "Z"
        return dt.datetime.fromisoformat(value)
    except ValueError:
        return None


def format_error_location(loc: Iterable[Any]) -> str:
    """Render a pydantic error ``loc`` tuple as ``items[0].name`` style text."""
    parts = list(loc)
    if parts and parts[0] in _LOC_SOURCES:
        parts = parts[1:]
    out = ""
    for part in parts:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out


def format_validation_error(errors: Iterable[Mapping[str, Any]]) -> str:
    """Turn a list of pydantic errors into one human-readable message.

    >>> format_validation_error([{"loc": ("body", "email"), "msg": "bad"}])
    'Validation error: bad at "email"'
    """
    details = []
    for err in errors:
        msg = err.get("msg", "Invalid value")
        # JSON decode errors carry a character offset, not a field path
        if err.get("type") == "json_invalid":
            details.append(msg)
            continue
        where = format_error_location(err.get("loc", ()))
        details.append(f'{msg} at "{where}"' if where else msg)
    if not details:
        return "Validation error"
    return "Validation error: " + "; ".join(details)


def product_name_from_url(url: str) -> str:
    """Derive a display label from the last path segment of ``url``.

    ``https://example.com/store/cool-blue-widget`` -> ``Cool Blue Widget``
    """
    last = urlparse(url).path.split("/")[-1]
    label = last.replace("-", " ")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), label)
