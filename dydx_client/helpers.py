"""Small request helpers shared by the clients."""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping
from urllib.parse import urlencode


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def generate_query_path(path: str, params: Mapping[str, Any]) -> str:
    """Append ``params`` to ``path`` as a query string.

    ``None`` values are dropped entirely; empty strings are kept and sent as
    ``key=``. Parameter order follows ``params``.
    """
    entries = [(key, _format_value(value)) for key, value in params.items() if value is not None]
    if not entries:
        return path
    return f"{path}?{urlencode(entries)}"


def strip_hex_prefix(value: str) -> str:
    if value.startswith(("0x", "0X")):
        return value[2:]
    return value


def path_segment(value: Any) -> str:
    """Render a market identifier (plain string or enum) for a URL path."""
    return _format_value(value)
