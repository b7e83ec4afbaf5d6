"""Helpers that turn pydantic error lists into human-readable messages."""

from collections.abc import Iterable, Mapping
from typing import Any

_TRANSPORT_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})


def summarize_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, str]:
    """Collapse pydantic error dicts into ``{dotted.location: message}``.

    Only the first message per location is kept.
    """
    messages: dict[str, str] = {}
    for error in errors:
        parts = [str(p) for p in error.get("loc", ()) if p not in _TRANSPORT_LOCATIONS]
        key = ".".join(parts) or "body"
        messages.setdefault(key, str(error.get("msg", "Invalid value")))
    return messages


def format_errors(messages: Mapping[str, str], prefix: str = "Validation error") -> str:
    """Render ``{key: message}`` as one line naming every offending key."""
    if not messages:
        return prefix
    details = "; ".join(f'{message} at "{key}"' for key, message in messages.items())
    return f"{prefix}: {details}"
