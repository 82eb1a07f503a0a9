"""Helpers shared by the wire models."""

from typing import Any

_EMPTY_VALUES: tuple[Any, ...] = (None, "")


def compact_payload(payload: dict[str, Any], required: tuple[str, ...] = ()) -> dict[str, Any]:
    """Drop unset optional keys from a request body.

    A key is unset when its value is None, an empty string or an empty
    list/dict. Keys named in ``required`` are always kept.
    """
    result: dict[str, Any] = {}
    for key, value in payload.items():
        if key not in required:
            if value in _EMPTY_VALUES:
                continue
            if isinstance(value, (list, dict)) and not value:
                continue
        result[key] = value
    return result
