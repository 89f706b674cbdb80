from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable

# Never leaves the server.
_HIDDEN_FIELDS = {"password_hash"}


def to_dict(instance: Any) -> dict:
    """Convert a domain dataclass into a JSON-friendly dict."""
    if not is_dataclass(instance):
        raise TypeError(f"Expected a dataclass instance, got {type(instance)!r}")

    output = {}
    for f in fields(instance):
        if f.name in _HIDDEN_FIELDS:
            continue
        value = getattr(instance, f.name)
        if isinstance(value, Enum):
            output[f.name] = value.value
        elif isinstance(value, (datetime, date)):
            output[f.name] = value.isoformat()
        else:
            output[f.name] = value
    return output


def to_dict_list(items: Iterable[Any]) -> list[dict]:
    return [to_dict(item) for item in items]
