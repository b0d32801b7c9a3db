"""Key and value conversion between event dicts and the dataclass model."""

from __future__ import annotations

import enum
import re
from datetime import date
from typing import Any

_CAMEL_TO_SNAKE = re.compile(r"(?<=[a-z0-9])([A-Z])")
_SNAKE_TO_CAMEL = re.compile(r"_([a-z])")


def _to_snake(name: str) -> str:
    return _CAMEL_TO_SNAKE.sub(r"_\1", name).lower()


def _to_camel(name: str) -> str:
    return _SNAKE_TO_CAMEL.sub(lambda m: m.group(1).upper(), name)


def decamelize_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Return a shallow copy of ``data`` with snake_case keys.

    Nested values are left alone; the recurrence pattern is decoded by its
    own ``from_dict``.
    """
    return {_to_snake(k): v for k, v in data.items()}


def to_plain(value: Any) -> Any:
    """Convert a model value into JSON-friendly primitives with camelCase keys.

    Dates become ISO strings, enums their value, tuples lists. ``None``
    entries are dropped from dicts.
    """
    if isinstance(value, dict):
        return {
            _to_camel(k): to_plain(v) for k, v in value.items() if v is not None
        }
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    return value
