"""Field access that works on both ``openai`` models and plain dicts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_MISSING: Any = object()


def get_field(obj: Any, name: str, default: Any = _MISSING) -> Any:
    """Read *name* from a mapping key or an attribute.

    Raises ``KeyError`` when the field is absent and no default is given.
    """
    if isinstance(obj, Mapping):
        if name in obj:
            return obj[name]
    elif hasattr(obj, name):
        return getattr(obj, name)

    if default is _MISSING:
        raise KeyError(name)
    return default
