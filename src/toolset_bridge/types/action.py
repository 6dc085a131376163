"""
Provider-neutral description of a toolset action.

The toolset owns the actual schemas; this module only pins down the three
fields the bridge forwards to the provider.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from toolset_bridge.errors import ProviderShapeError
from toolset_bridge.types._access import get_field

__all__ = ["ActionDescriptor"]


@dataclass(frozen=True, slots=True)
class ActionDescriptor:
    """An action as reported by the toolset: name, description, JSON schema."""
    name: str
    description: str
    parameters: Mapping[str, Any]

    @classmethod
    def from_raw(cls, raw: Any) -> ActionDescriptor:
        """
        Build a descriptor from whatever the toolset returned.

        Accepts an ``ActionDescriptor``, a mapping, or any object exposing
        ``name``/``description``/``parameters`` attributes. The parameters
        schema is passed through untouched; only its type is checked.

        Raises:
            ProviderShapeError: if ``name`` is missing or empty, or
                ``parameters`` is not a mapping.
        """
        if isinstance(raw, cls):
            return raw

        name = get_field(raw, "name", None)
        if not isinstance(name, str) or not name:
            raise ProviderShapeError(f"action descriptor needs a non-empty name, got {name!r}")

        description = get_field(raw, "description", None)
        if description is None:
            description = ""
        elif not isinstance(description, str):
            raise ProviderShapeError(f"description of action {name!r} must be a string")

        parameters = get_field(raw, "parameters", None)
        if parameters is None:
            parameters = {}
        elif not isinstance(parameters, Mapping):
            raise ProviderShapeError(
                f"parameters of action {name!r} must be a schema object, "
                f"got {type(parameters).__name__}"
            )

        return cls(name=name, description=description, parameters=parameters)
