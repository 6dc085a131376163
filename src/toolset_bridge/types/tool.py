"""
Tool-call shapes exchanged with the provider.

``ToolCallRequest`` is the bridge's own view of a call; the TypedDicts mirror
the OpenAI wire format field for field so they can be handed to the client
as-is.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, Mapping, TypedDict

__all__ = ["FunctionDefinition", "ToolSchema", "ToolCallRequest", "ToolOutput"]


class FunctionDefinition(TypedDict):
    name: str
    description: str
    parameters: Mapping[str, Any]


class ToolSchema(TypedDict):
    """``{"type": "function", "function": {...}}`` as accepted by ``tools=``."""
    type: Literal["function"]
    function: FunctionDefinition


class ToolOutput(TypedDict):
    """One entry of ``tool_outputs`` for ``runs.submit_tool_outputs``."""
    tool_call_id: str
    output: str


@dataclass(frozen=True, slots=True)
class ToolCallRequest:
    """A request emitted by the model to run one toolset action."""
    id: str
    name: str
    arguments: str  # raw JSON text, exactly as the provider sent it

    def parse_arguments(self) -> Any:
        """Decode the argument payload; ``json.JSONDecodeError`` propagates."""
        return json.loads(self.arguments)
