"""OpenAI adapter for pure tool-schema and tool-call transformations."""

from __future__ import annotations

from typing import Any, Iterable

from toolset_bridge.errors import ProviderShapeError
from toolset_bridge.types import (
    ActionDescriptor,
    ToolCallRequest,
    ToolOutput,
    ToolSchema,
)
from toolset_bridge.types._access import get_field


class OpenAIToolAdapter:
    """Adapter for converting between toolset actions and OpenAI tool shapes."""

    def to_tool_schema(self, action: Any) -> ToolSchema:
        """Convert one action descriptor to an OpenAI function tool."""
        descriptor = ActionDescriptor.from_raw(action)
        return {
            "type": "function",
            "function": {
                "name": descriptor.name,
                "description": descriptor.description,
                "parameters": descriptor.parameters,
            },
        }

    def to_tool_schemas(self, actions: Iterable[Any] | None) -> list[ToolSchema]:
        """Convert every descriptor; ``None`` from the toolset means no actions."""
        if actions is None:
            return []
        return [self.to_tool_schema(action) for action in actions]

    def parse_tool_call(self, raw: Any) -> ToolCallRequest:
        """
        Read ``id``, ``function.name`` and ``function.arguments`` from a tool call.

        Works for ``ChatCompletionMessageToolCall``, the ``RequiredActionFunctionToolCall``
        found on runs, and their dict equivalents. Arguments stay as text here;
        decoding happens when the call is executed.
        """
        call_id = get_field(raw, "id", None)
        function = get_field(raw, "function", None)
        if function is None:
            raise ProviderShapeError(f"tool call {call_id!r} has no function payload")

        name = get_field(function, "name", None)
        arguments = get_field(function, "arguments", None)

        if not isinstance(call_id, str) or not call_id:
            raise ProviderShapeError(f"tool call id must be a non-empty string, got {call_id!r}")
        if not isinstance(name, str) or not name:
            raise ProviderShapeError(f"tool call {call_id!r} has no function name")
        if not isinstance(arguments, str):
            raise ProviderShapeError(
                f"arguments of tool call {call_id!r} must be a JSON string, "
                f"got {type(arguments).__name__}"
            )

        return ToolCallRequest(id=call_id, name=name, arguments=arguments)

    def first_tool_calls(self, completion: Any) -> list[ToolCallRequest]:
        """
        Return the first tool call of every choice that has any.

        Later tool calls in the same choice are not returned.
        """
        calls: list[ToolCallRequest] = []
        for choice in get_field(completion, "choices", None) or []:
            message = get_field(choice, "message", None)
            if message is None:
                continue
            tool_calls = get_field(message, "tool_calls", None)
            if tool_calls:
                calls.append(self.parse_tool_call(tool_calls[0]))
        return calls

    def required_tool_calls(self, run: Any) -> list[ToolCallRequest]:
        """Tool calls a run is waiting on; empty when there is no pending action."""
        required_action = get_field(run, "required_action", None)
        if required_action is None:
            return []
        submit = get_field(required_action, "submit_tool_outputs", None)
        if submit is None:
            return []
        return [self.parse_tool_call(tc) for tc in get_field(submit, "tool_calls", None) or []]

    def tool_output(self, call_id: str, output: str) -> ToolOutput:
        """Pair an output with the call that produced it."""
        return {"tool_call_id": call_id, "output": output}

    def tool_result_message(self, result: ToolOutput) -> dict[str, Any]:
        """
        Return the chat message OpenAI expects for a tool result.
        """
        return {
            "role": "tool",
            "tool_call_id": result["tool_call_id"],
            "content": result["output"],
        }
