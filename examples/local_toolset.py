"""A tiny in-process toolset used by the examples."""

from __future__ import annotations

from typing import Any, Optional, Sequence

WEATHER_ACTION: dict[str, object] = {
    "name": "WEATHER_GET_CURRENT",
    "description": "Get the current weather in a given location",
    "parameters": {
        "type": "object",
        "properties": {
            "location": {
                "type": "string",
                "description": "City and state, e.g. San Francisco, CA",
            },
            "unit": {"type": "string", "enum": ["celsius", "fahrenheit"]},
        },
        "required": ["location"],
    },
}


class LocalToolset:
    """Serves one stub weather action."""

    async def get_actions_schema(
        self, *, actions: Optional[Sequence[str]] = None, entity_id: Optional[str] = None
    ) -> list[dict[str, object]]:
        if actions is None or WEATHER_ACTION["name"] in actions:
            return [WEATHER_ACTION]
        return []

    async def get_tools_schema(
        self,
        *,
        apps: Sequence[str],
        tags: Optional[Sequence[str]] = None,
        use_case: Optional[str] = None,
        entity_id: Optional[str] = None,
    ) -> list[dict[str, object]]:
        return [WEATHER_ACTION] if "weather" in apps else []

    async def execute_action(self, action: str, params: Any, entity_id: str) -> dict[str, Any]:
        # imagine we call a real weather API here
        return {"successful": True, "data": {"location": params["location"], "forecast": "15 °C, mostly cloudy"}}
