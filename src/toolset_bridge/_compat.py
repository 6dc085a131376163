"""
Legacy camelCase entry points kept for callers ported from the JavaScript SDK.

Every alias logs a deprecation warning and forwards to the snake_case
method. Deleting this module and the mixin from ``OpenAIToolSet``'s bases
removes them without touching anything else.
"""
from __future__ import annotations

import functools
import logging
from typing import Any, Final

__all__ = ["DEPRECATED_ALIASES", "DeprecatedAliasesMixin"]

_logger = logging.getLogger(__name__)

DEPRECATED_ALIASES: Final[dict[str, str]] = {
    "getActions": "get_actions",
    "getTools": "get_tools",
    "executeToolCall": "execute_tool_call",
    "handleToolCall": "handle_tool_call",
    "handleAssistantMessage": "handle_assistant_message",
    "waitAndHandleAssistantToolCalls": "wait_and_handle_assistant_tool_calls",
}


class DeprecatedAliasesMixin:
    """Resolves the names in ``DEPRECATED_ALIASES`` to warning wrappers."""

    def __getattr__(self, name: str) -> Any:
        try:
            target = DEPRECATED_ALIASES[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

        method = getattr(self, target)
        logger: logging.Logger = self.__dict__.get("logger") or _logger

        @functools.wraps(method)
        async def alias(*args: Any, **kwargs: Any) -> Any:
            logger.warning("%s is deprecated, use %s instead", name, target)
            return await method(*args, **kwargs)

        return alias

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | DEPRECATED_ALIASES.keys())
