"""
Exceptions raised by toolset-bridge itself.

Errors coming from the toolset (action execution) or from the OpenAI client
(transport, auth, rate limits) are never wrapped: they reach the caller
unchanged. The classes below only cover conditions the bridge detects on its
own.
"""

from __future__ import annotations

from typing import Any

__all__: tuple[str, ...] = (
    "ToolsetBridgeError",
    "ProviderShapeError",
    "RunWaitError",
    "RunWaitTimeoutError",
    "RunWaitCancelledError",
    "MissingAPIKeyError",
)


class ToolsetBridgeError(Exception):
    """Base class for every error raised by the bridge."""


class ProviderShapeError(ToolsetBridgeError, ValueError):
    """Raised when a descriptor, tool call or run lacks a field the bridge reads."""


class RunWaitError(ToolsetBridgeError):
    """Common base for waits that stopped before the run reached a terminal status.

    Attributes:
        run: The last run object observed before giving up.
    """

    run: Any

    def __init__(self, message: str, run: Any) -> None:
        super().__init__(message)
        self.run = run


class RunWaitTimeoutError(RunWaitError, TimeoutError):
    """The poll timeout or attempt ceiling was reached."""


class RunWaitCancelledError(RunWaitError):
    """The caller set the cancel event while the run was still pending."""


class MissingAPIKeyError(ToolsetBridgeError, RuntimeError):
    """No OpenAI API key was passed and none is present in the environment."""
