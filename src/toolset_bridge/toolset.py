"""
Contract of the toolset engine the bridge delegates to.

The toolset owns action discovery, execution, auth and workspaces. The
bridge only needs the three calls below; they may be coroutines or plain
functions.
"""
from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable

__all__ = ["BaseToolset", "call_toolset"]


@runtime_checkable
class BaseToolset(Protocol):
    """Protocol for the toolset engine behind the provider adapter."""

    def get_actions_schema(
        self,
        *,
        actions: Optional[Sequence[str]] = None,
        entity_id: Optional[str] = None,
    ) -> Any:
        """Return descriptors for the named actions (all actions when ``None``)."""
        ...

    def get_tools_schema(
        self,
        *,
        apps: Sequence[str],
        tags: Optional[Sequence[str]] = None,
        use_case: Optional[str] = None,
        entity_id: Optional[str] = None,
    ) -> Any:
        """Return descriptors selected by app, tag and use case."""
        ...

    def execute_action(self, action: str, params: Any, entity_id: str) -> Any:
        """Run one action and return its JSON-serializable result."""
        ...


async def call_toolset(method: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Any:
    """
    Invoke a toolset method from async code.

    Coroutine functions are awaited directly. Plain functions run in a worker
    thread so concurrent tool executions do not block each other; an
    awaitable returned by a plain function is awaited as well.
    """
    if inspect.iscoroutinefunction(method):
        return await method(*args, **kwargs)

    result = await asyncio.to_thread(method, *args, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result
