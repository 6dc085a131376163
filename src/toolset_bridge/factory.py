from __future__ import annotations

import logging
from typing import Optional

from openai import AsyncOpenAI

from toolset_bridge.config import PollSettings, get_api_key
from toolset_bridge.openai_toolset import OpenAIToolSet
from toolset_bridge.toolset import BaseToolset

__all__ = ["create_openai_client", "create_toolset"]


def create_openai_client(
    api_key: str | None = None,
    *,
    timeout: float = 60.0,
    max_retries: int = 2,
    base_url: Optional[str] = None,
) -> AsyncOpenAI:
    """
    Build the ``AsyncOpenAI`` client callers hand to the toolset.

    Args:
        api_key: Overrides automatic lookup; if omitted, pulled from env.
        timeout: Per-request timeout in seconds.
        max_retries: Retries performed by the OpenAI client itself.
        base_url: Alternative endpoint (proxies, Azure-style gateways).
    """
    key = api_key or get_api_key()
    return AsyncOpenAI(
        api_key=key,
        timeout=timeout,
        max_retries=max_retries,
        base_url=base_url,
    )


def create_toolset(
    toolset: BaseToolset,
    *,
    entity_id: str | None = None,
    poll: PollSettings | None = None,
    logger: logging.Logger | None = None,
    name: str | None = None,
) -> OpenAIToolSet:
    """
    Factory for the OpenAI binding of *toolset*.

    Raises TypeError when *toolset* does not provide the toolset methods.
    """
    if not isinstance(toolset, BaseToolset):
        raise TypeError(
            f"create_toolset expects a BaseToolset; got {type(toolset).__name__}"
        )
    return OpenAIToolSet(toolset, entity_id=entity_id, poll=poll, logger=logger, name=name)
