"""
Toolset Bridge - OpenAI function-calling binding for toolset engines.
"""

import logging

from .openai_toolset import OpenAIToolSet
from .adapters import OpenAIToolAdapter
from .config import PollSettings
from .errors import (
    MissingAPIKeyError,
    ProviderShapeError,
    RunWaitCancelledError,
    RunWaitError,
    RunWaitTimeoutError,
    ToolsetBridgeError,
)
from .factory import create_openai_client, create_toolset
from .toolset import BaseToolset
from .types import (
    ActionDescriptor,
    RunStatus,
    ToolCallRequest,
    ToolOutput,
    ToolSchema,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "OpenAIToolSet",
    "OpenAIToolAdapter",
    "BaseToolset",
    "PollSettings",
    "create_openai_client",
    "create_toolset",
    "ActionDescriptor",
    "RunStatus",
    "ToolCallRequest",
    "ToolOutput",
    "ToolSchema",
    "ToolsetBridgeError",
    "ProviderShapeError",
    "RunWaitError",
    "RunWaitTimeoutError",
    "RunWaitCancelledError",
    "MissingAPIKeyError",
]
