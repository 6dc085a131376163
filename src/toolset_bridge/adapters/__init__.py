"""Pure transformation adapters between toolset and provider shapes."""

from .openai import OpenAIToolAdapter

__all__ = [
    "OpenAIToolAdapter",
]
