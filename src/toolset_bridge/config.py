"""
Environment-driven settings.

Values are read from the process environment after ``load_dotenv()`` so a
local ``.env`` file works the same as exported variables:

  OPENAI_API_KEY             key used by ``create_openai_client``
  TOOLSET_ENTITY_ID          entity actions run as (default "default")
  TOOLSET_POLL_INTERVAL      seconds between run status checks (default 0.5)
  TOOLSET_POLL_TIMEOUT       overall wait ceiling in seconds (unset: none)
  TOOLSET_POLL_MAX_ATTEMPTS  provider round trips per wait (unset: none)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional

from dotenv import load_dotenv

from toolset_bridge.errors import MissingAPIKeyError

load_dotenv()

__all__ = [
    "DEFAULT_ENTITY_ID",
    "DEFAULT_POLL_INTERVAL",
    "PollSettings",
    "get_api_key",
    "get_default_entity_id",
]

DEFAULT_ENTITY_ID: Final = "default"
DEFAULT_POLL_INTERVAL: Final = 0.5

API_KEY_ENV: Final = "OPENAI_API_KEY"
ENTITY_ID_ENV: Final = "TOOLSET_ENTITY_ID"
POLL_INTERVAL_ENV: Final = "TOOLSET_POLL_INTERVAL"
POLL_TIMEOUT_ENV: Final = "TOOLSET_POLL_TIMEOUT"
POLL_MAX_ATTEMPTS_ENV: Final = "TOOLSET_POLL_MAX_ATTEMPTS"


def get_api_key() -> str:
    """Return the OpenAI API key or raise MissingAPIKeyError."""
    try:
        key = os.environ[API_KEY_ENV]
    except KeyError as exc:
        raise MissingAPIKeyError(f"{API_KEY_ENV} missing") from exc
    if not key:
        raise MissingAPIKeyError(f"{API_KEY_ENV} is empty")
    return key


def get_default_entity_id() -> str:
    return os.environ.get(ENTITY_ID_ENV) or DEFAULT_ENTITY_ID


def _env_number(env: Mapping[str, str], name: str, kind: type) -> Optional[float | int]:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = kind(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a {kind.__name__}, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


@dataclass(frozen=True, slots=True)
class PollSettings:
    """How ``wait_and_handle_assistant_tool_calls`` paces and bounds its loop."""

    interval: float = DEFAULT_POLL_INTERVAL
    timeout: Optional[float] = None
    max_attempts: Optional[int] = None

    def __post_init__(self) -> None:
        if self.interval < 0:
            raise ValueError("poll interval must not be negative")
        if self.timeout is not None and self.timeout < 0:
            raise ValueError("poll timeout must not be negative")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> PollSettings:
        """Build settings from ``TOOLSET_POLL_*`` variables."""
        source = os.environ if env is None else env
        interval = _env_number(source, POLL_INTERVAL_ENV, float)
        return cls(
            interval=DEFAULT_POLL_INTERVAL if interval is None else interval,
            timeout=_env_number(source, POLL_TIMEOUT_ENV, float),
            max_attempts=_env_number(source, POLL_MAX_ATTEMPTS_ENV, int),
        )

    def override(
        self,
        *,
        interval: Optional[float] = None,
        timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
    ) -> PollSettings:
        """Copy with any non-None argument replacing the stored value."""
        return PollSettings(
            interval=self.interval if interval is None else interval,
            timeout=self.timeout if timeout is None else timeout,
            max_attempts=self.max_attempts if max_attempts is None else max_attempts,
        )
