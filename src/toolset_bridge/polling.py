"""Bounded, cancellable pacing for run status polling."""
from __future__ import annotations

import asyncio
from typing import Any, Optional

from toolset_bridge.config import PollSettings
from toolset_bridge.errors import RunWaitCancelledError, RunWaitTimeoutError

__all__ = ["RunPoller"]


class RunPoller:
    """
    Tracks one wait: attempts spent, deadline, and the caller's cancel event.

    ``before_request`` is called ahead of every provider round trip and
    ``pause`` between status checks. Both raise as soon as the wait has been
    cancelled or has run out of budget.
    """

    def __init__(
        self,
        settings: PollSettings,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> None:
        self.settings = settings
        self.cancel_event = cancel_event
        self.attempts = 0
        self._loop = asyncio.get_running_loop()
        self._deadline = (
            None if settings.timeout is None else self._loop.time() + settings.timeout
        )

    @property
    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()

    def remaining(self) -> Optional[float]:
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self._loop.time())

    def before_request(self, run: Any) -> None:
        if self.cancelled:
            raise RunWaitCancelledError("wait for run cancelled", run)

        max_attempts = self.settings.max_attempts
        if max_attempts is not None and self.attempts >= max_attempts:
            raise RunWaitTimeoutError(
                f"run still pending after {self.attempts} attempts", run
            )

        remaining = self.remaining()
        if remaining is not None and remaining <= 0:
            raise RunWaitTimeoutError(
                f"run still pending after {self.settings.timeout}s", run
            )

        self.attempts += 1

    async def pause(self, run: Any) -> None:
        delay = self.settings.interval
        remaining = self.remaining()
        if remaining is not None:
            delay = min(delay, remaining)

        if self.cancel_event is None:
            await asyncio.sleep(delay)
            return

        try:
            await asyncio.wait_for(self.cancel_event.wait(), timeout=delay)
        except TimeoutError:
            return
        raise RunWaitCancelledError("wait for run cancelled", run)
