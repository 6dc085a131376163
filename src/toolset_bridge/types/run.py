"""Run status values and the few run/thread fields the bridge reads."""
from __future__ import annotations

from enum import StrEnum
from typing import Any, Final

from toolset_bridge.errors import ProviderShapeError
from toolset_bridge.types._access import get_field

__all__ = ["RunStatus", "PENDING_STATUSES", "run_status", "is_pending", "resource_id"]


class RunStatus(StrEnum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    REQUIRES_ACTION = "requires_action"
    CANCELLING = "cancelling"
    CANCELLED = "cancelled"
    FAILED = "failed"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"
    EXPIRED = "expired"


# Anything outside this set ends the polling loop, including statuses the
# provider adds later.
PENDING_STATUSES: Final[frozenset[str]] = frozenset(
    {RunStatus.QUEUED, RunStatus.IN_PROGRESS, RunStatus.REQUIRES_ACTION}
)


def run_status(run: Any) -> str:
    """Return the run's status string or raise ``ProviderShapeError``."""
    status = get_field(run, "status", None)
    if not isinstance(status, str):
        raise ProviderShapeError(f"run status must be a string, got {status!r}")
    return status


def is_pending(run: Any) -> bool:
    return run_status(run) in PENDING_STATUSES


def resource_id(obj: Any, kind: str) -> str:
    """Id of a run or thread; a bare string is taken as the id itself."""
    if isinstance(obj, str):
        value: Any = obj
    else:
        value = get_field(obj, "id", None)
    if not isinstance(value, str) or not value:
        raise ProviderShapeError(f"{kind} id must be a non-empty string, got {value!r}")
    return value
