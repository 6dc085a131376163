from .action import ActionDescriptor
from .run import PENDING_STATUSES, RunStatus
from .tool import FunctionDefinition, ToolCallRequest, ToolOutput, ToolSchema

__all__ = [
    "ActionDescriptor",
    "FunctionDefinition",
    "PENDING_STATUSES",
    "RunStatus",
    "ToolCallRequest",
    "ToolOutput",
    "ToolSchema",
]
