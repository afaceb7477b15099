"""Pydantic models shared across the insight pipeline."""

from biminsight.models.gemini import GenerateContentRequest, GenerateContentResponse
from biminsight.models.result import CommandResult, CommandStatus
from biminsight.models.wall import WallRecord

__all__ = [
    "CommandResult",
    "CommandStatus",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "WallRecord",
]
