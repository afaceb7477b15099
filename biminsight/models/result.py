"""CommandResult — what the command hands back to its host."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class CommandStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class CommandResult(BaseModel):
    """Outcome of one command run plus the dialog that was shown for it."""

    status: CommandStatus = CommandStatus.SUCCEEDED
    message: str = ""
    """Failure message for the host; empty on success."""

    title: str = ""
    body: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status is CommandStatus.SUCCEEDED
