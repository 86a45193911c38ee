"""Analysis-related exceptions: git invocation failures."""

from typing import Optional, Sequence

from .base import ThrashInsightError


class AnalysisError(ThrashInsightError):
    """Base class for analysis-related errors."""
    pass


class GitCommandError(AnalysisError):
    """Raised when a git invocation cannot be run or exits non-zero."""

    def __init__(
        self,
        command: Sequence[str],
        reason: str,
        returncode: Optional[int] = None,
    ):
        details = {"command": " ".join(command), "reason": reason}
        if returncode is not None:
            details["returncode"] = str(returncode)

        super().__init__(f"git command failed: {' '.join(command[:4])}", details=details)
        self.command = list(command)
        self.reason = reason
        self.returncode = returncode
