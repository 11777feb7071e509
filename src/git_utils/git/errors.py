"""Error taxonomy for git operations."""

from __future__ import annotations

from typing import Any, Dict, Mapping


class GitUtilsError(Exception):
    """Base exception for git-utils."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = dict(context) if context is not None else {}


class ExecutionError(GitUtilsError):
    """Raised when the external tool could not be launched at all."""


class ExternalToolError(GitUtilsError):
    """Raised when the external tool ran and reported a failure."""

    def __init__(
        self,
        message: str = "",
        *,
        stderr: str = "",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.stderr = stderr or message


class NotARepository(ExternalToolError):
    """Raised when a path is not a working copy git recognizes."""


class DetachedHead(ExternalToolError):
    """Raised when HEAD does not point at a branch."""


class PolicyViolation(GitUtilsError):
    """Raised when a locally enforced precondition fails."""


class BranchAlreadyExists(PolicyViolation):
    """Raised when the branch to create is already present."""

    def __init__(self, branch: str) -> None:
        super().__init__(f"Branch {branch} already exists!", context={"branch": branch})
        self.branch = branch


class ConfigError(GitUtilsError):
    """Raised when a config file cannot be parsed or holds bad values."""
