"""Git operations for safe branch creation."""

from git_utils.git.branch import Git
from git_utils.git.command import CommandResult, classify, execute, run
from git_utils.git.errors import (
    BranchAlreadyExists,
    ConfigError,
    DetachedHead,
    ExecutionError,
    ExternalToolError,
    GitUtilsError,
    NotARepository,
    PolicyViolation,
)
from git_utils.git.repository import GitRepository, Repository

__all__ = [
    # Command
    "CommandResult",
    "execute",
    "classify",
    "run",
    # Repository
    "Repository",
    "GitRepository",
    # Workflow
    "Git",
    # Errors
    "GitUtilsError",
    "ExecutionError",
    "ExternalToolError",
    "NotARepository",
    "DetachedHead",
    "PolicyViolation",
    "BranchAlreadyExists",
    "ConfigError",
]
