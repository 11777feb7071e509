"""Data models for git-utils."""

from git_utils.models.state import RunConfig

__all__ = ["RunConfig"]
