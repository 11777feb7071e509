"""Repository handle: one git invocation per operation."""

from typing import Protocol

from git_utils.git.command import run
from git_utils.git.errors import DetachedHead, ExternalToolError, NotARepository


class Repository(Protocol):
    """Narrow repository operations used by the branch workflow."""

    @property
    def path(self) -> str: ...

    def current_branch(self) -> str:
        """Return the short name of the checked-out branch."""
        ...

    def branch_exists(self, name: str) -> bool:
        """Return True if a local branch named ``name`` exists."""
        ...

    def create_branch(self, name: str, from_branch: str) -> str:
        """Create ``name`` at ``from_branch`` and switch to it."""
        ...


class GitRepository:
    """Working copy bound to a path, backed by the git binary.

    Build with ``GitRepository.open`` so the path is validated first.
    Holds no state beyond the path; every call is a fresh subprocess.
    """

    def __init__(self, path: str, binary: str = "git"):
        self._path = str(path)
        self._binary = binary

    @classmethod
    def open(cls, path: str, binary: str = "git") -> "GitRepository":
        """Validate ``path`` with a no-op ``git rev-parse`` and wrap it."""
        try:
            run([binary, "-C", str(path), "rev-parse"])
        except ExternalToolError as e:
            raise NotARepository(
                f"{path} is not a git repository: {e}",
                stderr=e.stderr,
                context={"path": str(path)},
            ) from e
        return cls(path, binary=binary)

    @property
    def path(self) -> str:
        return self._path

    def _git(self, *args: str) -> str:
        return run([self._binary, "-C", self._path, *args])

    def current_branch(self) -> str:
        branch = self._git("rev-parse", "--abbrev-ref", "HEAD")
        # rev-parse prints the literal "HEAD" when nothing is checked out by name
        if not branch or branch == "HEAD":
            raise DetachedHead(
                f"{self._path} is not on a branch (detached HEAD)",
                context={"path": self._path},
            )
        return branch

    def branch_exists(self, name: str) -> bool:
        ref = f"refs/heads/{name}"
        output = self._git("show-ref", ref)
        # show-ref matches on trailing path components, so filter to the exact ref
        return any(line.split(" ", 1)[-1] == ref for line in output.splitlines())

    def create_branch(self, name: str, from_branch: str) -> str:
        return self._git("checkout", "-b", name, from_branch)
