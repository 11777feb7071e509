"""Branch creation workflow."""

from git_utils.git.errors import BranchAlreadyExists
from git_utils.git.repository import GitRepository, Repository
from git_utils.ui.output import Logger


class Git:
    """Creates branches in one working copy, narrating progress to ``log``.

    Not safe to run concurrently against the same working copy: git itself
    races on the checkout. Callers serialize their invocations.
    """

    def __init__(self, repository: Repository, log=None):
        self.repository = repository
        self.log = log if log is not None else Logger()

    @classmethod
    def open(
        cls, path: str, debug: bool = False, binary: str = "git", name: str = "git-utils"
    ) -> "Git":
        """Validate ``path`` as a working copy and bind a workflow to it."""
        repository = GitRepository.open(path, binary=binary)
        return cls(repository, Logger(debug, name))

    def _note(self, level: str, msg: str) -> None:
        """Send ``msg`` to the logger. Only ``info`` is required; logger errors are dropped."""
        try:
            emit = getattr(self.log, level, None)
            if emit is None and level != "debug":
                emit = self.log.info
            if emit is not None:
                emit(msg)
        except Exception:
            pass

    def new_branch(self, name: str) -> str:
        """Create ``name`` from the current branch and switch to it.

        Steps: existence check, read current branch, create. Any failure
        aborts immediately; nothing is mutated before the final step, so
        there is nothing to roll back. Returns a confirmation message.
        """
        self._note("info", f"checking existence of {name}")
        if self.repository.branch_exists(name):
            raise BranchAlreadyExists(name)

        current = self.repository.current_branch().strip()
        self._note("info", f"creating {name} from {current}")

        output = self.repository.create_branch(name, current)
        self._note("debug", f"git checkout -b {name} {current}: {output or '(no output)'}")

        message = f"{name} created from {current}"
        self._note("success", message)
        return message
