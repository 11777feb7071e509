"""Shared test fixtures."""

import shutil
import subprocess

import pytest

from git_utils.git.errors import DetachedHead


class FakeRepository:
    """In-memory stand-in for GitRepository."""

    def __init__(self, branches=None, current="main", path="/repo"):
        self._path = path
        self.branches = set(branches or [current])
        self.current = current
        self.calls = []

    @property
    def path(self) -> str:
        return self._path

    def current_branch(self) -> str:
        self.calls.append(("current_branch",))
        if self.current is None:
            raise DetachedHead("not on a branch")
        return self.current

    def branch_exists(self, name: str) -> bool:
        self.calls.append(("branch_exists", name))
        return name in self.branches

    def create_branch(self, name: str, from_branch: str) -> str:
        self.calls.append(("create_branch", name, from_branch))
        self.branches.add(name)
        self.current = name
        return ""


class RecordingLogger:
    """Logger double that keeps every message in order."""

    def __init__(self):
        self.messages = []
        self.debug_entries = []

    def info(self, msg):
        self.messages.append(msg)

    def success(self, msg):
        self.messages.append(msg)

    def debug(self, msg):
        self.debug_entries.append(msg)


@pytest.fixture
def fake_repo():
    return FakeRepository()


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def reset_config_cache():
    import git_utils.config.settings as settings

    settings._config = None
    settings._loaded_sources = []
    yield
    settings._config = None
    settings._loaded_sources = []


@pytest.fixture
def git_repo(tmp_path):
    """Real git working copy with one commit on ``main``."""
    if shutil.which("git") is None:
        pytest.skip("git not installed")

    repo = tmp_path / "repo"
    repo.mkdir()

    def git(*args):
        subprocess.run(["git", "-C", str(repo), *args], check=True, capture_output=True)

    git("init", "-q")
    git("symbolic-ref", "HEAD", "refs/heads/main")
    git("config", "user.email", "test@example.com")
    git("config", "user.name", "Test")
    git("config", "commit.gpgsign", "false")
    (repo / "README").write_text("hello\n")
    git("add", "README")
    git("commit", "-q", "-m", "initial")
    return repo
