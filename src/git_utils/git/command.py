"""Subprocess execution and outcome classification.

Git is not consistent about exit codes in scripted use: several porcelain
and plumbing commands return non-zero for purely informational conditions
(``git show-ref`` with no match exits 1 and writes nothing to stderr).
``classify`` therefore applies a two-signal heuristic: an invocation is a
failure only when the process exited unsuccessfully *and* wrote something to
its error stream. Anything else is treated as success. This is a heuristic
tuned for git, not a general rule about subprocesses.
"""

import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from git_utils.git.errors import ExecutionError, ExternalToolError

ENCODING = "utf-8"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one subprocess invocation. Consumed by ``classify``."""

    args: tuple[str, ...]
    success: bool
    stdout: bytes = b""
    stderr: bytes = b""


def _decode(data: bytes, stream: str) -> tuple[Optional[str], str]:
    """Decode a captured stream. Returns (text, "") or (None, reason)."""
    try:
        return data.decode(ENCODING), ""
    except UnicodeDecodeError as e:
        return None, f"{stream} is not valid {ENCODING}: {e}"


def execute(args: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
    """Run ``args`` to completion, capturing both output streams."""
    try:
        proc = subprocess.run(list(args), cwd=cwd, capture_output=True)
    except (OSError, ValueError) as e:
        # ValueError: arguments subprocess refuses to pass on, e.g. an embedded NUL byte
        raise ExecutionError(
            f"Error executing {args[0]}: {e}", context={"args": list(args)}
        ) from e
    return CommandResult(
        args=tuple(args),
        success=proc.returncode == 0,
        stdout=proc.stdout or b"",
        stderr=proc.stderr or b"",
    )


def classify(success: bool, stderr: bytes, stdout: bytes = b"") -> str:
    """Reduce an exit status and captured streams to text or an error.

    Failure iff the exit status is unsuccessful and stderr is non-empty.
    A failed exit with empty stderr is benign and yields stdout.
    """
    if not success and stderr:
        text, reason = _decode(stderr, "stderr")
        message = text if text is not None else reason
        raise ExternalToolError(message.strip(), stderr=message)

    text, reason = _decode(stdout, "stdout")
    if text is None:
        raise ExternalToolError(reason)
    return text


def run(args: Sequence[str], cwd: Optional[str] = None) -> str:
    """Execute and classify a command. Returns trimmed stdout."""
    result = execute(args, cwd=cwd)
    try:
        return classify(result.success, result.stderr, result.stdout).strip()
    except ExternalToolError as e:
        e.context.setdefault("args", list(result.args))
        raise
