"""Debug log for git invocations."""

import json
import time
from pathlib import Path

from git_utils.ui.output import GRAY, MAGENTA, NC

DEBUG_LOG = Path(".git-utils/debug.log")


def _format(data) -> str:
    if isinstance(data, str):
        return data.rstrip("\n")
    return json.dumps(data, indent=2, default=str)


def debug_log(enabled: bool, label: str, data) -> None:
    """Append a timestamped ``label`` block holding ``data`` to DEBUG_LOG.

    Strings (usually raw git output) are written verbatim; anything else is
    dumped as JSON. No-op unless ``enabled``.
    """
    if not enabled:
        return

    DEBUG_LOG.parent.mkdir(parents=True, exist_ok=True)
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    with open(DEBUG_LOG, "a") as f:
        f.write(f"--- [{timestamp}] {label}\n{_format(data)}\n")
    print(f"\r\033[K{MAGENTA}[debug]{NC} {label}  {GRAY}-> {DEBUG_LOG}{NC}")
