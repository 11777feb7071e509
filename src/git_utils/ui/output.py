"""Terminal output helpers with colors, plus an injectable Logger."""

# Colors
RED = "\033[0;31m"
GREEN = "\033[0;32m"
BLUE = "\033[0;34m"
GRAY = "\033[90m"
MAGENTA = "\033[0;35m"
NC = "\033[0m"

DEFAULT_NAME = "git-utils"


def log(msg: str, name: str = DEFAULT_NAME) -> None:
    print(f"\r\033[K{BLUE}[{name}]{NC} {msg}")


def success(msg: str, name: str = DEFAULT_NAME) -> None:
    print(f"\r\033[K{GREEN}[{name}]{NC} {msg}")


def error(msg: str, name: str = DEFAULT_NAME) -> None:
    print(f"\r\033[K{RED}[{name}]{NC} {msg}")


class Logger:
    """Named logger handed to components that narrate progress.

    Output is fire-and-forget: a broken terminal never fails the caller.
    """

    def __init__(self, debug: bool = False, name: str = DEFAULT_NAME):
        self.debug_enabled = debug
        self.name = name

    def _emit(self, fn, msg: str) -> None:
        try:
            fn(msg, self.name)
        except (OSError, ValueError):
            pass

    def info(self, msg: str) -> None:
        self._emit(log, msg)

    def success(self, msg: str) -> None:
        self._emit(success, msg)

    def debug(self, label: str, data=None) -> None:
        """Record ``label`` (and ``data``) in the debug log when debug mode is on."""
        from git_utils.utils.debug import debug_log

        try:
            debug_log(self.debug_enabled, label, "" if data is None else data)
        except (OSError, ValueError, TypeError):
            pass
