"""CLI entry point and argument parsing."""

import argparse
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Optional, Sequence

try:
    __version__ = get_version("git-utils")
except PackageNotFoundError:
    __version__ = "dev"

from git_utils.config import get_config_loaded_sources, get_setting
from git_utils.git.branch import Git
from git_utils.git.errors import ExternalToolError, GitUtilsError, NotARepository
from git_utils.models.state import RunConfig
from git_utils.ui.output import DEFAULT_NAME, error
from git_utils.utils.debug import DEBUG_LOG


def parse_args(argv: Optional[Sequence[str]] = None) -> RunConfig:
    parser = argparse.ArgumentParser(
        prog="git-utils",
        description="Create a new git branch from the current branch, refusing to clobber one.",
        epilog="""
Examples:
  %(prog)s feature/x                 Branch off the current branch in this directory
  %(prog)s feature/x -C ../other     Work on another working copy
  %(prog)s feature/x --debug         Record git output in the debug log

How it works:
  1. Checks that the directory is a git working copy
  2. Refuses if the branch already exists locally
  3. Reads the current branch
  4. Runs git checkout -b <branch> <current>

Config:
  Layered YAML: bundled defaults < ~/.config/git-utils/config.yaml < .git-utils/config.yaml
  git.binary   git executable (default: git)
  log.name     prefix for progress messages (default: git-utils)
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "branch",
        metavar="BRANCH",
        help="Name of the branch to create",
    )
    parser.add_argument(
        "-C",
        "--path",
        default=".",
        metavar="PATH",
        help="Working copy to operate on (default: current directory)",
    )
    parser.add_argument(
        "--git",
        dest="binary",
        default=None,
        metavar="BINARY",
        help="git executable to run (default: git.binary from config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"Enable debug mode - logs git output to {DEBUG_LOG}",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    args = parser.parse_args(argv)
    return RunConfig(
        branch=args.branch,
        path=args.path,
        binary=args.binary or get_setting("git", "binary", "git"),
        debug=args.debug,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    name = DEFAULT_NAME
    try:
        config = parse_args(argv)
        name = get_setting("log", "name", DEFAULT_NAME)
        git = Git.open(config.path, debug=config.debug, binary=config.binary, name=name)
        git.log.debug("config sources", get_config_loaded_sources())
        git.new_branch(config.branch)
    except NotARepository as e:
        error(str(e), name)
        sys.exit(1)
    except ExternalToolError as e:
        error(f"git failed: {e.stderr.strip()}", name)
        sys.exit(1)
    except GitUtilsError as e:
        error(str(e), name)
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
