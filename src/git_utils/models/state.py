"""Run configuration model."""

from dataclasses import dataclass


@dataclass
class RunConfig:
    """CLI arguments bundled together."""

    branch: str
    path: str = "."
    binary: str = "git"
    debug: bool = False
