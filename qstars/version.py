"""Application version and the command that prints it."""

from __future__ import annotations

import argparse

MAJ = "0"
MIN = "24"
FIX = "2"

VERSION = "0.24.2"

# Set at build time.
GIT_COMMIT = ""


def get_version(git_commit: str | None = None) -> str:
    """Return the version, followed by ``-<commit>`` when a commit is known."""
    commit = GIT_COMMIT if git_commit is None else git_commit
    return f"{VERSION}-{commit}" if commit else VERSION


def main(argv: list[str] | None = None) -> int:
    """Print the app version."""
    parser = argparse.ArgumentParser(prog="version", description="Print the app version")
    parser.add_argument("args", nargs="*", help=argparse.SUPPRESS)
    parser.parse_args(argv)
    print(get_version())
    return 0