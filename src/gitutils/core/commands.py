"""Thin wrapper over GitPython's command runner."""

import logging
import os
from pathlib import Path
from typing import Tuple, Type, Union

# GitPython refuses to import without a git executable on PATH. Quiet mode
# defers that to GitCommandNotFound when a command runs.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

import git  # noqa: E402

logger = logging.getLogger(__name__)

# Everything that means "git could not answer": a non-zero exit, no git
# executable or an unusable working directory.
GIT_FAILURES: Tuple[Type[BaseException], ...] = (
    git.exc.GitCommandError,
    git.exc.GitCommandNotFound,
    OSError,
)


def run_git(directory: Union[str, Path], command: str, *args: str) -> str:
    """Run a read-only git subcommand in ``directory`` and return its stdout.

    Raises ``git.exc.GitCommandError`` on a non-zero exit.
    """
    logger.debug("git %s %s (in %s)", command, " ".join(args), directory)
    runner = git.Git(str(directory))
    return getattr(runner, command.replace("-", "_"))(*args)
