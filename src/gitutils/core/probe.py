"""Read-only queries about the working tree containing a path.

None of these raise: a missing path, a path outside any working tree and a
failing git all read as "not a repository".
"""

import logging
from pathlib import Path
from typing import Optional, Union

from gitutils.core.commands import GIT_FAILURES, run_git
from gitutils.models.repository import RepositoryHandle

logger = logging.getLogger(__name__)


def _query(path: Union[str, Path], command: str, *args: str) -> Optional[str]:
    """Run git in ``path`` and return trimmed stdout, or None on any failure."""
    directory = Path(path)
    try:
        if not directory.exists():
            logger.debug("%s does not exist", directory)
            return None
        return run_git(directory.resolve(), command, *args).strip()
    except GIT_FAILURES as e:
        logger.debug("git %s failed in %s: %s", command, directory, e)
        return None


def is_repository(path: Union[str, Path]) -> bool:
    """Check if ``path`` is inside a git working tree."""
    return _query(path, "rev-parse", "--is-inside-work-tree") == "true"


def resolve_root(path: Union[str, Path]) -> Optional[Path]:
    """Get the canonical top-level directory of the working tree."""
    if not is_repository(path):
        return None
    toplevel = _query(path, "rev-parse", "--show-toplevel")
    if not toplevel:
        return None
    return Path(toplevel).resolve()


def current_branch(path: Union[str, Path]) -> Optional[str]:
    """Get the checked-out branch name (``HEAD`` when detached)."""
    if not is_repository(path):
        return None
    return _query(path, "rev-parse", "--abbrev-ref", "HEAD") or None


def probe(path: Union[str, Path]) -> RepositoryHandle:
    """Probe ``path`` and bundle root and branch into a handle."""
    root = resolve_root(path)
    branch = current_branch(path) if root is not None else None
    return RepositoryHandle(path=Path(path), root=root, branch=branch)
