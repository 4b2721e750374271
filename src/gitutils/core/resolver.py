"""Change-set resolution: which files changed, and how."""

import logging
from pathlib import Path
from typing import List, Optional, Union

import git

from gitutils.core.commands import GIT_FAILURES, run_git
from gitutils.core.filters import split_lines
from gitutils.core.probe import is_repository
from gitutils.models.change import (
    ChangeClass,
    ChangedFile,
    ChangeQuery,
    ChangeResult,
    ResultStatus,
)

logger = logging.getLogger(__name__)


def _base_branch_exists(directory: Path, base_branch: str) -> bool:
    try:
        run_git(directory, "rev-parse", "--verify", base_branch)
    except git.exc.GitCommandError:
        return False
    return True


def _committed_files(directory: Path, base_branch: str) -> List[str]:
    """Files changed on the current branch since it diverged from the base."""
    if not _base_branch_exists(directory, base_branch):
        logger.debug("Base branch %s does not exist, no committed changes", base_branch)
        return []

    branch = run_git(directory, "rev-parse", "--abbrev-ref", "HEAD").strip()
    if branch == base_branch:
        logger.debug("On base branch %s, no committed changes", base_branch)
        return []

    output = run_git(directory, "diff", "--name-only", f"{base_branch}...HEAD")
    return split_lines(output)


def _changed_files(
    directory: Path, change_class: ChangeClass, base_branch: str
) -> List[str]:
    if change_class == ChangeClass.STAGED:
        return split_lines(run_git(directory, "diff", "--name-only", "--cached"))
    if change_class == ChangeClass.UNSTAGED:
        return split_lines(run_git(directory, "diff", "--name-only"))
    return _committed_files(directory, base_branch)


def resolve(query: ChangeQuery) -> ChangeResult:
    """Resolve ``query`` into the list of changed files.

    Every requested class is resolved independently and reported in
    committed, staged, unstaged order. A git failure in any of them fails the
    whole query.
    """
    if not is_repository(query.working_directory):
        return ChangeResult.not_a_repository()

    directory = query.working_directory.resolve()
    files: List[ChangedFile] = []
    try:
        for change_class in query.classes:
            paths = _changed_files(directory, change_class, query.base_branch)
            logger.debug(
                "%d %s file(s) in %s", len(paths), change_class.value, directory
            )
            files.extend(ChangedFile(path=p, change_class=change_class) for p in paths)
    except GIT_FAILURES as e:
        logger.debug("Change query failed in %s: %s", directory, e)
        return ChangeResult.query_failed()

    return ChangeResult(status=ResultStatus.FILES, files=files, combined=query.combined)


def get_changed_files(
    directory: Union[str, Path],
    change_class: Union[ChangeClass, str] = ChangeClass.COMMITTED,
    base_branch: str = "main",
) -> Optional[List[str]]:
    """List changed paths of one class, or None if the query could not run."""
    result = resolve(
        ChangeQuery(
            change_class=ChangeClass(change_class),
            base_branch=base_branch,
            working_directory=Path(directory),
        )
    )
    if not result.ok:
        return None
    return result.paths
