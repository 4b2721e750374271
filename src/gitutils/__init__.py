"""git-utils - Small helpers for inspecting git working trees."""

from gitutils.core.filters import filter_by_suffix
from gitutils.core.probe import (
    current_branch,
    is_repository,
    probe,
    resolve_root,
)
from gitutils.core.resolver import get_changed_files, resolve
from gitutils.models import (
    ChangeClass,
    ChangedFile,
    ChangeQuery,
    ChangeResult,
    RepositoryHandle,
    ResultStatus,
)

__version__ = "0.1.0"

__all__ = [
    "ChangeClass",
    "ChangedFile",
    "ChangeQuery",
    "ChangeResult",
    "RepositoryHandle",
    "ResultStatus",
    "current_branch",
    "filter_by_suffix",
    "get_changed_files",
    "is_repository",
    "probe",
    "resolve",
    "resolve_root",
]
