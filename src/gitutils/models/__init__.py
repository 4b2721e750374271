"""Data models for git-utils."""

from .change import ChangeClass, ChangedFile, ChangeQuery, ChangeResult, ResultStatus
from .repository import RepositoryHandle

__all__ = [
    "ChangeClass",
    "ChangedFile",
    "ChangeQuery",
    "ChangeResult",
    "ResultStatus",
    "RepositoryHandle",
]
