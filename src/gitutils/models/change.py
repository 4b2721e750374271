"""Change-set models for reporting modified files."""

from enum import Enum
from pathlib import Path
from typing import List, Literal, Union

from pydantic import BaseModel

ALL = "all"


class ChangeClass(str, Enum):
    """Category of a change. Declaration order is the report order."""

    COMMITTED = "committed"
    STAGED = "staged"
    UNSTAGED = "unstaged"


class ResultStatus(str, Enum):
    """Outcome of resolving a change query."""

    FILES = "files"
    NOT_A_REPOSITORY = "not_a_repository"
    QUERY_FAILED = "query_failed"


class ChangeQuery(BaseModel):
    """Which changes to list, and where."""

    change_class: Union[ChangeClass, Literal["all"]] = ChangeClass.COMMITTED
    base_branch: str = "main"  # Only used for committed changes
    working_directory: Path

    @property
    def combined(self) -> bool:
        return self.change_class == ALL

    @property
    def classes(self) -> List[ChangeClass]:
        """Classes to resolve, in report order."""
        if self.combined:
            return list(ChangeClass)
        return [ChangeClass(self.change_class)]


class ChangedFile(BaseModel):
    """A single path reported by git diff."""

    path: str
    change_class: ChangeClass

    @property
    def tagged(self) -> str:
        return f"{self.change_class.value}:{self.path}"


class ChangeResult(BaseModel):
    """Result of a change query.

    An empty ``files`` list with status ``FILES`` means "no changes", which is
    never the same thing as ``QUERY_FAILED``.
    """

    status: ResultStatus
    files: List[ChangedFile] = []
    combined: bool = False

    @classmethod
    def not_a_repository(cls) -> "ChangeResult":
        return cls(status=ResultStatus.NOT_A_REPOSITORY)

    @classmethod
    def query_failed(cls) -> "ChangeResult":
        return cls(status=ResultStatus.QUERY_FAILED)

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.FILES

    @property
    def is_empty(self) -> bool:
        """True when the query succeeded and found nothing."""
        return self.ok and not self.files

    @property
    def paths(self) -> List[str]:
        return [f.path for f in self.files]

    def count(self, change_class: ChangeClass) -> int:
        return sum(1 for f in self.files if f.change_class == change_class)

    def lines(self) -> List[str]:
        """Output lines, tagged with their class for combined queries."""
        if self.combined:
            return [f.tagged for f in self.files]
        return self.paths
