"""Repository handle model."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel


class RepositoryHandle(BaseModel):
    """A git working tree found by probing a path."""

    path: Path
    root: Optional[Path] = None
    branch: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def valid(self) -> bool:
        """Check if the probed path is inside a working tree."""
        return self.root is not None
