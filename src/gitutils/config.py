"""Per-repository configuration read from ``.git-utils.json``."""

import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from gitutils.exceptions import ConfigError

CONFIG_FILENAME = ".git-utils.json"
DEFAULT_BASE_BRANCH = "main"

logger = logging.getLogger(__name__)


class Config(BaseModel):
    """Defaults for the changed-files commands."""

    base_branch: str = DEFAULT_BASE_BRANCH
    exclude_suffixes: List[str] = []

    model_config = {"extra": "forbid"}


def load_config(root: Optional[Path]) -> Config:
    """Load the config file from a repository root.

    A missing root or file yields the defaults.
    """
    if root is None:
        return Config()

    config_file = Path(root) / CONFIG_FILENAME
    if not config_file.exists():
        return Config()

    logger.debug("Loading config from %s", config_file)
    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
        return Config.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid config file {config_file}: {e}") from e
