"""Exceptions raised by git-utils."""


class GitUtilsError(Exception):
    """Base class for git-utils errors."""


class ConfigError(GitUtilsError):
    """The configuration file could not be read or is invalid."""
