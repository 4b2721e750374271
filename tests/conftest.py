"""Shared fixtures: throwaway git repositories."""

import tempfile
from pathlib import Path

import pytest
from git import Repo


def commit_file(repo: Repo, name: str, content: str, message: str) -> None:
    """Write a file into the working tree and commit it."""
    path = Path(repo.working_tree_dir) / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    repo.git.add(name)
    repo.git.commit("-m", message)


@pytest.fixture
def temp_git_repo():
    """Create a git repository on ``main`` with one committed file1.txt."""
    with tempfile.TemporaryDirectory() as temp_dir:
        repo_path = Path(temp_dir).resolve()
        repo = Repo.init(repo_path)
        with repo.config_writer() as config:
            config.set_value("user", "name", "Test User")
            config.set_value("user", "email", "test@example.com")
            config.set_value("commit", "gpgsign", "false")

        commit_file(repo, "file1.txt", "initial content\n", "Initial commit")
        repo.git.branch("-M", "main")

        yield repo_path, repo
        repo.close()


@pytest.fixture
def feature_branch(temp_git_repo):
    """Check out ``feature`` from main and commit file2.txt on it."""
    repo_path, repo = temp_git_repo
    repo.git.checkout("-b", "feature")
    commit_file(repo, "file2.txt", "feature content\n", "Add file2")
    return repo_path, repo


@pytest.fixture
def not_a_repo():
    """A directory outside any git working tree."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir).resolve()
