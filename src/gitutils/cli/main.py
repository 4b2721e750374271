"""Main CLI interface for git-utils."""

import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

import click
from rich.console import Console
from rich.markup import escape

from gitutils.config import Config, load_config
from gitutils.core.filters import filter_by_suffix, split_lines
from gitutils.core.probe import current_branch, is_repository, resolve_root
from gitutils.core.resolver import resolve
from gitutils.exceptions import ConfigError
from gitutils.logging_config import setup_logging
from gitutils.models.change import ALL, ChangeClass, ChangeQuery, ChangeResult

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

verbose_option = click.option(
    "-v", "--verbose", is_flag=True, default=False, help="Print details to stderr"
)


def _fail(message: str) -> None:
    err_console.print(f"[red]{escape(message)}[/red]")
    sys.exit(1)


def _load_config_or_exit(root: Path) -> Config:
    try:
        return load_config(root)
    except ConfigError as e:
        _fail(f"Error: {e}")


def _exclude(result: ChangeResult, suffixes: Sequence[str]) -> ChangeResult:
    """Drop files whose path ends with one of ``suffixes``."""
    if not suffixes:
        return result
    kept = set(filter_by_suffix(result.paths, suffixes))
    files = [f for f in result.files if f.path in kept]
    return result.model_copy(update={"files": files})


def _selected_class(staged: bool, unstaged: bool, all_changes: bool) -> str:
    """--all wins over --staged, which wins over --unstaged."""
    if all_changes:
        return ALL
    if staged:
        return ChangeClass.STAGED.value
    if unstaged:
        return ChangeClass.UNSTAGED.value
    return ChangeClass.COMMITTED.value


def _print_headers(result: ChangeResult, change_class: str, base_branch: str) -> None:
    """Print a summary of ``result`` to stderr."""
    total = len(result.files)
    if change_class == ChangeClass.STAGED:
        err_console.print(f"Staged files ({total}):")
    elif change_class == ChangeClass.UNSTAGED:
        err_console.print(f"Unstaged files ({total}):")
    elif change_class == ChangeClass.COMMITTED:
        err_console.print(f"Changed files compared to {escape(base_branch)} ({total}):")
    else:
        titles = {
            ChangeClass.COMMITTED: (
                f"Committed changes (compared to {escape(base_branch)})"
            ),
            ChangeClass.STAGED: "Staged changes",
            ChangeClass.UNSTAGED: "Unstaged changes",
        }
        for cls in ChangeClass:
            count = result.count(cls)
            if count:
                err_console.print(f"{titles[cls]} ({count}):")


@click.group()
@click.version_option(package_name="git-utils")
@click.option(
    "--debug", is_flag=True, default=False, help="Log git invocations to stderr"
)
def main(debug: bool):
    """git-utils - Small helpers for inspecting git working trees."""
    setup_logging(verbose=debug)


@main.command()
@click.argument("path", type=click.Path(), default=".")
def check(path: str):
    """Check if PATH is inside a git repository."""
    if not is_repository(path):
        console.print("[red]✗ Not a git repository[/red]")
        sys.exit(1)

    root = resolve_root(path)
    console.print("[green]✓ This is a git repository[/green]")
    console.print(f"  Root: {escape(str(root))}")


@main.command()
@click.argument("path", type=click.Path(), default=".")
@verbose_option
def root(path: str, verbose: bool):
    """Print the top-level directory of the repository containing PATH."""
    if not is_repository(path):
        if verbose:
            err_console.print("[red]Error: Not in a git repository[/red]")
        sys.exit(1)

    repo_root = resolve_root(path)
    if repo_root is None:
        _fail("Error: Failed to get git root")

    if verbose:
        err_console.print(f"Git root: {escape(str(repo_root))}")
    click.echo(str(repo_root))


@main.command()
@click.argument("path", type=click.Path(), default=".")
def branch(path: str):
    """Print the branch checked out in the repository containing PATH."""
    name = current_branch(path)
    if name is None:
        _fail("Error: Not in a git repository")
    click.echo(name)


@main.command()
@click.option("-s", "--staged", is_flag=True, help="Show staged changes only")
@click.option("-u", "--unstaged", is_flag=True, help="Show unstaged changes only")
@click.option(
    "-a",
    "--all",
    "all_changes",
    is_flag=True,
    help="Show committed, staged and unstaged changes",
)
@click.option(
    "-b",
    "--base-branch",
    envvar="GIT_UTILS_BASE_BRANCH",
    help="Base branch to compare committed changes against [default: main]",
)
@click.option(
    "-e",
    "--exclude",
    "excludes",
    multiple=True,
    help="Suffix of files to leave out (repeatable)",
)
@click.option(
    "-C",
    "--path",
    type=click.Path(file_okay=False),
    default=".",
    help="Directory to inspect",
)
@verbose_option
def changed(
    staged: bool,
    unstaged: bool,
    all_changes: bool,
    base_branch: Optional[str],
    excludes: Tuple[str, ...],
    path: str,
    verbose: bool,
):
    """Show files that changed compared to the base branch.

    Paths go to stdout one per line, prefixed with their kind for --all.
    Nothing is printed when there are no changes.
    """
    directory = Path(path)
    repo_root = resolve_root(directory)
    if repo_root is None:
        _fail("Error: Not in a git repository")

    config = _load_config_or_exit(repo_root)
    base_branch = base_branch or config.base_branch
    change_class = _selected_class(staged, unstaged, all_changes)

    result = resolve(
        ChangeQuery(
            change_class=change_class,
            base_branch=base_branch,
            working_directory=directory,
        )
    )
    if not result.ok:
        _fail("Error: Failed to get changed files")

    result = _exclude(result, [*config.exclude_suffixes, *excludes])
    if result.is_empty:
        return

    if verbose:
        _print_headers(result, change_class, base_branch)

    for line in result.lines():
        click.echo(line)


@main.command("filter")
@click.argument("suffixes", nargs=-1)
@verbose_option
def filter_files(suffixes: Tuple[str, ...], verbose: bool):
    """Remove paths read from stdin that end with any of SUFFIXES.

    Example: git-utils changed | git-utils filter .g.dart .gql.dart
    """
    if not suffixes:
        _fail("Error: At least one suffix pattern is required")

    stdin = click.open_file("-")
    if stdin.isatty():
        err_console.print(
            "[red]Error: This command expects input from stdin (pipe)[/red]"
        )
        err_console.print("Usage: git-utils changed | git-utils filter .g.dart")
        sys.exit(1)

    files = split_lines(stdin.read())
    if not files:
        return

    filtered = filter_by_suffix(files, suffixes)

    if verbose:
        err_console.print(
            f"Filtered {len(files) - len(filtered)} files matching patterns: "
            f"{escape(', '.join(suffixes))}"
        )
        err_console.print(f"Remaining files: {len(filtered)}")

    for file in filtered:
        click.echo(file)


if __name__ == "__main__":
    main()
