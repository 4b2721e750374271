"""Path list helpers."""

from typing import Iterable, List, Sequence


def split_lines(text: str) -> List[str]:
    """Split command output into trimmed, non-empty lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def filter_by_suffix(paths: Sequence[str], suffixes: Iterable[str]) -> List[str]:
    """Drop every path that ends with one of ``suffixes``.

    Matching is an exact, case-sensitive comparison against the tail of the
    path, so ``.g.dart`` removes ``lib/user.g.dart`` but neither
    ``lib/USER.G.DART`` nor ``lib/user.g.dart.backup``. Survivors keep their
    order. An empty ``suffixes`` leaves the list unchanged.
    """
    suffixes = tuple(suffixes)
    if not suffixes:
        return list(paths)
    return [path for path in paths if not path.endswith(suffixes)]
