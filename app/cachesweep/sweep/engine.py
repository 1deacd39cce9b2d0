"""Traversal engine: find and remove directories by name.

The walk is iterative over an explicit stack of (path, depth) records,
so arbitrarily deep trees never grow the call stack. Matched directories
are reported and removed in place and never expanded. Symlinks are
never followed or removed.
"""

import errno
import logging
import os
import string
from collections.abc import Callable, Iterator
from pathlib import Path

from cachesweep.core.config import SweepConfig
from cachesweep.sweep.errors import EnumerationError, ResolutionError
from cachesweep.sweep.models import MatchedDirectory, VisitRecord
from cachesweep.sweep.remover import DirectoryRemover

logger = logging.getLogger(__name__)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def resolve_root(root: Path | None = None) -> Path:
    """Resolve the traversal root to a canonical absolute directory.

    Args:
        root: Requested start directory. None means the working directory.

    Returns:
        Canonicalized absolute path of the root.

    Raises:
        ResolutionError: If the path is missing, not a directory, or unreadable.
    """
    requested = root if root is not None else Path(".")
    try:
        resolved = Path(requested).resolve(strict=True)
    except OSError as e:
        raise ResolutionError(requested, e) from e

    if not resolved.is_dir():
        raise ResolutionError(
            resolved, NotADirectoryError(errno.ENOTDIR, "Not a directory", str(resolved))
        )
    if not os.access(resolved, os.R_OK | os.X_OK):
        raise ResolutionError(
            resolved, PermissionError(errno.EACCES, "Permission denied", str(resolved))
        )
    return resolved


def _names_match(name: str, target: str) -> bool:
    """Compare a directory name with the target, folding ASCII letters only."""
    return name.translate(_ASCII_LOWER) == target.translate(_ASCII_LOWER)


class DirectorySweeper:
    """Walks a tree and removes every directory named like the target.

    Args:
        target_name: Directory name to remove (case-insensitive).
        max_depth: Inclusive depth bound for expansion. None means unbounded.
        dry_run: If True, report matches without deleting.
        remover: Deletion strategy. Defaults to a DirectoryRemover honoring dry_run.
    """

    def __init__(
        self,
        target_name: str,
        *,
        max_depth: int | None = None,
        dry_run: bool = False,
        remover: DirectoryRemover | None = None,
    ) -> None:
        self._target_name = target_name
        self._max_depth = max_depth
        self._dry_run = dry_run
        self._remover = remover if remover is not None else DirectoryRemover(dry_run=dry_run)

    def sweep(self, root: Path) -> Iterator[MatchedDirectory]:
        """Walk ``root`` depth-first and yield each matched directory.

        A match is yielded before it is removed, so the consumer can
        report it first. Removal happens when iteration resumes; stopping
        iteration early leaves the last yielded match in place.

        Args:
            root: Resolved traversal root (see resolve_root).

        Yields:
            MatchedDirectory for every directory whose name equals the target.

        Raises:
            EnumerationError: If a directory cannot be listed.
            DeletionError: If a matched directory cannot be removed.
        """
        visited: set[VisitRecord] = set()
        queue: list[VisitRecord] = [VisitRecord(path=root, depth=0)]

        while queue:
            current = queue.pop()
            visited.add(current)

            if self._max_depth is not None and current.depth > self._max_depth:
                logger.debug("Depth %d exceeds limit, skipping %s", current.depth, current.path)
                continue

            logger.debug("Expanding %s (depth %d)", current.path, current.depth)
            for entry in self._list_directory(current.path):
                # Symlinks are never followed or deleted, even when the name matches
                if entry.is_symlink() or not entry.is_dir():
                    continue

                candidate = current.child(entry)
                if candidate in visited:
                    continue

                if _names_match(entry.name, self._target_name):
                    yield MatchedDirectory(
                        path=entry, depth=candidate.depth, dry_run=self._dry_run
                    )
                    self._remover.remove(entry)
                else:
                    queue.append(candidate)

    @staticmethod
    def _list_directory(path: Path) -> list[Path]:
        """List the immediate entries of ``path``.

        Raises:
            EnumerationError: If the directory cannot be read.
        """
        try:
            return list(path.iterdir())
        except OSError as e:
            raise EnumerationError(path, e) from e


def run(
    config: SweepConfig,
    report: Callable[[MatchedDirectory], None] | None = None,
    on_root: Callable[[Path], None] | None = None,
) -> list[MatchedDirectory]:
    """Resolve the root and sweep it according to ``config``.

    Args:
        config: Sweep configuration.
        report: Called with each match before it is removed.
        on_root: Called once with the resolved root before the walk starts.

    Returns:
        All matched directories, in the order they were found.

    Raises:
        SweepError: On the first resolution, enumeration or deletion failure.
    """
    root = resolve_root(config.root)
    if on_root is not None:
        on_root(root)

    sweeper = DirectorySweeper(
        config.dirname,
        max_depth=config.max_depth,
        dry_run=config.dry_run,
    )

    matches: list[MatchedDirectory] = []
    for match in sweeper.sweep(root):
        if report is not None:
            report(match)
        matches.append(match)
    return matches
