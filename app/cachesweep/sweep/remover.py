"""Recursive deletion of matched directories.

Removal is permanent. Failures are raised, never collected, so the
caller stops at the first directory that cannot be removed.
"""

import errno
import logging
import shutil
from pathlib import Path

from cachesweep.sweep.errors import DeletionError

logger = logging.getLogger(__name__)


class DirectoryRemover:
    """Deletes directory trees, or only logs them in dry-run mode.

    Attributes:
        _dry_run: If True, simulate deletions without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the DirectoryRemover.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    def remove(self, path: Path) -> None:
        """Delete the directory tree rooted at ``path``.

        Symlinks are refused even when they point at a directory.

        Args:
            path: Absolute path of the directory to delete.

        Raises:
            DeletionError: If the path is a symlink or removal fails.
        """
        if path.is_symlink():
            raise DeletionError(
                path, OSError(errno.ENOTDIR, "refusing to remove a symlink", str(path))
            )

        if self._dry_run:
            logger.info("Dry-run: would delete %s", path)
            return

        try:
            shutil.rmtree(path)
        except OSError as e:
            raise DeletionError(path, e) from e
        logger.debug("Deleted %s", path)

