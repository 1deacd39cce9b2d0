"""Value types used by the traversal engine."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class VisitRecord:
    """A directory queued for expansion, keyed by path and depth.

    Two records are equal only if both path and depth match, so the
    same directory reached at a different depth is a distinct record.

    Attributes:
        path: Absolute directory path.
        depth: Parent-directory hops from the traversal root (root is 0).
    """

    path: Path
    depth: int

    def child(self, path: Path) -> "VisitRecord":
        """Build the record for an entry directly below this one."""
        return VisitRecord(path=path, depth=self.depth + 1)


@dataclass(frozen=True, slots=True)
class MatchedDirectory:
    """A directory whose name equals the sweep target.

    Attributes:
        path: Absolute path of the matched directory.
        depth: Depth at which it was found.
        dry_run: Whether the deletion is suppressed.
    """

    path: Path
    depth: int
    dry_run: bool = False
