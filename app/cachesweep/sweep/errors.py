"""Error taxonomy for sweep runs.

Every error carries the offending path and wraps the underlying OSError
as ``__cause__``. None of them is recovered from inside the engine.
"""

from pathlib import Path


class SweepError(Exception):
    """Base exception for failures during a sweep."""

    action = "process"

    def __init__(self, path: Path | str, cause: OSError | None = None) -> None:
        self.path = Path(path)
        detail = (cause.strerror or str(cause)) if cause is not None else "unknown error"
        super().__init__(f"Cannot {self.action} {self.path}: {detail}")


class ResolutionError(SweepError):
    """Root path is missing, not a directory, or unreadable."""

    action = "resolve root"


class EnumerationError(SweepError):
    """A directory's entries could not be listed."""

    action = "list directory"


class DeletionError(SweepError):
    """A matched directory tree could not be removed."""

    action = "remove"
