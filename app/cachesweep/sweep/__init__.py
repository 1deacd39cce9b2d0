"""Directory sweeping: traversal, matching and removal.

This package owns the core walk. Everything else in cachesweep
configures it or prints what it reports.
"""

from cachesweep.sweep.engine import DirectorySweeper, resolve_root, run
from cachesweep.sweep.errors import DeletionError, EnumerationError, ResolutionError, SweepError
from cachesweep.sweep.models import MatchedDirectory, VisitRecord
from cachesweep.sweep.remover import DirectoryRemover

__all__ = [
    "DeletionError",
    "DirectoryRemover",
    "DirectorySweeper",
    "EnumerationError",
    "MatchedDirectory",
    "ResolutionError",
    "SweepError",
    "VisitRecord",
    "resolve_root",
    "run",
]
