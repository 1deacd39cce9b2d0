"""cachesweep - Remove cache directories from a source tree."""

__version__ = "0.1.0"
