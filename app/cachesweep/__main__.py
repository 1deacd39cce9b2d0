"""Allow running cachesweep as ``python -m cachesweep``."""

from cachesweep.cli.main import app

app(prog_name="cachesweep")
