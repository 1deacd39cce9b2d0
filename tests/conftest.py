"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """Build a small project tree.

    Layout::

        project/
            src/
                module.py
                __pycache__/
                    module.cpython-312.pyc
            docs/
                index.md
    """
    root = tmp_path / "project"
    src = root / "src"
    cache = src / "__pycache__"
    docs = root / "docs"
    cache.mkdir(parents=True)
    docs.mkdir()
    (src / "module.py").write_text("x = 1\n")
    (cache / "module.cpython-312.pyc").write_bytes(b"\x00\x01")
    (docs / "index.md").write_text("# docs\n")
    return root


def _snapshot(root: Path) -> dict[str, bytes | None]:
    """Map every path below root to its file content (None for directories)."""
    result: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        rel = str(path.relative_to(root))
        if path.is_symlink():
            result[rel] = f"-> {path.readlink()}".encode()
        elif path.is_dir():
            result[rel] = None
        else:
            result[rel] = path.read_bytes()
    return result


@pytest.fixture
def tree_snapshot() -> Callable[[Path], dict[str, bytes | None]]:
    """Return a function that captures a tree's layout and file contents."""
    return _snapshot
