from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Mapping, Union

from gitree.audit.model import ChildEntry, EntryType

ROOT = Path(__file__).resolve().parents[1]

TreeShape = Mapping[str, Union["TreeShape", str, None]]


def build_tree(base: Path, shape: TreeShape) -> Path:
    """Materialise a nested mapping: dict values are directories, str/None values are files."""
    base.mkdir(parents=True, exist_ok=True)
    for name, value in shape.items():
        target = base / name
        if isinstance(value, Mapping):
            build_tree(target, value)
        else:
            target.write_text(value or "", encoding="utf-8")
    return base


def run_gitree(
    *args: str,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    errors: str | None = None,
) -> subprocess.CompletedProcess[str]:
    merged = os.environ.copy()
    merged["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT / "src"), merged.get("PYTHONPATH", "")]))
    merged.setdefault("GITREE_RUN_ID", "pytest-run")
    if env:
        merged.update(env)
    return subprocess.run(
        [sys.executable, "-m", "gitree", *args],
        cwd=(cwd or ROOT),
        env=merged,
        text=True,
        errors=errors,
        capture_output=True,
        check=False,
    )


class MemoryLister:
    """In-memory stand-in for the filesystem lister, keyed by posix path."""

    def __init__(self, listings: Mapping[str, list[tuple[str, EntryType]]]) -> None:
        self.listings = {path: [ChildEntry(name, kind) for name, kind in rows] for path, rows in listings.items()}
        self.calls: list[str] = []

    def __call__(self, path: Path, max_entries: int) -> list[ChildEntry]:
        key = path.as_posix()
        self.calls.append(key)
        return list(self.listings[key])


D = EntryType.DIRECTORY
F = EntryType.FILE
L = EntryType.OTHER
U = EntryType.UNKNOWN
