from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import settings
from hypothesis.database import DirectoryBasedExampleDatabase

_ALLOWED_MARKERS = {"unit", "integration"}

_ROOT = Path(__file__).resolve().parents[1]
_HYPOTHESIS_DB = _ROOT / ".hypothesis/examples"
settings.register_profile("gitree", database=DirectoryBasedExampleDatabase(_HYPOTHESIS_DB), deadline=None)
settings.load_profile("gitree")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture
def bare_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "bare.git"
    (repo / "objects").mkdir(parents=True)
    (repo / "refs").mkdir()
    (repo / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    return repo
