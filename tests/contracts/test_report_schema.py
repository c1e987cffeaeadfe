from __future__ import annotations

from pathlib import Path

import pytest

from gitree.audit.results import REPORT_SCHEMA_NAME
from gitree.audit.walker import audit_tree
from gitree.contracts import schema_path_for, validate
from gitree.errors import ScriptError
from gitree.exit_codes import ERR_VALIDATION

from tests.helpers import build_tree


def test_schema_is_packaged() -> None:
    assert schema_path_for(REPORT_SCHEMA_NAME).name == "gitree.audit-report.v1.schema.json"


def test_unknown_schema() -> None:
    with pytest.raises(ScriptError) as excinfo:
        schema_path_for("gitree.nope.v1")
    assert excinfo.value.code == ERR_VALIDATION


def test_walk_payload_validates(tmp_path: Path) -> None:
    build_tree(tmp_path / "t", {"f": "x", "r.git": {"objects": {}, "refs": {}, "odd": "x"}})
    payload = audit_tree(tmp_path / "t").to_payload(run_id="r", mode="all", root=str(tmp_path / "t"))
    validate(REPORT_SCHEMA_NAME, payload)


def test_invalid_payload_points_at_the_problem(tmp_path: Path) -> None:
    payload = audit_tree(build_tree(tmp_path / "t", {})).to_payload(run_id="r", mode="all", root="t")
    payload["counts"]["stray-file"] = -1
    with pytest.raises(ScriptError) as excinfo:
        validate(REPORT_SCHEMA_NAME, payload)
    assert excinfo.value.code == ERR_VALIDATION
    assert "counts/stray-file" in str(excinfo.value)
