from __future__ import annotations

import re

import pytest

from gitree.audit.listing import DEFAULT_MAX_ENTRIES
from gitree.audit.modes import Mode
from gitree.core.context import RunContext
from gitree.errors import ScriptError
from gitree.exit_codes import ERR_CONFIG


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GITREE_RUN_ID", "GITREE_MAX_ENTRIES", "GITREE_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    ctx = RunContext.from_args()
    assert ctx.mode is Mode.ALL
    assert ctx.output_format == "text"
    assert ctx.log_format == "text"
    assert ctx.max_entries == DEFAULT_MAX_ENTRIES
    assert re.fullmatch(r"gitree-\d{8}-\d{6}-[0-9a-f]{8}", ctx.run_id)
    assert not ctx.as_json


def test_environment_fills_unset_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITREE_RUN_ID", "ci-42")
    monkeypatch.setenv("GITREE_MAX_ENTRIES", "16")
    monkeypatch.setenv("GITREE_LOG_FORMAT", "json")
    ctx = RunContext.from_args(mode="stray", output_format="json")
    assert ctx.run_id == "ci-42"
    assert ctx.max_entries == 16
    assert ctx.log_format == "json"
    assert ctx.mode is Mode.STRAY
    assert ctx.as_json


def test_arguments_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITREE_RUN_ID", "env-id")
    monkeypatch.setenv("GITREE_MAX_ENTRIES", "16")
    ctx = RunContext.from_args(run_id="cli-id", max_entries=8)
    assert ctx.run_id == "cli-id"
    assert ctx.max_entries == 8


@pytest.mark.parametrize("raw", ["0", "-3", "many"])
def test_invalid_entry_limit(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("GITREE_MAX_ENTRIES", raw)
    with pytest.raises(ScriptError) as excinfo:
        RunContext.from_args()
    assert excinfo.value.code == ERR_CONFIG


def test_invalid_log_format(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITREE_LOG_FORMAT", "xml")
    with pytest.raises(ScriptError) as excinfo:
        RunContext.from_args()
    assert excinfo.value.code == ERR_CONFIG


def test_invalid_mode() -> None:
    with pytest.raises(ScriptError) as excinfo:
        RunContext.from_args(mode="everything")
    assert excinfo.value.code == ERR_CONFIG
