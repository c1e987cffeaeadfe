"""CLI payload and text output helpers."""

from __future__ import annotations

import sys
from typing import TextIO

from ..audit.model import WarningRecord
from ..audit.modes import Mode
from ..audit.results import AuditResult
from ..core.serialize import dumps_json


def emit(payload: dict[str, object], as_json: bool) -> None:
    print(dumps_json(payload, pretty=not as_json))


def resolve_output_format(*, cli_json: bool, cli_format: str | None) -> str:
    if cli_json:
        return "json"
    if cli_format:
        return cli_format
    return "text"


def pass_through_undecodable_names(stream: TextIO) -> None:
    """Let surrogate-escaped filenames from os.scandir reach the stream as their original bytes."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_name": "gitree.error.v1",
                "schema_version": 1,
                "tool": "gitree",
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            },
            pretty=False,
        )
    return f"ERROR: {message}"


def render_summary(result: AuditResult) -> str:
    lines = ["", "Check Result:"]
    lines.extend(f"{count} {category.summary_label}" for category, count in result.summary())
    return "\n".join(lines)


class TextReporter:
    """Streams walk progress to a text stream while the walk runs."""

    def __init__(self, mode: Mode, stream: TextIO | None = None) -> None:
        self.mode = mode
        self.stream = stream if stream is not None else sys.stdout

    def on_visit(self, path: str) -> None:
        if self.mode.announces_visits:
            self._write(f"Checking {path}")

    def on_warning(self, warning: WarningRecord) -> None:
        if self.mode.enumerates_matches:
            self._write(warning.path)
        else:
            self._write(warning.as_line())

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")
