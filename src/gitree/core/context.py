from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..audit.listing import DEFAULT_MAX_ENTRIES
from ..audit.modes import DEFAULT_MODE, Mode
from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG
from .env import getenv
from .run_id import make_run_id

OutputFormat = Literal["text", "json"]
LogFormat = Literal["text", "json"]
_LOG_FORMATS = ("text", "json")


def _parse_max_entries(raw: str | int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ScriptError(f"invalid entry limit `{raw}`: expected a positive integer", ERR_CONFIG, "config_error") from exc
    if value <= 0:
        raise ScriptError(f"invalid entry limit `{raw}`: expected a positive integer", ERR_CONFIG, "config_error")
    return value


def _parse_mode(raw: str) -> Mode:
    try:
        return Mode.parse(raw)
    except ValueError as exc:
        raise ScriptError(str(exc), ERR_CONFIG, "config_error") from exc


@dataclass(frozen=True)
class RunContext:
    run_id: str
    mode: Mode
    output_format: OutputFormat
    log_format: LogFormat
    max_entries: int
    verbose: bool
    quiet: bool

    @property
    def as_json(self) -> bool:
        return self.output_format == "json"

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        mode: str | None = None,
        output_format: OutputFormat = "text",
        log_format: str | None = None,
        max_entries: int | None = None,
        verbose: bool = False,
        quiet: bool = False,
    ) -> "RunContext":
        resolved_run_id = run_id or getenv("GITREE_RUN_ID") or make_run_id()
        resolved_log_format = log_format or getenv("GITREE_LOG_FORMAT", "text")
        if resolved_log_format not in _LOG_FORMATS:
            raise ScriptError(
                f"invalid log format `{resolved_log_format}`: must be one of {list(_LOG_FORMATS)}",
                ERR_CONFIG,
                "config_error",
            )
        raw_limit = max_entries if max_entries is not None else getenv("GITREE_MAX_ENTRIES", str(DEFAULT_MAX_ENTRIES))
        return cls(
            run_id=resolved_run_id,
            mode=_parse_mode(mode or DEFAULT_MODE.value),
            output_format=output_format,
            log_format=resolved_log_format,  # type: ignore[arg-type]
            max_entries=_parse_max_entries(raw_limit),
            verbose=verbose,
            quiet=quiet,
        )
