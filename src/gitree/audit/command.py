from __future__ import annotations

import argparse
from pathlib import Path

from ..contracts import validate
from ..core.context import RunContext
from ..core.logging import log_event
from ..cli.output import TextReporter, emit, render_summary
from .modes import mode_names
from .results import REPORT_SCHEMA_NAME
from .walker import audit_tree


def configure_audit_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-m",
        "--mode",
        choices=mode_names(),
        default=None,
        help="warning categories to report: all (default), layout, non-bare or stray",
    )
    p.add_argument("--max-entries", type=int, default=None, help="fatal limit on entries per directory")
    p.add_argument("path", help="directory tree to audit")


def run_audit_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    root = Path(ns.path)
    listeners = [] if ctx.as_json else [TextReporter(ctx.mode)]
    result = audit_tree(
        root,
        ctx.mode,
        max_entries=ctx.max_entries,
        ctx=ctx,
        listeners=listeners,
    )
    if not ctx.quiet:
        log_event(
            ctx,
            "info",
            "audit",
            "finish",
            visited=len(result.visited),
            warnings=result.total_warnings,
            **{category.value: count for category, count in result.summary()},
        )
    if ctx.as_json:
        payload = result.to_payload(run_id=ctx.run_id, mode=ctx.mode.value, root=str(root))
        validate(REPORT_SCHEMA_NAME, payload)
        emit(payload, as_json=True)
        return 0
    print(render_summary(result))
    return 0
