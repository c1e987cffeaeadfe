from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..audit.command import configure_audit_arguments, run_audit_command
from ..core.context import RunContext
from ..core.logging import log_event
from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG, ERR_INTERNAL
from .output import pass_through_undecodable_names, render_error, resolve_output_format

_DESCRIPTION = """\
Perform conformance check, give warnings when
1. files break Git repo layout rule
2. git dirs name not terminated with .git
3. git dirs non-bare git tree
4. files not in a git tree
"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gitree",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"gitree {__version__}")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--run-id", help="run identifier stamped on log events and reports")
    p.add_argument("--log-format", choices=["text", "json"], default=None, help="log event format on stderr")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="log every visited directory")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    configure_audit_arguments(p)
    return p


def main(argv: list[str] | None = None) -> int:
    raw_argv = argv if argv is not None else sys.argv[1:]
    p = build_parser()
    ns = p.parse_args(raw_argv)
    as_json = ns.json or ns.format == "json"
    if ns.format and ns.json and ns.format != "json":
        print(
            render_error(
                as_json=True,
                message="conflicting output flags: use either --format json or --json",
                code=ERR_CONFIG,
                kind="config_error",
            ),
            file=sys.stderr,
        )
        return ERR_CONFIG
    pass_through_undecodable_names(sys.stdout)
    fmt = resolve_output_format(cli_json=ns.json, cli_format=ns.format)
    try:
        ctx = RunContext.from_args(
            run_id=ns.run_id,
            mode=ns.mode,
            output_format=fmt,  # type: ignore[arg-type]
            log_format=ns.log_format,
            max_entries=ns.max_entries,
            verbose=ns.verbose,
            quiet=ns.quiet,
        )
    except ScriptError as exc:
        print(render_error(as_json=as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code

    try:
        if not ctx.quiet:
            log_event(ctx, "info", "cli", "start", path=ns.path, mode=ctx.mode.value, fmt=ctx.output_format)
        return run_audit_command(ctx, ns)
    except ScriptError as exc:
        log_event(ctx, "error", "cli", "abort", kind=exc.kind, code=exc.code)
        print(render_error(as_json=ctx.as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(
            render_error(as_json=ctx.as_json, message=f"internal error: {exc}", code=ERR_INTERNAL, kind="internal_error"),
            file=sys.stderr,
        )
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
