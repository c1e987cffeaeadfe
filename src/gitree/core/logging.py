from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING

from .run_id import utc_now_iso

if TYPE_CHECKING:
    from .context import RunContext


def log_event(ctx: RunContext, level: str, component: str, action: str, **fields: object) -> None:
    if level == "debug" and not ctx.verbose:
        return
    payload = {
        "ts": utc_now_iso(),
        "level": level,
        "run_id": ctx.run_id,
        "component": component,
        "action": action,
        **fields,
    }
    if ctx.log_format == "json":
        sys.stderr.write(json.dumps(payload, sort_keys=True) + "\n")
        return
    core = f"ts={payload['ts']} level={level} run_id={ctx.run_id} component={component} action={action}"
    extras = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
    sys.stderr.write((core if not extras else f"{core} {extras}") + "\n")
