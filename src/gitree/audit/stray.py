from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .exemptions import EXCEPTION_REGISTRY, ExceptionEntry, is_exempt
from .model import WarningCategory

if TYPE_CHECKING:
    from .results import AuditResult


def report_stray(
    directory: Path,
    filename: str,
    results: AuditResult,
    registry: tuple[ExceptionEntry, ...] = EXCEPTION_REGISTRY,
) -> bool:
    if is_exempt(directory, WarningCategory.STRAY_FILE, registry):
        return False
    results.record(WarningCategory.STRAY_FILE, directory / filename)
    return True
