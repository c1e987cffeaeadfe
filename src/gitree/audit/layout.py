from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from .markers import is_managed_name
from .model import ChildEntry, WarningCategory

if TYPE_CHECKING:
    from .results import AuditResult


def unmanaged_children(children: Iterable[ChildEntry]) -> list[ChildEntry]:
    return [child for child in children if not is_managed_name(child.name)]


def check_layout(path: Path, children: Iterable[ChildEntry], results: AuditResult) -> int:
    foreign = unmanaged_children(children)
    for child in foreign:
        results.record(WarningCategory.LAYOUT_VIOLATION, path / child.name)
    return len(foreign)
