from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from .model import CATEGORY_ORDER, Classification, WarningCategory, WarningRecord

REPORT_SCHEMA_NAME = "gitree.audit-report.v1"


@runtime_checkable
class AuditListener(Protocol):
    def on_visit(self, path: str) -> None: ...

    def on_warning(self, warning: WarningRecord) -> None: ...


@dataclass
class AuditResult:
    """Accumulates everything one walk produced.

    Owned by the caller that starts the walk and handed to every component by
    reference. Warnings of categories outside `active` are dropped uncounted.
    """

    active: tuple[WarningCategory, ...] = CATEGORY_ORDER
    counts: dict[WarningCategory, int] = field(default_factory=dict)
    warnings: list[WarningRecord] = field(default_factory=list)
    visited: list[str] = field(default_factory=list)
    roots: dict[str, Classification] = field(default_factory=dict)
    listeners: list[AuditListener] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        for category in self.active:
            self.counts.setdefault(category, 0)

    def subscribe(self, listener: AuditListener) -> None:
        self.listeners.append(listener)

    def is_active(self, category: WarningCategory) -> bool:
        return category in self.active

    def record(self, category: WarningCategory, path: Path | str) -> WarningRecord | None:
        if not self.is_active(category):
            return None
        warning = WarningRecord.create(category, path)
        self.counts[category] += 1
        self.warnings.append(warning)
        for listener in self.listeners:
            listener.on_warning(warning)
        return warning

    def note_visit(self, path: Path | str) -> None:
        rel = str(path)
        self.visited.append(rel)
        for listener in self.listeners:
            listener.on_visit(rel)

    def note_root(self, path: Path | str, classification: Classification) -> None:
        self.roots[str(path)] = classification

    def count(self, category: WarningCategory) -> int:
        return self.counts.get(category, 0)

    @property
    def total_warnings(self) -> int:
        return sum(self.counts.values())

    def summary(self) -> list[tuple[WarningCategory, int]]:
        return [(category, self.counts[category]) for category in CATEGORY_ORDER if category in self.counts]

    def warnings_for(self, category: WarningCategory) -> list[WarningRecord]:
        return [warning for warning in self.warnings if warning.category is category]

    def to_payload(self, *, run_id: str, mode: str, root: str) -> dict[str, object]:
        return {
            "schema_name": REPORT_SCHEMA_NAME,
            "schema_version": 1,
            "tool": "gitree",
            "status": "ok" if not self.warnings else "warn",
            "run_id": run_id,
            "mode": mode,
            "root": root,
            "visited": list(self.visited),
            "roots": {path: classification.value for path, classification in sorted(self.roots.items())},
            "warnings": [warning.to_payload() for warning in self.warnings],
            "counts": {category.value: count for category, count in self.summary()},
        }
