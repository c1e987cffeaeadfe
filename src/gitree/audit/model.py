from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryType(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"
    UNKNOWN = "unknown"


class Classification(str, Enum):
    NOT_YET_TESTED = "not-yet-tested"
    BARE_ROOT = "bare-root"
    NON_BARE_ROOT = "non-bare-root"
    REGULAR = "regular"

    @property
    def is_root(self) -> bool:
        return self in (Classification.BARE_ROOT, Classification.NON_BARE_ROOT)


class WarningCategory(str, Enum):
    LAYOUT_VIOLATION = "layout-violation"
    BAD_NAME_SUFFIX = "bad-name-suffix"
    NON_BARE_LAYOUT = "non-bare-layout"
    STRAY_FILE = "stray-file"

    @property
    def detail(self) -> str:
        return _DETAILS[self]

    @property
    def summary_label(self) -> str:
        return _SUMMARY_LABELS[self]


_DETAILS = {
    WarningCategory.LAYOUT_VIOLATION: "breaks Git repo layout rule",
    WarningCategory.BAD_NAME_SUFFIX: "name not terminated with .git",
    WarningCategory.NON_BARE_LAYOUT: "non-bare git tree",
    WarningCategory.STRAY_FILE: "not in a git tree",
}

_SUMMARY_LABELS = {
    WarningCategory.LAYOUT_VIOLATION: "files break Git repo layout rule",
    WarningCategory.BAD_NAME_SUFFIX: "git dirs name not terminated with .git",
    WarningCategory.NON_BARE_LAYOUT: "git dirs non-bare git tree",
    WarningCategory.STRAY_FILE: "files not in a git tree",
}

# Summary rows always print in this order, whatever order warnings arrived in.
CATEGORY_ORDER: tuple[WarningCategory, ...] = (
    WarningCategory.LAYOUT_VIOLATION,
    WarningCategory.BAD_NAME_SUFFIX,
    WarningCategory.NON_BARE_LAYOUT,
    WarningCategory.STRAY_FILE,
)


@dataclass(frozen=True, order=True)
class ChildEntry:
    name: str
    entry_type: EntryType

    @property
    def is_dir(self) -> bool:
        return self.entry_type is EntryType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.entry_type is EntryType.FILE


@dataclass(frozen=True)
class WarningRecord:
    category: WarningCategory
    path: str
    detail: str

    @classmethod
    def create(cls, category: WarningCategory, path: Path | str) -> "WarningRecord":
        return cls(category=category, path=str(path), detail=category.detail)

    def as_line(self) -> str:
        return f"WARNING: {self.path} {self.detail}"

    def to_payload(self) -> dict[str, str]:
        return {"category": self.category.value, "path": self.path, "detail": self.detail}
