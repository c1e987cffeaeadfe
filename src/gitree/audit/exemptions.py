from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .model import WarningCategory


@dataclass(frozen=True)
class ExceptionEntry:
    prefix: str
    category: WarningCategory
    reason: str = ""

    def matches(self, path: Path | str) -> bool:
        rel = Path(path).as_posix()
        return rel == self.prefix or rel.startswith(self.prefix + "/")


_ANDROID_REPO_META = "/git/android/.repo"

EXCEPTION_REGISTRY: tuple[ExceptionEntry, ...] = (
    ExceptionEntry(_ANDROID_REPO_META, WarningCategory.NON_BARE_LAYOUT, "repo tool keeps manifests as a working tree"),
    ExceptionEntry(_ANDROID_REPO_META, WarningCategory.BAD_NAME_SUFFIX, "repo tool names its own checkouts"),
    ExceptionEntry(_ANDROID_REPO_META, WarningCategory.STRAY_FILE, "repo tool stores state files beside its repositories"),
)


def is_exempt(
    path: Path | str,
    category: WarningCategory,
    registry: tuple[ExceptionEntry, ...] = EXCEPTION_REGISTRY,
) -> bool:
    for entry in registry:
        if entry.category is category and entry.matches(path):
            return True
    return False
