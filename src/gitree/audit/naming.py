from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from .exemptions import EXCEPTION_REGISTRY, ExceptionEntry, is_exempt
from .markers import GIT_SUFFIX
from .model import WarningCategory

if TYPE_CHECKING:
    from .results import AuditResult


class NameVerdict(str, Enum):
    PROPER = "proper"
    NON_BARE = "non-bare"
    BAD_SUFFIX = "bad-suffix"

    @property
    def category(self) -> WarningCategory | None:
        if self is NameVerdict.NON_BARE:
            return WarningCategory.NON_BARE_LAYOUT
        if self is NameVerdict.BAD_SUFFIX:
            return WarningCategory.BAD_NAME_SUFFIX
        return None


def has_proper_suffix(name: str) -> bool:
    return name.endswith(GIT_SUFFIX) and len(name) > len(GIT_SUFFIX)


def judge_name(name: str) -> NameVerdict:
    if has_proper_suffix(name):
        return NameVerdict.PROPER
    if name == GIT_SUFFIX:
        return NameVerdict.NON_BARE
    return NameVerdict.BAD_SUFFIX


def check_naming(
    path: Path,
    results: AuditResult,
    registry: tuple[ExceptionEntry, ...] = EXCEPTION_REGISTRY,
) -> NameVerdict:
    """Judge a confirmed root's basename and record at most one naming warning.

    The non-bare warning carries the root's own path (`<project>/.git`), not
    the project directory that holds it.
    """
    verdict = judge_name(path.name)
    category = verdict.category
    if category is not None and not is_exempt(path, category, registry):
        results.record(category, path)
    return verdict
