"""Git repository layout audit: root detection, naming, layout and stray-file checks."""

from __future__ import annotations

from .detector import classify, is_repository_root
from .exemptions import EXCEPTION_REGISTRY, ExceptionEntry, is_exempt
from .layout import check_layout
from .listing import DEFAULT_MAX_ENTRIES, scan_directory
from .markers import GIT_MARKER_SET
from .model import ChildEntry, Classification, EntryType, WarningCategory, WarningRecord
from .modes import Mode
from .naming import NameVerdict, check_naming, judge_name
from .results import AuditListener, AuditResult
from .stray import report_stray
from .walker import TreeWalker, audit_tree

__all__ = [
    "AuditListener",
    "AuditResult",
    "ChildEntry",
    "Classification",
    "DEFAULT_MAX_ENTRIES",
    "EXCEPTION_REGISTRY",
    "EntryType",
    "ExceptionEntry",
    "GIT_MARKER_SET",
    "Mode",
    "NameVerdict",
    "TreeWalker",
    "WarningCategory",
    "WarningRecord",
    "audit_tree",
    "check_layout",
    "check_naming",
    "classify",
    "is_exempt",
    "is_repository_root",
    "judge_name",
    "report_stray",
    "scan_directory",
]
