from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from ..core.logging import log_event
from ..errors import ScriptError
from ..exit_codes import ERR_ENTRY_LIMIT, ERR_UNKNOWN_ENTRY_TYPE
from .detector import classify
from .exemptions import EXCEPTION_REGISTRY, ExceptionEntry
from .layout import check_layout
from .listing import DEFAULT_MAX_ENTRIES, DirectoryLister, scan_directory
from .model import ChildEntry, Classification, EntryType
from .modes import DEFAULT_MODE, Mode
from .naming import check_naming, has_proper_suffix
from .results import AuditListener, AuditResult
from .stray import report_stray

if TYPE_CHECKING:
    from ..core.context import RunContext


class TreeWalker:
    """Depth-first classifier for a directory tree.

    A directory holding both `objects/` and `refs/` directories is a repository
    root: its name and its immediate members are checked and nothing below it
    is visited. Any other directory has its regular files reported as stray and
    its subdirectories walked, except that a subdirectory named `<name>.git` is
    checked as a root straight away, whatever its contents say.
    """

    def __init__(
        self,
        results: AuditResult,
        *,
        lister: DirectoryLister = scan_directory,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        registry: tuple[ExceptionEntry, ...] = EXCEPTION_REGISTRY,
        ctx: RunContext | None = None,
    ) -> None:
        self.results = results
        self.lister = lister
        self.max_entries = max_entries
        self.registry = registry
        self.ctx = ctx

    def walk(self, path: Path) -> Classification:
        children = self._list(path)
        classification = classify(path, children)
        self._visited(path, classification)
        if classification.is_root:
            self._check_root(path, children, classification)
            return classification

        for child in children:
            if child.is_file:
                report_stray(path, child.name, self.results, self.registry)
        for child in children:
            if not child.is_dir:
                continue
            subdir = path / child.name
            if has_proper_suffix(child.name):
                self.check_named_root(subdir)
            else:
                self.walk(subdir)
        return classification

    def check_named_root(self, path: Path) -> Classification:
        children = self._list(path)
        classification = classify(path, children)
        self._visited(path, classification)
        self._check_root(path, children, classification)
        return classification

    def _check_root(self, path: Path, children: Iterable[ChildEntry], classification: Classification) -> None:
        self.results.note_root(path, classification)
        check_naming(path, self.results, self.registry)
        check_layout(path, children, self.results)

    def _list(self, path: Path) -> list[ChildEntry]:
        children = self.lister(path, self.max_entries)
        if len(children) > self.max_entries:
            raise ScriptError(
                f"{path}: more than {self.max_entries} entries in one directory",
                ERR_ENTRY_LIMIT,
                "entry_limit_exceeded",
            )
        for child in children:
            if child.entry_type is EntryType.UNKNOWN:
                raise ScriptError(
                    f"{path / child.name}: unknown file type",
                    ERR_UNKNOWN_ENTRY_TYPE,
                    "unknown_entry_type",
                )
        return sorted(children)

    def _visited(self, path: Path, classification: Classification) -> None:
        self.results.note_visit(path)
        if self.ctx is not None:
            log_event(self.ctx, "debug", "walker", "visit", path=str(path), classification=classification.value)


def audit_tree(
    path: Path | str,
    mode: Mode = DEFAULT_MODE,
    *,
    max_entries: int = DEFAULT_MAX_ENTRIES,
    lister: DirectoryLister = scan_directory,
    registry: tuple[ExceptionEntry, ...] = EXCEPTION_REGISTRY,
    ctx: RunContext | None = None,
    listeners: Iterable[AuditListener] = (),
) -> AuditResult:
    results = AuditResult(active=mode.categories)
    for listener in listeners:
        results.subscribe(listener)
    walker = TreeWalker(results, lister=lister, max_entries=max_entries, registry=registry, ctx=ctx)
    walker.walk(Path(path))
    return results
