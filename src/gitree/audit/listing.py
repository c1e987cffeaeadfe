from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from ..errors import ScriptError
from ..exit_codes import ERR_ENTRY_LIMIT, ERR_UNREADABLE_DIR
from .model import ChildEntry, EntryType

DEFAULT_MAX_ENTRIES = 4096

DirectoryLister = Callable[[Path, int], list[ChildEntry]]


def entry_type_of(entry: os.DirEntry[str]) -> EntryType:
    try:
        if entry.is_symlink():
            return EntryType.OTHER
        if entry.is_dir(follow_symlinks=False):
            return EntryType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryType.FILE
    except OSError:
        return EntryType.UNKNOWN
    return EntryType.OTHER


def scan_directory(path: Path, max_entries: int) -> list[ChildEntry]:
    """List the immediate children of `path` with their type tags, unsorted."""
    children: list[ChildEntry] = []
    try:
        with os.scandir(path) as it:
            for entry in it:
                children.append(ChildEntry(entry.name, entry_type_of(entry)))
                if len(children) > max_entries:
                    raise ScriptError(
                        f"{path}: more than {max_entries} entries in one directory",
                        ERR_ENTRY_LIMIT,
                        "entry_limit_exceeded",
                    )
    except OSError as exc:
        raise ScriptError(
            f"{path}: cannot open directory: {exc.strerror or exc}",
            ERR_UNREADABLE_DIR,
            "unreadable_directory",
        ) from exc
    return children
