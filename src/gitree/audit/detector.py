from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .markers import GIT_SUFFIX, OBJECT_STORE_DIR, REF_STORE_DIR
from .model import ChildEntry, Classification


def is_repository_root(children: Iterable[ChildEntry]) -> bool:
    has_objects = False
    has_refs = False
    for child in children:
        if not child.is_dir:
            continue
        if child.name == OBJECT_STORE_DIR:
            has_objects = True
        elif child.name == REF_STORE_DIR:
            has_refs = True
    return has_objects and has_refs


def classify(path: Path, children: Iterable[ChildEntry]) -> Classification:
    if not is_repository_root(children):
        return Classification.REGULAR
    if path.name == GIT_SUFFIX:
        return Classification.NON_BARE_ROOT
    return Classification.BARE_ROOT
