"""Names git tooling is known to create inside a repository root."""

from __future__ import annotations

GIT_SUFFIX = ".git"
OBJECT_STORE_DIR = "objects"
REF_STORE_DIR = "refs"
HEAD_FILE = "HEAD"

_GIT_CORE_FILES = (
    "COMMIT_EDITMSG",
    "config",
    "description",
    "FETCH_HEAD",
    HEAD_FILE,
    "index",
    "packed-refs",
    "ORIG_HEAD",
    "MERGE_HEAD",
    "MERGE_MODE",
    "MERGE_MSG",
    "MERGE_RR",
    "RENAMED-REF",
    "gitk.cache",
)

_GIT_CORE_DIRS = (
    "hooks",
    "info",
    "logs",
    OBJECT_STORE_DIR,
    "rebase-apply",
    REF_STORE_DIR,
    "branches",
    "remotes",
    "shallow",
    "rr-cache",
)

_GITWEB_FILES = ("cloneurl",)

_REPO_TOOL_FILES = (
    ".repopickle_config",
    "clone.bundle",
)

# Backups and leftovers seen on long-lived mirrors.
_AUXILIARY_NAMES = (
    "config.bak",
    "config_bak",
    "config~",
    "description~",
    "hooks_bk",
    "hooks.bak",
    "hooks-bak",
    "COMMIT_EDITMSG~",
    ".gitignore",
    "pnt",
    "svn",
    "temp.patch",
)

GIT_MARKER_SET: frozenset[str] = frozenset(
    (*_GIT_CORE_FILES, *_GIT_CORE_DIRS, *_GITWEB_FILES, *_REPO_TOOL_FILES, *_AUXILIARY_NAMES)
)


def is_managed_name(name: str) -> bool:
    return name in GIT_MARKER_SET
