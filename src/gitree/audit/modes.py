from __future__ import annotations

from enum import Enum

from .model import CATEGORY_ORDER, WarningCategory


class Mode(str, Enum):
    ALL = "all"
    LAYOUT = "layout"
    NON_BARE = "non-bare"
    STRAY = "stray"

    @classmethod
    def parse(cls, value: str) -> "Mode":
        raw = str(value).strip()
        try:
            return cls(raw)
        except ValueError as exc:
            raise ValueError(f"invalid mode `{raw}`: must be one of {mode_names()}") from exc

    @property
    def categories(self) -> tuple[WarningCategory, ...]:
        return _MODE_CATEGORIES[self]

    @property
    def enumerates_matches(self) -> bool:
        """Non-bare and stray modes print matching paths bare instead of WARNING lines."""
        return self in (Mode.NON_BARE, Mode.STRAY)

    @property
    def announces_visits(self) -> bool:
        return self is Mode.ALL


_MODE_CATEGORIES: dict[Mode, tuple[WarningCategory, ...]] = {
    Mode.ALL: CATEGORY_ORDER,
    Mode.LAYOUT: (WarningCategory.LAYOUT_VIOLATION, WarningCategory.BAD_NAME_SUFFIX),
    Mode.NON_BARE: (WarningCategory.NON_BARE_LAYOUT,),
    Mode.STRAY: (WarningCategory.STRAY_FILE,),
}

DEFAULT_MODE = Mode.ALL


def mode_names() -> list[str]:
    return [mode.value for mode in Mode]
