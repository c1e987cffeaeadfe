from __future__ import annotations

OK = 0
ERR_USAGE = 2
ERR_UNREADABLE_DIR = 3
ERR_UNKNOWN_ENTRY_TYPE = 4
ERR_ENTRY_LIMIT = 5
ERR_CONFIG = 10
ERR_VALIDATION = 65
ERR_INTERNAL = 99
