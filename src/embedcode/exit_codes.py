from __future__ import annotations

OK = 0
ERR_GENERIC = 1
ERR_USAGE = 2
ERR_CONFIG = 3
ERR_FRAGMENTATION = 4
ERR_DIRECTIVE = 5
ERR_RESOLUTION = 6
ERR_DRIFT = 7
ERR_INTERNAL = 99
