"""Runtime configuration for calendrical.

Values here may be tuned per process. Calendar constants that never change
live in ``calendrical._internal.constants``.
"""

from __future__ import annotations

import os

DEFAULT_ZONE_GROUP_ENV = "CALENDRICAL_DEFAULT_ZONE_GROUP"
DEFAULT_ZONE_GROUP = "TZDB"

# Upper bound on passes of the merge fixpoint loop.
MERGE_ITERATION_LIMIT = 100

# Offsets that are whole multiples of this many seconds are cached.
OFFSET_CACHE_GRANULARITY = 900


def get_default_zone_group() -> str:
    """Return the zone rules group used when a zone id names none.

    Reads ``CALENDRICAL_DEFAULT_ZONE_GROUP`` from the environment on each
    call and falls back to ``TZDB``.
    """
    value = os.environ.get(DEFAULT_ZONE_GROUP_ENV, "").strip()
    return value or DEFAULT_ZONE_GROUP


__all__ = [
    "DEFAULT_ZONE_GROUP_ENV",
    "DEFAULT_ZONE_GROUP",
    "MERGE_ITERATION_LIMIT",
    "OFFSET_CACHE_GRANULARITY",
    "get_default_zone_group",
]
