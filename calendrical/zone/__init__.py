"""Offsets and zone identities.

This module provides:
    - Offset: A fixed offset from UTC, with shared cached instances
    - Zone: Fixed-offset or group:region#version zone identities
    - ZoneRules: The offset lookup interface behind a zone
    - ZoneRulesGroup: The registry of rule providers
    - ZoneResolvers: Policies for gaps and overlaps
"""

from __future__ import annotations

from calendrical.zone.offset import Offset
from calendrical.zone.rules import (
    FixedZoneRules,
    OffsetInfo,
    Transition,
    TransitionZoneRules,
    ZoneRules,
)
from calendrical.zone.groups import (
    StaticZoneRulesDataProvider,
    ZoneRulesDataProvider,
    ZoneRulesGroup,
)
from calendrical.zone.zone import FixedZone, RegionZone, Zone
from calendrical.zone.resolvers import ZoneResolver, ZoneResolvers
from calendrical.zone.aliases import OLD_IDS_POST_2005, OLD_IDS_PRE_2005

__all__: list[str] = [
    "Offset",
    "FixedZoneRules",
    "OffsetInfo",
    "Transition",
    "TransitionZoneRules",
    "ZoneRules",
    "StaticZoneRulesDataProvider",
    "ZoneRulesDataProvider",
    "ZoneRulesGroup",
    "FixedZone",
    "RegionZone",
    "Zone",
    "ZoneResolver",
    "ZoneResolvers",
    "OLD_IDS_POST_2005",
    "OLD_IDS_PRE_2005",
]
