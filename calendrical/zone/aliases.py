"""Legacy three-letter zone ids.

Older systems used short ids such as ``PST``. These tables map them to
region ids. The meaning of ``EST``, ``MST`` and ``HST`` changed in 2005,
so two tables are provided; pass one to ``Zone.of`` to accept the ids.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

_BASE: dict[str, str] = {
    "ACT": "Australia/Darwin",
    "AET": "Australia/Sydney",
    "AGT": "America/Argentina/Buenos_Aires",
    "ART": "Africa/Cairo",
    "AST": "America/Anchorage",
    "BET": "America/Sao_Paulo",
    "BST": "Asia/Dhaka",
    "CAT": "Africa/Harare",
    "CNT": "America/St_Johns",
    "CST": "America/Chicago",
    "CTT": "Asia/Shanghai",
    "EAT": "Africa/Addis_Ababa",
    "ECT": "Europe/Paris",
    "IET": "America/Indiana/Indianapolis",
    "IST": "Asia/Kolkata",
    "JST": "Asia/Tokyo",
    "MIT": "Pacific/Apia",
    "NET": "Asia/Yerevan",
    "NST": "Pacific/Auckland",
    "PLT": "Asia/Karachi",
    "PNT": "America/Phoenix",
    "PRT": "America/Puerto_Rico",
    "PST": "America/Los_Angeles",
    "SST": "Pacific/Guadalcanal",
    "VST": "Asia/Ho_Chi_Minh",
}

# Before 2005 EST, MST and HST named regions.
OLD_IDS_PRE_2005: Mapping[str, str] = MappingProxyType({
    **_BASE,
    "EST": "America/Indianapolis",
    "MST": "America/Phoenix",
    "HST": "Pacific/Honolulu",
})

# From 2005 they name fixed offsets.
OLD_IDS_POST_2005: Mapping[str, str] = MappingProxyType({
    **_BASE,
    "EST": "UTC-05:00",
    "MST": "UTC-07:00",
    "HST": "UTC-10:00",
})


__all__ = ["OLD_IDS_PRE_2005", "OLD_IDS_POST_2005"]
