"""Zone identities.

A Zone is either a fixed offset or a region identified within a rules
group, optionally pinned to one version of the group's rules. Region
zones never load rules on construction: an id whose rules are not
available in this process is still a valid value until its rules are
requested.

Id grammar::

    {group}:{region}#{version}   pinned
    {group}:{region}             floating
    {region}#{version}           pinned, default group
    {region}                     floating, default group
    UTC, GMT                     UTC
    UTC+01:00, GMT-05:30         fixed offsets
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Mapping

from calendrical.config import get_default_zone_group
from calendrical.errors import ParseError, ZoneRulesError
from calendrical.zone.groups import ZoneRulesGroup
from calendrical.zone.offset import Offset
from calendrical.zone.rules import FixedZoneRules, ZoneRules

if TYPE_CHECKING:
    from calendrical.core.offsetdatetime import OffsetDateTime

ZONE_ID_PATTERN = re.compile(
    r"(?:(?P<group>[A-Za-z0-9._-]+):)?"
    r"(?P<region>[A-Za-z0-9%@~/+._-]+)"
    r"(?:#(?P<version>[A-Za-z0-9._-]+))?"
)


class Zone(ABC):
    """Base class of zone identities.

    Use ``Zone.of`` to parse an id and ``Zone.fixed`` for an offset.

    Examples:
        >>> Zone.of("Europe/Paris").id
        'Europe/Paris'
        >>> Zone.of("TZDB:Europe/Paris#2008i").version_id
        '2008i'
        >>> Zone.of("UTC+01:00").is_fixed
        True
    """

    __slots__ = ()

    UTC: ClassVar[FixedZone]

    @classmethod
    def of(cls, zone_id: str, aliases: Mapping[str, str] | None = None) -> Zone:
        """Parse a zone id.

        Args:
            zone_id: The id text.
            aliases: Optional map of legacy ids, such as
                ``OLD_IDS_POST_2005``, applied before parsing.

        Raises:
            ParseError: If the text does not follow the id grammar.
        """
        if aliases is not None:
            zone_id = aliases.get(zone_id, zone_id)
        if zone_id in ("UTC", "GMT"):
            return cls.UTC
        if (zone_id.startswith("UTC") or zone_id.startswith("GMT")) and len(zone_id) > 3:
            return cls.fixed(Offset.parse(zone_id[3:]))
        match = ZONE_ID_PATTERN.fullmatch(zone_id)
        if match is None:
            raise ParseError(f"Invalid time-zone id: {zone_id!r}", zone_id)
        group = match.group("group") or get_default_zone_group()
        return RegionZone(group, match.group("region"), match.group("version") or "")

    @classmethod
    def fixed(cls, offset: Offset) -> FixedZone:
        """Return the zone that always uses ``offset``."""
        if offset == Offset.UTC:
            return Zone.UTC
        return FixedZone(offset)

    @property
    @abstractmethod
    def id(self) -> str:
        """Return the id text."""

    @property
    def group_id(self) -> str:
        """Return the rules group id, empty for fixed zones."""
        return ""

    @property
    def region_id(self) -> str:
        return self.id

    @property
    def version_id(self) -> str:
        """Return the pinned version, empty when floating or fixed."""
        return ""

    @property
    def is_fixed(self) -> bool:
        return False

    @property
    def is_floating_version(self) -> bool:
        return self.version_id == ""

    @property
    def group(self) -> ZoneRulesGroup:
        """Return the rules group.

        Raises:
            ZoneRulesError: For fixed zones and unknown groups.
        """
        raise ZoneRulesError(f"Fixed time-zone {self.id} has no rules group")

    @abstractmethod
    def is_latest_version(self) -> bool:
        """Return True if the zone uses the latest version of its rules."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return True if the rules of this zone can be loaded."""

    @abstractmethod
    def with_floating_version(self) -> Zone:
        ...

    @abstractmethod
    def with_version(self, version_id: str) -> Zone:
        ...

    @abstractmethod
    def with_latest_version(self) -> Zone:
        ...

    @abstractmethod
    def with_latest_version_valid_for(self, odt: OffsetDateTime) -> Zone:
        ...

    @abstractmethod
    def rules(self) -> ZoneRules:
        """Return the rules, using the latest version when floating.

        Raises:
            ZoneRulesError: If the rules cannot be loaded.
        """

    @abstractmethod
    def rules_valid_for(self, odt: OffsetDateTime) -> ZoneRules:
        """Return rules that accept the offset of ``odt``.

        Raises:
            ZoneRulesError: If no suitable rules are available.
        """

    def is_valid_for(self, odt: OffsetDateTime) -> bool:
        try:
            self.rules_valid_for(odt)
        except ZoneRulesError:
            return False
        return True

    def get(self, rule: Any) -> Any:
        return rule.value_from(self)

    def __str__(self) -> str:
        return self.id

    def __bool__(self) -> bool:
        return True


class FixedZone(Zone):
    """A zone with one offset for all time. Always valid."""

    __slots__ = ("_offset", "_id")

    def __init__(self, offset: Offset) -> None:
        self._offset = offset
        self._id = "UTC" if offset == Offset.UTC else f"UTC{offset.id}"

    @property
    def offset(self) -> Offset:
        return self._offset

    @property
    def id(self) -> str:
        return self._id

    @property
    def is_fixed(self) -> bool:
        return True

    def is_latest_version(self) -> bool:
        return True

    def is_valid(self) -> bool:
        return True

    def with_floating_version(self) -> Zone:
        return self

    def with_version(self, version_id: str) -> Zone:
        """Return self for an empty version.

        Raises:
            ZoneRulesError: For any other version; fixed zones have none.
        """
        if version_id == "":
            return self
        raise ZoneRulesError(f"Fixed time-zone {self._id} does not provide versions")

    def with_latest_version(self) -> Zone:
        return self

    def with_latest_version_valid_for(self, odt: OffsetDateTime) -> Zone:
        self.rules_valid_for(odt)
        return self

    def rules(self) -> ZoneRules:
        return FixedZoneRules(self._offset)

    def rules_valid_for(self, odt: OffsetDateTime) -> ZoneRules:
        if odt.offset != self._offset:
            raise ZoneRulesError(f"Fixed time-zone {self._id} is invalid for date-time {odt}")
        return self.rules()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedZone):
            return NotImplemented
        return self._offset == other._offset

    def __hash__(self) -> int:
        return hash(self._offset)

    def __repr__(self) -> str:
        return f"Zone({self._id!r})"


class RegionZone(Zone):
    """A region within a rules group, floating or pinned to a version."""

    __slots__ = ("_group_id", "_region_id", "_version_id", "_id")

    def __init__(self, group_id: str, region_id: str, version_id: str = "") -> None:
        self._group_id = group_id
        self._region_id = region_id
        self._version_id = version_id
        text = region_id if group_id == get_default_zone_group() else f"{group_id}:{region_id}"
        self._id = f"{text}#{version_id}" if version_id else text

    @property
    def id(self) -> str:
        return self._id

    @property
    def group_id(self) -> str:
        return self._group_id

    @property
    def region_id(self) -> str:
        return self._region_id

    @property
    def version_id(self) -> str:
        return self._version_id

    @property
    def group(self) -> ZoneRulesGroup:
        return ZoneRulesGroup.group(self._group_id)

    def is_latest_version(self) -> bool:
        if self.is_floating_version:
            return True
        return self._version_id == self.group.latest_version_id(self._region_id)

    def is_valid(self) -> bool:
        if not ZoneRulesGroup.is_valid_group_id(self._group_id):
            return False
        group = self.group
        if self.is_floating_version:
            return group.is_valid_region_id(self._region_id)
        return group.is_valid_rules(self._region_id, self._version_id)

    def with_floating_version(self) -> Zone:
        if self.is_floating_version:
            return self
        return RegionZone(self._group_id, self._region_id)

    def with_version(self, version_id: str) -> Zone:
        """Return this region pinned to a version, or floating for ``""``.

        Raises:
            ZoneRulesError: If the group does not hold the region in that
                version.
        """
        if version_id == "":
            return self.with_floating_version()
        if not self.group.is_valid_rules(self._region_id, version_id):
            raise ZoneRulesError(
                f"Unknown version {version_id} for time-zone {self._region_id} "
                f"in group {self._group_id}"
            )
        if version_id == self._version_id:
            return self
        return RegionZone(self._group_id, self._region_id, version_id)

    def with_latest_version(self) -> Zone:
        latest = self.group.latest_version_id(self._region_id)
        if latest == self._version_id:
            return self
        return RegionZone(self._group_id, self._region_id, latest)

    def with_latest_version_valid_for(self, odt: OffsetDateTime) -> Zone:
        version = self.group.latest_version_id_valid_for(self._region_id, odt)
        if version == self._version_id:
            return self
        return RegionZone(self._group_id, self._region_id, version)

    def rules(self) -> ZoneRules:
        group = self.group
        if self.is_floating_version:
            return group.rules(self._region_id, group.latest_version_id(self._region_id))
        return group.rules(self._region_id, self._version_id)

    def rules_valid_for(self, odt: OffsetDateTime) -> ZoneRules:
        group = self.group
        if self.is_floating_version:
            version = group.latest_version_id_valid_for(self._region_id, odt)
            return group.rules(self._region_id, version)
        rules = group.rules(self._region_id, self._version_id)
        if not rules.is_valid_offset(odt.datetime, odt.offset):
            raise ZoneRulesError(
                f"Offset {odt.offset} is invalid for time-zone {self._id} at {odt.datetime}"
            )
        return rules

    def _key(self) -> tuple[str, str, str]:
        return (self._group_id, self._region_id, self._version_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegionZone):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        text = f"{self._group_id}:{self._region_id}"
        if self._version_id:
            text += f"#{self._version_id}"
        return f"Zone({text!r})"


Zone.UTC = FixedZone(Offset.UTC)


__all__ = ["ZONE_ID_PATTERN", "Zone", "FixedZone", "RegionZone"]
