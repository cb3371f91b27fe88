"""Zone rules groups and their data providers.

Zone rules are organised into groups, such as ``TZDB``. Each group holds
one or more versions of its rules, each version covering a set of
regions. Providers supply the data and are registered at runtime; no
rule data ships with this package.
"""

from __future__ import annotations

import logging
import re
import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Mapping

from calendrical.errors import CalendricalError, ZoneRulesError
from calendrical.zone.rules import ZoneRules

if TYPE_CHECKING:
    from calendrical.core.offsetdatetime import OffsetDateTime

logger = logging.getLogger(__name__)

GROUP_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]+")


class ZoneRulesDataProvider(ABC):
    """Source of zone rules for one group.

    Subclasses report the versions and regions they hold and return the
    rules for a region in a version.
    """

    @property
    @abstractmethod
    def group_id(self) -> str:
        """Return the id of the group the data belongs to."""

    @abstractmethod
    def version_ids(self) -> set[str]:
        """Return the versions this provider holds."""

    @abstractmethod
    def region_ids(self, version_id: str) -> set[str]:
        """Return the regions in a version, empty for unknown versions."""

    @abstractmethod
    def rules(self, region_id: str, version_id: str) -> ZoneRules | None:
        """Return the rules, or None if the region is not in the version."""


class StaticZoneRulesDataProvider(ZoneRulesDataProvider):
    """A provider backed by an in-memory mapping.

    Args:
        group_id: The group the data belongs to.
        data: Mapping of version id to a mapping of region id to rules.

    Examples:
        >>> from calendrical.zone.offset import Offset
        >>> from calendrical.zone.rules import FixedZoneRules
        >>> provider = StaticZoneRulesDataProvider(
        ...     "DEMO", {"1": {"Demo/Fixed": FixedZoneRules(Offset.of_hours(3))}}
        ... )
        >>> sorted(provider.region_ids("1"))
        ['Demo/Fixed']
    """

    def __init__(self, group_id: str, data: Mapping[str, Mapping[str, ZoneRules]]) -> None:
        self._group_id = group_id
        self._data = {version: dict(regions) for version, regions in data.items()}

    @property
    def group_id(self) -> str:
        return self._group_id

    def version_ids(self) -> set[str]:
        return set(self._data)

    def region_ids(self, version_id: str) -> set[str]:
        return set(self._data.get(version_id, {}))

    def rules(self, region_id: str, version_id: str) -> ZoneRules | None:
        return self._data.get(version_id, {}).get(region_id)


class ZoneRulesGroup:
    """A named group of versioned zone rules.

    Groups are created by registering providers and looked up with
    ``ZoneRulesGroup.group``. Version ids sort as text, and the largest
    one is the latest version.
    """

    _groups: ClassVar[dict[str, ZoneRulesGroup]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, group_id: str) -> None:
        self._group_id = group_id
        self._versions: dict[str, ZoneRulesDataProvider] = {}

    @classmethod
    def is_valid_group_id(cls, group_id: str) -> bool:
        """Return True if a group with this id has been registered."""
        return group_id in cls._groups

    @classmethod
    def group(cls, group_id: str) -> ZoneRulesGroup:
        """Return a registered group.

        Raises:
            ZoneRulesError: If no provider registered the group.
        """
        group = cls._groups.get(group_id)
        if group is None:
            raise ZoneRulesError(f"Unknown time-zone group: {group_id}")
        return group

    @classmethod
    def available_groups(cls) -> list[ZoneRulesGroup]:
        return sorted(cls._groups.values(), key=lambda g: g.group_id)

    @classmethod
    def register_provider(cls, provider: ZoneRulesDataProvider) -> ZoneRulesGroup:
        """Register a provider, creating its group on first use.

        Raises:
            CalendricalError: If the group id is malformed.
            ZoneRulesError: If one of its versions is already registered.
        """
        group_id = provider.group_id
        if not GROUP_ID_PATTERN.fullmatch(group_id):
            raise CalendricalError(f"Invalid group id: {group_id!r}")
        with cls._lock:
            group = cls._groups.get(group_id)
            if group is None:
                group = ZoneRulesGroup(group_id)
            group._add(provider)
            cls._groups[group_id] = group
        logger.info(
            "Registered zone rules provider for group %s with versions %s",
            group_id,
            ", ".join(sorted(provider.version_ids())),
        )
        return group

    def _add(self, provider: ZoneRulesDataProvider) -> None:
        versions = provider.version_ids()
        clashes = versions & set(self._versions)
        if clashes:
            raise ZoneRulesError(
                f"Cannot register zone rules for group {self._group_id}, "
                f"versions already registered: {', '.join(sorted(clashes))}"
            )
        updated = dict(self._versions)
        for version in versions:
            updated[version] = provider
        self._versions = updated

    @property
    def group_id(self) -> str:
        return self._group_id

    def available_version_ids(self) -> list[str]:
        """Return every version id, latest first."""
        return sorted(self._versions, reverse=True)

    def region_ids(self, version_id: str | None = None) -> set[str]:
        """Return the regions of one version, or of all versions when None."""
        if version_id is not None:
            provider = self._versions.get(version_id)
            return provider.region_ids(version_id) if provider else set()
        regions: set[str] = set()
        for version, provider in self._versions.items():
            regions |= provider.region_ids(version)
        return regions

    def is_valid_region_id(self, region_id: str) -> bool:
        return any(region_id in p.region_ids(v) for v, p in self._versions.items())

    def is_valid_rules(self, region_id: str, version_id: str) -> bool:
        provider = self._versions.get(version_id)
        return provider is not None and region_id in provider.region_ids(version_id)

    def rules(self, region_id: str, version_id: str) -> ZoneRules:
        """Return the rules for a region in a version.

        Raises:
            ZoneRulesError: If the version or the region is unknown.
        """
        provider = self._versions.get(version_id)
        if provider is None:
            raise ZoneRulesError(
                f"Unknown version {version_id} for time-zone group {self._group_id}"
            )
        rules = provider.rules(region_id, version_id)
        if rules is None:
            raise ZoneRulesError(
                f"Unknown time-zone region {region_id} in group {self._group_id} "
                f"version {version_id}"
            )
        return rules

    def latest_version_id(self, region_id: str) -> str:
        """Return the latest version holding the region.

        Raises:
            ZoneRulesError: If no version holds the region.
        """
        for version in self.available_version_ids():
            if self.is_valid_rules(region_id, version):
                return version
        raise ZoneRulesError(f"Unknown time-zone region {region_id} in group {self._group_id}")

    def latest_version_id_valid_for(self, region_id: str, odt: OffsetDateTime) -> str:
        """Return the latest version whose rules accept the offset of ``odt``.

        Raises:
            ZoneRulesError: If no version holds the region with that offset.
        """
        for version in self.available_version_ids():
            if self.is_valid_rules(region_id, version):
                rules = self.rules(region_id, version)
                if rules.is_valid_offset(odt.datetime, odt.offset):
                    return version
        raise ZoneRulesError(
            f"No rules could be found for {self._group_id}:{region_id} "
            f"that are valid for date-time {odt}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneRulesGroup):
            return NotImplemented
        return self._group_id == other._group_id

    def __hash__(self) -> int:
        return hash(self._group_id)

    def __repr__(self) -> str:
        return f"ZoneRulesGroup[{self._group_id}]"


__all__ = [
    "GROUP_ID_PATTERN",
    "ZoneRulesDataProvider",
    "StaticZoneRulesDataProvider",
    "ZoneRulesGroup",
]
