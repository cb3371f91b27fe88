"""Zone resolvers.

Turning a local date-time into an offset date-time in a zone is usually
unambiguous. Near a transition it is not: in a gap the local time does
not exist, and in an overlap it exists twice. A ZoneResolver decides
what to do in those two cases.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from calendrical.errors import ZoneRulesError

if TYPE_CHECKING:
    from calendrical.core.datetime import DateTime
    from calendrical.core.offsetdatetime import OffsetDateTime
    from calendrical.zone.rules import Transition, ZoneRules
    from calendrical.zone.zone import Zone

logger = logging.getLogger(__name__)


class ZoneResolver(ABC):
    """Base class of zone resolvers.

    ``resolve`` looks up the offsets for the local date-time and calls
    ``handle_gap`` or ``handle_overlap`` when there is no single answer.
    The result must be valid for the rules.
    """

    name = "ZoneResolver"

    def resolve(
        self,
        zone: Zone,
        datetime: DateTime,
        old: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        """Resolve a local date-time in a zone.

        Args:
            zone: The zone.
            datetime: The local date-time.
            old: A previous value, used by RETAIN_OFFSET.

        Raises:
            ZoneRulesError: If the rules cannot be loaded, the resolver
                rejects the date-time, or it returns an invalid offset.
        """
        rules = zone.rules()
        info = rules.offset_info(datetime)
        transition = info.transition
        if transition is None:
            return datetime.at_offset(info.estimated_offset)

        if transition.is_gap:
            result = self.handle_gap(zone, rules, transition, datetime, old)
        else:
            result = self.handle_overlap(zone, rules, transition, datetime, old)
        logger.debug("Resolved %s in %s with %s to %s", datetime, zone, self.name, result)

        if not rules.is_valid_offset(result.datetime, result.offset):
            raise ZoneRulesError(
                f"ZoneResolver {self.name} produced an invalid result: {result} "
                f"for date-time {datetime} in time-zone {zone}"
            )
        return result

    def __call__(
        self,
        zone: Zone,
        datetime: DateTime,
        old: OffsetDateTime | None = None,
    ) -> OffsetDateTime:
        return self.resolve(zone, datetime, old)

    @abstractmethod
    def handle_gap(
        self,
        zone: Zone,
        rules: ZoneRules,
        transition: Transition,
        datetime: DateTime,
        old: OffsetDateTime | None,
    ) -> OffsetDateTime:
        """Return the result for a local date-time inside a gap."""

    @abstractmethod
    def handle_overlap(
        self,
        zone: Zone,
        rules: ZoneRules,
        transition: Transition,
        datetime: DateTime,
        old: OffsetDateTime | None,
    ) -> OffsetDateTime:
        """Return the result for a local date-time inside an overlap."""

    def __repr__(self) -> str:
        return f"ZoneResolvers.{self.name}"


class _Strict(ZoneResolver):
    """Reject both gaps and overlaps."""

    name = "STRICT"

    def handle_gap(self, zone, rules, transition, datetime, old):
        raise ZoneRulesError(
            f"Local time {datetime} does not exist in time-zone {zone} "
            f"due to a gap in the local time-line"
        )

    def handle_overlap(self, zone, rules, transition, datetime, old):
        raise ZoneRulesError(
            f"Local time {datetime} has two matching offsets, {transition.offset_before} "
            f"and {transition.offset_after}, in time-zone {zone}"
        )


class _PreTransition(ZoneResolver):
    """Gap: the last instant before it. Overlap: the earlier offset."""

    name = "PRE_TRANSITION"

    def handle_gap(self, zone, rules, transition, datetime, old):
        return transition.local_before.minus_nanos(1).at_offset(transition.offset_before)

    def handle_overlap(self, zone, rules, transition, datetime, old):
        return datetime.at_offset(transition.offset_before)


class _PostTransition(ZoneResolver):
    """Gap: the first instant after it. Overlap: the later offset."""

    name = "POST_TRANSITION"

    def handle_gap(self, zone, rules, transition, datetime, old):
        return transition.date_time_after

    def handle_overlap(self, zone, rules, transition, datetime, old):
        return datetime.at_offset(transition.offset_after)


class _PostGapPreOverlap(ZoneResolver):
    """Gap: the first instant after it. Overlap: the earlier offset."""

    name = "POST_GAP_PRE_OVERLAP"

    def handle_gap(self, zone, rules, transition, datetime, old):
        return transition.date_time_after

    def handle_overlap(self, zone, rules, transition, datetime, old):
        return datetime.at_offset(transition.offset_before)


class _RetainOffset(ZoneResolver):
    """Gap: the first instant after it. Overlap: the old offset if still valid."""

    name = "RETAIN_OFFSET"

    def handle_gap(self, zone, rules, transition, datetime, old):
        return transition.date_time_after

    def handle_overlap(self, zone, rules, transition, datetime, old):
        if old is not None and transition.is_valid_offset(old.offset):
            return datetime.at_offset(old.offset)
        return datetime.at_offset(transition.offset_after)


class _PushForward(ZoneResolver):
    """Gap: move the local time forward by the gap length. Overlap: the later offset."""

    name = "PUSH_FORWARD"

    def handle_gap(self, zone, rules, transition, datetime, old):
        return datetime.plus_seconds(transition.size_seconds).at_offset(transition.offset_after)

    def handle_overlap(self, zone, rules, transition, datetime, old):
        return datetime.at_offset(transition.offset_after)


class _Combination(ZoneResolver):
    """Delegate gaps to one resolver and overlaps to another."""

    def __init__(self, gap_resolver: ZoneResolver, overlap_resolver: ZoneResolver) -> None:
        self._gap_resolver = gap_resolver
        self._overlap_resolver = overlap_resolver
        self.name = f"combination({gap_resolver.name}, {overlap_resolver.name})"

    def handle_gap(self, zone, rules, transition, datetime, old):
        return self._gap_resolver.handle_gap(zone, rules, transition, datetime, old)

    def handle_overlap(self, zone, rules, transition, datetime, old):
        return self._overlap_resolver.handle_overlap(zone, rules, transition, datetime, old)


STRICT = _Strict()
PRE_TRANSITION = _PreTransition()
POST_TRANSITION = _PostTransition()
POST_GAP_PRE_OVERLAP = _PostGapPreOverlap()
RETAIN_OFFSET = _RetainOffset()
PUSH_FORWARD = _PushForward()


def combination(
    gap_resolver: ZoneResolver | None, overlap_resolver: ZoneResolver | None
) -> ZoneResolver:
    """Return a resolver using one policy for gaps and another for overlaps.

    A missing resolver means STRICT. Two equal resolvers return that
    resolver unchanged.
    """
    gap_resolver = gap_resolver or STRICT
    overlap_resolver = overlap_resolver or STRICT
    if gap_resolver is overlap_resolver:
        return gap_resolver
    return _Combination(gap_resolver, overlap_resolver)


class ZoneResolvers:
    """Namespace of the standard zone resolvers."""

    STRICT = STRICT
    PRE_TRANSITION = PRE_TRANSITION
    POST_TRANSITION = POST_TRANSITION
    POST_GAP_PRE_OVERLAP = POST_GAP_PRE_OVERLAP
    RETAIN_OFFSET = RETAIN_OFFSET
    PUSH_FORWARD = PUSH_FORWARD
    combination = staticmethod(combination)


__all__ = [
    "ZoneResolver",
    "ZoneResolvers",
    "STRICT",
    "PRE_TRANSITION",
    "POST_TRANSITION",
    "POST_GAP_PRE_OVERLAP",
    "RETAIN_OFFSET",
    "PUSH_FORWARD",
    "combination",
]
