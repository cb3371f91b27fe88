"""Zone rules: the offset lookup behind a zone.

A ZoneRules answers two questions: which offset applies at an instant,
and which offsets are valid for a local date-time. The historical rule
tables themselves are supplied by providers registered with a
``ZoneRulesGroup``; this module only defines the lookup interface and
two simple implementations.
"""

from __future__ import annotations

import bisect
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Sequence

from calendrical.core.datetime import DateTime
from calendrical.core.period import Period
from calendrical.errors import CalendricalError
from calendrical.zone.offset import Offset

if TYPE_CHECKING:
    from calendrical.core.offsetdatetime import OffsetDateTime


class Transition:
    """A change from one offset to another on the local time-line.

    A transition with a larger offset after it is a gap: local times
    between ``local_before`` and ``local_after`` never happen. A smaller
    offset after it gives an overlap: those local times happen twice.

    Args:
        local_before: The local date-time at which the transition happens,
            measured with the offset before it.
        offset_before: The offset before the transition.
        offset_after: The offset after the transition.

    Raises:
        CalendricalError: If both offsets are equal.

    Examples:
        >>> t = Transition(DateTime.of(2008, 3, 30, 1), Offset.UTC, Offset.of_hours(1))
        >>> t.is_gap
        True
        >>> t.local_after
        DateTime(Date(2008, 3, 30), Time(2, 0, 0, 0))
    """

    __slots__ = ("_local_before", "_offset_before", "_offset_after")

    def __init__(self, local_before: DateTime, offset_before: Offset, offset_after: Offset) -> None:
        if offset_before == offset_after:
            raise CalendricalError("Offsets must not be equal")
        self._local_before = local_before
        self._offset_before = offset_before
        self._offset_after = offset_after

    @property
    def local_before(self) -> DateTime:
        return self._local_before

    @property
    def local_after(self) -> DateTime:
        return self._local_before.plus_seconds(self.size_seconds)

    @property
    def offset_before(self) -> Offset:
        return self._offset_before

    @property
    def offset_after(self) -> Offset:
        return self._offset_after

    @property
    def size_seconds(self) -> int:
        return self._offset_after.total_seconds - self._offset_before.total_seconds

    @property
    def size(self) -> Period:
        """Return the length of the gap, negative for an overlap."""
        return Period(seconds=self.size_seconds)

    @property
    def is_gap(self) -> bool:
        return self.size_seconds > 0

    @property
    def is_overlap(self) -> bool:
        return self.size_seconds < 0

    @property
    def epoch_second(self) -> int:
        return self.date_time_before.to_epoch_second()

    @property
    def date_time_before(self) -> OffsetDateTime:
        return self._local_before.at_offset(self._offset_before)

    @property
    def date_time_after(self) -> OffsetDateTime:
        return self.local_after.at_offset(self._offset_after)

    def is_valid_offset(self, offset: Offset) -> bool:
        """Return True if the offset is usable during this transition.

        No offset is valid in a gap; both are valid in an overlap.
        """
        if self.is_gap:
            return False
        return offset == self._offset_before or offset == self._offset_after

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transition):
            return NotImplemented
        return (
            self._local_before == other._local_before
            and self._offset_before == other._offset_before
            and self._offset_after == other._offset_after
        )

    def __hash__(self) -> int:
        return hash((self._local_before, self._offset_before, self._offset_after))

    def __repr__(self) -> str:
        kind = "Gap" if self.is_gap else "Overlap"
        return f"Transition[{kind} at {self.date_time_before} to {self._offset_after}]"


class OffsetInfo:
    """The offsets available for one local date-time.

    Holds either a single offset or the transition the local date-time
    falls into.
    """

    __slots__ = ("_datetime", "_offset", "_transition")

    def __init__(
        self,
        datetime: DateTime,
        offset: Offset | None = None,
        transition: Transition | None = None,
    ) -> None:
        if (offset is None) == (transition is None):
            raise CalendricalError("One, but not both, of offset or transition must be specified")
        self._datetime = datetime
        self._offset = offset
        self._transition = transition

    @property
    def datetime(self) -> DateTime:
        return self._datetime

    @property
    def offset(self) -> Offset | None:
        """Return the single valid offset, or None within a transition."""
        return self._offset

    @property
    def transition(self) -> Transition | None:
        return self._transition

    @property
    def is_transition(self) -> bool:
        return self._transition is not None

    @property
    def estimated_offset(self) -> Offset:
        """Return the offset, or the offset after the transition."""
        if self._transition is not None:
            return self._transition.offset_after
        return self._offset  # type: ignore[return-value]

    def is_valid_offset(self, offset: Offset) -> bool:
        if self._transition is not None:
            return self._transition.is_valid_offset(offset)
        return self._offset == offset

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetInfo):
            return NotImplemented
        return (
            self._datetime == other._datetime
            and self._offset == other._offset
            and self._transition == other._transition
        )

    def __hash__(self) -> int:
        return hash((self._datetime, self._offset, self._transition))

    def __repr__(self) -> str:
        value = self._transition if self._transition is not None else self._offset
        return f"OffsetInfo[{self._datetime} {value}]"


class ZoneRules(ABC):
    """Lookup of the offsets used by a zone.

    Subclasses implement ``offset_at`` and ``offset_info``.
    """

    @abstractmethod
    def offset_at(self, epoch_second: int) -> Offset:
        """Return the offset in force at an instant."""

    @abstractmethod
    def offset_info(self, datetime: DateTime) -> OffsetInfo:
        """Return the offsets available for a local date-time."""

    def offset_for(self, odt: OffsetDateTime) -> Offset:
        """Return the offset in force at the instant of ``odt``."""
        return self.offset_at(odt.to_epoch_second())

    def is_valid_offset(self, datetime: DateTime, offset: Offset) -> bool:
        return self.offset_info(datetime).is_valid_offset(offset)

    @property
    def is_fixed_offset(self) -> bool:
        return False


class FixedZoneRules(ZoneRules):
    """Rules for a zone that always uses one offset."""

    __slots__ = ("_offset",)

    def __init__(self, offset: Offset) -> None:
        self._offset = offset

    @property
    def offset(self) -> Offset:
        return self._offset

    def offset_at(self, epoch_second: int) -> Offset:
        return self._offset

    def offset_info(self, datetime: DateTime) -> OffsetInfo:
        return OffsetInfo(datetime, offset=self._offset)

    @property
    def is_fixed_offset(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedZoneRules):
            return NotImplemented
        return self._offset == other._offset

    def __hash__(self) -> int:
        return hash(self._offset)

    def __repr__(self) -> str:
        return f"FixedZoneRules[{self._offset}]"


class TransitionZoneRules(ZoneRules):
    """Rules defined by an initial offset and a table of transitions.

    Args:
        initial_offset: The offset before the first transition.
        transitions: The transitions; they are sorted by instant and each
            must start from the offset left by the one before.

    Raises:
        CalendricalError: If the transitions do not chain together.
    """

    def __init__(self, initial_offset: Offset, transitions: Iterable[Transition] = ()) -> None:
        ordered = sorted(transitions, key=lambda t: t.epoch_second)
        offset = initial_offset
        for transition in ordered:
            if transition.offset_before != offset:
                raise CalendricalError(
                    f"Transition {transition!r} does not start from offset {offset}"
                )
            offset = transition.offset_after
        self._initial_offset = initial_offset
        self._transitions: tuple[Transition, ...] = tuple(ordered)
        self._epoch_seconds = [t.epoch_second for t in ordered]

    @property
    def initial_offset(self) -> Offset:
        return self._initial_offset

    @property
    def transitions(self) -> Sequence[Transition]:
        return self._transitions

    def offset_at(self, epoch_second: int) -> Offset:
        index = bisect.bisect_right(self._epoch_seconds, epoch_second)
        if index == 0:
            return self._initial_offset
        return self._transitions[index - 1].offset_after

    def offset_info(self, datetime: DateTime) -> OffsetInfo:
        offset = self._initial_offset
        for transition in self._transitions:
            if transition.is_gap:
                if datetime < transition.local_before:
                    break
                if datetime < transition.local_after:
                    return OffsetInfo(datetime, transition=transition)
            else:
                if datetime < transition.local_after:
                    break
                if datetime < transition.local_before:
                    return OffsetInfo(datetime, transition=transition)
            offset = transition.offset_after
        return OffsetInfo(datetime, offset=offset)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitionZoneRules):
            return NotImplemented
        return (
            self._initial_offset == other._initial_offset
            and self._transitions == other._transitions
        )

    def __hash__(self) -> int:
        return hash((self._initial_offset, self._transitions))

    def __repr__(self) -> str:
        return f"TransitionZoneRules[{self._initial_offset}, {len(self._transitions)} transitions]"


__all__ = [
    "Transition",
    "OffsetInfo",
    "ZoneRules",
    "FixedZoneRules",
    "TransitionZoneRules",
]
