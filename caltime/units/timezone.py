"""IANA timezone support for civil-day and natural-unit arithmetic.

This module provides the TimeZone class, which converts between absolute
instants and civil time in a named zone and answers the calendar
questions the rest of Caltime asks: where the surrounding midnights are,
which weekday an instant falls on, and where natural second, minute, hour
and day boundaries lie.

Zones are resolved with the standard library's zoneinfo, backed by the
tzdata distribution on hosts without a system database. The process's
local zone comes from dateutil.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz as dateutil_tz

from caltime._internal.calendar import sunday_based_weekday
from caltime._internal.constants import LATEST_INSTANT
from caltime._internal.validation import coerce_enum, require_instant
from caltime.errors import (
    InvalidArgumentRangeError,
    InvalidArgumentTypeError,
    UnresolvableTimezoneError,
)
from caltime.units.policy import DurationPolicy
from caltime.units.weekday import Weekday


class TimeZone:
    """A named IANA timezone.

    All instants returned by a TimeZone are timezone-aware datetimes in
    UTC. Instants passed in may carry any tzinfo but must not be naive.

    Attributes:
        name: The IANA identifier, or "local" for the process zone.

    Examples:
        >>> from datetime import datetime, timezone
        >>> dubai = TimeZone("Asia/Dubai")
        >>> dubai.next_midnight(datetime(2017, 7, 15, 12, tzinfo=timezone.utc))
        datetime.datetime(2017, 7, 15, 20, 0, tzinfo=datetime.timezone.utc)

        >>> TimeZone("Mars/Olympus_Mons")
        Traceback (most recent call last):
        ...
        UnresolvableTimezoneError: unknown timezone: 'Mars/Olympus_Mons'
    """

    __slots__ = ("_name", "_tz")

    _UNIT_STEPS: ClassVar[dict[DurationPolicy, timedelta]] = {
        DurationPolicy.NATURAL_SECS: timedelta(seconds=1),
        DurationPolicy.NATURAL_MINS: timedelta(minutes=1),
        DurationPolicy.NATURAL_HOURS: timedelta(hours=1),
        DurationPolicy.NATURAL_DAYS: timedelta(days=1),
    }

    def __init__(self, name: str) -> None:
        """Resolve an IANA timezone identifier.

        Args:
            name: IANA identifier such as "Etc/UTC" or "Asia/Dubai".

        Raises:
            InvalidArgumentTypeError: If name is not a string.
            UnresolvableTimezoneError: If name is empty, malformed or unknown.
        """
        if not isinstance(name, str):
            raise InvalidArgumentTypeError(
                f"timezone must be a string, got {type(name).__name__}"
            )
        if not name.strip():
            raise UnresolvableTimezoneError("timezone identifier must not be empty")
        try:
            zone = ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            raise UnresolvableTimezoneError(f"unknown timezone: {name!r}") from None
        self._name: str = name
        self._tz: tzinfo = zone

    @classmethod
    def _from_tzinfo(cls, name: str, zone: tzinfo) -> TimeZone:
        """Internal factory wrapping an already-resolved tzinfo.

        This bypasses the IANA lookup in __init__.
        """
        instance = object.__new__(cls)
        instance._name = name
        instance._tz = zone
        return instance

    @classmethod
    def local(cls) -> TimeZone:
        """Return the timezone of the running process.

        Examples:
            >>> TimeZone.local().name
            'local'
        """
        return cls._from_tzinfo("local", dateutil_tz.tzlocal())

    @classmethod
    def utc(cls) -> TimeZone:
        """Return the Etc/UTC timezone."""
        return cls("Etc/UTC")

    @classmethod
    def resolve(cls, zone: TimeZone | str | None) -> TimeZone:
        """Accept a TimeZone, an IANA name, or None for the local zone."""
        if zone is None:
            return cls.local()
        if isinstance(zone, TimeZone):
            return zone
        return cls(zone)

    @property
    def name(self) -> str:
        """The IANA identifier of this zone."""
        return self._name

    @property
    def tzinfo(self) -> tzinfo:
        """The underlying tzinfo object."""
        return self._tz

    # -------------------------------------------------------------------------
    # Civil time conversion
    # -------------------------------------------------------------------------

    def to_civil(self, instant: datetime) -> datetime:
        """Express an instant as civil time in this zone.

        Args:
            instant: A timezone-aware datetime.

        Returns:
            An aware datetime whose tzinfo is this zone.

        Raises:
            InvalidArgumentTypeError: If instant is not an aware datetime.
            InvalidArgumentRangeError: If the civil time is not representable.
        """
        instant = require_instant("instant", instant)
        try:
            return instant.astimezone(self._tz)
        except OverflowError:
            raise InvalidArgumentRangeError(
                f"{instant.isoformat()} has no civil representation in {self._name}"
            ) from None

    def from_civil(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> datetime:
        """Convert civil time in this zone to an instant in UTC.

        A civil time skipped by a forward DST transition resolves with the
        offset in force before the transition, which moves it forward by
        the size of the gap. An ambiguous civil time resolves to its first
        occurrence.

        Raises:
            InvalidArgumentRangeError: If a field is out of range, or the
                result is not representable.
        """
        try:
            civil = datetime(
                year, month, day, hour, minute, second, millisecond * 1000,
                tzinfo=self._tz,
            )
            return civil.astimezone(timezone.utc)
        except (ValueError, OverflowError) as exc:
            raise InvalidArgumentRangeError(
                f"invalid civil time in {self._name}: {exc}"
            ) from None

    def _start_of_date(self, civil_date: date) -> datetime:
        return self.from_civil(civil_date.year, civil_date.month, civil_date.day)

    # -------------------------------------------------------------------------
    # Civil day boundaries
    # -------------------------------------------------------------------------

    def start_of_day(self, instant: datetime) -> datetime:
        """Return the first instant of the civil day containing instant."""
        return self._start_of_date(self.to_civil(instant).date())

    def next_midnight(self, instant: datetime) -> datetime:
        """Return the first civil start-of-day strictly after instant.

        Returns LATEST_INSTANT when that day starts past the representable
        range.

        Examples:
            >>> from datetime import datetime, timezone
            >>> tz = TimeZone("Pacific/Kiritimati")
            >>> tz.next_midnight(datetime(2017, 7, 15, 12, tzinfo=timezone.utc))
            datetime.datetime(2017, 7, 16, 10, 0, tzinfo=datetime.timezone.utc)
        """
        civil_date = self.to_civil(instant).date()
        try:
            return self._start_of_date(civil_date + timedelta(days=1))
        except (OverflowError, InvalidArgumentRangeError):
            # The following civil day starts past the last representable instant
            return LATEST_INSTANT

    def previous_midnight(self, instant: datetime) -> datetime:
        """Return the last civil start-of-day strictly before instant.

        When instant is itself a midnight, this is the start of the
        previous civil day.
        """
        civil_date = self.to_civil(instant).date()
        start = self._start_of_date(civil_date)
        if start == instant:
            return self._start_of_date(civil_date - timedelta(days=1))
        return start

    def is_midnight(self, instant: datetime) -> bool:
        """Return True if instant is the start of a civil day."""
        return self.start_of_day(instant) == instant

    def weekday(self, instant: datetime) -> Weekday:
        """Return the civil weekday of instant, Sunday = 0."""
        return Weekday(sunday_based_weekday(self.to_civil(instant).date()))

    # -------------------------------------------------------------------------
    # Natural units
    # -------------------------------------------------------------------------

    def _natural(self, policy: DurationPolicy | int) -> DurationPolicy:
        policy = coerce_enum(DurationPolicy, "policy", policy)
        if not policy.is_natural:
            raise InvalidArgumentRangeError(
                f"{policy.name} is not a natural unit policy"
            )
        return policy

    def floor(self, instant: datetime, policy: DurationPolicy | int) -> datetime:
        """Round instant down to the start of its natural unit.

        Args:
            instant: A timezone-aware datetime.
            policy: One of the NATURAL_* duration policies.

        Returns:
            The unit boundary at or before instant, in UTC.
        """
        policy = self._natural(policy)
        if policy is DurationPolicy.NATURAL_DAYS:
            return self.start_of_day(instant)

        civil = self.to_civil(instant).replace(microsecond=0)
        if policy is DurationPolicy.NATURAL_MINS:
            civil = civil.replace(second=0)
        elif policy is DurationPolicy.NATURAL_HOURS:
            civil = civil.replace(minute=0, second=0)
        return civil.astimezone(timezone.utc)

    def ceil(self, instant: datetime, policy: DurationPolicy | int) -> datetime:
        """Round instant up to the start of the next natural unit.

        An instant already on a boundary is returned unchanged.
        Returns LATEST_INSTANT when the next boundary is not representable.
        """
        policy = self._natural(policy)
        start = self.floor(instant, policy)
        if start == instant:
            return start
        if policy is DurationPolicy.NATURAL_DAYS:
            return self.next_midnight(instant)
        try:
            return self.floor(instant + self._UNIT_STEPS[policy], policy)
        except OverflowError:
            return LATEST_INSTANT

    def count_units(
        self, begin: datetime, end: datetime, policy: DurationPolicy | int
    ) -> int:
        """Count whole natural units between two unit boundaries.

        Days are counted as civil dates, so a day shortened or lengthened
        by a DST transition still counts once.

        Args:
            begin: Unit boundary at or before end.
            end: Unit boundary.
            policy: One of the NATURAL_* duration policies.

        Returns:
            The number of units, never negative.
        """
        policy = self._natural(policy)
        if end <= begin:
            return 0
        if policy is DurationPolicy.NATURAL_DAYS:
            return (self.to_civil(end).date() - self.to_civil(begin).date()).days
        return (end - begin) // self._UNIT_STEPS[policy]

    # -------------------------------------------------------------------------
    # Comparison and representation
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeZone):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"TimeZone({self._name!r})"

    def __str__(self) -> str:
        return self._name


__all__ = ["TimeZone"]
