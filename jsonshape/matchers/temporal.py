"""
Temporal predicates.

These matchers require a string, parse it as an RFC 3339 timestamp or
a calendar date, and optionally compare the parsed time against a
reference. Reference datetimes without tzinfo are taken as UTC.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Optional

from .models import Matcher, Mismatch, format_value


RFC3339_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt](?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


class TimeParseError(ValueError):
    """Raised when a string is not in the expected time format."""


def parse_rfc3339(value: str) -> datetime:
    """
    Parse an RFC 3339 date-time into an aware datetime.

    Fractions finer than a microsecond are truncated.

    Raises:
        TimeParseError: If the string is not a valid RFC 3339 date-time
    """
    m = RFC3339_PATTERN.fullmatch(value)
    if not m:
        raise TimeParseError(f"cannot parse {value!r} as RFC 3339 timestamp")

    offset = m.group("offset")
    try:
        if offset in ("Z", "z"):
            tz = timezone.utc
        else:
            sign = -1 if offset[0] == "-" else 1
            hours, minutes = int(offset[1:3]), int(offset[4:6])
            tz = timezone(sign * timedelta(hours=hours, minutes=minutes))

        fraction = (m.group("fraction") or "")[:6].ljust(6, "0")
        return datetime(
            int(m.group("year")),
            int(m.group("month")),
            int(m.group("day")),
            int(m.group("hour")),
            int(m.group("minute")),
            int(m.group("second")),
            int(fraction),
            tzinfo=tz,
        )
    except ValueError as e:
        raise TimeParseError(
            f"cannot parse {value!r} as RFC 3339 timestamp: {e}"
        ) from e


def parse_date(value: str) -> date:
    """
    Parse a YYYY-MM-DD calendar date.

    Raises:
        TimeParseError: If the string is not a valid date
    """
    if DATE_PATTERN.fullmatch(value):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
    raise TimeParseError(f"expected YYYY-MM-DD, got {value!r}")


def _aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


class TimeMatcher(Matcher):
    """
    Base class for matchers on time strings.

    Subclasses pick the parser and may override check() to compare
    the parsed value.
    """
    parser: Callable[[str], Any] = staticmethod(parse_rfc3339)

    def match(self, path: str, value: Any) -> Optional[Mismatch]:
        if not isinstance(value, str):
            return Mismatch.type_error(path, "time string", value)

        try:
            parsed = self.parser(value)
        except TimeParseError as e:
            return Mismatch(path=path, message=str(e), actual=value)

        return self.check(path, parsed)

    def check(self, path: str, parsed: Any) -> Optional[Mismatch]:
        return None


def _time_failure(path: str, expected: str, parsed: datetime) -> Mismatch:
    return Mismatch(
        path=path,
        message=f"expected time {expected}, got {parsed.isoformat()}",
        expected=expected,
        actual=parsed.isoformat(),
    )


@dataclass(frozen=True)
class Timestamp(TimeMatcher):
    """String holding an RFC 3339 date-time."""


@dataclass(frozen=True)
class Date(TimeMatcher):
    """String holding a YYYY-MM-DD date."""
    parser = staticmethod(parse_date)


@dataclass(frozen=True)
class TimeWithinDuration(TimeMatcher):
    """Timestamp no further than delta from expected, either side."""
    expected: datetime
    delta: timedelta

    def check(self, path: str, parsed: datetime) -> Optional[Mismatch]:
        difference = abs((parsed - _aware(self.expected)).total_seconds())
        if difference > self.delta.total_seconds():
            return _time_failure(
                path,
                f"within {self.delta} of {_aware(self.expected).isoformat()}",
                parsed,
            )
        return None


@dataclass(frozen=True)
class TimeWithinRange(TimeMatcher):
    """Timestamp between start and end, both inclusive."""
    start: datetime
    end: datetime

    def check(self, path: str, parsed: datetime) -> Optional[Mismatch]:
        start, end = _aware(self.start), _aware(self.end)
        if parsed < start or parsed > end:
            return _time_failure(
                path,
                f"between {start.isoformat()} and {end.isoformat()}",
                parsed,
            )
        return None


@dataclass(frozen=True)
class TimeBefore(TimeMatcher):
    """Timestamp strictly before a reference time."""
    before: datetime

    def check(self, path: str, parsed: datetime) -> Optional[Mismatch]:
        before = _aware(self.before)
        if not parsed < before:
            return _time_failure(path, f"before {before.isoformat()}", parsed)
        return None


@dataclass(frozen=True)
class TimeAfter(TimeMatcher):
    """Timestamp strictly after a reference time."""
    after: datetime

    def check(self, path: str, parsed: datetime) -> Optional[Mismatch]:
        after = _aware(self.after)
        if not parsed > after:
            return _time_failure(path, f"after {after.isoformat()}", parsed)
        return None
