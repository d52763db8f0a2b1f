"""Date parsing for the chronological sort methods.

A date parser turns an element into a comparable value and compares two
such values. :class:`IsoDateParser` is the default; hosts can supply any
object with the same two methods.
"""
from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Iterable, List, Protocol

from listops.core.exceptions import DateParseError


class DateParser(Protocol):
    def parse(self, value: Any) -> Any: ...

    def compare(self, a: Any, b: Any) -> int: ...


class IsoDateParser:
    """Parse ISO 8601 text, falling back to a list of ``strptime`` formats.

    All results are timezone-aware UTC datetimes so that values with and
    without offsets compare. Naive values are taken as UTC when
    ``assume_utc`` is set, otherwise as local time.
    """

    def __init__(self, formats: Iterable[str] = (), *, assume_utc: bool = True) -> None:
        self.formats: List[str] = list(formats)
        self.assume_utc = assume_utc

    def _normalize(self, dt: datetime) -> datetime:
        if dt.tzinfo is None:
            if self.assume_utc:
                return dt.replace(tzinfo=timezone.utc)
            return dt.astimezone(timezone.utc)
        return dt.astimezone(timezone.utc)

    def parse(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            return self._normalize(value)
        if isinstance(value, date):
            return self._normalize(datetime(value.year, value.month, value.day))

        text = "" if value is None else str(value).strip()
        if not text:
            raise DateParseError(value, formats=self.formats)

        iso = text[:-1] + "+00:00" if text[-1] in "Zz" else text
        try:
            return self._normalize(datetime.fromisoformat(iso))
        except ValueError:
            pass

        for fmt in self.formats:
            try:
                return self._normalize(datetime.strptime(text, fmt))
            except ValueError:
                continue
        raise DateParseError(value, formats=self.formats)

    def compare(self, a: datetime, b: datetime) -> int:
        return (a > b) - (a < b)


__all__ = ["DateParser", "IsoDateParser"]
