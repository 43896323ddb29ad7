import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .exceptions import DateFormatError


logger = logging.getLogger(__name__)

WEEK_OFFSET = timedelta(hours=144)
DAYS_IN_WEEK = 7
UNSIGNED = re.compile(r"[0-9]+")


def _parse_unsigned(text, field):
    if not UNSIGNED.fullmatch(text):
        raise DateFormatError(f"Could not parse {field}: {text!r}")
    return int(text)


def _utc_date(year, month, day):
    try:
        return datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError as exc:
        raise DateFormatError(f"Invalid date {day}.{month}.{year}: {exc}") from exc


def parse_form_a(text):
    """Parse the end date of a range like ``"dd.mm.-dd.mm.yyyy"``.

    Fields are cut from the right: year after the last dot, month after the
    one before it, then the day from the last two characters left over. When
    those two are not a number (``"1.-7"`` leaves ``"-7"``) only the last
    character is used.
    """
    idx = text.rfind(".")
    if idx < 0:
        raise DateFormatError(f"No year separator in {text!r}")
    year = _parse_unsigned(text[idx + 1:], "year")

    text = text[:idx]
    idx = text.rfind(".")
    if idx < 0:
        raise DateFormatError(f"No month separator in {text!r}")
    month = _parse_unsigned(text[idx + 1:], "month")

    text = text[:idx]
    try:
        day = _parse_unsigned(text[-2:], "day")
    except DateFormatError:
        day = _parse_unsigned(text[-1:], "day")

    return _utc_date(year, month, day)


def parse_form_b(text, reference_year=None):
    """Parse the end date of a range like ``"dd.mm. - dd.mm."``.

    The last ``-`` separated segment is read as ``day/month[/year]``; a
    missing year is taken from ``reference_year`` (the current UTC year by
    default).
    """
    segment = text.split("-")[-1].strip().replace(".", "/").strip("/")
    if not segment:
        raise DateFormatError(f"No date after the last dash in {text!r}")

    fields = segment.split("/")
    if len(fields) == 2:
        if reference_year is None:
            reference_year = datetime.now(timezone.utc).year
        fields.append(str(reference_year))
    if len(fields) != 3:
        raise DateFormatError(f"Expected day/month/year, got {segment!r}")

    day, month, year = (
        _parse_unsigned(value.strip(), name)
        for value, name in zip(fields, ("day", "month", "year"))
    )
    return _utc_date(year, month, day)


DATE_PARSERS = (parse_form_a, parse_form_b)


def resolve_end_date(text, parsers=DATE_PARSERS):
    """Return the end date of the week range in ``text``.

    Each parser either returns a date or raises ``DateFormatError``; the
    first one that succeeds wins.
    """
    text = text.strip()
    reasons = []
    for parser in parsers:
        try:
            end = parser(text)
        except DateFormatError as exc:
            reasons.append(f"{parser.__name__}: {exc}")
            continue
        logger.debug("Resolved %r with %s to %s", text, parser.__name__, end.date())
        return end

    raise DateFormatError(f"Unrecognised date range {text!r} ({'; '.join(reasons)})")


@dataclass(frozen=True)
class WeekRange:
    start: datetime
    end: datetime

    @classmethod
    def from_anchor(cls, text, parsers=DATE_PARSERS):
        end = resolve_end_date(text, parsers)
        return cls(start=end - WEEK_OFFSET, end=end)

    def days(self):
        return [self.start + timedelta(days=i) for i in range(DAYS_IN_WEEK)]
