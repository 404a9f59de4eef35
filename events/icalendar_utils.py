"""Utilities for generating iCalendar (.ics) files for events."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime, timedelta
from datetime import timezone as dt_timezone

from django.utils.dateparse import parse_date, parse_datetime
from icalendar import vDatetime

LINE_BREAK = "\r\n"

PRODID = "-//GamePlan//EN"
UID_DOMAIN = "gameplan"
DEFAULT_DURATION_MINUTES = 60


class InvalidEventDateError(ValueError):
    """Raised when an event's date cannot be read as a point in time."""


def build_ics_from_event(
    event,
    duration_minutes: int = DEFAULT_DURATION_MINUTES,
    event_url: str | None = None,
    generated_at: datetime | None = None,
) -> str:
    """Generate a single-event iCalendar document for ``event``.

    Args:
        event: An Event model instance, or a mapping with the keys ``id``,
               ``name``, ``event_date``, ``description`` and ``venue``.
        duration_minutes: Assumed length of the event.
        event_url: Optional link embedded as the event's URL.
        generated_at: Stamp time of the document, defaults to now.

    Returns:
        The calendar as text, every line terminated by CRLF.

    Raises:
        InvalidEventDateError: ``event_date`` is not a valid date/time, or
            the event would end outside the years 1-9999.
    """
    start = parse_event_date(_field(event, "event_date"))
    uid = f"{_field(event, 'id')}@{UID_DOMAIN}"
    if generated_at is None:
        generated_at = datetime.now(tz=dt_timezone.utc)
    try:
        end = start + timedelta(minutes=duration_minutes)
        dtstamp = format_timestamp(generated_at)
        dtstart = format_timestamp(start)
        dtend = format_timestamp(end)
    except OverflowError as exc:
        # Parseable, but the end time or its UTC form falls outside year 1-9999.
        raise InvalidEventDateError(
            f"Event date out of range: {_field(event, 'event_date')!r}"
        ) from exc

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        "BEGIN:VEVENT",
        f"UID:{escape_text(uid)}",
        f"SUMMARY:{escape_text(_field(event, 'name'))}",
        f"DTSTAMP:{dtstamp}",
        f"DTSTART:{dtstart}",
        f"DTEND:{dtend}",
    ]

    description = _field(event, "description")
    if description:
        lines.append(f"DESCRIPTION:{escape_text(description)}")

    lines.append(f"LOCATION:{escape_text(_field(event, 'venue'))}")

    if event_url:
        lines.append(f"URL:{escape_text(event_url)}")

    lines += ["END:VEVENT", "END:VCALENDAR"]
    return LINE_BREAK.join(lines) + LINE_BREAK


def escape_text(value) -> str:
    """Escape a TEXT value. Backslashes go first so later escapes stay intact."""
    escaped = str(value).replace("\\", "\\\\").replace(";", "\\;").replace(",", "\\,")
    return re.sub(r"\r\n|\r|\n", r"\\n", escaped)


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as a UTC date-time, e.g. ``20240601T100000Z``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt_timezone.utc)
    return vDatetime(value.astimezone(dt_timezone.utc)).to_ical().decode("ascii")


def parse_event_date(value) -> datetime:
    """Read an event date as an aware datetime.

    Accepts datetimes, dates and ISO-8601 strings. Values without an offset
    are taken to be UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        parsed = _parse_iso(value.strip())
    else:
        parsed = None

    if parsed is None:
        raise InvalidEventDateError(f"Invalid event date: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt_timezone.utc)
    return parsed


def _parse_iso(value: str) -> datetime | None:
    try:
        parsed = parse_datetime(value)
        if parsed is None:
            day = parse_date(value)
            if day is not None:
                parsed = datetime(day.year, day.month, day.day)
    except ValueError:
        # Well formatted but impossible, e.g. February 30th.
        return None
    return parsed


def calendar_filename(event) -> str:
    """Download name for an event's invite: ``<slugified-name>-<id>.ics``."""
    slug = re.sub(r"[^a-z0-9]+", "-", str(_field(event, "name")).lower()).strip("-")
    return f"{slug or 'event'}-{_field(event, 'id')}.ics"


def _field(event, name):
    if isinstance(event, Mapping):
        return event.get(name)
    return getattr(event, name, None)
