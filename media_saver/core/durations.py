"""Pure helpers for ``HH:MM:SS`` durations stored as signed total seconds."""
from __future__ import annotations

import re


class DurationParseError(ValueError):
    """Raised when a duration string cannot be converted to seconds."""


# Leading integer of the seconds field; anything after it is ignored
_LEADING_INT = re.compile(r'\s*[+-]?\d+')


def _to_int(field: str, text: str) -> int:
    try:
        return int(field)
    except ValueError:
        raise DurationParseError(f"Invalid duration field {field!r} in {text!r}") from None


def parse_duration(text: str) -> int:
    """Convert ``"HH:MM:SS"`` to total seconds.

    Missing trailing fields default to 0, so ``"05"`` is five hours,
    ``"05:10"`` is five hours ten minutes, and ``""`` or ``"05:"`` end early
    the same way. The seconds field is read up to the end of the text and
    only its leading integer counts (``"1:2:3:4"`` is 3723). Fields are not
    range-checked: ``"00:61:00"`` gives 3660 and negative fields are carried
    as-is. Raises ``DurationParseError`` for a field that does not start with
    an integer (``"aa"``, ``"01:xx"``, ``"05::10"``).
    """
    parts = text.split(':', 2)
    # A trailing empty field means the text ended after a separator
    if parts[-1] == '':
        parts.pop()

    values = [_to_int(part, text) for part in parts[:2]]
    if len(parts) == 3:
        match = _LEADING_INT.match(parts[2])
        if match is None:
            raise DurationParseError(f"Invalid duration field {parts[2]!r} in {text!r}")
        values.append(int(match.group()))
    values.extend([0] * (3 - len(values)))

    hours, minutes, seconds = values
    return hours * 3600 + minutes * 60 + seconds


def format_duration(seconds: int) -> str:
    """Format total seconds as zero-padded ``HH:MM:SS``.

    Keeps the sign for negative values (``-75`` -> ``"-00:01:15"``); hours
    beyond 99 are printed in full.
    """
    sign = '-' if seconds < 0 else ''
    s = abs(int(seconds))
    hours = s // 3600
    minutes = (s % 3600) // 60
    secs = s % 60
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"


def add_durations(first: int, second: int) -> int:
    return first + second


def subtract_durations(first: int, second: int) -> int:
    """Return ``first - second``; the result may be negative."""
    return first - second
