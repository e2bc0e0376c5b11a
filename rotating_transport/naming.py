"""Archive file naming: <base>__<YYYYMMDD>_<HHMMSS>.log in UTC."""

import os
from datetime import datetime, timezone

ARCHIVE_SEP = "__"
ARCHIVE_EXT = ".log"
_DIGITS = "0123456789"


def pad_zeros(value, width: int) -> str:
    """Left-pad a number or numeral string with zeros. Longer values are returned unchanged.

    pad_zeros(2, 2) == "02", pad_zeros(123, 2) == "123"
    """
    return str(value).rjust(width, "0")


def format_archive_timestamp(timestamp: datetime) -> str:
    """Return the fixed-width UTC stamp, e.g. 20170802_093306."""
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(timezone.utc)
    return (
        pad_zeros(timestamp.year, 4)
        + pad_zeros(timestamp.month, 2)
        + pad_zeros(timestamp.day, 2)
        + "_"
        + pad_zeros(timestamp.hour, 2)
        + pad_zeros(timestamp.minute, 2)
        + pad_zeros(timestamp.second, 2)
    )


def base_name_without_ext(active_path: str) -> str:
    return os.path.splitext(os.path.basename(active_path))[0]


def generate_archive_name(active_path: str, timestamp: datetime, counter: int = 0) -> str:
    """Archive path for active_path rotated at timestamp, in the same directory.

    A non-zero counter disambiguates two rotations within the same second:
    app__20170802_093306-1.log
    """
    stamp = format_archive_timestamp(timestamp)
    if counter:
        stamp = f"{stamp}-{counter}"
    name = base_name_without_ext(active_path) + ARCHIVE_SEP + stamp + ARCHIVE_EXT
    return os.path.join(os.path.dirname(active_path), name)


def _numeral(text: str, width: int) -> int | None:
    if len(text) != width or any(c not in _DIGITS for c in text):
        return None
    return int(text)


def parse_archive_timestamp(archive_name: str) -> datetime | None:
    """Extract the UTC rotation time from an archive file name. Returns None on failure."""
    parts = os.path.basename(archive_name).split(ARCHIVE_SEP)
    if len(parts) != 2:
        return None
    stamp = parts[1]

    fields = [
        _numeral(stamp[0:4], 4),
        _numeral(stamp[4:6], 2),
        _numeral(stamp[6:8], 2),
        _numeral(stamp[9:11], 2),
        _numeral(stamp[11:13], 2),
        _numeral(stamp[13:15], 2),
    ]
    if any(f is None for f in fields):
        return None
    try:
        return datetime(*fields, tzinfo=timezone.utc)
    except ValueError:
        return None


def parse_archive_counter(archive_name: str) -> int:
    """Same-second counter of an archive name; 0 for a name without one."""
    parts = os.path.basename(archive_name).split(ARCHIVE_SEP)
    if len(parts) != 2:
        return 0
    rest = parts[1][15:]
    if rest.endswith(ARCHIVE_EXT):
        rest = rest[: -len(ARCHIVE_EXT)]
    if not rest.startswith("-"):
        return 0
    counter = rest[1:]
    if not counter or any(c not in _DIGITS for c in counter):
        return 0
    return int(counter)
