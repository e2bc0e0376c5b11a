"""Discover archived log files that belong to an active log file."""

import logging
import os
import re
from dataclasses import dataclass
from datetime import datetime

from rotating_transport.errors import ScanError
from rotating_transport.naming import (
    ARCHIVE_SEP,
    base_name_without_ext,
    parse_archive_counter,
    parse_archive_timestamp,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArchiveRecord:
    path: str
    timestamp: datetime | None  # None when the name does not hold a valid date
    counter: int = 0

    @property
    def name(self) -> str:
        return os.path.basename(self.path)


def archive_pattern(active_path: str) -> re.Pattern:
    """Match <base>__<8 digits>_<6 digits>[-N].log for the given active file."""
    prefix = re.escape(base_name_without_ext(active_path) + ARCHIVE_SEP)
    return re.compile(prefix + r"\d{8}_\d{6}(?:-\d+)?\.log", re.ASCII)


def list_archives(active_path: str) -> list[ArchiveRecord]:
    """Return one record per archive next to active_path, in directory order.

    Raises ScanError when the directory cannot be listed.
    """
    directory = os.path.dirname(os.path.abspath(active_path))
    pattern = archive_pattern(active_path)
    records = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if not pattern.fullmatch(entry.name):
                    continue
                if not entry.is_file(follow_symlinks=False):
                    continue
                records.append(
                    ArchiveRecord(
                        path=entry.path,
                        timestamp=parse_archive_timestamp(entry.name),
                        counter=parse_archive_counter(entry.name),
                    )
                )
    except OSError as e:
        raise ScanError(f"Could not list {directory}: {e}") from e

    logger.debug("Found %d archive(s) for %s", len(records), active_path)
    return records
