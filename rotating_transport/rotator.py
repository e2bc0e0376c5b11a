"""Rotation: archive the active file, prune old archives, reopen."""

import logging
import os
from datetime import datetime, timezone

from rotating_transport.active_file import ActiveFile
from rotating_transport.config import RotationPolicy
from rotating_transport.console import log_console
from rotating_transport.errors import RotationError, ScanError
from rotating_transport.naming import generate_archive_name, parse_archive_timestamp
from rotating_transport.scanner import ArchiveRecord, list_archives

logger = logging.getLogger(__name__)


def sort_newest_first(records: list[ArchiveRecord]) -> list[ArchiveRecord]:
    """Newest first by (timestamp, counter); undated records last. Ties keep scan order."""
    dated = [r for r in records if r.timestamp is not None]
    undated = [r for r in records if r.timestamp is None]
    return sorted(dated, key=lambda r: (r.timestamp, r.counter), reverse=True) + undated


def select_aged_out(records: list[ArchiveRecord], max_archive_count: int) -> list[ArchiveRecord]:
    return sort_newest_first(records)[max(max_archive_count, 0):]


def prune(active_path: str, max_archive_count: int, console=log_console) -> list[str]:
    """Delete archives beyond max_archive_count, oldest first. Returns deleted paths."""
    try:
        records = list_archives(active_path)
    except ScanError as e:
        console("Could not list archived logs", e)
        return []

    deleted = []
    for record in select_aged_out(records, max_archive_count):
        try:
            os.remove(record.path)
        except OSError as e:
            console(f"Could not delete {record.path}", e)
            continue
        logger.info("Deleted archived log %s", record.path)
        deleted.append(record.path)
    return deleted


def _next_counter(active_path: str, archive_path: str) -> int:
    """One above the highest counter on disk for the archive's second, or 0 if none."""
    stamp = parse_archive_timestamp(archive_path)
    try:
        records = list_archives(active_path)
    except ScanError:
        return 0
    counters = [r.counter for r in records if r.timestamp == stamp]
    return max(counters) + 1 if counters else 0


def archive_active_file(
    active_path: str, timestamp: datetime, disambiguate: bool = True
) -> str:
    """Rename the active file to its archive name. Returns the archive path.

    An existing archive is never overwritten. With disambiguate the name gets
    a -N counter above every archive already on disk for the same second,
    otherwise a taken name raises RotationError.
    """
    target = generate_archive_name(active_path, timestamp)
    if disambiguate:
        counter = _next_counter(active_path, target)
        target = generate_archive_name(active_path, timestamp, counter)
        while os.path.lexists(target):
            counter += 1
            target = generate_archive_name(active_path, timestamp, counter)
    elif os.path.lexists(target):
        raise RotationError(f"Archive {target} already exists")

    try:
        os.rename(active_path, target)
    except OSError as e:
        raise RotationError(f"Could not rename {active_path} to {target}: {e}") from e
    return target


def rotate(
    active_file: ActiveFile,
    policy: RotationPolicy,
    time_func=None,
    console=log_console,
    disambiguate: bool = True,
) -> tuple[ActiveFile | None, str | None]:
    """Archive active_file and open a fresh one at the same path.

    Returns the new ActiveFile and the archive path. The archive path is None
    when the rename was abandoned; the ActiveFile is None when the reopen
    failed, in which case the archive path is still reported.
    """
    now_func = time_func or (lambda: datetime.now(timezone.utc))
    path = active_file.path

    try:
        active_file.close()
    except OSError as e:
        console("Could not close log file before rotation", e)

    archived = None
    try:
        archived = archive_active_file(path, now_func(), disambiguate)
    except RotationError as e:
        console("Could not rotate log", e)
    else:
        logger.info("Archived %s as %s", path, archived)
        prune(path, policy.max_archive_count, console)

    try:
        return ActiveFile.open(path, "a"), archived
    except OSError as e:
        console(f"Could not reopen log file {path}", e)
        return None, archived
