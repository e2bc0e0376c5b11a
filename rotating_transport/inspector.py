"""Inspector logic: list archived logs next to an active file."""

import os
from dataclasses import dataclass
from datetime import datetime

from rotating_transport.rotator import sort_newest_first
from rotating_transport.scanner import list_archives


@dataclass(frozen=True)
class ArchiveInfo:
    name: str
    path: str
    timestamp: datetime | None
    size: int


def describe_archives(active_path: str) -> list[ArchiveInfo]:
    """Archives of active_path, newest first, with their sizes."""
    infos = []
    for record in sort_newest_first(list_archives(active_path)):
        try:
            size = os.path.getsize(record.path)
        except OSError:
            # Removed between listing and stat.
            continue
        infos.append(ArchiveInfo(record.name, record.path, record.timestamp, size))
    return infos


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"
