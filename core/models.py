"""Core domain models for an iPhoto library catalog."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Seconds between 1970-01-01 and 2001-01-01 (UTC)
FORMAT_EPOCH_OFFSET = 978307200
NANOS_PER_SECOND = 1_000_000_000

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Timestamp:
    """Absolute point in time relative to the Unix epoch, nanosecond resolution."""

    seconds: int
    nanoseconds: int = 0

    @property
    def total_nanoseconds(self) -> int:
        """Nanoseconds since the Unix epoch, suitable for `os.utime(ns=...)`."""
        return self.seconds * NANOS_PER_SECOND + self.nanoseconds

    def to_datetime(self) -> datetime:
        """Return an aware UTC datetime (sub-microsecond digits are dropped)."""
        return _UNIX_EPOCH + timedelta(
            seconds=self.seconds, microseconds=self.nanoseconds // 1000
        )


@dataclass(frozen=True)
class Album:
    """An ordered, named collection of master image keys."""

    id: int
    name: str
    images: tuple[str, ...]


@dataclass(frozen=True)
class Master:
    """One original image asset tracked by the library."""

    path: Path
    creation_date: Timestamp
    modification_date: Timestamp
    caption: str
    comment: str


@dataclass(frozen=True)
class Library:
    """Root record of a decoded catalog."""

    application_version: str
    archive_path: Path
    archive_id: str
    major_version: int
    minor_version: int
    albums: tuple[Album, ...]
    master_images: Mapping[str, Master]

    def masters_for(self, album: Album) -> Iterator[tuple[str, Master | None]]:
        """Yield `(key, master)` in album order; master is None for dangling keys."""
        for key in album.images:
            yield key, self.master_images.get(key)
