"""Core service interfaces and shared data structures.

This module defines simple dataclasses that represent export planning
and results used across the infrastructure and UI layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from core.models import Master


@dataclass(frozen=True)
class ExportItem:
    """One master copied into one album folder.

    Attributes:
        album_name: Folder name of the album the copy belongs to.
        image_key: Key of the master in the library.
        source: Original image path.
        target: Destination path inside the album folder.
        master: The decoded master record (used for file times).
    """

    album_name: str
    image_key: str
    source: Path
    target: Path
    master: Master


@dataclass
class ExportPlan:
    """Planned export of albums into a destination directory.

    Attributes:
        destination: Root directory receiving one folder per album.
        items: Copies to perform, in album order.
        missing_keys: (album_name, image_key) pairs that do not resolve.
    """

    destination: Path
    items: list[ExportItem] = field(default_factory=list)
    missing_keys: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class ExportResult:
    """Outcome of an export.

    Attributes:
        copied: Targets written.
        skipped: Targets left alone because they already existed.
        failed: Tuples of (source, reason) for failures.
        log_path: Optional path to the audit log.
    """

    copied: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)
    log_path: str | None = None
