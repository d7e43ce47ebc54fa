"""Lightweight view model wrapper around a `Master` referenced by an album."""

from __future__ import annotations

from dataclasses import dataclass

from core.models import Master, Timestamp

DATE_FMT = "%Y-%m-%d %H:%M:%S"


def _format(ts: Timestamp) -> str:
    try:
        return ts.to_datetime().strftime(DATE_FMT)
    except OverflowError:
        # beyond the years datetime can represent
        return str(ts.seconds)


@dataclass(frozen=True)
class MasterVM:
    """Expose display properties for one album entry.

    `master` is None when the album key has no entry in the library.
    """

    key: str
    master: Master | None

    @property
    def missing(self) -> bool:
        return self.master is None

    @property
    def file_name(self) -> str:
        """Base name of the image path (empty for missing entries)."""
        return self.master.path.name if self.master else ""

    @property
    def path(self) -> str:
        return str(self.master.path) if self.master else ""

    @property
    def created(self) -> str:
        """Creation date formatted in UTC."""
        return _format(self.master.creation_date) if self.master else ""

    @property
    def modified(self) -> str:
        """Modification date formatted in UTC."""
        return _format(self.master.modification_date) if self.master else ""

    @property
    def caption(self) -> str:
        return self.master.caption if self.master else ""

    @property
    def comment(self) -> str:
        return self.master.comment if self.master else ""
