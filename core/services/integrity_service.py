"""Opt-in referential integrity check for a decoded `Library`.

Decoding does not verify that album keys resolve to masters; callers that
want that guarantee run this check afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.models import Library


@dataclass(frozen=True)
class MissingReference:
    """An album key with no entry in the master image list."""

    album_id: int
    album_name: str
    image_key: str


@dataclass
class IntegrityReport:
    """Result of an integrity check.

    Attributes:
        missing_references: Album keys that do not resolve, in album order.
        unreferenced_keys: Master keys no album refers to, sorted.
    """

    missing_references: list[MissingReference] = field(default_factory=list)
    unreferenced_keys: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing_references


class IntegrityService:
    """Cross-checks album image keys against the master image list."""

    def check(self, library: Library) -> IntegrityReport:
        report = IntegrityReport()
        referenced: set[str] = set()
        for album in library.albums:
            for key in album.images:
                referenced.add(key)
                if key not in library.master_images:
                    report.missing_references.append(
                        MissingReference(album_id=album.id, album_name=album.name, image_key=key)
                    )
        report.unreferenced_keys = sorted(set(library.master_images) - referenced)
        return report
