"""ViewModel for orchestrating library loading, integrity checks and export."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from app.viewmodels.master_vm import MasterVM
from core.models import Album, Library
from core.services.integrity_service import IntegrityReport, IntegrityService
from core.services.interfaces import ExportResult


class MainVM:
    """Main application view-model.

    Mediates between a repository providing a `Library` and UI models.
    """

    def __init__(
        self,
        repo,
        integrity: IntegrityService | None = None,
        exporter=None,
    ) -> None:
        """Create a MainVM.

        Args:
            repo: Repository with a `load(path) -> Library` method.
            integrity: Integrity checker (defaults to `IntegrityService`).
            exporter: Service with `plan_export` and `execute_export`; export
                is unavailable when None.
        """
        self._repo = repo
        self._integrity = integrity or IntegrityService()
        self._exporter = exporter
        self.library: Library | None = None
        self._source_path: str | None = None

    def load_library(self, path: str | Path) -> Library:
        """Load the library at `path`; the previous library is kept on failure."""
        library = self._repo.load(path)
        self.library = library
        self._source_path = str(path)
        return library

    def get_source_path(self) -> str | None:
        """Return the last-loaded library path, if available."""
        return self._source_path

    @property
    def albums(self) -> list[Album]:
        return list(self.library.albums) if self.library else []

    def album_rows(self, album: Album) -> list[MasterVM]:
        """Rows for `album` in display order, including dangling keys."""
        if self.library is None:
            return []
        return [MasterVM(key=k, master=m) for k, m in self.library.masters_for(album)]

    def check_integrity(self) -> IntegrityReport | None:
        """Run the integrity check on the loaded library and log the outcome."""
        if self.library is None:
            return None
        report = self._integrity.check(self.library)
        if report.ok:
            logger.info(
                "Integrity check passed ({} unreferenced masters)", len(report.unreferenced_keys)
            )
        else:
            logger.warning(
                "Integrity check found {} dangling album keys", len(report.missing_references)
            )
        return report

    def export_albums(
        self,
        destination: str | Path,
        albums: list[Album] | None = None,
        replace_existing: bool = False,
    ) -> ExportResult | None:
        """Export `albums` (default: all) of the loaded library to `destination`."""
        if self.library is None or self._exporter is None:
            return None
        plan = self._exporter.plan_export(self.library, destination, albums)
        logger.info("Exporting {} files to {}", len(plan.items), destination)
        return self._exporter.execute_export(plan, replace_existing=replace_existing)
