"""Album export planning and execution service.

Copies each album's masters into `<destination>/<album name>/`, stamps the
copies with the catalog modification time, and writes an audit CSV log.
Existing files are skipped, or moved to the recycle bin when replacing.
"""

from __future__ import annotations

from collections.abc import Iterable
import csv
from datetime import datetime
import os
from pathlib import Path
import shutil

from loguru import logger
from send2trash import send2trash

from core.models import Album, Library
from core.services.interfaces import ExportItem, ExportPlan, ExportResult
from infrastructure.logging import get_export_log_directory


_RESERVED_FOLDER_NAMES = {"", ".", ".."}


def album_folder_name(album: Album) -> str:
    """Folder name for `album`; falls back to the id for empty, "." and ".." names."""
    if album.name in _RESERVED_FOLDER_NAMES:
        return f"Album {album.id}"
    return album.name


def _unique_folder(name: str, used: set[str]) -> str:
    """Append ` (n)` to a folder name until it is unused (case-insensitive)."""
    candidate = name
    n = 2
    while candidate.lower() in used:
        candidate = f"{name} ({n})"
        n += 1
    used.add(candidate.lower())
    return candidate


def _dedupe_name(name: str, used: set[str]) -> str:
    """Append ` (n)` before the extension until `name` is unused (case-insensitive)."""
    if name.lower() not in used:
        used.add(name.lower())
        return name
    stem, suffix = os.path.splitext(name)
    n = 2
    while True:
        candidate = f"{stem} ({n}){suffix}"
        if candidate.lower() not in used:
            used.add(candidate.lower())
            return candidate
        n += 1


class ExportService:
    """Coordinates album exports and audit logging."""

    def plan_export(
        self,
        library: Library,
        destination: str | Path,
        albums: Iterable[Album] | None = None,
    ) -> ExportPlan:
        """Compute the copies needed to export `albums` (default: all albums)."""
        plan = ExportPlan(destination=Path(destination))
        # albums whose names sanitize alike still get separate folders
        used_folders: set[str] = set()
        for album in library.albums if albums is None else albums:
            folder = _unique_folder(album_folder_name(album), used_folders)
            used: set[str] = set()
            for key, master in library.masters_for(album):
                if master is None:
                    plan.missing_keys.append((folder, key))
                    continue
                file_name = _dedupe_name(master.path.name, used)
                plan.items.append(
                    ExportItem(
                        album_name=folder,
                        image_key=key,
                        source=master.path,
                        target=plan.destination / folder / file_name,
                        master=master,
                    )
                )
        if plan.missing_keys:
            logger.warning("Export plan skips {} unresolved image keys", len(plan.missing_keys))
        return plan

    def _copy_one(self, item: ExportItem, replace_existing: bool) -> str:
        """Copy a single item; return "copied" or "skipped"."""
        if not item.source.exists():
            raise FileNotFoundError(f"Source does not exist: {item.source}")
        if item.target.exists():
            if not replace_existing:
                return "skipped"
            send2trash(str(item.target))
        item.target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(item.source, item.target)
        mtime_ns = item.master.modification_date.total_nanoseconds
        os.utime(item.target, ns=(mtime_ns, mtime_ns))
        return "copied"

    def execute_export(
        self,
        plan: ExportPlan,
        replace_existing: bool = False,
        log_dir: str | None = None,
    ) -> ExportResult:
        """Execute the export plan and write an audit CSV log.

        Args:
            plan: The plan produced by `plan_export`.
            replace_existing: Send existing targets to the recycle bin and copy
                again instead of skipping them.
            log_dir: Optional directory for the audit log; defaults to
                `get_export_log_directory()`.
        """
        result = ExportResult()
        rows: list[list[str]] = []
        for item in plan.items:
            try:
                status = self._copy_one(item, replace_existing)
                reason = ""
            except (OSError, RuntimeError) as ex:
                logger.error("Export failed for {}: {}", item.source, ex)
                result.failed.append((item.source, str(ex)))
                status, reason = "failed", str(ex)
            if status == "copied":
                result.copied.append(item.target)
            elif status == "skipped":
                result.skipped.append(item.target)
            rows.append(
                [
                    item.album_name,
                    item.image_key,
                    str(item.source),
                    str(item.target),
                    status,
                    reason,
                ]
            )
        for album_name, key in plan.missing_keys:
            rows.append([album_name, key, "", "", "missing", "image key not in library"])

        try:
            base_dir = Path(log_dir) if log_dir else Path(get_export_log_directory())
            base_dir.mkdir(parents=True, exist_ok=True)
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_path = base_dir / f"export_{ts}.csv"
            with log_path.open("w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f)
                writer.writerow(["Album", "ImageKey", "Source", "Target", "Status", "Reason"])
                writer.writerows(rows)
            result.log_path = str(log_path)
            logger.info(
                "Export log written: {} ({} copied, {} skipped, {} failed)",
                log_path,
                len(result.copied),
                len(result.skipped),
                len(result.failed),
            )
        except (OSError, ValueError) as ex:
            logger.error("Write export log failed: {}", ex)
        return result
