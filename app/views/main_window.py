"""MainWindow: album/master browser for a decoded iPhoto library."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from PySide6.QtWidgets import QFileDialog, QMainWindow, QMessageBox, QTreeView
from loguru import logger

from app.views.components.menu_controller import MenuController
from app.views.tree_model_builder import build_model
from core.errors import DecodeError, LibraryLoadError
from infrastructure.logging import open_latest_log


class MainWindow(QMainWindow):
    """Main application window.

    Shows albums as top-level rows and their images as children.
    """

    def __init__(self, vm: Any, settings: Any | None = None) -> None:
        """Initialize MainWindow.

        Args:
            vm: `MainVM` instance for data operations
            settings: Settings instance for configuration
        """
        super().__init__()
        self._vm = vm
        self._settings = settings
        self._model = None
        self._proxy = None

        self.tree = QTreeView()
        self.tree.setSortingEnabled(True)
        self.tree.setUniformRowHeights(True)
        self.setCentralWidget(self.tree)
        self.setWindowTitle("iPhoto Library Reader")
        self.resize(1100, 700)

        self.menu_controller = MenuController(self)
        self.menu_controller.setup_menus()
        self.menu_controller.connect_actions(
            {
                "open": self.on_open_library,
                "export": self.on_export_albums,
                "check_integrity": self.on_check_integrity,
                "open_latest_log": self.on_open_latest_log,
                "exit": self.close,
            }
        )
        self.menu_controller.set_library_actions_enabled(False)
        self.statusBar().showMessage("Ready", 3000)

    def refresh_tree(self) -> None:
        """Rebuild the tree from the view-model's current library."""
        self._model, self._proxy = build_model(self._vm)
        self.tree.setModel(self._proxy)
        self.tree.sortByColumn(0, self.tree.header().sortIndicatorOrder())
        for col in range(self._model.columnCount()):
            self.tree.resizeColumnToContents(col)
        self.menu_controller.set_library_actions_enabled(self._vm.library is not None)

    def open_library(self, path: str | Path) -> bool:
        """Load `path` through the view-model; report failures to the user."""
        try:
            library = self._vm.load_library(path)
        except (DecodeError, LibraryLoadError) as ex:
            logger.error("Open library failed: {} ({})", path, ex)
            QMessageBox.critical(self, "Open Library", f"Could not read library:\n{ex}")
            return False
        self.refresh_tree()
        self.setWindowTitle(f"iPhoto Library Reader - {self._vm.get_source_path()}")
        self.statusBar().showMessage(
            f"{len(library.albums)} albums, {len(library.master_images)} images", 5000
        )
        if self._settings is not None and self._settings.get_bool("library.check_integrity"):
            self.on_check_integrity()
        return True

    def on_open_library(self) -> None:
        start = ""
        if self._settings is not None:
            configured = self._settings.get_path("library.path")
            start = str(configured) if configured else ""
        path = QFileDialog.getExistingDirectory(self, "Open iPhoto Library", start)
        if path:
            self.open_library(path)

    def on_export_albums(self) -> None:
        start = ""
        replace = False
        if self._settings is not None:
            configured = self._settings.get_path("export.destination")
            start = str(configured) if configured else ""
            replace = self._settings.get_bool("export.replace_existing")
        dest = QFileDialog.getExistingDirectory(self, "Export Albums To", start)
        if not dest:
            return
        result = self._vm.export_albums(dest, replace_existing=replace)
        if result is None:
            return
        QMessageBox.information(
            self,
            "Export Albums",
            f"Copied: {len(result.copied)}\nSkipped: {len(result.skipped)}\n"
            f"Failed: {len(result.failed)}\nLog: {result.log_path or '-'}",
        )

    def on_check_integrity(self) -> None:
        report = self._vm.check_integrity()
        if report is None:
            return
        if report.ok:
            self.statusBar().showMessage("Integrity check passed", 5000)
            return
        lines = [
            f"{ref.album_name} ({ref.album_id}): {ref.image_key}"
            for ref in report.missing_references[:20]
        ]
        more = len(report.missing_references) - len(lines)
        if more > 0:
            lines.append(f"… and {more} more")
        QMessageBox.warning(
            self, "Integrity Check", "Album images missing from library:\n" + "\n".join(lines)
        )

    def on_open_latest_log(self) -> None:
        if not open_latest_log():
            self.statusBar().showMessage("No log file found", 3000)
