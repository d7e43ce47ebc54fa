from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from loguru import logger

from app.viewmodels.main_vm import MainVM
from app.views.main_window import MainWindow
from infrastructure.export_service import ExportService
from infrastructure.logging import init_logging
from infrastructure.plist_repository import PlistLibraryRepository
from infrastructure.settings import JsonSettings


BASE_DIR = Path(__file__).parent


def _initial_library_path(settings: JsonSettings, argv: list[str]) -> Path | None:
    # A path on the command line wins over settings.json
    if len(argv) > 1 and argv[1] and not argv[1].startswith("-"):
        return Path(argv[1]).expanduser()
    return settings.get_path("library.path")


def main() -> int:
    settings = JsonSettings(BASE_DIR / "settings.json")
    init_logging(level=str(settings.get("logging.level", "INFO")))

    app = QApplication(sys.argv)

    repo = PlistLibraryRepository()
    vm = MainVM(repo, exporter=ExportService())
    win = MainWindow(vm=vm, settings=settings)

    library_path = _initial_library_path(settings, sys.argv)
    if library_path is not None and library_path.exists():
        win.open_library(library_path)
    else:
        logger.info("No library opened at startup (path: {})", library_path)

    win.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
