"""MenuController: Manages menu creation and action connections."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QMenuBar


class MenuController:
    """Manages main window menu creation and action connections."""

    def __init__(self, main_window: QMainWindow) -> None:
        self.window = main_window
        self.actions: dict[str, QAction] = {}

    def setup_menus(self) -> dict[str, QAction]:
        """Create all menus and return action references.

        Returns:
            Dictionary mapping action names to QAction instances
        """
        menubar = QMenuBar(self.window)

        file_menu = menubar.addMenu("File")
        self.actions["open"] = file_menu.addAction("Open Library…")
        self.actions["export"] = file_menu.addAction("Export Albums…")
        file_menu.addSeparator()
        self.actions["exit"] = file_menu.addAction("Exit")

        tools_menu = menubar.addMenu("Tools")
        self.actions["check_integrity"] = tools_menu.addAction("Check Integrity")
        tools_menu.addSeparator()
        self.actions["open_latest_log"] = tools_menu.addAction("Open Latest Log")

        self.window.setMenuBar(menubar)
        return self.actions

    def connect_actions(self, handlers: dict[str, Callable]) -> None:
        """Connect menu actions to handler callables keyed by action name."""
        for name, handler in handlers.items():
            action = self.actions.get(name)
            if action is not None:
                action.triggered.connect(handler)

    def set_library_actions_enabled(self, enabled: bool) -> None:
        """Enable actions that need a loaded library."""
        for name in ("export", "check_integrity"):
            if name in self.actions:
                self.actions[name].setEnabled(enabled)
