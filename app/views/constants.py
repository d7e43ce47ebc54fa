"""
UI/view constants centralized for reuse across view modules.
"""

from __future__ import annotations

from PySide6.QtCore import Qt

# Column headers and indices
HEADERS: list[str] = [
    "Album",
    "File Name",
    "Created (UTC)",
    "Modified (UTC)",
    "Caption",
    "Comment",
    "Image Count",
]

COL_ALBUM: int = 0
COL_NAME: int = 1
COL_CREATED: int = 2
COL_MODIFIED: int = 3
COL_CAPTION: int = 4
COL_COMMENT: int = 5
COL_IMAGE_COUNT: int = 6
NUM_COLUMNS: int = 7


# Data roles
PATH_ROLE: int = Qt.UserRole  # full image path on name item
SORT_ROLE: int = Qt.UserRole + 1  # used by QSortFilterProxyModel
ALBUM_ID_ROLE: int = Qt.UserRole + 2  # album id (as text, ids are u64) on album item

MISSING_TEXT: str = "<missing>"
