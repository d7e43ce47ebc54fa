from __future__ import annotations

from PySide6.QtCore import QSortFilterProxyModel, Qt
from PySide6.QtGui import QStandardItem, QStandardItemModel

from app.views.constants import (
    ALBUM_ID_ROLE,
    COL_ALBUM,
    COL_CAPTION,
    COL_COMMENT,
    COL_CREATED,
    COL_IMAGE_COUNT,
    COL_MODIFIED,
    COL_NAME,
    HEADERS,
    MISSING_TEXT,
    NUM_COLUMNS,
    PATH_ROLE,
    SORT_ROLE,
)


def _row(values: dict[int, str]) -> list[QStandardItem]:
    row = [QStandardItem(values.get(col, "")) for col in range(NUM_COLUMNS)]
    for it in row:
        it.setEditable(False)
    return row


def build_model(vm) -> tuple[QStandardItemModel, QSortFilterProxyModel]:
    """Builds the album tree model and a proxy for sorting with roles.

    `vm` is a `MainVM`. Albums are top-level rows in catalog order; their
    images are child rows from `vm.album_rows`. Keys missing from the library
    show as `<missing>`.
    """
    model = QStandardItemModel()
    model.setHorizontalHeaderLabels(HEADERS)

    for position, album in enumerate(vm.albums):
        album_row = _row({COL_ALBUM: album.name, COL_IMAGE_COUNT: str(len(album.images))})
        album_item = album_row[COL_ALBUM]
        album_item.setData(str(album.id), ALBUM_ID_ROLE)
        album_item.setData(position, SORT_ROLE)
        album_row[COL_IMAGE_COUNT].setData(len(album.images), SORT_ROLE)
        model.appendRow(album_row)

        for index, row in enumerate(vm.album_rows(album)):
            child_row = _row(
                {
                    COL_NAME: MISSING_TEXT if row.missing else row.file_name,
                    COL_CREATED: row.created,
                    COL_MODIFIED: row.modified,
                    COL_CAPTION: row.caption,
                    COL_COMMENT: row.comment,
                }
            )
            child_row[COL_ALBUM].setData(index, SORT_ROLE)
            child_row[COL_NAME].setData(row.file_name.lower(), SORT_ROLE)
            child_row[COL_NAME].setData(row.path, PATH_ROLE)
            if row.master is not None:
                # seconds are bounded to int64 when decoded; total nanoseconds are not
                child_row[COL_CREATED].setData(row.master.creation_date.seconds, SORT_ROLE)
                child_row[COL_MODIFIED].setData(row.master.modification_date.seconds, SORT_ROLE)
            album_item.appendRow(child_row)

    proxy = QSortFilterProxyModel()
    proxy.setSortRole(SORT_ROLE)
    proxy.setSortCaseSensitivity(Qt.CaseInsensitive)
    proxy.setSourceModel(model)
    return model, proxy
