"""Decoders mapping a generic catalog tree onto typed records.

The input is the tree a plist parser produces: dicts keyed by field name,
lists, and scalar leaves. Decoding is key driven, ignores unknown keys, and
fails the whole decode on the first problem; no partial `Library` is ever
returned.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from core.converters import filter_album_name, time_interval_to_timestamp
from core.errors import (
    DecodeError,
    MissingFieldError,
    PathPart,
    TypeMismatchError,
    ValueOverflowError,
)
from core.models import Album, Library, Master

U64_MAX = 2**64 - 1

TreePath = tuple[PathPart, ...]


def _record_dict(node: Any, record: str, path: TreePath) -> Mapping[str, Any]:
    if not isinstance(node, Mapping):
        raise TypeMismatchError("dictionary", node, path, record)
    return node


def _field(node: Mapping[str, Any], key: str, record: str, path: TreePath) -> Any:
    try:
        return node[key]
    except KeyError:
        raise MissingFieldError(key, path, record) from None


def _as_u64(value: Any, path: TreePath) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError("integer", value, path)
    if not 0 <= value <= U64_MAX:
        raise ValueOverflowError(value, "unsigned 64-bit integer", path)
    return value


def _as_text(value: Any, path: TreePath) -> str:
    if not isinstance(value, str):
        raise TypeMismatchError("text", value, path)
    return value


def _as_path(value: Any, path: TreePath) -> Path:
    return Path(_as_text(value, path))


def _as_sequence(value: Any, path: TreePath) -> list[Any] | tuple[Any, ...]:
    if not isinstance(value, (list, tuple)):
        raise TypeMismatchError("sequence", value, path)
    return value


def _as_text_list(value: Any, path: TreePath) -> tuple[str, ...]:
    items = _as_sequence(value, path)
    return tuple(_as_text(item, path + (i,)) for i, item in enumerate(items))


def _with_record(ex: DecodeError, record: str) -> None:
    """Attach the enclosing record name to an error raised by a leaf converter."""
    if ex.record is None:
        ex.record = record
        ex.args = (ex._render(),)  # pylint: disable=protected-access


def decode_album(node: Any, path: TreePath = ()) -> Album:
    """Decode one album dictionary."""
    rec = "Album"
    d = _record_dict(node, rec, path)
    try:
        return Album(
            id=_as_u64(_field(d, "AlbumId", rec, path), path + ("AlbumId",)),
            name=filter_album_name(_field(d, "AlbumName", rec, path), path + ("AlbumName",)),
            images=_as_text_list(_field(d, "KeyList", rec, path), path + ("KeyList",)),
        )
    except DecodeError as ex:
        _with_record(ex, rec)
        raise


def decode_master(node: Any, path: TreePath = ()) -> Master:
    """Decode one master image dictionary."""
    rec = "Master"
    d = _record_dict(node, rec, path)
    try:
        return Master(
            path=_as_path(_field(d, "ImagePath", rec, path), path + ("ImagePath",)),
            creation_date=time_interval_to_timestamp(
                _field(d, "DateAsTimerIntervalGMT", rec, path),
                path + ("DateAsTimerIntervalGMT",),
            ),
            modification_date=time_interval_to_timestamp(
                _field(d, "ModDateAsTimerInterval", rec, path),
                path + ("ModDateAsTimerInterval",),
            ),
            caption=_as_text(_field(d, "Caption", rec, path), path + ("Caption",)),
            comment=_as_text(_field(d, "Comment", rec, path), path + ("Comment",)),
        )
    except DecodeError as ex:
        _with_record(ex, rec)
        raise


def _decode_albums(value: Any, path: TreePath) -> tuple[Album, ...]:
    items = _as_sequence(value, path)
    return tuple(decode_album(item, path + (i,)) for i, item in enumerate(items))


def _decode_masters(value: Any, path: TreePath) -> Mapping[str, Master]:
    if not isinstance(value, Mapping):
        raise TypeMismatchError("dictionary", value, path)
    masters: dict[str, Master] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise TypeMismatchError("text key", key, path)
        masters[key] = decode_master(item, path + (key,))
    return MappingProxyType(masters)


def decode_library(node: Any) -> Library:
    """Decode the catalog root into a `Library`.

    Raises:
        MissingFieldError: A required key is absent.
        TypeMismatchError: A value has the wrong shape.
        ValueOverflowError: A number does not fit its target type.
    """
    rec = "Library"
    root: TreePath = ()
    d = _record_dict(node, rec, root)
    try:
        return Library(
            application_version=_as_text(
                _field(d, "Application Version", rec, root), ("Application Version",)
            ),
            archive_path=_as_path(_field(d, "Archive Path", rec, root), ("Archive Path",)),
            archive_id=_as_text(_field(d, "ArchiveId", rec, root), ("ArchiveId",)),
            major_version=_as_u64(_field(d, "Major Version", rec, root), ("Major Version",)),
            minor_version=_as_u64(_field(d, "Minor Version", rec, root), ("Minor Version",)),
            albums=_decode_albums(_field(d, "List of Albums", rec, root), ("List of Albums",)),
            master_images=_decode_masters(
                _field(d, "Master Image List", rec, root), ("Master Image List",)
            ),
        )
    except DecodeError as ex:
        _with_record(ex, rec)
        raise
