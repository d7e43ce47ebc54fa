"""Plist persistence for iPhoto library catalogs.

Locates `AlbumData.xml` inside a library bundle, parses it with `plistlib`
and hands the resulting tree to the core decoders. Read only.
"""

from __future__ import annotations

from pathlib import Path
import plistlib
from typing import Any
from xml.parsers.expat import ExpatError

from loguru import logger

from core.decoding import decode_library
from core.errors import DecodeError, LibraryLoadError
from core.models import Library

ALBUM_DATA_FILENAME = "AlbumData.xml"


def find_album_data(path: str | Path) -> Path:
    """Return the catalog file for `path` (a catalog file or a library bundle)."""
    p = Path(path).expanduser()
    if p.is_file():
        return p
    if p.is_dir():
        candidate = p / ALBUM_DATA_FILENAME
        if candidate.is_file():
            return candidate
        raise LibraryLoadError(f"{ALBUM_DATA_FILENAME} not found in library: {p}")
    raise LibraryLoadError(f"Library path does not exist: {p}")


def parse_tree(data: bytes) -> Any:
    """Parse XML or binary plist bytes into a generic tree."""
    try:
        return plistlib.loads(data)
    except (plistlib.InvalidFileException, ExpatError, ValueError) as ex:
        raise LibraryLoadError(f"Catalog is not a valid property list: {ex}") from ex


class PlistLibraryRepository:
    """Load a `Library` from an on-disk catalog."""

    def load(self, path: str | Path) -> Library:
        """Locate, parse and decode the catalog at `path`."""
        catalog = find_album_data(path)
        try:
            data = catalog.read_bytes()
        except OSError as ex:
            logger.error("Read catalog failed: {} ({})", catalog, ex)
            raise LibraryLoadError(f"Cannot read catalog {catalog}: {ex}") from ex

        tree = parse_tree(data)
        library = self.load_tree(tree)
        logger.info(
            "Loaded library {} (v{}.{}, app {}): {} albums, {} masters",
            catalog,
            library.major_version,
            library.minor_version,
            library.application_version,
            len(library.albums),
            len(library.master_images),
        )
        return library

    def load_tree(self, tree: Any) -> Library:
        """Decode an already parsed catalog tree."""
        try:
            return decode_library(tree)
        except DecodeError as ex:
            logger.error("Catalog decode failed: {}", ex)
            raise
