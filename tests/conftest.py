"""Shared test fixtures."""

from __future__ import annotations

import copy
from pathlib import Path
import plistlib

import pytest

from core.decoding import decode_library

MINIMAL_TREE = {
    "Application Version": "9.6.1 (9.6.1)",
    "Archive Path": "/Users/me/Pictures/iPhoto Library.photolibrary",
    "ArchiveId": "D9B1F8C2-2A4C-4C6E-9C1D-000000000001",
    "Major Version": 2,
    "Minor Version": 0,
    "List of Albums": [
        {"AlbumId": 1, "AlbumName": " Trip/2020 ", "KeyList": ["k1"]},
    ],
    "Master Image List": {
        "k1": {
            "ImagePath": "/photos/a.jpg",
            "DateAsTimerIntervalGMT": 0.0,
            "ModDateAsTimerInterval": 0.0,
            "Caption": "",
            "Comment": "",
        },
    },
}


def master_node(path: str, created: float = 0.0, modified: float = 0.0, caption: str = "") -> dict:
    return {
        "ImagePath": path,
        "DateAsTimerIntervalGMT": created,
        "ModDateAsTimerInterval": modified,
        "Caption": caption,
        "Comment": "",
        "MediaType": "Image",
    }


@pytest.fixture
def minimal_tree():
    return copy.deepcopy(MINIMAL_TREE)


@pytest.fixture
def minimal_library(minimal_tree):
    return decode_library(minimal_tree)


@pytest.fixture
def photo_tree(tmp_path):
    """Tree whose masters point at real files under `tmp_path/originals`."""
    originals = tmp_path / "originals"
    (originals / "2010").mkdir(parents=True)
    (originals / "2011").mkdir(parents=True)
    files = {
        "10": originals / "2010" / "IMG_0001.JPG",
        "11": originals / "2010" / "IMG_0002.JPG",
        "12": originals / "2011" / "IMG_0001.JPG",
    }
    for key, p in files.items():
        p.write_bytes(f"image {key}".encode())

    tree = copy.deepcopy(MINIMAL_TREE)
    tree["List of Albums"] = [
        {"AlbumId": 2, "AlbumName": "Holidays", "KeyList": ["10", "12", "11"]},
        {"AlbumId": 3, "AlbumName": "  Family / Friends ", "KeyList": ["11", "99"]},
    ]
    tree["Master Image List"] = {
        "10": master_node(str(files["10"]), created=100.5, modified=200.0, caption="Beach"),
        "11": master_node(str(files["11"]), created=300.0, modified=400.0),
        "12": master_node(str(files["12"]), created=500.0, modified=600.0),
    }
    return tree


@pytest.fixture
def library_bundle(tmp_path, photo_tree) -> Path:
    """An on-disk library bundle containing an XML `AlbumData.xml`."""
    bundle = tmp_path / "iPhoto Library.photolibrary"
    bundle.mkdir()
    with (bundle / "AlbumData.xml").open("wb") as f:
        plistlib.dump(photo_tree, f)
    return bundle
