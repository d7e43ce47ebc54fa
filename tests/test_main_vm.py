"""MainVM tests with an in-memory repository."""

import pytest

from app.viewmodels.main_vm import MainVM
from core.decoding import decode_library
from core.errors import LibraryLoadError
from core.services.interfaces import ExportPlan, ExportResult


class FakeRepo:
    def __init__(self, tree):
        self._tree = tree

    def load(self, path):
        if path == "broken":
            raise LibraryLoadError("cannot read")
        return decode_library(self._tree)


class FakeExporter:
    def __init__(self):
        self.calls = []

    def plan_export(self, library, destination, albums=None):
        self.calls.append(("plan", destination, albums))
        return ExportPlan(destination=destination)

    def execute_export(self, plan, replace_existing=False):
        self.calls.append(("execute", replace_existing))
        return ExportResult()


def test_empty_before_load(photo_tree):
    vm = MainVM(FakeRepo(photo_tree))
    assert vm.library is None
    assert vm.albums == []
    assert vm.check_integrity() is None
    assert vm.export_albums("/tmp/x") is None


def test_load_library(photo_tree):
    vm = MainVM(FakeRepo(photo_tree))
    vm.load_library("lib")
    assert len(vm.albums) == 2
    assert vm.get_source_path() == "lib"


def test_failed_load_keeps_previous_library(photo_tree):
    vm = MainVM(FakeRepo(photo_tree))
    vm.load_library("lib")
    with pytest.raises(LibraryLoadError):
        vm.load_library("broken")
    assert len(vm.albums) == 2
    assert vm.get_source_path() == "lib"


def test_album_rows(photo_tree):
    vm = MainVM(FakeRepo(photo_tree))
    vm.load_library("lib")
    rows = vm.album_rows(vm.albums[1])
    assert [r.key for r in rows] == ["11", "99"]
    assert rows[0].file_name == "IMG_0002.JPG"
    assert rows[0].created == "2001-01-01 00:05:00"
    assert rows[1].missing
    assert rows[1].file_name == ""
    assert rows[1].created == ""
    assert rows[1].comment == ""


def test_album_rows_expose_comment(photo_tree):
    photo_tree["Master Image List"]["11"]["Comment"] = "scanned from print"
    vm = MainVM(FakeRepo(photo_tree))
    vm.load_library("lib")
    (row, _) = vm.album_rows(vm.albums[1])
    assert row.comment == "scanned from print"
    assert row.caption == ""


def test_check_integrity(photo_tree):
    vm = MainVM(FakeRepo(photo_tree))
    vm.load_library("lib")
    report = vm.check_integrity()
    assert not report.ok
    assert [m.image_key for m in report.missing_references] == ["99"]


def test_export_albums_delegates(photo_tree):
    exporter = FakeExporter()
    vm = MainVM(FakeRepo(photo_tree), exporter=exporter)
    vm.load_library("lib")
    result = vm.export_albums("/out", replace_existing=True)
    assert isinstance(result, ExportResult)
    assert exporter.calls == [("plan", "/out", None), ("execute", True)]
