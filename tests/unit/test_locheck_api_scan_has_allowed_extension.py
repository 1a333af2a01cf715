"""Unit tests for locheck.api.scan.has_allowed_extension module."""

from pathlib import Path

from locheck.api.scan.has_allowed_extension import has_allowed_extension


def test_empty_filter_allows_everything():
    assert has_allowed_extension(Path("Notes.md"), frozenset()) is True
    assert has_allowed_extension(Path("Makefile"), frozenset()) is True


def test_extension_is_case_insensitive():
    allowed = {"swift"}
    assert has_allowed_extension(Path("App.swift"), allowed) is True
    assert has_allowed_extension(Path("App.SWIFT"), allowed) is True
    assert has_allowed_extension(Path("Notes.md"), allowed) is False


def test_only_last_suffix_counts():
    assert has_allowed_extension(Path("archive.swift.bak"), {"swift"}) is False
    assert has_allowed_extension(Path("archive.tar.gz"), {"gz"}) is True


def test_file_without_extension_is_filtered_out():
    assert has_allowed_extension(Path("Makefile"), {"swift"}) is False
