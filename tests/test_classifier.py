"""Tests for directory entry classification."""

from __future__ import annotations

import pytest

from generate_summary.classifier import EntryKind, classify_entry


@pytest.mark.parametrize(
    ("name", "is_dir", "expected"),
    [
        ("intro.md", False, EntryKind.CHAPTER),
        ("guide", True, EntryKind.GROUP),
        ("README.md", False, EntryKind.IGNORED),
        ("SUMMARY.md", False, EntryKind.CHAPTER),
        ("logo.png", False, EntryKind.IGNORED),
        ("notes.txt", False, EntryKind.IGNORED),
        ("Makefile", False, EntryKind.IGNORED),
        (".hidden.md", False, EntryKind.IGNORED),
        (".git", True, EntryKind.IGNORED),
        ("intro.MD", False, EntryKind.IGNORED),
    ],
)
def test_classify_entry(name: str, is_dir: bool, expected: EntryKind) -> None:
    assert classify_entry(name, is_dir, chapter_file="README.md") is expected


def test_custom_chapter_file_is_consumed() -> None:
    """Only the configured chapter file is excluded from the children."""
    assert classify_entry("index.md", False, chapter_file="index.md") is EntryKind.IGNORED
    assert classify_entry("README.md", False, chapter_file="index.md") is EntryKind.CHAPTER


def test_directory_named_like_markdown_is_group() -> None:
    assert classify_entry("notes.md", True, chapter_file="README.md") is EntryKind.GROUP


def test_reserved_names_are_ignored() -> None:
    kind = classify_entry("SUMMARY.md", False, chapter_file="README.md", reserved=("SUMMARY.md",))

    assert kind is EntryKind.IGNORED


def test_non_regular_markdown_entry_is_ignored() -> None:
    """Broken symlinks, FIFOs and sockets are neither files nor directories."""
    kind = classify_entry("pipe.md", False, is_file=False, chapter_file="README.md")

    assert kind is EntryKind.IGNORED
