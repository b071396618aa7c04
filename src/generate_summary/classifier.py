"""Decide how directory entries appear in the outline."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Collection

TEXT_EXTENSIONS = frozenset({".md"})


class EntryKind(str, Enum):
    """How a directory entry is handled by the builder."""

    CHAPTER = "chapter"
    GROUP = "group"
    IGNORED = "ignored"


def classify_entry(
    name: str,
    is_dir: bool,
    *,
    is_file: bool = True,
    chapter_file: str,
    reserved: Collection[str] = (),
) -> EntryKind:
    """Classify a directory entry.

    Args:
        name: Entry name.
        is_dir: The entry is a directory (symlinks followed).
        is_file: The entry is a regular file (symlinks followed). Broken
            symlinks, FIFOs, sockets and devices are never chapters.
        chapter_file: The directory's own chapter file name (e.g.
            ``README.md``); it is consumed separately and never listed as a
            child.
        reserved: Further file names to leave out, such as the generated
            ``SUMMARY.md`` at the book root.
    """
    if name.startswith("."):
        return EntryKind.IGNORED
    if is_dir:
        return EntryKind.GROUP
    if not is_file or name == chapter_file or name in reserved:
        return EntryKind.IGNORED
    if Path(name).suffix in TEXT_EXTENSIONS:
        return EntryKind.CHAPTER
    return EntryKind.IGNORED
