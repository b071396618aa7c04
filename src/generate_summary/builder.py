"""Build the chapter outline from a source directory tree."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator

from generate_summary.chapter_files import resolve_chapter_file
from generate_summary.classifier import EntryKind, classify_entry
from generate_summary.config import SUMMARY_FILE_NAME, SummaryConfig
from generate_summary.exceptions import SummaryError, UnreadableFileError
from generate_summary.schemas import ChapterNode, DirectoryContext
from generate_summary.titles import resolve_title

logger = logging.getLogger(__name__)


def build_outline(root: Path, config: SummaryConfig) -> list[ChapterNode]:
    """Walk ``root`` and return the top-level chapters of the outline.

    If ``root`` has a chapter file, the result is a single node for it with
    every other chapter nested below. Otherwise the root is an implicit
    container and its entries are returned as top-level chapters.

    Entries are sorted by name using plain string ordering (case-sensitive,
    files and directories interleaved). A directory without a chapter file
    (when ``ignore_missing_chapter_files`` applies) contributes no node of its
    own; its chapters are spliced into its parent's children in its place.

    Raises:
        SummaryError: If ``root`` is not a directory, or on any chapter file,
            read or creation failure. No partial outline is returned.
    """
    root = Path(root).resolve()
    if not root.is_dir():
        raise SummaryError(f"Book source directory not found: {root}")

    context = DirectoryContext(
        root=root,
        path=root,
        depth=0,
        config=config,
        ancestors=frozenset({_directory_key(root)}),
    )
    return _build_directory(context, fallback_name=root.name or config.chapter_file_name)


def _build_directory(context: DirectoryContext, *, fallback_name: str) -> list[ChapterNode]:
    resolution = resolve_chapter_file(context.path, context.config)
    logger.debug(
        "Processing %s (depth %d, chapter file %s)", context.path, context.depth, resolution.status.value
    )
    children = _build_children(context)

    if not resolution.has_file:
        return children

    title = resolve_title(resolution.path, context.config, fallback_name=fallback_name)
    return [ChapterNode(title=title, link=context.relative(resolution.path), children=children)]


def _build_children(context: DirectoryContext) -> list[ChapterNode]:
    # Only the root holds the generated summary.
    reserved = (SUMMARY_FILE_NAME,) if context.depth == 0 else ()
    nodes: list[ChapterNode] = []
    for entry in _list_entries(context.path):
        path = Path(entry.path)
        kind = _classify(entry, path, context.config.chapter_file, reserved)
        if kind is EntryKind.CHAPTER:
            title = resolve_title(path, context.config)
            nodes.append(ChapterNode(title=title, link=context.relative(path)))
        elif kind is EntryKind.GROUP:
            key = _directory_key(path)
            if key in context.ancestors:
                raise UnreadableFileError(path, "symbolic link loop back to a parent directory")
            nodes.extend(_build_directory(context.descend(path, key), fallback_name=entry.name))
    return nodes


def _classify(entry: os.DirEntry[str], path: Path, chapter_file: str, reserved: tuple[str, ...]) -> EntryKind:
    if entry.name.startswith("."):
        return EntryKind.IGNORED
    try:
        is_dir = entry.is_dir()
        is_file = entry.is_file()
    except OSError as exc:
        raise UnreadableFileError(path, exc.strerror or str(exc)) from exc
    return classify_entry(entry.name, is_dir, is_file=is_file, chapter_file=chapter_file, reserved=reserved)


def _directory_key(directory: Path) -> tuple[int, int]:
    try:
        stat = directory.stat()
    except OSError as exc:
        raise UnreadableFileError(directory, exc.strerror or str(exc)) from exc
    return stat.st_dev, stat.st_ino


def _list_entries(directory: Path) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except OSError as exc:
        raise UnreadableFileError(directory, exc.strerror or str(exc)) from exc


def iter_chapters(nodes: Iterable[ChapterNode]) -> Iterator[ChapterNode]:
    """Yield every node depth-first, parents before children."""
    for node in nodes:
        yield node
        yield from iter_chapters(node.children)


def count_chapters(nodes: Iterable[ChapterNode]) -> int:
    """Count total chapters in the outline."""
    return sum(1 for _ in iter_chapters(nodes))
