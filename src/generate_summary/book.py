"""Convert the chapter outline into mdBook's ``Book`` JSON structure."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from generate_summary.exceptions import UnreadableFileError
from generate_summary.schemas import ChapterNode


def outline_to_book(chapters: list[ChapterNode], src_dir: Path) -> dict[str, Any]:
    """Build the book mdBook expects back from a preprocessor.

    Every chapter carries its file content, a 1-based section number and the
    names of its ancestors, matching what mdBook produces when it loads a
    ``SUMMARY.md`` itself.

    Raises:
        UnreadableFileError: If a chapter file cannot be read.
    """
    return {
        "sections": _to_items(chapters, src_dir, number=[], parent_names=[]),
        "__non_exhaustive": None,
    }


def _to_items(
    chapters: list[ChapterNode],
    src_dir: Path,
    *,
    number: list[int],
    parent_names: list[str],
) -> list[dict[str, Any]]:
    items: list[dict[str, Any]] = []
    for index, chapter in enumerate(chapters, start=1):
        section = [*number, index]
        chapter_data = {
            "name": chapter.title,
            "content": _read_content(src_dir / chapter.link),
            "number": section,
            "sub_items": _to_items(
                chapter.children,
                src_dir,
                number=section,
                parent_names=[*parent_names, chapter.title],
            ),
            "path": chapter.link,
            "source_path": chapter.link,
            "parent_names": parent_names,
        }
        items.append({"Chapter": chapter_data})
    return items


def _read_content(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise UnreadableFileError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise UnreadableFileError(path, exc.strerror or str(exc)) from exc
