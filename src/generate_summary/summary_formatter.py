"""Format the chapter outline as an mdBook ``SUMMARY.md``."""

from __future__ import annotations

import re
from pathlib import Path

from generate_summary.schemas import ChapterNode

INDENT = "    "

_TITLE_SPECIALS = re.compile(r"([\\\[\]])")
_LINK_NEEDS_BRACKETS = re.compile(r"[\s()<>]")


def format_summary(chapters: list[ChapterNode], *, title: str = "Summary") -> str:
    """Render the outline as a nested Markdown list under a ``# title`` heading.

    The output depends only on the outline, so an unchanged tree always yields
    byte-identical text.
    """
    lines = [f"# {title}", ""]
    lines.extend(_render_chapters(chapters))
    return "\n".join(lines) + "\n"


def _render_chapters(chapters: list[ChapterNode], indent: int = 0) -> list[str]:
    lines: list[str] = []
    for chapter in chapters:
        lines.append(f"{INDENT * indent}- [{escape_title(chapter.title)}]({format_link(chapter.link)})")
        lines.extend(_render_chapters(chapter.children, indent + 1))
    return lines


def escape_title(title: str) -> str:
    """Escape characters that would end the link text early."""
    return _TITLE_SPECIALS.sub(r"\\\1", title)


def format_link(link: str) -> str:
    """Format a relative path as a Markdown link destination.

    Paths with whitespace, parentheses or angle brackets are wrapped in
    ``<...>``.
    """
    if not _LINK_NEEDS_BRACKETS.search(link):
        return link
    escaped = link.replace("<", "\\<").replace(">", "\\>")
    return f"<{escaped}>"


def write_summary(path: Path, text: str) -> None:
    """Overwrite ``path`` with the rendered summary."""
    path.write_text(text, encoding="utf-8", newline="\n")
