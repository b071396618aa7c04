"""Chapter title resolution."""

from __future__ import annotations

import re
from pathlib import Path

from generate_summary.config import SummaryConfig
from generate_summary.exceptions import UnreadableFileError

_WORD_SEPARATORS = re.compile(r"[-_\s]+")
_HEADING_RE = re.compile(r"^# (.*)$")


def title_from_name(name: str, *, strip_extension: bool = True) -> str:
    """Derive a display title from a file or directory name.

    The extension is stripped (files only), the name is split on hyphens,
    underscores and whitespace, and the first letter of each word is
    upper-cased. The rest of each word is left alone so acronyms such as
    ``README`` survive.
    """
    stem = Path(name).stem if strip_extension else name
    words = [word for word in _WORD_SEPARATORS.split(stem) if word]
    if not words:
        return stem
    return " ".join(word[0].upper() + word[1:] for word in words)


def parse_heading(line: str) -> str | None:
    """Return the text of a ``# Title`` line, or None if the line is not one."""
    match = _HEADING_RE.match(line.rstrip("\r\n"))
    if not match:
        return None
    title = match.group(1).strip()
    return title or None


def read_first_line(path: Path) -> str:
    """Read the first line of a UTF-8 text file.

    Raises:
        UnreadableFileError: If the file cannot be opened or decoded.
    """
    try:
        with path.open("r", encoding="utf-8-sig") as handle:
            return handle.readline()
    except UnicodeDecodeError as exc:
        raise UnreadableFileError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise UnreadableFileError(path, exc.strerror or str(exc)) from exc


def resolve_title(path: Path, config: SummaryConfig, *, fallback_name: str | None = None) -> str:
    """Resolve the display title of a chapter file.

    Args:
        path: The chapter file.
        config: Run configuration. When ``get_chapter_name_from_file`` is set,
            the first line is parsed as a ``# Title`` heading.
        fallback_name: Name used when no heading title is available. Defaults
            to the file name; the builder passes the directory name for a
            directory's own chapter file.

    Returns:
        The title. Never empty unless the name itself is empty.

    Raises:
        UnreadableFileError: If the first line cannot be read.
    """
    if fallback_name is None:
        fallback = title_from_name(path.name)
    else:
        fallback = title_from_name(fallback_name, strip_extension=False)
    if not config.get_chapter_name_from_file:
        return fallback
    return parse_heading(read_first_line(path)) or fallback
