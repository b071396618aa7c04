"""generate_summary: build an mdBook SUMMARY.md from the source tree layout."""

from generate_summary.builder import build_outline, count_chapters, iter_chapters
from generate_summary.chapter_files import (
    ChapterFileResolution,
    ChapterFileStatus,
    plan_chapter_file,
    resolve_chapter_file,
)
from generate_summary.classifier import EntryKind, classify_entry
from generate_summary.config import SummaryConfig, config_from_table
from generate_summary.exceptions import (
    ConfigError,
    FileCreationError,
    MissingChapterFileError,
    ProtocolError,
    SummaryError,
    UnreadableFileError,
)
from generate_summary.preprocessor import generate_summary, run_preprocessor
from generate_summary.schemas import ChapterNode
from generate_summary.summary_formatter import format_summary
from generate_summary.titles import resolve_title

__all__ = [
    "ChapterFileResolution",
    "ChapterFileStatus",
    "ChapterNode",
    "ConfigError",
    "EntryKind",
    "FileCreationError",
    "MissingChapterFileError",
    "ProtocolError",
    "SummaryConfig",
    "SummaryError",
    "UnreadableFileError",
    "build_outline",
    "classify_entry",
    "config_from_table",
    "count_chapters",
    "format_summary",
    "generate_summary",
    "iter_chapters",
    "plan_chapter_file",
    "resolve_chapter_file",
    "resolve_title",
    "run_preprocessor",
]
