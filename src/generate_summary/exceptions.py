"""Custom exceptions for generate_summary."""

from __future__ import annotations

from pathlib import Path


class SummaryError(Exception):
    """Base exception for summary generation."""


class ConfigError(SummaryError):
    """Invalid preprocessor configuration."""


class ProtocolError(SummaryError):
    """Malformed input received from the mdBook host."""


class MissingChapterFileError(SummaryError):
    """A directory has no chapter file and neither create nor ignore is enabled."""

    def __init__(self, directory: Path, path: Path) -> None:
        self.directory = directory
        self.path = path
        super().__init__(
            f"Missing chapter file in directory {directory}: expected {path.name} "
            "(enable create_missing_chapter_files or ignore_missing_chapter_files)"
        )


class UnreadableFileError(SummaryError):
    """A file or directory could not be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Unable to read {path}: {reason}")


class FileCreationError(SummaryError):
    """A missing chapter file could not be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Unable to create chapter file {path}: {reason}")
