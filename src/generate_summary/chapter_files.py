"""Resolve the chapter file that represents a directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from generate_summary.config import SummaryConfig
from generate_summary.exceptions import FileCreationError, MissingChapterFileError

logger = logging.getLogger(__name__)


class ChapterFileStatus(str, Enum):
    """Outcome of chapter file resolution for one directory."""

    FOUND = "found"
    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ChapterFileResolution:
    """Resolution outcome.

    Attributes:
        status: What happened (or, from ``plan_chapter_file``, what would happen).
        path: The chapter file path. Set for every status so diagnostics can
            name the expected file, but only FOUND and CREATED point at a file
            that exists once resolution is applied.
    """

    status: ChapterFileStatus
    path: Path

    @property
    def has_file(self) -> bool:
        return self.status in (ChapterFileStatus.FOUND, ChapterFileStatus.CREATED)


def plan_chapter_file(directory: Path, config: SummaryConfig) -> ChapterFileResolution:
    """Decide how the chapter file of ``directory`` is resolved without touching disk."""
    candidate = directory / config.chapter_file
    if candidate.is_file():
        return ChapterFileResolution(ChapterFileStatus.FOUND, candidate)
    if config.create_missing_chapter_files:
        return ChapterFileResolution(ChapterFileStatus.CREATED, candidate)
    if config.ignore_missing_chapter_files:
        return ChapterFileResolution(ChapterFileStatus.SKIPPED, candidate)
    return ChapterFileResolution(ChapterFileStatus.FAILED, candidate)


def resolve_chapter_file(directory: Path, config: SummaryConfig) -> ChapterFileResolution:
    """Resolve the chapter file of ``directory``, creating it when configured to.

    Raises:
        MissingChapterFileError: If the file is missing and neither creation
            nor ignoring is enabled.
        FileCreationError: If the missing file could not be created.
    """
    resolution = plan_chapter_file(directory, config)
    if resolution.status is ChapterFileStatus.FAILED:
        raise MissingChapterFileError(directory, resolution.path)
    if resolution.status is ChapterFileStatus.CREATED:
        return _create_chapter_file(resolution.path)
    return resolution


def _create_chapter_file(path: Path) -> ChapterFileResolution:
    try:
        # Exclusive mode never truncates a file that appeared in the meantime.
        with path.open("x", encoding="utf-8"):
            pass
    except FileExistsError:
        if path.is_file():
            return ChapterFileResolution(ChapterFileStatus.FOUND, path)
        raise FileCreationError(path, "a non-file entry with that name exists") from None
    except OSError as exc:
        raise FileCreationError(path, exc.strerror or str(exc)) from exc
    logger.info("Created missing chapter file %s", path)
    return ChapterFileResolution(ChapterFileStatus.CREATED, path)
