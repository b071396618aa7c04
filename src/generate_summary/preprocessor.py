"""Run summary generation as an mdBook preprocessor or standalone."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from generate_summary.book import outline_to_book
from generate_summary.builder import build_outline, count_chapters
from generate_summary.config import (
    DEFAULT_BOOK_SRC,
    PREPROCESSOR_NAME,
    SUMMARY_FILE_NAME,
    SummaryConfig,
    config_from_table,
)
from generate_summary.exceptions import ConfigError, ProtocolError
from generate_summary.schemas import ChapterNode
from generate_summary.summary_formatter import format_summary, write_summary

logger = logging.getLogger(__name__)

UNSUPPORTED_RENDERER = "not-supported"


class PreprocessorContext(BaseModel):
    """The context object mdBook sends as the first element of its input."""

    model_config = ConfigDict(extra="allow")

    root: Path
    config: dict[str, Any] = Field(default_factory=dict)
    renderer: str = "html"
    mdbook_version: str | None = None

    @property
    def src_dir(self) -> Path:
        book = self.config.get("book") or {}
        src = book.get("src", DEFAULT_BOOK_SRC)
        if not isinstance(src, str):
            raise ConfigError("book.src must be a string")
        return self.root / src

    @property
    def preprocessor_table(self) -> dict[str, Any]:
        preprocessors = self.config.get("preprocessor") or {}
        return preprocessors.get(PREPROCESSOR_NAME) or {}


@dataclass
class GenerationResult:
    """Outcome of one generation run."""

    chapters: list[ChapterNode]
    summary: str
    summary_path: Path
    written: bool


def supports_renderer(renderer: str) -> bool:
    return renderer != UNSUPPORTED_RENDERER


def generate_summary(src_dir: Path, config: SummaryConfig, *, write: bool = True) -> GenerationResult:
    """Build the outline for ``src_dir`` and (optionally) overwrite its ``SUMMARY.md``.

    The summary file is only written after the whole outline was built, so a
    failed run leaves the previous file untouched.
    """
    chapters = build_outline(src_dir, config)
    summary = format_summary(chapters)
    summary_path = Path(src_dir) / SUMMARY_FILE_NAME
    if write:
        write_summary(summary_path, summary)
        logger.info("Wrote %s with %d chapters", summary_path, count_chapters(chapters))
    return GenerationResult(chapters=chapters, summary=summary, summary_path=summary_path, written=write)


def parse_preprocessor_input(raw: str) -> tuple[PreprocessorContext, Any]:
    """Split mdBook's ``[context, book]`` JSON payload.

    Raises:
        ProtocolError: If the payload is not valid JSON of the expected shape.
    """
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"Preprocessor input is not valid JSON: {exc}") from exc
    if not isinstance(payload, list) or len(payload) != 2:
        raise ProtocolError("Preprocessor input must be a JSON array of [context, book]")

    context_data, book = payload
    try:
        context = PreprocessorContext.model_validate(context_data)
    except ValidationError as exc:
        raise ProtocolError(f"Invalid preprocessor context: {exc}") from exc
    return context, book


def run_preprocessor(raw: str) -> dict[str, Any]:
    """Handle one preprocessor invocation and return the regenerated book.

    The incoming book is discarded: the chapters come from the source tree,
    and ``SUMMARY.md`` is rewritten to match.
    """
    context, _ = parse_preprocessor_input(raw)
    config = config_from_table(context.preprocessor_table)
    src_dir = context.src_dir
    logger.debug("Running %s for renderer %s in %s", PREPROCESSOR_NAME, context.renderer, src_dir)

    result = generate_summary(src_dir, config, write=False)
    book = outline_to_book(result.chapters, src_dir)
    write_summary(result.summary_path, result.summary)
    return book
