"""Configuration for generate_summary."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError, field_validator

from generate_summary.exceptions import ConfigError

PREPROCESSOR_NAME = "generate-summary"
SUMMARY_FILE_NAME = "SUMMARY.md"
CHAPTER_FILE_EXTENSION = ".md"
BOOK_TOML = "book.toml"

DEFAULT_CHAPTER_FILE_NAME = "README"
DEFAULT_BOOK_SRC = "src"
DEFAULT_LOG_LEVEL = "WARNING"

GENERATE_SUMMARY_LOG_LEVEL = os.getenv("GENERATE_SUMMARY_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


class SummaryConfig(BaseModel):
    """Options read from the ``[preprocessor.generate-summary]`` table.

    Attributes:
        get_chapter_name_from_file: Use the ``# Title`` first line of a file as
            its chapter name instead of the file name.
        chapter_file_name: Base name (without ``.md``) of the file that holds a
            directory's own chapter.
        create_missing_chapter_files: Create an empty chapter file when a
            directory lacks one.
        ignore_missing_chapter_files: List the children of a directory lacking
            a chapter file instead of failing. Only consulted when creation is
            disabled.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    get_chapter_name_from_file: StrictBool = False
    chapter_file_name: StrictStr = Field(default=DEFAULT_CHAPTER_FILE_NAME, min_length=1)
    create_missing_chapter_files: StrictBool = False
    ignore_missing_chapter_files: StrictBool = False

    @field_validator("chapter_file_name")
    @classmethod
    def _plain_file_name(cls, value: str) -> str:
        if "/" in value or "\\" in value or "\x00" in value or value in (".", ".."):
            raise ValueError("must be a bare file name without path separators or NUL characters")
        return value

    @property
    def chapter_file(self) -> str:
        """File name of a directory's chapter file, extension included."""
        return self.chapter_file_name + CHAPTER_FILE_EXTENSION


def config_from_table(table: Mapping[str, Any] | None) -> SummaryConfig:
    """Build a config from a preprocessor table, applying defaults.

    Raises:
        ConfigError: If an option has the wrong type or an invalid value.
    """
    try:
        return SummaryConfig.model_validate(dict(table or {}))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"Invalid {PREPROCESSOR_NAME} configuration: {problems}") from exc


def load_book_toml(path: Path) -> tuple[dict[str, Any], str]:
    """Read a ``book.toml`` and return the preprocessor table and the book source dir.

    A missing file yields an empty table and the default source directory.
    """
    if not path.is_file():
        return {}, DEFAULT_BOOK_SRC
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to load {path}: {exc}") from exc

    book = data.get("book") or {}
    src = book.get("src", DEFAULT_BOOK_SRC)
    if not isinstance(src, str):
        raise ConfigError(f"book.src in {path} must be a string")
    table = (data.get("preprocessor") or {}).get(PREPROCESSOR_NAME) or {}
    return dict(table), src
