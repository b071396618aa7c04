"""Outline models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field

from generate_summary.config import SummaryConfig


class ChapterNode(BaseModel):
    """One entry in the generated outline.

    ``link`` is the POSIX path of the backing file relative to the book source
    root.
    """

    title: str
    link: str
    children: list["ChapterNode"] = Field(default_factory=list)


@dataclass(frozen=True)
class DirectoryContext:
    """State carried while walking one directory."""

    root: Path
    path: Path
    depth: int
    config: SummaryConfig
    # (st_dev, st_ino) of every directory on the path from the root, this one included.
    ancestors: frozenset[tuple[int, int]] = field(default_factory=frozenset)

    def relative(self, path: Path) -> str:
        return path.relative_to(self.root).as_posix()

    def descend(self, directory: Path, key: tuple[int, int]) -> "DirectoryContext":
        return DirectoryContext(
            root=self.root,
            path=directory,
            depth=self.depth + 1,
            config=self.config,
            ancestors=self.ancestors | {key},
        )
