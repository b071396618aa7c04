"""Shared schemas for generate_summary."""

from generate_summary.schemas.outline import ChapterNode, DirectoryContext

__all__ = ["ChapterNode", "DirectoryContext"]
