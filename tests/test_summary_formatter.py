"""Tests for SUMMARY.md formatting."""

from __future__ import annotations

from pathlib import Path

import pytest

from generate_summary.schemas import ChapterNode
from generate_summary.summary_formatter import escape_title, format_link, format_summary, write_summary


def _outline() -> list[ChapterNode]:
    return [
        ChapterNode(
            title="Intro",
            link="README.md",
            children=[
                ChapterNode(
                    title="Guide",
                    link="guide/README.md",
                    children=[ChapterNode(title="Install", link="guide/install.md")],
                ),
                ChapterNode(title="FAQ", link="faq.md"),
            ],
        )
    ]


class TestFormatSummary:
    """Tests for format_summary function."""

    def test_nested_list(self) -> None:
        assert format_summary(_outline()) == (
            "# Summary\n"
            "\n"
            "- [Intro](README.md)\n"
            "    - [Guide](guide/README.md)\n"
            "        - [Install](guide/install.md)\n"
            "    - [FAQ](faq.md)\n"
        )

    def test_empty_outline(self) -> None:
        assert format_summary([]) == "# Summary\n\n"

    def test_multiple_top_level_chapters(self) -> None:
        chapters = [ChapterNode(title="A", link="a.md"), ChapterNode(title="B", link="b.md")]

        assert format_summary(chapters).splitlines()[2:] == ["- [A](a.md)", "- [B](b.md)"]

    def test_custom_heading(self) -> None:
        assert format_summary([], title="Contents").startswith("# Contents\n")

    def test_output_is_stable(self) -> None:
        assert format_summary(_outline()) == format_summary(_outline())


class TestEscaping:
    """Tests for title and link escaping."""

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Plain", "Plain"),
            ("Arrays [and] lists", "Arrays \\[and\\] lists"),
            ("back\\slash", "back\\\\slash"),
        ],
    )
    def test_escape_title(self, title: str, expected: str) -> None:
        assert escape_title(title) == expected

    @pytest.mark.parametrize(
        ("link", "expected"),
        [
            ("guide/install.md", "guide/install.md"),
            ("my notes/page.md", "<my notes/page.md>"),
            ("page(1).md", "<page(1).md>"),
            ("a<b>.md", "<a\\<b\\>.md>"),
        ],
    )
    def test_format_link(self, link: str, expected: str) -> None:
        assert format_link(link) == expected

    def test_escaped_line(self) -> None:
        chapters = [ChapterNode(title="[Draft]", link="my page.md")]

        assert format_summary(chapters).splitlines()[2] == "- [\\[Draft\\]](<my page.md>)"


def test_write_summary_overwrites(tmp_path: Path) -> None:
    path = tmp_path / "SUMMARY.md"
    path.write_text("old content that is longer than the new one\n")

    write_summary(path, "# Summary\n\n")

    assert path.read_bytes() == b"# Summary\n\n"
