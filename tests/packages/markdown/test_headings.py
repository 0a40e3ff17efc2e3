"""Tests for grouping heading sections."""

import pytest

from packages.markdown.errors import StructuralMismatchError
from packages.markdown.headings import (
    find_constructor_header,
    find_content_inside_header,
    headings_and_content,
)
from tests.utils.tokens import Tokenizer, make_inline, make_token

API_DOC = """
# BrowserWindow

Create and control browser windows.

## Methods

### `win.focus()`

Focuses on the window.

### `win.blur()`

## Events

Emitted events.
"""


class TestHeadingsAndContent:
    """Test heading grouping over a whole document."""

    def test_one_group_per_heading(self, md: Tokenizer) -> None:
        """Test every heading appears exactly once, in order."""
        groups = headings_and_content(md(API_DOC))

        assert [(g["heading"], g["level"]) for g in groups] == [
            ("BrowserWindow", 1),
            ("Methods", 2),
            ("`win.focus()`", 3),
            ("`win.blur()`", 3),
            ("Events", 2),
        ]

    def test_content_stops_at_same_or_higher_heading(self, md: Tokenizer) -> None:
        """Test sections end at the next heading of equal or shallower rank."""
        groups = {g["heading"]: g for g in headings_and_content(md(API_DOC))}

        focus = groups["`win.focus()`"]["content"]
        assert [t.type for t in focus] == ["paragraph_open", "inline", "paragraph_close"]
        assert focus[1].content == "Focuses on the window."

        assert groups["`win.blur()`"]["content"] == []

        methods = groups["Methods"]["content"]
        assert sum(1 for t in methods if t.type == "heading_open") == 2
        assert all(t.content != "Emitted events." for t in methods)

    def test_top_level_section_runs_to_end(self, md: Tokenizer) -> None:
        """Test a section with no later sibling keeps everything after it."""
        tokens = md(API_DOC)
        groups = headings_and_content(tokens)

        root = groups[0]
        assert root["content"][0].type == "paragraph_open"
        assert root["content"][-1] is tokens[-1]

    def test_heading_tokens_are_the_inline_run(self, md: Tokenizer) -> None:
        """Test heading tokens exclude the open and close markers."""
        groups = headings_and_content(md("## The **bold** title"))

        assert len(groups) == 1
        assert [t.type for t in groups[0]["heading_tokens"]] == ["inline"]
        assert groups[0]["heading"] == "The **bold** title"

    def test_no_headings(self, md: Tokenizer) -> None:
        """Test a document without headings yields no groups."""
        assert headings_and_content(md("Plain text.")) == []

    def test_unclosed_heading_raises(self) -> None:
        """Test a heading without a close marker is a structural error."""
        tokens = [
            make_token("heading_open", tag="h2", nesting=1),
            make_inline(make_token("text", content="Dangling")),
        ]

        with pytest.raises(StructuralMismatchError, match="no matching heading_close"):
            headings_and_content(tokens)


class TestHeaderLookups:
    """Test the convenience lookups built on heading groups."""

    def test_find_constructor_header(self, md: Tokenizer) -> None:
        """Test the level 3 constructor signature heading is found."""
        tokens = md(
            """
            # Menu

            ## `new Menu(options)`

            ### `new Menu(options)`

            * `options` Object
            """
        )

        group = find_constructor_header(tokens)

        assert group is not None
        assert group["level"] == 3
        assert group["heading"] == "`new Menu(options)`"
        assert group["content"][0].type == "bullet_list_open"

    def test_find_constructor_header_missing(self, md: Tokenizer) -> None:
        """Test documents without a constructor yield None."""
        assert find_constructor_header(md(API_DOC)) is None

    def test_find_content_inside_header(self, md: Tokenizer) -> None:
        """Test content is returned for an exact heading text and level."""
        content = find_content_inside_header(md(API_DOC), "Events", 2)

        assert content is not None
        assert content[1].content == "Emitted events."

    def test_find_content_inside_header_wrong_level(self, md: Tokenizer) -> None:
        """Test a matching name at another level is not a match."""
        assert find_content_inside_header(md(API_DOC), "Events", 3) is None
