"""Group a token stream into heading sections."""

from __future__ import annotations

import logging

from markdown_it.token import Token

from packages.markdown.errors import StructuralMismatchError
from packages.markdown.text import safely_join_tokens
from packages.markdown.tokens import HEADING_CLOSE, HEADING_OPEN, MarkdownTokens, heading_rank
from packages.markdown.types import HeadingContent

logger = logging.getLogger(__name__)


def _find_heading_close(tokens: MarkdownTokens, start: int) -> int:
    level = tokens[start].level
    for index in range(start + 1, len(tokens)):
        token = tokens[index]
        if token.type == HEADING_CLOSE and token.level == level:
            return index
    raise StructuralMismatchError(f"Heading opened at token {start} has no matching heading_close")


def headings_and_content(tokens: MarkdownTokens) -> list[HeadingContent]:
    """Produce one group per heading, in source order.

    A group's content starts after the heading's close marker and stops at
    the next heading of the same or a higher rank.

    Args:
        tokens: Full token stream of a document.

    Returns:
        list[HeadingContent]: Heading groups.

    Raises:
        StructuralMismatchError: If a heading is never closed.
    """
    groups: list[HeadingContent] = []
    for start, token in enumerate(tokens):
        if token.type != HEADING_OPEN:
            continue

        close = _find_heading_close(tokens, start)
        heading_tokens = list(tokens[start + 1 : close])
        start_level = heading_rank(token)

        content: list[Token] = []
        for candidate in tokens[close + 1 :]:
            if candidate.type == HEADING_OPEN and heading_rank(candidate) <= start_level:
                break
            content.append(candidate)

        groups.append(
            {
                "heading": safely_join_tokens(heading_tokens).strip(),
                "level": start_level,
                "heading_tokens": heading_tokens,
                "content": content,
            }
        )

    logger.debug(f"Grouped {len(groups)} headings")
    return groups


def find_constructor_header(tokens: MarkdownTokens) -> HeadingContent | None:
    """Return the level 3 group documenting a constructor (``### `new Foo()```)."""
    for group in headings_and_content(tokens):
        if group["level"] == 3 and group["heading"].startswith("`new "):
            return group
    return None


def find_content_inside_header(
    tokens: MarkdownTokens,
    expected_header: str,
    expected_level: int,
) -> list[Token] | None:
    """Return the content of the heading with exactly this text and level.

    Args:
        tokens: Full token stream of a document.
        expected_header: Reconstructed heading text to match.
        expected_level: Heading rank to match.

    Returns:
        list[Token] | None: The section content, or None when no heading matches.
    """
    for group in headings_and_content(tokens):
        if group["heading"] == expected_header and group["level"] == expected_level:
            return group["content"]
    logger.debug(f"No level {expected_level} heading named {expected_header!r}")
    return None
