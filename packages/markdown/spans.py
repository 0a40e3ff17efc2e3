"""Locate bounded regions of a markdown token stream."""

from __future__ import annotations

import logging

from markdown_it.token import Token

from packages.markdown.errors import StructuralMismatchError
from packages.markdown.tokens import (
    BULLET_LIST_CLOSE,
    BULLET_LIST_OPEN,
    HEADING_CLOSE,
    HEADING_OPEN,
    MarkdownTokens,
)

logger = logging.getLogger(__name__)


def _find_index(tokens: MarkdownTokens, token_type: str, start: int = 0) -> int:
    for index in range(start, len(tokens)):
        if tokens[index].type == token_type:
            return index
    return -1


def find_next_list(tokens: MarkdownTokens) -> list[Token] | None:
    """Return the first bullet list, from its open marker through the matching close.

    Args:
        tokens: Token stream to scan.

    Returns:
        list[Token] | None: Inclusive slice of the list, or None if there is no
            list or its open/close markers never balance.
    """
    start = _find_index(tokens, BULLET_LIST_OPEN)
    if start == -1:
        logger.debug("No bullet list found")
        return None

    opened = 1
    for index in range(start + 1, len(tokens)):
        token_type = tokens[index].type
        if token_type == BULLET_LIST_OPEN:
            opened += 1
        elif token_type == BULLET_LIST_CLOSE:
            opened -= 1
        if opened == 0:
            return list(tokens[start : index + 1])

    logger.debug(f"Bullet list opened at token {start} is never closed")
    return None


def find_first_heading(tokens: MarkdownTokens) -> Token:
    """Return the inline token holding the text of the first heading.

    Raises:
        StructuralMismatchError: If there is no heading, or it is not shaped
            heading_open / inline / heading_close.
    """
    start = _find_index(tokens, HEADING_OPEN)
    if start == -1:
        raise StructuralMismatchError("Expected to find a heading token but couldn't")
    if start + 2 >= len(tokens) or tokens[start + 2].type != HEADING_CLOSE:
        found = tokens[start + 2].type if start + 2 < len(tokens) else "end of stream"
        raise StructuralMismatchError(
            f"Expected heading at token {start} to close after one inline token, found {found}"
        )
    return tokens[start + 1]


def find_content_after_list(tokens: MarkdownTokens) -> list[Token]:
    """Return the tokens between the first list close and the next heading.

    Returns:
        list[Token]: Tokens after the first ``bullet_list_close`` up to the next
            heading (or the end); empty if no list is closed.
    """
    start = _find_index(tokens, BULLET_LIST_CLOSE)
    if start == -1:
        return []
    end = _find_index(tokens, HEADING_OPEN, start + 1)
    if end == -1:
        return list(tokens[start + 1 :])
    return list(tokens[start + 1 : end])
