"""Token vocabulary consumed by the markdown extraction helpers.

Tokens come from markdown-it-py and are treated as read-only input.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

from packages.common.config import DocsParserConfig, get_config

logger = logging.getLogger(__name__)

MarkdownTokens = Sequence[Token]

HEADING_OPEN = "heading_open"
HEADING_CLOSE = "heading_close"
BULLET_LIST_OPEN = "bullet_list_open"
BULLET_LIST_CLOSE = "bullet_list_close"
LIST_ITEM_OPEN = "list_item_open"
LIST_ITEM_CLOSE = "list_item_close"
PARAGRAPH_OPEN = "paragraph_open"
PARAGRAPH_CLOSE = "paragraph_close"
BLOCKQUOTE_OPEN = "blockquote_open"
BLOCKQUOTE_CLOSE = "blockquote_close"
STRONG_OPEN = "strong_open"
STRONG_CLOSE = "strong_close"
EM_OPEN = "em_open"
EM_CLOSE = "em_close"
S_OPEN = "s_open"
S_CLOSE = "s_close"
LINK_OPEN = "link_open"
LINK_CLOSE = "link_close"
INLINE = "inline"
TEXT = "text"
SOFTBREAK = "softbreak"
CODE_INLINE = "code_inline"
FENCE = "fence"


def heading_rank(token: Token) -> int:
    """Return the numeric rank of a heading token (``h3`` -> 3)."""
    return int(token.tag.replace("h", ""))


def create_parser(config: DocsParserConfig | None = None) -> MarkdownIt:
    """Build a markdown-it parser producing the token vocabulary above.

    Args:
        config: Optional configuration; defaults to the cached settings.

    Returns:
        MarkdownIt: Parser configured with the requested preset.
    """
    config = config or get_config()
    md = MarkdownIt(config.markdown_preset)
    if config.enable_strikethrough:
        md.enable("strikethrough")
    return md


def tokenize(markdown: str, config: DocsParserConfig | None = None) -> list[Token]:
    """Tokenize markdown text into a flat token stream.

    Args:
        markdown: Raw markdown document.
        config: Optional configuration; defaults to the cached settings.

    Returns:
        list[Token]: Flat block-level tokens; inline runs carry ``children``.
    """
    tokens = create_parser(config).parse(markdown)
    logger.debug(f"Tokenized markdown into {len(tokens)} tokens")
    return tokens
