"""Rebuild markdown-ish text from a run of tokens."""

from __future__ import annotations

from packages.markdown import tokens as kinds
from packages.markdown.errors import ConventionViolationError
from packages.markdown.tokens import MarkdownTokens

JOINABLE_TOKEN_TYPES = frozenset(
    {
        kinds.TEXT,
        kinds.LINK_OPEN,
        kinds.LINK_CLOSE,
        kinds.SOFTBREAK,
        kinds.CODE_INLINE,
        kinds.STRONG_OPEN,
        kinds.STRONG_CLOSE,
        kinds.PARAGRAPH_OPEN,
        kinds.PARAGRAPH_CLOSE,
        kinds.BULLET_LIST_OPEN,
        kinds.BULLET_LIST_CLOSE,
        kinds.LIST_ITEM_OPEN,
        kinds.LIST_ITEM_CLOSE,
        kinds.EM_OPEN,
        kinds.EM_CLOSE,
        kinds.FENCE,
        kinds.S_OPEN,
        kinds.S_CLOSE,
        kinds.BLOCKQUOTE_OPEN,
        kinds.BLOCKQUOTE_CLOSE,
    }
)

_MARKUP_TOKEN_TYPES = frozenset(
    {
        kinds.STRONG_OPEN,
        kinds.STRONG_CLOSE,
        kinds.EM_OPEN,
        kinds.EM_CLOSE,
        kinds.S_OPEN,
        kinds.S_CLOSE,
    }
)

_STRUCTURAL_TOKEN_TYPES = frozenset(
    {
        kinds.PARAGRAPH_OPEN,
        kinds.BULLET_LIST_OPEN,
        kinds.BULLET_LIST_CLOSE,
        kinds.BLOCKQUOTE_CLOSE,
        kinds.FENCE,
    }
)


def safely_join_tokens(tokens: MarkdownTokens) -> str:
    """Flatten tokens back into a single markdown string.

    Emphasis, strikethrough and inline code keep their original delimiters.
    Fenced code blocks produce no text.

    Args:
        tokens: Tokens drawn from the supported plain text, link, emphasis,
            code, paragraph, list and blockquote kinds. Inline tokens are
            expanded through their children.

    Returns:
        str: Reconstructed text, stripped of surrounding whitespace.

    Raises:
        ConventionViolationError: If a token of any other kind is present.
    """
    joined = ""
    for token in tokens:
        if token.children is not None and token.type == kinds.INLINE:
            joined += safely_join_tokens(token.children)
            continue

        if token.children is not None:
            raise ConventionViolationError(
                f"There should be no nested children in the joinable tokens, got {token.type}"
            )
        if token.type not in JOINABLE_TOKEN_TYPES:
            raise ConventionViolationError(
                "Only plain text, links, softbreaks, inline code, emphasis, lists, "
                f"blockquotes and paragraphs can be joined, got {token.type}"
            )

        if token.type == kinds.SOFTBREAK:
            joined += " "
        elif token.type == kinds.CODE_INLINE:
            joined += f"{token.markup}{token.content}{token.markup}"
        elif token.type == kinds.BLOCKQUOTE_OPEN:
            joined += f"{token.markup} "
        elif token.type in _MARKUP_TOKEN_TYPES:
            joined += token.markup
        elif token.type in (kinds.TEXT, kinds.LINK_OPEN, kinds.LINK_CLOSE):
            joined += token.content
        elif token.type == kinds.PARAGRAPH_CLOSE:
            joined += "\n\n"
        elif token.type == kinds.LIST_ITEM_OPEN:
            joined += "* "
        elif token.type == kinds.LIST_ITEM_CLOSE:
            if joined.endswith("\n"):
                joined = joined[:-1]
        elif token.type in _STRUCTURAL_TOKEN_TYPES:
            # structural only
            pass

    return joined.strip()
