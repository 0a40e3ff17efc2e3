"""Extract typed keys from documented parameter and property lists.

Each bullet follows the form::

    * `name` Type (optional) - Description text.
      * `nested` string - Sub-field of an Object or Function type.
"""

from __future__ import annotations

import logging
import re

from packages.markdown.errors import ConventionViolationError, StructuralMismatchError
from packages.markdown.lists import get_nested_list
from packages.markdown.text import safely_join_tokens
from packages.markdown.tokens import CODE_INLINE, MarkdownTokens
from packages.markdown.type_grammar import raw_type_to_type_information
from packages.markdown.types import NestedList, TypedKey

logger = logging.getLogger(__name__)

OPTIONAL_PATTERN = re.compile(r" ?\(optional\) ?", re.IGNORECASE)
DESCRIPTION_PREFIX = re.compile(r"^- ?")


def convert_nested_list_to_typed_keys(nested_list: NestedList) -> list[TypedKey]:
    """Extract one typed key per item of a nested list.

    Args:
        nested_list: List tree built by ``get_nested_list``.

    Returns:
        list[TypedKey]: Keys in list order; nested lists feed Object and
            Function members.

    Raises:
        StructuralMismatchError: If an item is not a single paragraph.
        ConventionViolationError: If an item lacks a code key and a type, or
            declares optionality in its description.
    """
    keys: list[TypedKey] = []

    for item in nested_list.items:
        # paragraph_open, inline, paragraph_close
        if len(item.tokens) != 3:
            raise StructuralMismatchError(
                "Expected list item representing a typed key to have 3 child tokens, "
                f"got {len(item.tokens)}"
            )

        target = item.tokens[1]
        children = target.children or []
        if len(children) < 2:
            raise ConventionViolationError(
                "Expected typed key to have at least 2 children (a key and a type), "
                f"got {len(children)}"
            )

        key_token = children[0]
        if key_token.type != CODE_INLINE:
            raise ConventionViolationError(
                f"Expected key token to be inline code, got {key_token.type}"
            )

        joined = safely_join_tokens(children[1:])
        raw_type = joined.split("-", 1)[0]
        raw_description = joined[len(raw_type) :]

        if OPTIONAL_PATTERN.search(raw_description):
            raise ConventionViolationError(
                f"Optionality for typed key '{key_token.content}' should be defined "
                'before the "-" and after the type'
            )

        required = OPTIONAL_PATTERN.search(raw_type) is None
        cleaned_type = OPTIONAL_PATTERN.sub("", raw_type, count=1)
        sub_typed_keys = (
            convert_nested_list_to_typed_keys(item.nested_list) if item.nested_list else None
        )

        keys.append(
            {
                "key": key_token.content,
                "type": raw_type_to_type_information(cleaned_type.strip(), sub_typed_keys),
                "description": DESCRIPTION_PREFIX.sub("", raw_description.strip()).strip(),
                "required": required,
            }
        )

    return keys


def convert_list_to_typed_keys(list_tokens: MarkdownTokens) -> list[TypedKey]:
    """Build the nested list for ``list_tokens`` and extract its typed keys."""
    keys = convert_nested_list_to_typed_keys(get_nested_list(list_tokens))
    logger.debug(f"Extracted {len(keys)} typed keys")
    return keys
