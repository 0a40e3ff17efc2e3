"""Structured extraction from documentation markdown token streams."""

from packages.markdown.errors import (
    ConventionViolationError,
    MarkdownConventionError,
    StructuralMismatchError,
)
from packages.markdown.headings import (
    find_constructor_header,
    find_content_inside_header,
    headings_and_content,
)
from packages.markdown.lists import get_nested_list
from packages.markdown.spans import find_content_after_list, find_first_heading, find_next_list
from packages.markdown.text import safely_join_tokens
from packages.markdown.tokens import MarkdownTokens, create_parser, tokenize
from packages.markdown.type_grammar import raw_type_to_type_information
from packages.markdown.typed_keys import (
    convert_list_to_typed_keys,
    convert_nested_list_to_typed_keys,
)
from packages.markdown.types import (
    HeadingContent,
    ListItem,
    NestedList,
    TypedKey,
    TypeInformation,
)

__all__ = [
    "ConventionViolationError",
    "HeadingContent",
    "ListItem",
    "MarkdownConventionError",
    "MarkdownTokens",
    "NestedList",
    "StructuralMismatchError",
    "TypeInformation",
    "TypedKey",
    "convert_list_to_typed_keys",
    "convert_nested_list_to_typed_keys",
    "create_parser",
    "find_constructor_header",
    "find_content_after_list",
    "find_content_inside_header",
    "find_first_heading",
    "find_next_list",
    "get_nested_list",
    "headings_and_content",
    "raw_type_to_type_information",
    "safely_join_tokens",
    "tokenize",
]
