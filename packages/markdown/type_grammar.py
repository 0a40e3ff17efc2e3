"""Parse documented type strings such as ``Foo[] | (Bar | Baz)``."""

from __future__ import annotations

from packages.markdown.types import (
    DetailedTypeInformation,
    DocumentedField,
    TypedKey,
    TypeInformation,
)

COLLECTION_SUFFIX = "[]"


def _strip_enclosing_parens(type_string: str) -> str:
    """Drop one pair of parentheses when it wraps the whole string."""
    if len(type_string) < 2 or type_string[0] != "(" or type_string[-1] != ")":
        return type_string

    depth = 0
    for index, char in enumerate(type_string):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0 and index != len(type_string) - 1:
                # "(A) | (B)": the first paren closes early
                return type_string
    return type_string[1:-1]


def split_union(type_string: str) -> list[str]:
    """Split on ``|`` outside parentheses, leaving ``\\|`` escapes in place."""
    parts: list[str] = []
    depth = 0
    start = 0
    escaped = False
    for index, char in enumerate(type_string):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "|" and depth == 0:
            parts.append(type_string[start:index])
            start = index + 1
    parts.append(type_string[start:])
    return parts


def _document_sub_keys(sub_typed_keys: list[TypedKey] | None) -> list[DocumentedField]:
    if not sub_typed_keys:
        return []
    return [
        {
            "name": typed_key["key"],
            "description": typed_key["description"],
            "required": typed_key["required"],
            **typed_key["type"],
        }
        for typed_key in sub_typed_keys
    ]


def raw_type_to_type_information(
    raw_type: str,
    sub_typed_keys: list[TypedKey] | None,
) -> TypeInformation:
    """Parse a raw type string into structured type information.

    ``[]`` is stripped first and marks a collection. The rest, minus one
    layer of enclosing parentheses, is split on top-level ``|``; each member
    of a union is parsed on its own. ``Function`` and ``Object`` take their
    parameters or properties from ``sub_typed_keys``.

    Args:
        raw_type: Type text, e.g. ``string[]`` or ``Object``.
        sub_typed_keys: Keys documented in the item's nested list, if any.

    Returns:
        TypeInformation: Union or leaf type information.

    Example:
        >>> raw_type_to_type_information("string | number", None)["type"][1]
        {'collection': False, 'type': 'number'}
    """
    collection = False
    type_string = raw_type
    if raw_type.endswith(COLLECTION_SUFFIX):
        collection = True
        type_string = raw_type[: -len(COLLECTION_SUFFIX)]
    type_string = _strip_enclosing_parens(type_string.strip())

    members = split_union(type_string)
    if len(members) > 1:
        return {
            "collection": collection,
            "type": [
                raw_type_to_type_information(member.strip(), sub_typed_keys)
                for member in members
            ],
        }

    type_string = type_string.replace("\\|", "|")
    leaf: DetailedTypeInformation = {"collection": collection, "type": type_string}
    if type_string == "Function":
        leaf["parameters"] = _document_sub_keys(sub_typed_keys)
    elif type_string == "Object":
        leaf["properties"] = _document_sub_keys(sub_typed_keys)
    return leaf
