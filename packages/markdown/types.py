"""Shared type definitions for the markdown extraction package."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NotRequired, TypedDict, Union

from markdown_it.token import Token


class DetailedTypeInformation(TypedDict):
    """A single named type.

    Attributes:
        collection: True when the raw type carried a ``[]`` suffix.
        type: Type name, e.g. "string" or "Object".
        parameters: Documented parameters, only for ``Function``.
        properties: Documented properties, only for ``Object``.
    """

    collection: bool
    type: str
    parameters: NotRequired[list[MethodParameterDocumentation]]
    properties: NotRequired[list[PropertyDocumentationBlock]]


class UnionTypeInformation(TypedDict):
    """A ``A | B`` type; members are parsed independently."""

    collection: bool
    type: list[TypeInformation]


TypeInformation = Union[DetailedTypeInformation, UnionTypeInformation]


class DocumentedField(TypedDict):
    """A documented parameter or property with its type fields spread in."""

    name: str
    description: str
    required: bool
    collection: bool
    type: str | list[TypeInformation]
    parameters: NotRequired[list[MethodParameterDocumentation]]
    properties: NotRequired[list[PropertyDocumentationBlock]]


MethodParameterDocumentation = DocumentedField
PropertyDocumentationBlock = DocumentedField


class TypedKey(TypedDict):
    """A parameter or property described by one bullet list item.

    Attributes:
        key: Name taken from the leading inline code span.
        type: Parsed type of the key.
        description: Text following the ``-`` separator.
        required: False when the type segment is marked ``(optional)``.
    """

    key: str
    type: TypeInformation
    description: str
    required: bool


class HeadingContent(TypedDict):
    """A heading and the tokens that make up its section.

    Attributes:
        heading: Reconstructed heading text.
        level: Heading rank (1 for ``#``, 2 for ``##``...).
        heading_tokens: Tokens between the heading open and close markers.
        content: Tokens up to the next heading of equal or higher rank.
    """

    heading: str
    level: int
    heading_tokens: list[Token]
    content: list[Token]


@dataclass
class ListItem:
    """One bullet; tokens of a nested sub-list live only in ``nested_list``."""

    tokens: list[Token] = field(default_factory=list)
    nested_list: NestedList | None = None


@dataclass
class NestedList:
    """One level of a bullet list."""

    items: list[ListItem] = field(default_factory=list)
