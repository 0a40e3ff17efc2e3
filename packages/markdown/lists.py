"""Turn a flat bullet list token region into an explicit tree."""

from __future__ import annotations

import logging

from packages.markdown.errors import StructuralMismatchError
from packages.markdown.tokens import (
    BULLET_LIST_CLOSE,
    BULLET_LIST_OPEN,
    LIST_ITEM_CLOSE,
    LIST_ITEM_OPEN,
    MarkdownTokens,
)
from packages.markdown.types import ListItem, NestedList

logger = logging.getLogger(__name__)


def get_nested_list(tokens: MarkdownTokens) -> NestedList:
    """Build a nested list tree from list tokens.

    Nesting is tracked with a depth counter and the list being filled at
    each depth. Tokens of a sub-list are attached to the sub-list only,
    never to the owning item.

    Args:
        tokens: One or more top-level bullet lists, including their markers.

    Returns:
        NestedList: Root of the tree.

    Raises:
        StructuralMismatchError: If a sub-list has no owning item or the list
            markers are unbalanced.
    """
    root = NestedList()
    depth_map: dict[int, NestedList | None] = {0: root}
    current: ListItem | None = None
    depth = 0

    for token in tokens:
        current_list = depth_map.get(depth)
        if current_list is None:
            raise StructuralMismatchError(f"No open list at depth {depth} for {token.type}")

        if token.type == LIST_ITEM_CLOSE:
            if current is not None and not any(item is current for item in current_list.items):
                current_list.items.append(current)
            current = None
        elif token.type == LIST_ITEM_OPEN:
            current = ListItem()
        elif token.type == BULLET_LIST_OPEN:
            if current is None:
                if depth > 0:
                    raise StructuralMismatchError(
                        "Found a nested list without a parent list item"
                    )
                # top-level list opening
                continue
            current.nested_list = NestedList()
            current_list.items.append(current)
            depth += 1
            depth_map[depth] = current.nested_list
            current = None
        elif token.type == BULLET_LIST_CLOSE:
            if depth == 0:
                continue
            depth_map[depth] = None
            depth -= 1
        elif current is not None:
            current.tokens.append(token)

    if depth != 0:
        raise StructuralMismatchError(f"Unbalanced bullet list, ended at depth {depth}")

    logger.debug(f"Built nested list with {len(root.items)} top-level items")
    return root
