"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/bookmarks.py
Bookmark ranks for entries whose applicable order is by bookmark position.
This is independent of grouping: an entry can be ordered by its bookmark
rank while belonging to a group that has nothing to do with bookmarks.
"""

import logging
from typing import List

from foldersort.core.interfaces import BookmarkOrderLookup
from foldersort.core.models import ClassifiedEntry, SortOrder, SortSpec

logger = logging.getLogger(__name__)


def needs_bookmarks_order(*orders: SortOrder) -> bool:
    return any(o is not None and o.needs_bookmarks_order for o in orders)


def determine_bookmarks_order_if_needed(items: List[ClassifiedEntry], spec: SortSpec,
                                        bookmarks: BookmarkOrderLookup) -> int:
    """Fill `bookmarked_idx` where needed. Returns the number of items looked up."""
    if bookmarks is None:
        return 0

    folder_level_needed = needs_bookmarks_order(*spec.default_orders())
    group_needed = [needs_bookmarks_order(*group.orders()) for group in spec.groups]

    looked_up = 0
    for item in items:
        needed = folder_level_needed
        if not needed and item.group_idx is not None and item.group_idx < len(group_needed):
            needed = group_needed[item.group_idx]
        if needed:
            item.bookmarked_idx = bookmarks.order_of(item.path) or None
            looked_up += 1

    if looked_up:
        logger.debug(f"Resolved bookmark order for {looked_up} items")
    return looked_up
