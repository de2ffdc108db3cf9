"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Sort pass orchestration.

One pass over a folder's children:
1. Drop hidden and ignored entries (folder children entry point only)
2. Classify every entry into a group
3. Aggregate folder dates where an advanced date order needs them
4. Resolve bookmark ranks where a bookmark order needs them
5. Stable-sort with the multi-level comparator
6. Map the records back to the caller's entry objects (identity preserved)

Folders without a specification are sorted the host way by sort_plain().
"""

import logging
from functools import cmp_to_key
from typing import List, Optional, Sequence

from foldersort.core.bookmarks import determine_bookmarks_order_if_needed
from foldersort.core.classifier import GroupClassifier
from foldersort.core.collation import collator_compare
from foldersort.core.comparator import get_comparator
from foldersort.core.folder_dates import determine_folder_dates_if_needed
from foldersort.core.interfaces import SortContext
from foldersort.core.macros import build_groups_shadow
from foldersort.core.models import (
    Entry, FolderEntry, SortSpec,
    HOST_ALPHABETICAL, HOST_ALPHABETICAL_REVERSE, HOST_BY_MODIFIED_TIME,
    HOST_BY_MODIFIED_TIME_REVERSE, HOST_BY_CREATED_TIME, HOST_BY_CREATED_TIME_REVERSE,
)

logger = logging.getLogger(__name__)


def _sort_with_spec(folder: FolderEntry, items: Sequence[Entry], spec: SortSpec,
                    ctx: SortContext, host_order: Optional[str]) -> List[Entry]:
    groups_shadow = build_groups_shadow(spec, folder.name, ctx.macro_expander)
    classifier = GroupClassifier(spec, ctx, groups_shadow)

    entries_by_path = {}
    folder_items = []
    for entry in items:
        entries_by_path[entry.path] = entry
        folder_items.append(classifier.classify(entry))
    logger.debug(f"Classified {len(folder_items)} items of {folder.path}")

    determine_folder_dates_if_needed(folder_items, spec)
    if ctx.bookmarks is not None:
        determine_bookmarks_order_if_needed(folder_items, spec, ctx.bookmarks)

    folder_items.sort(key=cmp_to_key(get_comparator(spec, host_order)))
    return [entries_by_path[item.path] for item in folder_items]


def sort_folder_children(folder: FolderEntry, spec: Optional[SortSpec], ctx: Optional[SortContext] = None,
                         host_order: Optional[str] = None) -> List[Entry]:
    """
    Sort the direct children of `folder`. Hidden and ignored items are left out
    of the result. Without a specification the host order applies.
    """
    if spec is None:
        return sort_plain(folder.children, host_order)
    visible = [
        entry for entry in folder.children
        if entry.name not in spec.items_to_hide and entry.name not in spec.items_to_ignore
    ]
    return _sort_with_spec(folder, visible, spec, ctx or SortContext(), host_order)


def sort_folder_items(folder: FolderEntry, items: Sequence[Entry], spec: Optional[SortSpec],
                      ctx: Optional[SortContext] = None, host_order: Optional[str] = None) -> List[Entry]:
    """
    Sort an already assembled list of entries as if they were children of `folder`.
    Returns a sorted copy; the input list is left intact and nothing is filtered out.
    """
    if spec is None:
        return sort_plain(items, host_order)
    return _sort_with_spec(folder, items, spec, ctx or SortContext(), host_order)


# =============================
# Host default sorting
# =============================

def _file_sort_key_cmp(host_order: Optional[str]):
    if host_order == HOST_ALPHABETICAL_REVERSE:
        return lambda a, b: collator_compare(b.basename, a.basename)
    if host_order == HOST_BY_MODIFIED_TIME:
        return lambda a, b: b.mtime - a.mtime
    if host_order == HOST_BY_MODIFIED_TIME_REVERSE:
        return lambda a, b: a.mtime - b.mtime
    if host_order == HOST_BY_CREATED_TIME:
        return lambda a, b: b.ctime - a.ctime
    if host_order == HOST_BY_CREATED_TIME_REVERSE:
        return lambda a, b: a.ctime - b.ctime
    # HOST_ALPHABETICAL and anything unknown
    return lambda a, b: collator_compare(a.basename, b.basename)


def sort_plain(items: Sequence[Entry], host_order: Optional[str] = HOST_ALPHABETICAL) -> List[Entry]:
    """
    Host-equivalent sorting of raw entries: folders on top alphabetically by
    name, then files by the single host-selected criterion.
    """
    file_cmp = _file_sort_key_cmp(host_order)

    def compare(a: Entry, b: Entry) -> float:
        if a.is_folder or b.is_folder:
            if a.is_folder and not b.is_folder:
                return -1
            if b.is_folder and not a.is_folder:
                return 1
            return collator_compare(a.name, b.name)
        return file_cmp(a, b)

    return sorted(items, key=cmp_to_key(compare))
