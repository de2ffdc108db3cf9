"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/folder_dates.py
Synthetic folder timestamps for the "advanced" date orders.

A folder's modified time is the newest modified time of its files, its created
time the oldest created time. Recursive orders look at the whole subtree,
the others at direct children only. A folder without files keeps the 0
sentinel for both.
"""

import logging
from typing import List, Tuple

from foldersort.core.models import (
    ClassifiedEntry, FolderEntry, SortOrder, SortSpec,
    DEFAULT_FOLDER_CTIME, DEFAULT_FOLDER_MTIME,
)

logger = logging.getLogger(__name__)


def needs_folder_dates(*orders: SortOrder) -> bool:
    return any(o is not None and o.needs_folder_dates for o in orders)


def needs_folder_deep_dates(*orders: SortOrder) -> bool:
    return any(o is not None and o.needs_folder_deep_dates for o in orders)


def determine_dates_for_folder(folder: FolderEntry, recursive: bool = False) -> Tuple[float, float]:
    """Returns (mtime, ctime) of the folder computed from its files."""
    mtime = DEFAULT_FOLDER_MTIME
    ctime = DEFAULT_FOLDER_CTIME

    if recursive:
        to_visit = list(folder.children)
        files = []
        while to_visit:
            item = to_visit.pop()
            if item.is_folder:
                to_visit.extend(item.children)
            else:
                files.append(item)
    else:
        files = [child for child in folder.children if not child.is_folder]

    for file in files:
        if file.mtime > mtime:
            mtime = file.mtime
        if file.ctime < ctime or ctime == DEFAULT_FOLDER_CTIME:
            ctime = file.ctime
    return mtime, ctime


def determine_folder_dates_if_needed(items: List[ClassifiedEntry], spec: SortSpec) -> int:
    """
    Aggregate dates of the folder items whose applicable orders need them.
    The folder-level defaults apply to every item, a group's orders only to
    its own items. Returns the number of folders processed.
    """
    default_orders = spec.default_orders()
    dates_needed = needs_folder_dates(*default_orders)
    deep_dates_needed = needs_folder_deep_dates(*default_orders)

    group_needs = [
        (needs_folder_dates(*group.orders()), needs_folder_deep_dates(*group.orders()))
        for group in spec.groups
    ]

    processed = 0
    for item in items:
        if item.folder is None:
            continue
        group_dates, group_deep = False, False
        if item.group_idx is not None and item.group_idx < len(group_needs):
            group_dates, group_deep = group_needs[item.group_idx]
        if dates_needed or group_dates:
            item.mtime, item.ctime = determine_dates_for_folder(
                item.folder, recursive=deep_dates_needed or group_deep)
            processed += 1

    if processed:
        logger.debug(f"Determined aggregate dates for {processed} folders")
    return processed
