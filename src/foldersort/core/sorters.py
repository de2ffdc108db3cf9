"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorters.py
Registry of the named ordering strategies.

Every sorter compares two ClassifiedEntry records and returns a negative
number, zero or a positive number. Zero (EQUAL_OR_UNCOMPARABLE) means the
sorter cannot tell the two apart and the next cascade level decides.

FAMILIES
--------
• Lexicographic: alphabetical (numeric-aware, case-insensitive), true
  alphabetical (digits as text), with/without extension, reversed; unicode
  (raw code points) and its reverse
• File/folder precedence on equal names
• Time: basic (two folders compare by name) and advanced (aggregated folder
  dates, a determined date always goes before an undetermined one)
• Metadata: reads the value belonging to the cascade level it is used at
• Bookmark rank: ranked items always go before unranked ones
• Structural: files first / folders first
• STANDARD: whatever the host UI has selected, folders kept on top

The tables are built once at import time and exposed read-only.
"""

from types import MappingProxyType
from typing import Callable, Optional, Mapping

from foldersort.core.collation import collator_compare, true_alphabetical_compare, unicode_compare
from foldersort.core.models import (
    ClassifiedEntry, SortOrder, SortingLevel, EQUAL_OR_UNCOMPARABLE,
    HOST_ALPHABETICAL, HOST_ALPHABETICAL_REVERSE, HOST_BY_MODIFIED_TIME,
    HOST_BY_MODIFIED_TIME_REVERSE, HOST_BY_CREATED_TIME, HOST_BY_CREATED_TIME_REVERSE,
    HOST_DEFAULT_ORDER,
)

SorterFn = Callable[[ClassifiedEntry, ClassifiedEntry], float]
CollatorCompareFn = Callable[[str, str], int]

REVERSE_ORDER = True
STRAIGHT_ORDER = False
TRUE_ALPHABETICAL = True


# =============================
# Sorter factories
# =============================

def _metadata_of(item: ClassifiedEntry, level: SortingLevel) -> Optional[str]:
    if level == SortingLevel.SECONDARY:
        return item.metadata_field_value_secondary
    if level == SortingLevel.DERIVED_PRIMARY:
        return item.metadata_field_value_for_derived
    if level == SortingLevel.DERIVED_SECONDARY:
        return item.metadata_field_value_for_derived_secondary
    return item.metadata_field_value


def sorter_by_metadata_field(reverse: bool, true_alphabetical: bool, level: SortingLevel) -> SorterFn:
    compare: CollatorCompareFn = true_alphabetical_compare if true_alphabetical else collator_compare

    def sorter(a: ClassifiedEntry, b: ClassifiedEntry) -> float:
        a_value, b_value = _metadata_of(a, level), _metadata_of(b, level)
        if reverse:
            a_value, b_value = b_value, a_value
        if a_value is not None and b_value is not None:
            return compare(a_value, b_value)
        # Item with metadata goes before the one without, in both directions
        if a_value is not None:
            return 1 if reverse else -1
        if b_value is not None:
            return -1 if reverse else 1
        return EQUAL_OR_UNCOMPARABLE
    return sorter


def sorter_by_bookmark_order(reverse: bool) -> SorterFn:
    def sorter(a: ClassifiedEntry, b: ClassifiedEntry) -> float:
        if reverse:
            a, b = b, a
        if a.bookmarked_idx and b.bookmarked_idx:
            # ranks are unique per item, no secondary ordering needed
            return a.bookmarked_idx - b.bookmarked_idx
        if a.bookmarked_idx:
            return 1 if reverse else -1
        if b.bookmarked_idx:
            return -1 if reverse else 1
        return EQUAL_OR_UNCOMPARABLE
    return sorter


def _sorter_by_determined_date(attr: str, reverse: bool) -> SorterFn:
    def sorter(a: ClassifiedEntry, b: ClassifiedEntry) -> float:
        if reverse:
            a, b = b, a
        a_date, b_date = getattr(a, attr), getattr(b, attr)
        if a_date and b_date:
            return a_date - b_date
        # Item with determined date goes before an empty folder, in both directions
        if a_date:
            return 1 if reverse else -1
        if b_date:
            return -1 if reverse else 1
        return EQUAL_OR_UNCOMPARABLE
    return sorter


def sorter_by_folder_mdate(reverse: bool = False) -> SorterFn:
    return _sorter_by_determined_date("mtime", reverse)


def sorter_by_folder_cdate(reverse: bool = False) -> SorterFn:
    return _sorter_by_determined_date("ctime", reverse)


def _sorter_by_basic_date(attr: str, reverse: bool) -> SorterFn:
    def sorter(a: ClassifiedEntry, b: ClassifiedEntry) -> float:
        if a.is_folder and b.is_folder:
            return collator_compare(a.sort_string, b.sort_string)
        if reverse:
            return getattr(b, attr) - getattr(a, attr)
        return getattr(a, attr) - getattr(b, attr)
    return sorter


def file_goes_first_when_same_name(string_compare_result: float, a: ClassifiedEntry, b: ClassifiedEntry) -> float:
    if string_compare_result:
        return string_compare_result
    if a.is_folder == b.is_folder:
        return EQUAL_OR_UNCOMPARABLE
    return 1 if a.is_folder else -1


def folder_goes_first_when_same_name(string_compare_result: float, a: ClassifiedEntry, b: ClassifiedEntry) -> float:
    if string_compare_result:
        return string_compare_result
    if a.is_folder == b.is_folder:
        return EQUAL_OR_UNCOMPARABLE
    return -1 if a.is_folder else 1


def _kind_first(folders_first: bool) -> SorterFn:
    def sorter(a: ClassifiedEntry, b: ClassifiedEntry) -> float:
        if a.is_folder == b.is_folder:
            return EQUAL_OR_UNCOMPARABLE
        return (-1 if a.is_folder else 1) if folders_first else (1 if a.is_folder else -1)
    return sorter


# =============================
# Registry tables
# =============================

def _alphabetical(a: ClassifiedEntry, b: ClassifiedEntry) -> float:
    return collator_compare(a.sort_string, b.sort_string)


SORTERS: Mapping[SortOrder, SorterFn] = MappingProxyType({
    SortOrder.ALPHABETICAL: _alphabetical,
    SortOrder.ALPHABETICAL_WITH_FILES_PREFERRED:
        lambda a, b: file_goes_first_when_same_name(_alphabetical(a, b), a, b),
    SortOrder.ALPHABETICAL_WITH_FOLDERS_PREFERRED:
        lambda a, b: folder_goes_first_when_same_name(_alphabetical(a, b), a, b),
    SortOrder.ALPHABETICAL_WITH_FILE_EXT:
        lambda a, b: collator_compare(a.sort_string_with_ext, b.sort_string_with_ext),
    SortOrder.TRUE_ALPHABETICAL:
        lambda a, b: true_alphabetical_compare(a.sort_string, b.sort_string),
    SortOrder.TRUE_ALPHABETICAL_WITH_FILE_EXT:
        lambda a, b: true_alphabetical_compare(a.sort_string_with_ext, b.sort_string_with_ext),
    SortOrder.ALPHABETICAL_REVERSE:
        lambda a, b: collator_compare(b.sort_string, a.sort_string),
    SortOrder.ALPHABETICAL_REVERSE_WITH_FILE_EXT:
        lambda a, b: collator_compare(b.sort_string_with_ext, a.sort_string_with_ext),
    SortOrder.TRUE_ALPHABETICAL_REVERSE:
        lambda a, b: true_alphabetical_compare(b.sort_string, a.sort_string),
    SortOrder.TRUE_ALPHABETICAL_REVERSE_WITH_FILE_EXT:
        lambda a, b: true_alphabetical_compare(b.sort_string_with_ext, a.sort_string_with_ext),
    SortOrder.BY_MODIFIED_TIME: _sorter_by_basic_date("mtime", STRAIGHT_ORDER),
    SortOrder.BY_MODIFIED_TIME_ADVANCED: sorter_by_folder_mdate(),
    SortOrder.BY_MODIFIED_TIME_ADVANCED_RECURSIVE: sorter_by_folder_mdate(),
    SortOrder.BY_MODIFIED_TIME_REVERSE: _sorter_by_basic_date("mtime", REVERSE_ORDER),
    SortOrder.BY_MODIFIED_TIME_REVERSE_ADVANCED: sorter_by_folder_mdate(REVERSE_ORDER),
    SortOrder.BY_MODIFIED_TIME_REVERSE_ADVANCED_RECURSIVE: sorter_by_folder_mdate(REVERSE_ORDER),
    SortOrder.BY_CREATED_TIME: _sorter_by_basic_date("ctime", STRAIGHT_ORDER),
    SortOrder.BY_CREATED_TIME_ADVANCED: sorter_by_folder_cdate(),
    SortOrder.BY_CREATED_TIME_ADVANCED_RECURSIVE: sorter_by_folder_cdate(),
    SortOrder.BY_CREATED_TIME_REVERSE: _sorter_by_basic_date("ctime", REVERSE_ORDER),
    SortOrder.BY_CREATED_TIME_REVERSE_ADVANCED: sorter_by_folder_cdate(REVERSE_ORDER),
    SortOrder.BY_CREATED_TIME_REVERSE_ADVANCED_RECURSIVE: sorter_by_folder_cdate(REVERSE_ORDER),
    SortOrder.BY_METADATA_FIELD_ALPHABETICAL:
        sorter_by_metadata_field(STRAIGHT_ORDER, not TRUE_ALPHABETICAL, SortingLevel.PRIMARY),
    SortOrder.BY_METADATA_FIELD_TRUE_ALPHABETICAL:
        sorter_by_metadata_field(STRAIGHT_ORDER, TRUE_ALPHABETICAL, SortingLevel.PRIMARY),
    SortOrder.BY_METADATA_FIELD_ALPHABETICAL_REVERSE:
        sorter_by_metadata_field(REVERSE_ORDER, not TRUE_ALPHABETICAL, SortingLevel.PRIMARY),
    SortOrder.BY_METADATA_FIELD_TRUE_ALPHABETICAL_REVERSE:
        sorter_by_metadata_field(REVERSE_ORDER, TRUE_ALPHABETICAL, SortingLevel.PRIMARY),
    SortOrder.BY_BOOKMARK_ORDER: sorter_by_bookmark_order(STRAIGHT_ORDER),
    SortOrder.BY_BOOKMARK_ORDER_REVERSE: sorter_by_bookmark_order(REVERSE_ORDER),
    SortOrder.FILE_FIRST: _kind_first(folders_first=False),
    SortOrder.FOLDER_FIRST: _kind_first(folders_first=True),
    SortOrder.VSC_UNICODE: lambda a, b: unicode_compare(a.sort_string, b.sort_string),
    SortOrder.VSC_UNICODE_REVERSE: lambda a, b: unicode_compare(b.sort_string, a.sort_string),
    # Fallback only, get_sorter_for() resolves STANDARD through the host order
    SortOrder.STANDARD: _alphabetical,
})


def _metadata_sorters_for(level: SortingLevel) -> Mapping[SortOrder, SorterFn]:
    return MappingProxyType({
        SortOrder.BY_METADATA_FIELD_ALPHABETICAL:
            sorter_by_metadata_field(STRAIGHT_ORDER, not TRUE_ALPHABETICAL, level),
        SortOrder.BY_METADATA_FIELD_TRUE_ALPHABETICAL:
            sorter_by_metadata_field(STRAIGHT_ORDER, TRUE_ALPHABETICAL, level),
        SortOrder.BY_METADATA_FIELD_ALPHABETICAL_REVERSE:
            sorter_by_metadata_field(REVERSE_ORDER, not TRUE_ALPHABETICAL, level),
        SortOrder.BY_METADATA_FIELD_TRUE_ALPHABETICAL_REVERSE:
            sorter_by_metadata_field(REVERSE_ORDER, TRUE_ALPHABETICAL, level),
    })


# Some sorters differ depending on the cascade level they are used at
LEVEL_OVERRIDES: Mapping[SortingLevel, Mapping[SortOrder, SorterFn]] = MappingProxyType({
    SortingLevel.SECONDARY: _metadata_sorters_for(SortingLevel.SECONDARY),
    SortingLevel.DERIVED_PRIMARY: _metadata_sorters_for(SortingLevel.DERIVED_PRIMARY),
    SortingLevel.DERIVED_SECONDARY: _metadata_sorters_for(SortingLevel.DERIVED_SECONDARY),
})


# Host label vs. internal name: the host's "byModifiedTime" is new to old,
# which is BY_MODIFIED_TIME_REVERSE here
HOST_TO_SORT_ORDER: Mapping[str, SortOrder] = MappingProxyType({
    HOST_ALPHABETICAL: SortOrder.ALPHABETICAL,
    HOST_ALPHABETICAL_REVERSE: SortOrder.ALPHABETICAL_REVERSE,
    HOST_BY_MODIFIED_TIME: SortOrder.BY_MODIFIED_TIME_REVERSE,
    HOST_BY_MODIFIED_TIME_REVERSE: SortOrder.BY_MODIFIED_TIME,
    HOST_BY_CREATED_TIME: SortOrder.BY_CREATED_TIME_REVERSE,
    HOST_BY_CREATED_TIME_REVERSE: SortOrder.BY_CREATED_TIME,
})


def standard_comparator(order: SortOrder) -> SorterFn:
    """Host-equivalent comparator: folders on top alphabetically, files by `order`."""
    files_sorter = SORTERS[order]

    def sorter(a: ClassifiedEntry, b: ClassifiedEntry) -> float:
        if a.is_folder or b.is_folder:
            if a.is_folder and not b.is_folder:
                return -1
            if b.is_folder and not a.is_folder:
                return 1
            return _alphabetical(a, b)
        return files_sorter(a, b)
    return sorter


def get_sorter_for(order: SortOrder, host_order: Optional[str] = None,
                   level: SortingLevel = SortingLevel.PRIMARY) -> SorterFn:
    if order == SortOrder.STANDARD:
        mapped = HOST_TO_SORT_ORDER.get(host_order or HOST_DEFAULT_ORDER, SortOrder.ALPHABETICAL)
        return standard_comparator(mapped)
    overrides = LEVEL_OVERRIDES.get(level)
    if overrides is not None and order in overrides:
        return overrides[order]
    return SORTERS[order]
