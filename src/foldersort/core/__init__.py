"""
Core sorting engine: classifier, resolvers, sorter registry, comparator and pass orchestrator.

This package contains the pure foundation of foldersort:
- GroupClassifier: first-match-wins group assignment with regex-derived sort text
- Metadata / folder date / bookmark resolvers: auxiliary keys, computed only when an order needs them
- SORTERS + get_sorter_for: the registry of named ordering strategies
- MultiLevelComparator: group index, then up to four cascading orderings, then a fixed default
- sort_folder_children / sort_folder_items / sort_plain: the sort pass entry points
- Models: SortSpec, SortGroup, Ordering, FileEntry, FolderEntry, ClassifiedEntry

No file system access and no GUI dependencies. Every external fact comes through the interfaces module.
"""

from .models import (
    SortOrder, GroupType, SortingLevel, RegexSpec, Ordering, SortGroup, SortSpec,
    FileEntry, FolderEntry, ClassifiedEntry, DEFAULT_METADATA_FIELD, EQUAL_OR_UNCOMPARABLE)
from .interfaces import SortContext
from .classifier import GroupClassifier, determine_sorting_group, match_group_regex
from .comparator import MultiLevelComparator, get_comparator
from .sorters import SORTERS, get_sorter_for
from .sorter import sort_folder_children, sort_folder_items, sort_plain

__all__ = [
    "SortOrder",
    "GroupType",
    "SortingLevel",
    "RegexSpec",
    "Ordering",
    "SortGroup",
    "SortSpec",
    "FileEntry",
    "FolderEntry",
    "ClassifiedEntry",
    "DEFAULT_METADATA_FIELD",
    "EQUAL_OR_UNCOMPARABLE",
    "SortContext",
    "GroupClassifier",
    "determine_sorting_group",
    "match_group_regex",
    "MultiLevelComparator",
    "get_comparator",
    "SORTERS",
    "get_sorter_for",
    "sort_folder_children",
    "sort_folder_items",
    "sort_plain",
]
