"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for rule-based folder sorting: orders, groups, specifications,
tree entries and the transient per-pass classification records.
"""

import os
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, Callable, Any, Union


# =============================
# Constants
# =============================

DEFAULT_METADATA_FIELD = "sort-index-value"

# Do not change: the sorters use 0 to recognize empty folders (undetermined dates)
DEFAULT_FOLDER_MTIME = 0
DEFAULT_FOLDER_CTIME = 0

EQUAL_OR_UNCOMPARABLE = 0

DERIVED_TEXT_SEPARATOR = "//"

NormalizerFn = Callable[[str], Optional[str]]
MetadataExtractorFn = Callable[[Any], Optional[str]]


# =============================
# Enums
# =============================

class GroupType(Enum):
    """
    Kind of a sorting group rule.
    OUTSIDERS never matches during classification: it only exists as a target
    for entries which matched no other group.
    """
    OUTSIDERS = "outsiders"
    MATCH_ALL = "match-all"
    EXACT_NAME = "exact-name"
    EXACT_PREFIX = "exact-prefix"
    EXACT_SUFFIX = "exact-suffix"
    EXACT_HEAD_AND_TAIL = "exact-head-and-tail"
    HAS_METADATA_FIELD = "has-metadata-field"
    BOOKMARKED_ONLY = "bookmarked-only"
    HAS_ICON = "has-icon"

    def __repr__(self) -> str:
        return self.value


class SortOrder(Enum):
    ALPHABETICAL = "alphabetical"
    ALPHABETICAL_WITH_FILE_EXT = "alphabetical-with-file-ext"
    TRUE_ALPHABETICAL = "true-alphabetical"
    TRUE_ALPHABETICAL_WITH_FILE_EXT = "true-alphabetical-with-file-ext"
    ALPHABETICAL_REVERSE = "alphabetical-reverse"
    ALPHABETICAL_REVERSE_WITH_FILE_EXT = "alphabetical-reverse-with-file-ext"
    TRUE_ALPHABETICAL_REVERSE = "true-alphabetical-reverse"
    TRUE_ALPHABETICAL_REVERSE_WITH_FILE_EXT = "true-alphabetical-reverse-with-file-ext"
    BY_MODIFIED_TIME = "by-modified-time"
    BY_MODIFIED_TIME_ADVANCED = "by-modified-time-advanced"
    BY_MODIFIED_TIME_ADVANCED_RECURSIVE = "by-modified-time-advanced-recursive"
    BY_MODIFIED_TIME_REVERSE = "by-modified-time-reverse"
    BY_MODIFIED_TIME_REVERSE_ADVANCED = "by-modified-time-reverse-advanced"
    BY_MODIFIED_TIME_REVERSE_ADVANCED_RECURSIVE = "by-modified-time-reverse-advanced-recursive"
    BY_CREATED_TIME = "by-created-time"
    BY_CREATED_TIME_ADVANCED = "by-created-time-advanced"
    BY_CREATED_TIME_ADVANCED_RECURSIVE = "by-created-time-advanced-recursive"
    BY_CREATED_TIME_REVERSE = "by-created-time-reverse"
    BY_CREATED_TIME_REVERSE_ADVANCED = "by-created-time-reverse-advanced"
    BY_CREATED_TIME_REVERSE_ADVANCED_RECURSIVE = "by-created-time-reverse-advanced-recursive"
    BY_METADATA_FIELD_ALPHABETICAL = "by-metadata-field-alphabetical"
    BY_METADATA_FIELD_TRUE_ALPHABETICAL = "by-metadata-field-true-alphabetical"
    BY_METADATA_FIELD_ALPHABETICAL_REVERSE = "by-metadata-field-alphabetical-reverse"
    BY_METADATA_FIELD_TRUE_ALPHABETICAL_REVERSE = "by-metadata-field-true-alphabetical-reverse"
    STANDARD = "standard"  # whatever the host UI has selected
    BY_BOOKMARK_ORDER = "by-bookmark-order"
    BY_BOOKMARK_ORDER_REVERSE = "by-bookmark-order-reverse"
    FILE_FIRST = "file-first"
    FOLDER_FIRST = "folder-first"
    ALPHABETICAL_WITH_FILES_PREFERRED = "alphabetical-with-files-preferred"
    ALPHABETICAL_WITH_FOLDERS_PREFERRED = "alphabetical-with-folders-preferred"
    VSC_UNICODE = "vsc-unicode"
    VSC_UNICODE_REVERSE = "vsc-unicode-reverse"

    # Alias of ALPHABETICAL_WITH_FILES_PREFERRED
    DEFAULT = "alphabetical-with-files-preferred"

    @property
    def is_by_metadata(self) -> bool:
        return self in METADATA_ORDERS

    @property
    def needs_folder_dates(self) -> bool:
        return self in FOLDER_DATE_ORDERS

    @property
    def needs_folder_deep_dates(self) -> bool:
        return self in RECURSIVE_FOLDER_DATE_ORDERS

    @property
    def needs_bookmarks_order(self) -> bool:
        return self in BOOKMARK_ORDERS


METADATA_ORDERS = frozenset({
    SortOrder.BY_METADATA_FIELD_ALPHABETICAL,
    SortOrder.BY_METADATA_FIELD_TRUE_ALPHABETICAL,
    SortOrder.BY_METADATA_FIELD_ALPHABETICAL_REVERSE,
    SortOrder.BY_METADATA_FIELD_TRUE_ALPHABETICAL_REVERSE,
})

RECURSIVE_FOLDER_DATE_ORDERS = frozenset({
    SortOrder.BY_MODIFIED_TIME_ADVANCED_RECURSIVE,
    SortOrder.BY_MODIFIED_TIME_REVERSE_ADVANCED_RECURSIVE,
    SortOrder.BY_CREATED_TIME_ADVANCED_RECURSIVE,
    SortOrder.BY_CREATED_TIME_REVERSE_ADVANCED_RECURSIVE,
})

FOLDER_DATE_ORDERS = RECURSIVE_FOLDER_DATE_ORDERS | frozenset({
    SortOrder.BY_MODIFIED_TIME_ADVANCED,
    SortOrder.BY_MODIFIED_TIME_REVERSE_ADVANCED,
    SortOrder.BY_CREATED_TIME_ADVANCED,
    SortOrder.BY_CREATED_TIME_REVERSE_ADVANCED,
})

BOOKMARK_ORDERS = frozenset({
    SortOrder.BY_BOOKMARK_ORDER,
    SortOrder.BY_BOOKMARK_ORDER_REVERSE,
})


class SortingLevel(Enum):
    """Cascade level a sorter is used at. Decides which metadata value is read."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    DERIVED_PRIMARY = "derived-primary"
    DERIVED_SECONDARY = "derived-secondary"
    DEFAULT_WHEN_UNSPECIFIED = "default-when-unspecified"


# Host UI sort names. Note the inverted naming: the host's "byModifiedTime"
# means "new to old"
HOST_ALPHABETICAL = "alphabetical"
HOST_ALPHABETICAL_REVERSE = "alphabeticalReverse"
HOST_BY_MODIFIED_TIME = "byModifiedTime"
HOST_BY_MODIFIED_TIME_REVERSE = "byModifiedTimeReverse"
HOST_BY_CREATED_TIME = "byCreatedTime"
HOST_BY_CREATED_TIME_REVERSE = "byCreatedTimeReverse"

HOST_DEFAULT_ORDER = HOST_ALPHABETICAL

HOST_ORDERS = (
    HOST_ALPHABETICAL,
    HOST_ALPHABETICAL_REVERSE,
    HOST_BY_MODIFIED_TIME,
    HOST_BY_MODIFIED_TIME_REVERSE,
    HOST_BY_CREATED_TIME,
    HOST_BY_CREATED_TIME_REVERSE,
)


# ======================
#  Sorting specification
# ======================

@dataclass
class RegexSpec:
    """A pre-compiled pattern with an optional normalizer for capture group 1."""
    regex: re.Pattern
    normalizer: Optional[NormalizerFn] = None


@dataclass
class Ordering:
    order: SortOrder
    by_metadata: Optional[str] = None
    metadata_value_extractor: Optional[MetadataExtractorFn] = None


@dataclass
class SortGroup:
    """
    One rule of the specification.
    A literal (exact_*) takes precedence over the regex counterpart when both are set.
    """
    type: GroupType
    exact_text: Optional[str] = None
    exact_prefix: Optional[str] = None
    regex_prefix: Optional[RegexSpec] = None
    exact_suffix: Optional[str] = None
    regex_suffix: Optional[RegexSpec] = None
    sorting: Optional[Ordering] = None
    secondary_sorting: Optional[Ordering] = None
    files_only: bool = False
    folders_only: bool = False
    match_filename_with_ext: bool = False
    with_metadata_field_name: Optional[str] = None
    icon_name: Optional[str] = None
    priority: Optional[int] = None
    combine_with_idx: Optional[int] = None

    def orders(self) -> List[SortOrder]:
        return [o.order for o in (self.sorting, self.secondary_sorting) if o is not None]


@dataclass
class SortSpec:
    groups: List[SortGroup] = field(default_factory=list)
    target_folders_paths: List[str] = field(default_factory=list)
    default_sorting: Optional[Ordering] = None
    default_secondary_sorting: Optional[Ordering] = None
    outsiders_group_idx: Optional[int] = None
    outsiders_files_group_idx: Optional[int] = None
    outsiders_folders_group_idx: Optional[int] = None
    items_to_hide: Set[str] = field(default_factory=set)
    items_to_ignore: Set[str] = field(default_factory=set)
    priority_order: Optional[List[int]] = None
    implicit: bool = False

    def default_orders(self) -> List[SortOrder]:
        return [o.order for o in (self.default_sorting, self.default_secondary_sorting) if o is not None]

    def __repr__(self):
        return f"<SortSpec targets={self.target_folders_paths}, groups={len(self.groups)}>"


# ======================
#  Tree entries
# ======================

@dataclass(eq=False)
class FileEntry:
    """
    A file in the sorted tree. Times are host timestamps (milliseconds since epoch).
    """
    path: str
    ctime: float = 0
    mtime: float = 0
    name: Optional[str] = None
    basename: Optional[str] = None
    extension: Optional[str] = None

    def __post_init__(self):
        """Extract name, basename and extension from path if not provided."""
        if self.name is None:
            self.name = self.path.rstrip("/").rsplit("/", 1)[-1]
        if self.basename is None or self.extension is None:
            base, ext = os.path.splitext(self.name)
            if self.basename is None:
                self.basename = base
            if self.extension is None:
                self.extension = ext.lstrip(".")

    @property
    def is_folder(self) -> bool:
        return False

    def __repr__(self):
        return f"<FileEntry path={self.path}>"


@dataclass(eq=False)
class FolderEntry:
    path: str
    children: List[Union["FileEntry", "FolderEntry"]] = field(default_factory=list)
    name: Optional[str] = None

    def __post_init__(self):
        if self.name is None:
            self.name = "" if self.path == "/" else self.path.rstrip("/").rsplit("/", 1)[-1]

    @property
    def is_folder(self) -> bool:
        return True

    @property
    def basename(self) -> str:
        return self.name

    def __repr__(self):
        return f"<FolderEntry path={self.path}, children={len(self.children)}>"


Entry = Union[FileEntry, FolderEntry]


@dataclass
class ClassifiedEntry:
    """
    Transient sorting record for one entry, rebuilt on every sort pass.
    For a folder ctime/mtime stay at the 0 sentinel unless aggregated from
    its descendant files.
    """
    path: str
    sort_string: str
    sort_string_with_ext: str
    is_folder: bool
    group_idx: Optional[int] = None
    metadata_field_value: Optional[str] = None
    metadata_field_value_secondary: Optional[str] = None
    metadata_field_value_for_derived: Optional[str] = None
    metadata_field_value_for_derived_secondary: Optional[str] = None
    ctime: float = DEFAULT_FOLDER_CTIME
    mtime: float = DEFAULT_FOLDER_MTIME
    folder: Optional[FolderEntry] = None
    bookmarked_idx: Optional[int] = None

    def __repr__(self):
        return f"<ClassifiedEntry path={self.path}, group={self.group_idx}, sort={self.sort_string!r}>"
