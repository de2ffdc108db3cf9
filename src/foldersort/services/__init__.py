"""Directory snapshot and file-backed lookup services."""

from .tree_service import TreeService
from .lookups import (
    FrontmatterMetadataLookup, OrderedBookmarkLookup, MappingIconLookup, FixedIndexNoteResolver)

__all__ = [
    "TreeService",
    "FrontmatterMetadataLookup",
    "OrderedBookmarkLookup",
    "MappingIconLookup",
    "FixedIndexNoteResolver",
]
