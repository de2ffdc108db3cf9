"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines the lookup collaborators (Protocols) consumed by the sorting engine.
The engine never touches the file system or the host application directly:
every external fact it needs is asked through one of these narrow, synchronous
interfaces, and an absent answer is always a normal outcome.

Key Components:
---------------
- MetadataLookup: frontmatter of a note, by note path.
- FolderNoteResolver: basename of a folder's alternate "index" note.
- BookmarkOrderLookup: 1-based bookmark rank of a path.
- IconLookup: icon name assigned to an entry.
- MacroExpander: folder-specific rewriting of a per-pass group copy.
- SortContext: the collaborators available for one sort pass.
"""

from dataclasses import dataclass
from typing import Protocol, Optional, Mapping, Any, List

from foldersort.core.models import Entry, FolderEntry, SortGroup


# ===== Interfaces =====

class MetadataLookup(Protocol):
    """Interface for reading frontmatter-like metadata of a note."""
    def get_frontmatter(self, note_path: str) -> Optional[Mapping[str, Any]]:
        """Return the metadata mapping of the note, or None if unknown."""
        ...


class FolderNoteResolver(Protocol):
    def index_note_basename_for(self, folder: FolderEntry) -> Optional[str]:
        """Basename (without .md) of the folder's index note, if that mode is active."""
        ...


class BookmarkOrderLookup(Protocol):
    def order_of(self, path: str) -> Optional[int]:
        """Positive 1-based rank of a bookmarked path, None or 0 if not bookmarked."""
        ...


class IconLookup(Protocol):
    def icon_of(self, entry: Entry) -> Optional[str]:
        ...


class MacroExpander(Protocol):
    """
    Rewrites folder-specific placeholders in the per-pass shadow groups.
    Must modify only the given copies, never the specification's own groups.
    """
    def __call__(self, groups_shadow: List[SortGroup], parent_folder_name: Optional[str]) -> None:
        ...


@dataclass
class SortContext:
    """Collaborators for one sort pass. Each one is optional."""
    metadata: Optional[MetadataLookup] = None
    folder_notes: Optional[FolderNoteResolver] = None
    bookmarks: Optional[BookmarkOrderLookup] = None
    icons: Optional[IconLookup] = None
    macro_expander: Optional[MacroExpander] = None
