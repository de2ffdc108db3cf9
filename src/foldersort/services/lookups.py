"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/lookups.py
File-backed implementations of the engine's lookup collaborators.
- FrontmatterMetadataLookup: YAML frontmatter of markdown notes (PyYAML)
- OrderedBookmarkLookup: ranks from an ordered list of bookmarked paths
- MappingIconLookup: icons assigned per path
- FixedIndexNoteResolver: one index note basename for every folder
"""

import logging
from pathlib import Path
from typing import Optional, Mapping, Any, Dict, Iterable, List

import yaml

from foldersort.core.models import Entry, FolderEntry

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"


def parse_frontmatter(content: str) -> Optional[Dict[str, Any]]:
    """
    Parse the YAML block between the leading '---' lines of a markdown note.
    Returns None when the note has no frontmatter or it is not a mapping.
    """
    lines = content.splitlines()
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None
    for end_idx in range(1, len(lines)):
        if lines[end_idx].strip() == FRONTMATTER_DELIMITER:
            break
    else:
        return None

    data = yaml.safe_load("\n".join(lines[1:end_idx]))
    if data is None:
        return {}
    if not isinstance(data, dict):
        return None
    return data


class FrontmatterMetadataLookup:
    """
    Reads frontmatter of notes below a root directory. Note paths are
    "/"-separated and relative to the root. Results are cached per path.
    """

    def __init__(self, root_dir: str):
        self.root_dir = Path(root_dir)
        self._cache: Dict[str, Optional[Dict[str, Any]]] = {}

    def get_frontmatter(self, note_path: str) -> Optional[Mapping[str, Any]]:
        if note_path not in self._cache:
            self._cache[note_path] = self._read(note_path)
        return self._cache[note_path]

    def _read(self, note_path: str) -> Optional[Dict[str, Any]]:
        path = self.root_dir.joinpath(*note_path.split("/"))
        if path.suffix.lower() != ".md" or not path.is_file():
            return None
        try:
            return parse_frontmatter(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
        except yaml.YAMLError as e:
            logger.warning(f"Malformed frontmatter in {path}: {e}")
        return None


class OrderedBookmarkLookup:
    """Bookmark rank = 1-based position of the path in the given list."""

    def __init__(self, paths: Iterable[str]):
        self._ranks: Dict[str, int] = {}
        for path in paths:
            path = path.strip().strip("/")
            if path and path not in self._ranks:
                self._ranks[path] = len(self._ranks) + 1

    @staticmethod
    def from_file(bookmarks_file: str) -> "OrderedBookmarkLookup":
        """One bookmarked path per line, empty lines and '#' comments skipped."""
        lines: List[str] = []
        with open(bookmarks_file, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#"):
                    lines.append(line)
        return OrderedBookmarkLookup(lines)

    def order_of(self, path: str) -> Optional[int]:
        return self._ranks.get(path)


class MappingIconLookup:
    def __init__(self, icons: Mapping[str, str]):
        self.icons = dict(icons)

    def icon_of(self, entry: Entry) -> Optional[str]:
        return self.icons.get(entry.path)


class FixedIndexNoteResolver:
    def __init__(self, basename: Optional[str]):
        self.basename = basename

    def index_note_basename_for(self, folder: FolderEntry) -> Optional[str]:
        return self.basename
