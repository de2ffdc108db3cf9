"""
FolderSort: rule-based, multi-group custom sorting of file trees.

Core features:
- Groups matched first-match-wins: exact name / prefix / suffix / head-and-tail (literal or regex),
  metadata field presence, bookmarked items, items with an icon, catch-all
- Up to four cascading orderings per group (group primary/secondary, folder default primary/secondary)
  chosen from ~30 named strategies, with a fixed deterministic fallback
- Lazily resolved metadata values, bookmark ranks and aggregated folder dates
- CLI that prints a directory sorted by a TOML specification
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("foldersort")
except Exception:
    from pathlib import Path as _Path
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    with open(_Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API, only what users should import directly
from foldersort.core import (
    SortOrder, GroupType, Ordering, RegexSpec, SortGroup, SortSpec, FileEntry, FolderEntry,
    SortContext, sort_folder_children, sort_folder_items, sort_plain)
from foldersort.config import SpecConfigError
from foldersort.services import TreeService

__all__ = [
    "SortOrder",
    "GroupType",
    "Ordering",
    "RegexSpec",
    "SortGroup",
    "SortSpec",
    "FileEntry",
    "FolderEntry",
    "SortContext",
    "sort_folder_children",
    "sort_folder_items",
    "sort_plain",
    "SpecConfigError",
    "TreeService",
    "__version__",
]
