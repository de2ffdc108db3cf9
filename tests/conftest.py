"""
Shared fixtures for sorting engine tests.
Provides in-memory lookup collaborators and small tree builders,
plus an isolated temporary directory with a controlled notes tree.
"""
import re
import sys
from pathlib import Path
from typing import Dict, Optional, Mapping, Any

import pytest

# Add src to sys.path so 'foldersort' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from foldersort.core.models import FileEntry, FolderEntry, RegexSpec  # noqa: E402


class FakeMetadata:
    """MetadataLookup over a dict note_path -> frontmatter, recording every lookup."""

    def __init__(self, notes: Optional[Dict[str, Mapping[str, Any]]] = None):
        self.notes = notes or {}
        self.calls = []

    def get_frontmatter(self, note_path):
        self.calls.append(note_path)
        return self.notes.get(note_path)


class FakeBookmarks:
    def __init__(self, ranks: Optional[Dict[str, int]] = None):
        self.ranks = ranks or {}
        self.calls = []

    def order_of(self, path):
        self.calls.append(path)
        return self.ranks.get(path)


class FakeIcons:
    def __init__(self, icons: Optional[Dict[str, str]] = None):
        self.icons = icons or {}

    def icon_of(self, entry):
        return self.icons.get(entry.path)


class FakeFolderNotes:
    def __init__(self, basename: Optional[str]):
        self.basename = basename

    def index_note_basename_for(self, folder):
        return self.basename


def make_file(path: str, mtime: float = 0, ctime: float = 0) -> FileEntry:
    return FileEntry(path=path, mtime=mtime, ctime=ctime)


def make_folder(path: str, *children) -> FolderEntry:
    return FolderEntry(path=path, children=list(children))


def rx(pattern: str, normalizer=None) -> RegexSpec:
    return RegexSpec(regex=re.compile(pattern), normalizer=normalizer)


def names(entries):
    return [e.name for e in entries]


@pytest.fixture
def notes_tree(tmp_path) -> Path:
    """
    Creates a small notes tree:
    - Chapter 2.md, Chapter 10.md, Chapter 1.md, Notes.md, draft.md
    - Archive/ with old.md (frontmatter rank: 2)
    - Projects/ with Projects.md (frontmatter rank: 1) and plan.md
    - .obsidian/ (hidden, skipped by the tree service)
    """
    for name in ("Chapter 2.md", "Chapter 10.md", "Chapter 1.md", "Notes.md", "draft.md"):
        (tmp_path / name).write_text(f"# {name}\n", encoding="utf-8")

    archive = tmp_path / "Archive"
    archive.mkdir()
    (archive / "old.md").write_text("---\nrank: 2\n---\nold\n", encoding="utf-8")

    projects = tmp_path / "Projects"
    projects.mkdir()
    (projects / "Projects.md").write_text("---\nrank: 1\nstatus: active\n---\n", encoding="utf-8")
    (projects / "plan.md").write_text("plan\n", encoding="utf-8")

    hidden = tmp_path / ".obsidian"
    hidden.mkdir()
    (hidden / "app.json").write_text("{}", encoding="utf-8")

    return tmp_path
