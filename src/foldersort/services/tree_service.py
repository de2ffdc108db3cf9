"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/tree_service.py
Builds an in-memory snapshot of a directory tree for the sorting engine.
Features:
- Uses pathlib.Path for robust, cross-platform path handling
- Entry paths are relative to the scanned root, "/"-separated; the root is "/"
- Times are milliseconds since epoch (creation time where the platform has it)
- Symbolic links and inaccessible subdirectories are skipped
"""

import logging
import os
from pathlib import Path
from typing import Tuple, List

from foldersort.core.models import FileEntry, FolderEntry, Entry

logger = logging.getLogger(__name__)

ROOT_PATH = "/"


class TreeService:
    """
    Reads a directory into FolderEntry / FileEntry objects.

    Attributes:
        root_dir: Root directory to read
        skip_hidden: Skip dot-files and dot-directories
    """

    def __init__(self, root_dir: str, skip_hidden: bool = True):
        self.root_dir = root_dir
        self.skip_hidden = skip_hidden

    def scan(self) -> FolderEntry:
        root_path = Path(self.root_dir)
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)

        logger.debug(f"Reading tree: {self.root_dir}")
        root = FolderEntry(path=ROOT_PATH)
        root.children = self._read_children(root_path, "")
        return root

    @staticmethod
    def to_entry_path(parent_rel: str, name: str) -> str:
        return f"{parent_rel}/{name}" if parent_rel else name

    def _read_children(self, directory: Path, rel_path: str) -> List[Entry]:
        children: List[Entry] = []
        try:
            dir_entries = sorted(os.scandir(directory), key=lambda e: e.name)
        except PermissionError as pe:
            logger.warning(f"Permission denied while reading {directory}: {pe}")
            return children

        for dir_entry in dir_entries:
            if self.skip_hidden and dir_entry.name.startswith("."):
                continue
            try:
                if dir_entry.is_symlink():
                    logger.debug(f"Skipping symbolic link: {dir_entry.path}")
                    continue
                entry_path = self.to_entry_path(rel_path, dir_entry.name)
                if dir_entry.is_dir():
                    folder = FolderEntry(path=entry_path, name=dir_entry.name)
                    folder.children = self._read_children(Path(dir_entry.path), entry_path)
                    children.append(folder)
                else:
                    ctime, mtime = self._times_of(dir_entry.stat())
                    children.append(FileEntry(path=entry_path, name=dir_entry.name, ctime=ctime, mtime=mtime))
            except (OSError, PermissionError) as e:
                logger.debug(f"Could not read {dir_entry.path}: {e}")
        return children

    @staticmethod
    def _times_of(stat_result: os.stat_result) -> Tuple[int, int]:
        created = getattr(stat_result, "st_birthtime", None)
        if created is None:
            created = stat_result.st_ctime
        return int(created * 1000), int(stat_result.st_mtime * 1000)
