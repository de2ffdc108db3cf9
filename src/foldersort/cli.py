#!/usr/bin/env python3
"""
FolderSort CLI: prints a directory tree sorted by a rule-based specification.
Runs the same core engine a host application would, with file-backed lookups:
YAML frontmatter of markdown notes, a bookmarks file and icons from the spec file.
Read-only: nothing on disk is ever modified.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import List, Optional, NoReturn

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from foldersort import config as spec_config
from foldersort.aliases import HOST_ORDER_ALIASES, HOST_ORDER_CHOICES, HOST_ORDER_HELP_TEXT, EPILOG_TEXT
from foldersort.config import SpecConfigError, SortConfig
from foldersort.core.interfaces import SortContext
from foldersort.core.models import Entry, FolderEntry
from foldersort.core.sorter import sort_folder_children
from foldersort.services.lookups import (
    FrontmatterMetadataLookup, OrderedBookmarkLookup, MappingIconLookup, FixedIndexNoteResolver)
from foldersort.services.tree_service import TreeService


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse and validate command-line arguments."""
        parser = argparse.ArgumentParser(
            description="FolderSort: multi-group custom sorting of a directory tree",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--input", "-i",
            required=True,
            type=str,
            help="Directory whose content should be sorted"
        )
        parser.add_argument(
            "--spec", "-s",
            default=None,
            type=str,
            metavar='',
            help="Sorting specification file (TOML). Without it the default order applies"
        )
        parser.add_argument(
            "--host-order",
            choices=HOST_ORDER_CHOICES,
            default="name",
            type=str,
            help=HOST_ORDER_HELP_TEXT
        )
        parser.add_argument(
            "--index-note",
            default=None,
            type=str,
            metavar='',
            help="Basename of folder index notes (e.g. _index) read with priority for folder metadata"
        )
        parser.add_argument(
            "--bookmarks", "-b",
            default=None,
            type=str,
            metavar='',
            help="Text file with one bookmarked path per line (relative to --input), in bookmark order"
        )
        parser.add_argument(
            "--recursive", "-r",
            action="store_true",
            help="Sort and print subfolders too"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging of the sort passes"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        root_path = Path(args.input).resolve()
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.input}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.input}")

        if args.spec is not None and not Path(args.spec).is_file():
            self.error_exit(f"Specification file not found: {args.spec}")

        if args.bookmarks is not None and not Path(args.bookmarks).is_file():
            self.warning(f"Bookmarks file not found: {args.bookmarks}")

    def load_config(self, args: argparse.Namespace) -> Optional[SortConfig]:
        if args.spec is None:
            return None
        try:
            return spec_config.load(args.spec)
        except SpecConfigError as e:
            self.error_exit(f"Invalid specification: {e}")

    def create_context(self, args: argparse.Namespace, sort_config: Optional[SortConfig]) -> SortContext:
        """Wire the file-backed lookups for the scanned directory."""
        root_dir = str(Path(args.input).resolve())
        ctx = SortContext(metadata=FrontmatterMetadataLookup(root_dir))
        if args.index_note:
            ctx.folder_notes = FixedIndexNoteResolver(args.index_note)
        if args.bookmarks and Path(args.bookmarks).is_file():
            ctx.bookmarks = OrderedBookmarkLookup.from_file(args.bookmarks)
        if sort_config is not None and sort_config.icons:
            ctx.icons = MappingIconLookup(sort_config.icons)
        return ctx

    def output_folder(self, folder: FolderEntry, sort_config: Optional[SortConfig], ctx: SortContext,
                      host_order: str, recursive: bool, depth: int = 0) -> int:
        """Print the sorted children of a folder. Returns the number of printed entries."""
        spec = None
        if sort_config is not None:
            targets = sort_config.spec.target_folders_paths
            if not targets or folder.path in targets:
                spec = sort_config.spec
        sorted_children: List[Entry] = sort_folder_children(folder, spec, ctx, host_order)
        printed = 0
        indent = "   " * depth
        for entry in sorted_children:
            marker = "📁 " if entry.is_folder else "   "
            print(f"{indent}{marker}{entry.name}")
            printed += 1
            if recursive and entry.is_folder:
                printed += self.output_folder(entry, sort_config, ctx, host_order, recursive, depth + 1)
        return printed

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, args=None) -> None:
        """Main entry point."""
        args = self.parse_args(args)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger("foldersort").setLevel(logging.DEBUG)

        self.validate_args(args)
        sort_config = self.load_config(args)
        ctx = self.create_context(args, sort_config)
        host_order = HOST_ORDER_ALIASES[args.host_order]

        try:
            root = TreeService(args.input).scan()
        except RuntimeError as e:
            self.error_exit(str(e))

        if not self.quiet:
            implicit = sort_config is not None and sort_config.spec.implicit
            print(f"Sorted content of: {Path(args.input).resolve()}"
                  + (" (implicit specification)" if implicit else ""))

        printed = self.output_folder(root, sort_config, ctx, host_order, args.recursive)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ {printed} entries in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
