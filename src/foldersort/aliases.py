from foldersort.core.models import (
    HOST_ALPHABETICAL, HOST_ALPHABETICAL_REVERSE, HOST_BY_MODIFIED_TIME,
    HOST_BY_MODIFIED_TIME_REVERSE, HOST_BY_CREATED_TIME, HOST_BY_CREATED_TIME_REVERSE,
)

HOST_ORDER_ALIASES = {
    "name": HOST_ALPHABETICAL,
    "name-reverse": HOST_ALPHABETICAL_REVERSE,
    "modified-newest": HOST_BY_MODIFIED_TIME,
    "modified-oldest": HOST_BY_MODIFIED_TIME_REVERSE,
    "created-newest": HOST_BY_CREATED_TIME,
    "created-oldest": HOST_BY_CREATED_TIME_REVERSE,
}

HOST_ORDER_CHOICES = list(HOST_ORDER_ALIASES.keys())

HOST_ORDER_HELP_TEXT = (
    "Default order used where the specification does not decide\n"
    "(and for every folder when no --spec is given):\n"
    "  name             : A to Z, folders on top\n"
    "  name-reverse     : Z to A, folders on top\n"
    "  modified-newest  : Modified time, new to old\n"
    "  modified-oldest  : Modified time, old to new\n"
    "  created-newest   : Created time, new to old\n"
    "  created-oldest   : Created time, old to new\n"
)

EPILOG_TEXT = """
Examples:
  Show a folder sorted the default way (folders first, then A to Z)
  %(prog)s -i ~/Notes

  Apply a sorting specification to the whole tree
  %(prog)s -i ~/Notes --spec sorting.toml --recursive

  Use frontmatter of index notes named "_index" for folders, bookmarks from a file
  %(prog)s -i ~/Notes --spec sorting.toml --index-note _index --bookmarks bookmarks.txt
"""
