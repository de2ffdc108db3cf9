"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/collation.py
String comparison primitives used by the sorters.

- collator_compare: case- and accent-insensitive, numeric-aware ("file2" < "file10")
- true_alphabetical_compare: case- and accent-insensitive, digits compared as text
- unicode_compare: raw code point order, no collation at all

All functions return a negative number, zero or a positive number.
"""

import re
import unicodedata
from functools import lru_cache

# Split "file10" into ["file", "10", ""]
_NATURAL_RE = re.compile(r'(\d+)')


@lru_cache(maxsize=8192)
def _base_letters(text: str) -> str:
    """Casefolded text with diacritics removed ("Élan" -> "elan")."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


@lru_cache(maxsize=8192)
def natural_sort_key(text: str) -> tuple:
    """
    Generate a sort key that handles embedded numbers naturally.

    Splitting on a capturing group always yields text at even positions and
    digit runs at odd positions, so two keys never compare str against int.
    """
    parts = _NATURAL_RE.split(_base_letters(text))
    return tuple(int(part) if idx % 2 else part for idx, part in enumerate(parts))


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def collator_compare(a: str, b: str) -> int:
    return _cmp(natural_sort_key(a), natural_sort_key(b))


def true_alphabetical_compare(a: str, b: str) -> int:
    return _cmp(_base_letters(a), _base_letters(b))


def unicode_compare(a: str, b: str) -> int:
    return _cmp(a, b)
