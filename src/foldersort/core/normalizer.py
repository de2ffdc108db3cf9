"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/normalizer.py
Normalizers for regex capture groups, applied before a capture becomes the
derived sort text of an entry.

A normalizer returns None when it cannot handle its input; the capture is then
not used as derived text and the entry sorts by its plain name.
"""

import re
from functools import lru_cache
from typing import Optional, Dict

from foldersort.core.models import NormalizerFn

NUMBER_WIDTH = 20

# Pre-compiled regex patterns (performance optimization)
_PATTERN_NUMBER = re.compile(r'^\d+$')
_PATTERN_COMPOUND = re.compile(r'^\d+(?:[.\-]\d+)*[.\-]?$')
_PATTERN_ROMAN = re.compile(r'^M{0,4}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$', re.IGNORECASE)

_ROMAN_VALUES = {"i": 1, "v": 5, "x": 10, "l": 50, "c": 100, "d": 500, "m": 1000}


def _pad(digits: str) -> str:
    return digits.lstrip("0").rjust(NUMBER_WIDTH, "0")


@lru_cache(maxsize=8192)
def pad_number(text: str) -> Optional[str]:
    """
    Zero-pad an integer capture so that it also orders correctly under
    code-point comparison.

    Examples:
        "7" → "00000000000000000007"
        "007" → "00000000000000000007"
        "x7" → None
    """
    if not text or not _PATTERN_NUMBER.match(text):
        return None
    return _pad(text)


@lru_cache(maxsize=8192)
def pad_compound_number(text: str) -> Optional[str]:
    """
    Zero-pad each component of a dotted or dashed number ("1.10.2", "3-1").
    A trailing separator is dropped; components are joined with ".".
    """
    if not text or not _PATTERN_COMPOUND.match(text):
        return None
    parts = [p for p in re.split(r'[.\-]', text) if p]
    return ".".join(_pad(p) for p in parts)


@lru_cache(maxsize=1024)
def roman_to_number(text: str) -> Optional[str]:
    """
    Convert a roman numeral capture to a zero-padded arabic number.

    Examples:
        "XIV" → "00000000000000000014"
        "iv" → "00000000000000000004"
        "IIII" → None
    """
    if not text or not _PATTERN_ROMAN.match(text):
        return None
    total = 0
    previous = 0
    for ch in reversed(text.lower()):
        value = _ROMAN_VALUES[ch]
        if value < previous:
            total -= value
        else:
            total += value
            previous = value
    return _pad(str(total))


NORMALIZERS: Dict[str, NormalizerFn] = {
    "int": pad_number,
    "compound": pad_compound_number,
    "roman": roman_to_number,
}
