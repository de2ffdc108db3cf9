"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/extractors.py
Metadata value extractors: turn a raw frontmatter value into a sortable string.
An extractor returns None for a value it cannot understand, which the
resolver treats as an absent value.
"""

import re
from typing import Any, Optional, Dict

from foldersort.core.models import MetadataExtractorFn

_DAY = r'(?P<day>\d{2})'
_MONTH = r'(?P<month>\d{2})'
_YEAR = r'(?P<year>\d{4})'


class DateExtractor:
    """
    Finds a date in a given day/month/year layout and rewrites it as ISO
    yyyy-mm-dd, which then orders chronologically as plain text.
    """

    def __init__(self, layout: str):
        self.layout = layout
        pattern = re.escape(layout)
        pattern = pattern.replace("dd", _DAY).replace("mm", _MONTH).replace("yyyy", _YEAR)
        self._regex = re.compile(pattern)

    def __call__(self, value: Any) -> Optional[str]:
        if value is None:
            return None
        match = self._regex.search(str(value))
        if not match:
            return None
        return f"{match.group('year')}-{match.group('month')}-{match.group('day')}"

    def __repr__(self):
        return f"<DateExtractor layout={self.layout}>"


EXTRACTORS: Dict[str, MetadataExtractorFn] = {
    f"date({layout})": DateExtractor(layout)
    for layout in ("dd/mm/yyyy", "mm/dd/yyyy", "dd-mm-yyyy", "mm-dd-yyyy", "dd.mm.yyyy", "yyyy-mm-dd")
}


def get_extractor(name: str) -> Optional[MetadataExtractorFn]:
    return EXTRACTORS.get(name.strip())
