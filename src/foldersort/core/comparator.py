"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Multi-level comparator for one sort pass.

Sorting priority (applied lexicographically):
1. Group index, ascending
2. Group's own primary ordering
3. Group's own secondary ordering
4. Folder's default primary ordering
5. Folder's default secondary ordering
6. Fixed default: alphabetical with files preferred over same-named folders
Each level is consulted only when all previous ones returned EQUAL_OR_UNCOMPARABLE.
"""

from typing import List, Optional, Tuple

from foldersort.core.models import (
    ClassifiedEntry, Ordering, SortOrder, SortSpec, SortingLevel, EQUAL_OR_UNCOMPARABLE,
)
from foldersort.core.sorters import SorterFn, get_sorter_for


class MultiLevelComparator:
    """
    Callable comparator bound to one specification and the host-selected order.
    All sorters are looked up once, at construction.
    """

    def __init__(self, spec: SortSpec, host_order: Optional[str] = None):
        self.spec = spec
        self.host_order = host_order
        self._group_sorters: List[Tuple[Optional[SorterFn], Optional[SorterFn]]] = [
            (self._sorter(group.sorting, SortingLevel.PRIMARY),
             self._sorter(group.secondary_sorting, SortingLevel.SECONDARY))
            for group in spec.groups
        ]
        self._folder_sorter = self._sorter(spec.default_sorting, SortingLevel.DERIVED_PRIMARY)
        self._folder_secondary_sorter = self._sorter(spec.default_secondary_sorting, SortingLevel.DERIVED_SECONDARY)
        self._default_sorter = get_sorter_for(SortOrder.DEFAULT, None, SortingLevel.DEFAULT_WHEN_UNSPECIFIED)

    def _sorter(self, ordering: Optional[Ordering], level: SortingLevel) -> Optional[SorterFn]:
        if ordering is None:
            return None
        return get_sorter_for(ordering.order, self.host_order, level)

    def __call__(self, a: ClassifiedEntry, b: ClassifiedEntry) -> float:
        if a.group_idx is None or b.group_idx is None:
            # never happens after classification, kept for a total order
            if a.group_idx is not None:
                return -1
            if b.group_idx is not None:
                return 1
            return self._default_sorter(a, b)

        if a.group_idx != b.group_idx:
            return a.group_idx - b.group_idx

        if a.group_idx < len(self._group_sorters):
            levels = self._group_sorters[a.group_idx] + (self._folder_sorter, self._folder_secondary_sorter)
        else:
            levels = (self._folder_sorter, self._folder_secondary_sorter)

        for sorter in levels:
            if sorter is None:
                continue
            result = sorter(a, b)
            if result != EQUAL_OR_UNCOMPARABLE:
                return result
        return self._default_sorter(a, b)


def get_comparator(spec: SortSpec, host_order: Optional[str] = None) -> MultiLevelComparator:
    return MultiLevelComparator(spec, host_order)
