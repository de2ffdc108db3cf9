"""
Unit tests for core/comparator.py
Verifies the cascade: group index first, then group primary / secondary,
folder default primary / secondary and the fixed final ordering.
"""
from functools import cmp_to_key

from foldersort.core.comparator import MultiLevelComparator, get_comparator
from foldersort.core.models import ClassifiedEntry, GroupType, Ordering, SortGroup, SortOrder, SortSpec


def item(name, group_idx, is_folder=False, **kwargs) -> ClassifiedEntry:
    return ClassifiedEntry(
        path=name, sort_string=name, sort_string_with_ext=name + ".md",
        is_folder=is_folder, group_idx=group_idx, **kwargs)


def order(spec, items, host_order=None):
    return [i.path for i in sorted(items, key=cmp_to_key(get_comparator(spec, host_order)))]


# =============================================================================
# 1. GROUP INDEX
# =============================================================================
class TestGroupIndex:

    def test_lower_group_index_first(self):
        spec = SortSpec(groups=[SortGroup(type=GroupType.MATCH_ALL)] * 2)
        assert order(spec, [item("a", 1), item("z", 0)]) == ["z", "a"]

    def test_past_the_end_index_sorts_last(self):
        spec = SortSpec(groups=[SortGroup(type=GroupType.MATCH_ALL)])
        assert order(spec, [item("a", 1), item("b", 0)]) == ["b", "a"]

    def test_missing_group_index_sorts_after_assigned(self):
        comparator = MultiLevelComparator(SortSpec())
        assert comparator(item("a", None), item("b", 0)) > 0
        assert comparator(item("b", 0), item("a", None)) < 0
        assert comparator(item("a", None), item("b", None)) < 0


# =============================================================================
# 2. CASCADE
# =============================================================================
class TestCascade:

    def test_group_primary_decides(self):
        group = SortGroup(type=GroupType.MATCH_ALL, sorting=Ordering(SortOrder.ALPHABETICAL_REVERSE))
        spec = SortSpec(groups=[group])
        assert order(spec, [item("a", 0), item("c", 0), item("b", 0)]) == ["c", "b", "a"]

    def test_group_secondary_breaks_primary_ties(self):
        group = SortGroup(
            type=GroupType.MATCH_ALL,
            sorting=Ordering(SortOrder.BY_METADATA_FIELD_ALPHABETICAL),
            secondary_sorting=Ordering(SortOrder.BY_MODIFIED_TIME_REVERSE),
        )
        spec = SortSpec(groups=[group])
        items = [
            item("old", 0, metadata_field_value="1", mtime=1),
            item("new", 0, metadata_field_value="1", mtime=5),
            item("first", 0, metadata_field_value="0", mtime=0),
        ]
        assert order(spec, items) == ["first", "new", "old"]

    def test_folder_default_applies_without_group_orderings(self):
        spec = SortSpec(
            groups=[SortGroup(type=GroupType.MATCH_ALL)],
            default_sorting=Ordering(SortOrder.BY_CREATED_TIME),
        )
        assert order(spec, [item("a", 0, ctime=9), item("b", 0, ctime=3)]) == ["b", "a"]

    def test_folder_default_applies_to_outsiders(self):
        spec = SortSpec(
            groups=[SortGroup(type=GroupType.EXACT_NAME, exact_text="x")],
            default_sorting=Ordering(SortOrder.ALPHABETICAL_REVERSE),
        )
        assert order(spec, [item("a", 1), item("b", 1)]) == ["b", "a"]

    def test_folder_default_secondary(self):
        spec = SortSpec(
            groups=[SortGroup(type=GroupType.MATCH_ALL, sorting=Ordering(SortOrder.FOLDER_FIRST))],
            default_sorting=Ordering(SortOrder.BY_BOOKMARK_ORDER),
            default_secondary_sorting=Ordering(SortOrder.ALPHABETICAL_REVERSE),
        )
        items = [item("a", 0), item("b", 0), item("c", 0, bookmarked_idx=1), item("d", 0, is_folder=True)]
        assert order(spec, items) == ["d", "c", "b", "a"]

    def test_fixed_default_puts_file_before_same_named_folder(self):
        spec = SortSpec(groups=[SortGroup(type=GroupType.MATCH_ALL)])
        items = [item("Notes", 0, is_folder=True), item("Notes", 0), item("Alpha", 0)]
        result = sorted(items, key=cmp_to_key(get_comparator(spec)))
        assert [(i.path, i.is_folder) for i in result] == [("Alpha", False), ("Notes", False), ("Notes", True)]

    def test_standard_order_uses_host_selection(self):
        group = SortGroup(type=GroupType.MATCH_ALL, sorting=Ordering(SortOrder.STANDARD))
        spec = SortSpec(groups=[group])
        items = [item("a", 0, mtime=1), item("b", 0, mtime=3), item("dir", 0, is_folder=True)]
        assert order(spec, items, "byModifiedTime") == ["dir", "b", "a"]
        assert order(spec, items, "alphabetical") == ["dir", "a", "b"]

    def test_comparator_is_antisymmetric(self):
        spec = SortSpec(groups=[SortGroup(type=GroupType.MATCH_ALL, sorting=Ordering(SortOrder.BY_MODIFIED_TIME))])
        comparator = get_comparator(spec)
        items = [item("a", 0, mtime=2), item("b", 0, mtime=2), item("c", 0, is_folder=True), item("d", 1)]
        for a in items:
            for b in items:
                forward, backward = comparator(a, b), comparator(b, a)
                assert (forward > 0) == (backward < 0)
