"""
Unit tests for core/bookmarks.py
"""
import pytest

from conftest import FakeBookmarks, make_file
from foldersort.core.bookmarks import determine_bookmarks_order_if_needed, needs_bookmarks_order
from foldersort.core.classifier import determine_sorting_group
from foldersort.core.models import GroupType, Ordering, SortGroup, SortOrder, SortSpec


def classify(spec, *paths):
    return [determine_sorting_group(make_file(p), spec) for p in paths]


class TestBookmarksOrder:

    def test_needs_bookmarks_order(self):
        assert needs_bookmarks_order(SortOrder.BY_BOOKMARK_ORDER)
        assert needs_bookmarks_order(None, SortOrder.BY_BOOKMARK_ORDER_REVERSE)
        assert not needs_bookmarks_order(SortOrder.ALPHABETICAL, None)

    def test_group_order_resolves_own_items_only(self):
        spec = SortSpec(groups=[
            SortGroup(type=GroupType.EXACT_PREFIX, exact_prefix="a", sorting=Ordering(SortOrder.BY_BOOKMARK_ORDER)),
            SortGroup(type=GroupType.MATCH_ALL),
        ])
        bookmarks = FakeBookmarks({"a1.md": 2, "b1.md": 1})
        items = classify(spec, "a1.md", "b1.md")
        assert determine_bookmarks_order_if_needed(items, spec, bookmarks) == 1
        assert items[0].bookmarked_idx == 2
        assert items[1].bookmarked_idx is None
        assert bookmarks.calls == ["a1.md"]

    @pytest.mark.parametrize("field_name", ["default_sorting", "default_secondary_sorting"])
    def test_folder_default_resolves_every_item(self, field_name):
        spec = SortSpec(groups=[SortGroup(type=GroupType.MATCH_ALL)])
        setattr(spec, field_name, Ordering(SortOrder.BY_BOOKMARK_ORDER_REVERSE))
        bookmarks = FakeBookmarks({"x.md": 1})
        items = classify(spec, "x.md", "y.md")
        assert determine_bookmarks_order_if_needed(items, spec, bookmarks) == 2
        assert [i.bookmarked_idx for i in items] == [1, None]

    def test_outsiders_sentinel_is_safe(self):
        spec = SortSpec(
            groups=[SortGroup(type=GroupType.EXACT_NAME, exact_text="none",
                              sorting=Ordering(SortOrder.BY_BOOKMARK_ORDER))])
        items = classify(spec, "z.md")
        assert items[0].group_idx == 1
        assert determine_bookmarks_order_if_needed(items, spec, FakeBookmarks({"z.md": 1})) == 0

    def test_without_lookup(self):
        spec = SortSpec(default_sorting=Ordering(SortOrder.BY_BOOKMARK_ORDER))
        assert determine_bookmarks_order_if_needed(classify(spec, "a.md"), spec, None) == 0
