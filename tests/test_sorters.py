"""
Unit tests for core/sorters.py and core/collation.py
Verifies the named ordering strategies, the present-before-absent rules for
metadata, bookmark ranks and aggregated dates, and the host order mapping.
"""
import pytest

from foldersort.core.collation import collator_compare, true_alphabetical_compare, unicode_compare
from foldersort.core.models import ClassifiedEntry, SortOrder, SortingLevel, HOST_ORDERS
from foldersort.core.sorters import (
    SORTERS, HOST_TO_SORT_ORDER, get_sorter_for, file_goes_first_when_same_name,
    folder_goes_first_when_same_name, sorter_by_metadata_field, sorter_by_bookmark_order,
    sorter_by_folder_mdate,
)


def item(name, is_folder=False, ext=".md", **kwargs) -> ClassifiedEntry:
    return ClassifiedEntry(
        path=name,
        sort_string=name,
        sort_string_with_ext=name if is_folder else name + ext,
        is_folder=is_folder,
        **kwargs,
    )


def sign(value) -> int:
    return (value > 0) - (value < 0)


# =============================================================================
# 1. COLLATION PRIMITIVES
# =============================================================================
class TestCollation:

    @pytest.mark.parametrize("a, b, expected", [
        ("file2", "file10", -1),
        ("File", "file", 0),
        ("Élan", "elan", 0),
        ("apple", "Banana", -1),
        ("v1.10", "v1.9", 1),
    ])
    def test_collator_compare(self, a, b, expected):
        assert collator_compare(a, b) == expected

    def test_true_alphabetical_compares_digits_as_text(self):
        assert true_alphabetical_compare("file2", "file10") == 1
        assert true_alphabetical_compare("ABC", "abc") == 0

    def test_unicode_compare_is_code_point_order(self):
        assert unicode_compare("B", "a") == -1
        assert unicode_compare("a", "a") == 0


# =============================================================================
# 2. REGISTRY COMPLETENESS
# =============================================================================
class TestRegistry:

    def test_every_order_has_a_sorter(self):
        for order in SortOrder:
            assert order in SORTERS

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            SORTERS[SortOrder.ALPHABETICAL] = None

    def test_default_is_alphabetical_with_files_preferred(self):
        assert SortOrder.DEFAULT is SortOrder.ALPHABETICAL_WITH_FILES_PREFERRED

    def test_host_order_mapping_is_inverted_for_dates(self):
        assert HOST_TO_SORT_ORDER["byModifiedTime"] == SortOrder.BY_MODIFIED_TIME_REVERSE
        assert HOST_TO_SORT_ORDER["byModifiedTimeReverse"] == SortOrder.BY_MODIFIED_TIME
        assert HOST_TO_SORT_ORDER["byCreatedTime"] == SortOrder.BY_CREATED_TIME_REVERSE
        assert HOST_TO_SORT_ORDER["byCreatedTimeReverse"] == SortOrder.BY_CREATED_TIME
        assert set(HOST_TO_SORT_ORDER) == set(HOST_ORDERS)


# =============================================================================
# 3. LEXICOGRAPHIC ORDERS
# =============================================================================
class TestLexicographic:

    def test_alphabetical_and_reverse(self):
        a, b = item("Chapter 2"), item("Chapter 10")
        assert SORTERS[SortOrder.ALPHABETICAL](a, b) < 0
        assert SORTERS[SortOrder.ALPHABETICAL_REVERSE](a, b) > 0

    def test_with_file_ext_uses_extension(self):
        a, b = item("note", ext=".txt"), item("note", ext=".md")
        assert SORTERS[SortOrder.ALPHABETICAL](a, b) == 0
        assert SORTERS[SortOrder.ALPHABETICAL_WITH_FILE_EXT](a, b) > 0
        assert SORTERS[SortOrder.ALPHABETICAL_REVERSE_WITH_FILE_EXT](a, b) < 0

    def test_vsc_unicode(self):
        upper, lower = item("Zeta"), item("alpha")
        assert SORTERS[SortOrder.VSC_UNICODE](upper, lower) < 0
        assert SORTERS[SortOrder.VSC_UNICODE_REVERSE](upper, lower) > 0

    def test_same_name_tie_break_helpers(self):
        file_item, folder_item = item("x"), item("x", is_folder=True)
        assert file_goes_first_when_same_name(0, file_item, folder_item) == -1
        assert file_goes_first_when_same_name(0, folder_item, file_item) == 1
        assert folder_goes_first_when_same_name(0, folder_item, file_item) == -1
        assert folder_goes_first_when_same_name(0, file_item, folder_item) == 1
        assert file_goes_first_when_same_name(5, folder_item, file_item) == 5
        assert file_goes_first_when_same_name(0, file_item, item("x")) == 0

    def test_files_and_folders_preferred_orders(self):
        file_item, folder_item = item("x"), item("x", is_folder=True)
        assert SORTERS[SortOrder.ALPHABETICAL_WITH_FILES_PREFERRED](file_item, folder_item) < 0
        assert SORTERS[SortOrder.ALPHABETICAL_WITH_FOLDERS_PREFERRED](file_item, folder_item) > 0

    def test_file_first_and_folder_first(self):
        file_item, folder_item = item("b"), item("a", is_folder=True)
        assert SORTERS[SortOrder.FILE_FIRST](file_item, folder_item) < 0
        assert SORTERS[SortOrder.FOLDER_FIRST](file_item, folder_item) > 0
        assert SORTERS[SortOrder.FILE_FIRST](file_item, item("c")) == 0


# =============================================================================
# 4. METADATA ORDERS
# =============================================================================
class TestMetadataOrders:

    def test_values_compared_by_collator(self):
        a = item("a", metadata_field_value="10")
        b = item("b", metadata_field_value="9")
        assert SORTERS[SortOrder.BY_METADATA_FIELD_ALPHABETICAL](a, b) > 0
        assert SORTERS[SortOrder.BY_METADATA_FIELD_TRUE_ALPHABETICAL](a, b) < 0
        assert SORTERS[SortOrder.BY_METADATA_FIELD_ALPHABETICAL_REVERSE](a, b) < 0

    @pytest.mark.parametrize("order", [
        SortOrder.BY_METADATA_FIELD_ALPHABETICAL,
        SortOrder.BY_METADATA_FIELD_ALPHABETICAL_REVERSE,
        SortOrder.BY_METADATA_FIELD_TRUE_ALPHABETICAL,
        SortOrder.BY_METADATA_FIELD_TRUE_ALPHABETICAL_REVERSE,
    ])
    def test_item_with_value_goes_first_in_both_directions(self, order):
        with_value = item("z", metadata_field_value="x")
        without = item("a")
        sorter = SORTERS[order]
        assert sorter(with_value, without) < 0
        assert sorter(without, with_value) > 0

    def test_both_absent_is_undecided(self):
        assert SORTERS[SortOrder.BY_METADATA_FIELD_ALPHABETICAL](item("a"), item("b")) == 0

    @pytest.mark.parametrize("level, attr", [
        (SortingLevel.PRIMARY, "metadata_field_value"),
        (SortingLevel.SECONDARY, "metadata_field_value_secondary"),
        (SortingLevel.DERIVED_PRIMARY, "metadata_field_value_for_derived"),
        (SortingLevel.DERIVED_SECONDARY, "metadata_field_value_for_derived_secondary"),
    ])
    def test_level_selects_value(self, level, attr):
        sorter = get_sorter_for(SortOrder.BY_METADATA_FIELD_ALPHABETICAL, None, level)
        a = item("a", **{attr: "2"})
        b = item("b", **{attr: "1"})
        assert sorter(a, b) > 0

    def test_factory_reads_only_its_level(self):
        sorter = sorter_by_metadata_field(False, False, SortingLevel.SECONDARY)
        a = item("a", metadata_field_value="1")
        b = item("b", metadata_field_value="2")
        assert sorter(a, b) == 0


# =============================================================================
# 5. BOOKMARK AND DATE ORDERS
# =============================================================================
class TestRankAndDateOrders:

    def test_bookmark_ranks(self):
        first, second, none = item("a", bookmarked_idx=1), item("b", bookmarked_idx=2), item("c")
        straight = sorter_by_bookmark_order(False)
        reverse = sorter_by_bookmark_order(True)
        assert straight(first, second) < 0
        assert reverse(first, second) > 0
        # unranked always last
        assert straight(none, first) > 0
        assert reverse(none, first) > 0
        assert straight(none, item("d")) == 0

    @pytest.mark.parametrize("order", [
        SortOrder.BY_MODIFIED_TIME_ADVANCED,
        SortOrder.BY_MODIFIED_TIME_REVERSE_ADVANCED,
        SortOrder.BY_MODIFIED_TIME_ADVANCED_RECURSIVE,
        SortOrder.BY_MODIFIED_TIME_REVERSE_ADVANCED_RECURSIVE,
    ])
    def test_empty_folder_goes_last_in_both_directions(self, order):
        dated = item("z", is_folder=True, mtime=100)
        empty = item("a", is_folder=True)
        sorter = SORTERS[order]
        assert sorter(dated, empty) < 0
        assert sorter(empty, dated) > 0

    def test_advanced_dates_compare_values(self):
        old, new = item("a", mtime=100), item("b", mtime=200)
        assert sorter_by_folder_mdate()(old, new) < 0
        assert sorter_by_folder_mdate(True)(old, new) > 0
        early, late = item("a", ctime=5), item("b", ctime=7)
        assert SORTERS[SortOrder.BY_CREATED_TIME_ADVANCED](early, late) < 0
        assert SORTERS[SortOrder.BY_CREATED_TIME_REVERSE_ADVANCED](early, late) > 0

    def test_basic_date_orders_files_by_time(self):
        old, new = item("b", mtime=1), item("a", mtime=2)
        assert SORTERS[SortOrder.BY_MODIFIED_TIME](old, new) < 0
        assert SORTERS[SortOrder.BY_MODIFIED_TIME_REVERSE](old, new) > 0

    def test_basic_date_orders_two_folders_by_name(self):
        """Folders carry no date of their own under the basic orders."""
        a, b = item("a", is_folder=True), item("b", is_folder=True)
        assert SORTERS[SortOrder.BY_MODIFIED_TIME_REVERSE](a, b) < 0
        assert SORTERS[SortOrder.BY_CREATED_TIME](b, a) > 0


# =============================================================================
# 6. STANDARD (HOST-SELECTED) ORDER
# =============================================================================
class TestStandardOrder:

    def test_folders_on_top(self):
        sorter = get_sorter_for(SortOrder.STANDARD, "alphabetical")
        assert sorter(item("z", is_folder=True), item("a")) < 0
        assert sorter(item("a"), item("z", is_folder=True)) > 0
        assert sorter(item("a", is_folder=True), item("b", is_folder=True)) < 0

    def test_files_follow_host_order(self):
        older, newer = item("a", mtime=1), item("b", mtime=2)
        newest_first = get_sorter_for(SortOrder.STANDARD, "byModifiedTime")
        oldest_first = get_sorter_for(SortOrder.STANDARD, "byModifiedTimeReverse")
        assert newest_first(older, newer) > 0
        assert oldest_first(older, newer) < 0

    @pytest.mark.parametrize("host_order", [None, "somethingElse"])
    def test_unknown_or_absent_host_order_is_alphabetical(self, host_order):
        sorter = get_sorter_for(SortOrder.STANDARD, host_order)
        assert sorter(item("a"), item("b")) < 0
