"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/classifier.py
Assigns every entry of a folder to a sorting group.

The groups are evaluated in priority order (or natural order when no
priorities are given) and the first matching group wins. A match may yield
"derived text" (regex capture) which replaces the name as the sort string.
Entries matching no group go to the outsiders group configured for their kind,
or to the past-the-end index (= number of groups) which sorts after everything.
"""

import logging
from typing import List, Optional, Tuple, Mapping, Any

from foldersort.core.interfaces import SortContext
from foldersort.core.metadata import resolve_metadata_values, note_paths_for
from foldersort.core.models import (
    ClassifiedEntry, Entry, GroupType, RegexSpec, SortGroup, SortSpec,
    DEFAULT_FOLDER_CTIME, DEFAULT_FOLDER_MTIME, DERIVED_TEXT_SEPARATOR,
)

logger = logging.getLogger(__name__)

# (matched, capture group 1 after normalization, full match)
RegexMatch = Tuple[bool, Optional[str], Optional[str]]


def match_group_regex(spec: RegexSpec, name: str) -> RegexMatch:
    match = spec.regex.search(name)
    if not match:
        return False, None, None
    captured = match.group(1) if spec.regex.groups >= 1 else None
    if captured:
        if spec.normalizer:
            captured = spec.normalizer(captured)
        return True, captured, match.group(0)
    return True, None, match.group(0)


def _has_field(frontmatter: Optional[Mapping[str, Any]], field_name: str) -> bool:
    return frontmatter is not None and field_name in frontmatter


class GroupClassifier:
    """
    Matches entries against the groups of one sort pass.

    Attributes:
        spec: The sorting specification (read-only)
        groups: Groups used for matching; the per-pass shadow copy when present
        ctx: Lookup collaborators
    """

    def __init__(self, spec: SortSpec, ctx: Optional[SortContext] = None,
                 groups_shadow: Optional[List[SortGroup]] = None):
        self.spec = spec
        self.ctx = ctx or SortContext()
        self.groups = groups_shadow if groups_shadow is not None else spec.groups

    def evaluation_order(self) -> List[int]:
        if self.spec.priority_order is not None:
            return list(self.spec.priority_order)
        return list(range(len(self.spec.groups)))

    def classify(self, entry: Entry) -> ClassifiedEntry:
        """Determine the group, sort strings and metadata values of one entry."""
        a_folder = entry.is_folder
        basename = entry.basename

        determined = False
        derived_text: Optional[str] = None
        group_idx: Optional[int] = None
        bookmarked_idx: Optional[int] = None

        for idx in self.evaluation_order():
            group = self.groups[idx]
            if group.folders_only and not a_folder:
                continue
            if group.files_only and a_folder:
                continue
            name_for_matching = entry.name if group.match_filename_with_ext else basename
            determined, derived_text, rank = self._match(group, entry, name_for_matching)
            if determined:
                group_idx = idx
                if rank:
                    bookmarked_idx = rank
                break

        sort_string = basename
        sort_string_with_ext = entry.name
        if determined and derived_text:
            sort_string = derived_text + DERIVED_TEXT_SEPARATOR + basename
            sort_string_with_ext = derived_text + DERIVED_TEXT_SEPARATOR + entry.name

        # Redirection to the group this one is combined with
        if determined:
            combined_idx = self.spec.groups[group_idx].combine_with_idx
            if combined_idx is not None:
                group_idx = combined_idx
        else:
            group_idx = self._outsiders_idx(a_folder)

        item = ClassifiedEntry(
            path=entry.path,
            sort_string=sort_string,
            sort_string_with_ext=sort_string_with_ext,
            is_folder=a_folder,
            group_idx=group_idx,
            ctime=DEFAULT_FOLDER_CTIME if a_folder else entry.ctime,
            mtime=DEFAULT_FOLDER_MTIME if a_folder else entry.mtime,
            folder=entry if a_folder else None,
            bookmarked_idx=bookmarked_idx,
        )
        resolve_metadata_values(item, entry, self.spec, self.ctx)
        return item

    def _outsiders_idx(self, a_folder: bool) -> int:
        spec = self.spec
        if spec.outsiders_files_group_idx is not None and not a_folder:
            return spec.outsiders_files_group_idx
        if spec.outsiders_folders_group_idx is not None and a_folder:
            return spec.outsiders_folders_group_idx
        if spec.outsiders_group_idx is not None:
            return spec.outsiders_group_idx
        return len(spec.groups)

    # =============================
    # Matching per group type
    # =============================

    def _match(self, group: SortGroup, entry: Entry, name: str) -> Tuple[bool, Optional[str], Optional[int]]:
        """Returns (matched, derived text, bookmark rank)."""
        kind = group.type
        if kind == GroupType.MATCH_ALL:
            return True, None, None
        if kind == GroupType.EXACT_NAME:
            if group.exact_text:
                return name == group.exact_text, None, None
            return self._match_regex(group.regex_prefix, name) + (None,)
        if kind == GroupType.EXACT_PREFIX:
            if group.exact_prefix:
                return name.startswith(group.exact_prefix), None, None
            return self._match_regex(group.regex_prefix, name) + (None,)
        if kind == GroupType.EXACT_SUFFIX:
            if group.exact_suffix:
                return name.endswith(group.exact_suffix), None, None
            return self._match_regex(group.regex_suffix, name) + (None,)
        if kind == GroupType.EXACT_HEAD_AND_TAIL:
            return self._match_head_and_tail(group, name) + (None,)
        if kind == GroupType.HAS_METADATA_FIELD:
            return self._match_metadata_field(group, entry), None, None
        if kind == GroupType.BOOKMARKED_ONLY:
            rank = self._bookmark_rank(entry)
            return bool(rank), None, rank
        if kind == GroupType.HAS_ICON:
            return self._match_icon(group, entry), None, None
        # OUTSIDERS groups are only reachable through the outsiders indexes
        return False, None, None

    @staticmethod
    def _match_regex(spec: Optional[RegexSpec], name: str) -> Tuple[bool, Optional[str]]:
        if spec is None:
            return False, None
        matched, captured, _ = match_group_regex(spec, name)
        return matched, captured

    @staticmethod
    def _match_head_and_tail(group: SortGroup, name: str) -> Tuple[bool, Optional[str]]:
        prefix, suffix = group.exact_prefix, group.exact_suffix

        if prefix and suffix:
            if len(name) >= len(prefix) + len(suffix):
                return name.startswith(prefix) and name.endswith(suffix), None
            return False, None

        if prefix or suffix:
            # one side literal, the other side regex
            if prefix and not name.startswith(prefix):
                return False, None
            if suffix and not name.endswith(suffix):
                return False, None
            regex = group.regex_suffix if prefix else group.regex_prefix
            if regex is None:
                return False, None
            matched, captured, full_match = match_group_regex(regex, name)
            if matched and len(full_match) + len(prefix or "") + len(suffix or "") <= len(name):
                return True, captured
            return False, None

        if group.regex_prefix is None or group.regex_suffix is None:
            return False, None
        matched_left, captured_left, full_left = match_group_regex(group.regex_prefix, name)
        matched_right, captured_right, full_right = match_group_regex(group.regex_suffix, name)
        if matched_left and matched_right and len(full_left) + len(full_right) <= len(name):
            derived = (captured_left or "") + (captured_right or "")
            return True, derived or None
        return False, None

    def _match_metadata_field(self, group: SortGroup, entry: Entry) -> bool:
        field_name = group.with_metadata_field_name
        if not field_name or self.ctx.metadata is None:
            return False
        note_path, index_note_path = note_paths_for(entry, self.ctx)
        if _has_field(self.ctx.metadata.get_frontmatter(note_path), field_name):
            return True
        if index_note_path is not None:
            return _has_field(self.ctx.metadata.get_frontmatter(index_note_path), field_name)
        return False

    def _bookmark_rank(self, entry: Entry) -> Optional[int]:
        if self.ctx.bookmarks is None:
            return None
        # ranks start from 1, so 0 also means "not bookmarked"
        return self.ctx.bookmarks.order_of(entry.path) or None

    def _match_icon(self, group: SortGroup, entry: Entry) -> bool:
        if self.ctx.icons is None:
            return False
        icon_name = self.ctx.icons.icon_of(entry)
        if not icon_name:
            return False
        if group.icon_name:
            return icon_name == group.icon_name
        return True


def determine_sorting_group(entry: Entry, spec: SortSpec, ctx: Optional[SortContext] = None,
                            groups_shadow: Optional[List[SortGroup]] = None) -> ClassifiedEntry:
    """Classify a single entry. Convenience wrapper over GroupClassifier."""
    return GroupClassifier(spec, ctx, groups_shadow).classify(entry)
