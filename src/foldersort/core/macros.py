"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/macros.py
Per-pass shadow copies of the specification's groups.

Folder-specific placeholders differ for every sorted folder, so the shadow
copy is rebuilt at the start of each pass and handed down explicitly; the
specification's own groups are never modified.
"""

import dataclasses
from typing import List, Optional

from foldersort.core.interfaces import MacroExpander
from foldersort.core.models import SortGroup, SortSpec

PARENT_FOLDER_NAME_MACRO = "{:%parent-folder-name%:}"


def expand_parent_folder_name(groups_shadow: List[SortGroup], parent_folder_name: Optional[str]) -> None:
    """Replace the parent folder name placeholder in literal matchers."""
    if parent_folder_name is None:
        return
    for group in groups_shadow:
        for attr in ("exact_text", "exact_prefix", "exact_suffix"):
            value = getattr(group, attr)
            if value and PARENT_FOLDER_NAME_MACRO in value:
                setattr(group, attr, value.replace(PARENT_FOLDER_NAME_MACRO, parent_folder_name))


def build_groups_shadow(spec: SortSpec, parent_folder_name: Optional[str],
                        expander: Optional[MacroExpander] = None) -> List[SortGroup]:
    """
    Shallow copy of every group, index-aligned with spec.groups, with macros
    expanded for the given folder.
    """
    groups_shadow = [dataclasses.replace(group) for group in spec.groups]
    (expander or expand_parent_folder_name)(groups_shadow, parent_folder_name)
    return groups_shadow
