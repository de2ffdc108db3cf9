"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/metadata.py
Resolves metadata-derived sort values of a classified entry.

Four independent levels may order by metadata: the group's primary and
secondary orderings and the folder-level default primary and secondary.
A value is fetched only for the levels whose order is metadata-based.
"""

from typing import Optional, Tuple, Mapping, Any

from foldersort.core.interfaces import SortContext
from foldersort.core.models import (
    ClassifiedEntry, Entry, Ordering, SortSpec, DEFAULT_METADATA_FIELD,
)

FrontMatter = Optional[Mapping[str, Any]]


def note_paths_for(entry: Entry, ctx: SortContext) -> Tuple[str, Optional[str]]:
    """
    Return (note path, index note path) holding the metadata of an entry.
    A file is its own note. A folder uses its same-name note inside it and,
    when a folder-note resolver supplies one, an index note with priority.
    """
    if not entry.is_folder:
        return entry.path, None
    note_path = f"{entry.path}/{entry.name}.md"
    index_note_path = None
    if ctx.folder_notes is not None:
        index_basename = ctx.folder_notes.index_note_basename_for(entry)
        if index_basename:
            index_note_path = f"{entry.path}/{index_basename}.md"
    return note_path, index_note_path


def value_from_frontmatter(field_name: str, ordering: Ordering,
                           frontmatter: FrontMatter, prio_frontmatter: FrontMatter) -> Optional[str]:
    raw = None
    if prio_frontmatter is not None:
        raw = prio_frontmatter.get(field_name)
    if raw is None and frontmatter is not None:
        raw = frontmatter.get(field_name)
    if ordering.metadata_value_extractor is not None:
        raw = ordering.metadata_value_extractor(raw)
    if raw is None:
        return None
    return raw if isinstance(raw, str) else str(raw)


def resolve_metadata_values(item: ClassifiedEntry, entry: Entry, spec: SortSpec, ctx: SortContext) -> None:
    """Fill the metadata fields of `item` for the metadata-ordered levels only."""
    if ctx.metadata is None or item.group_idx is None:
        return

    group = spec.groups[item.group_idx] if item.group_idx < len(spec.groups) else None
    group_field = group.with_metadata_field_name if group else None

    levels = {
        "metadata_field_value": (group.sorting if group else None, group_field),
        "metadata_field_value_secondary": (group.secondary_sorting if group else None, group_field),
        "metadata_field_value_for_derived": (spec.default_sorting, None),
        "metadata_field_value_for_derived_secondary": (spec.default_secondary_sorting, None),
    }
    needed = {attr: (ordering, fallback) for attr, (ordering, fallback) in levels.items()
              if ordering is not None and ordering.order.is_by_metadata}
    if not needed:
        return

    note_path, index_note_path = note_paths_for(entry, ctx)
    frontmatter = ctx.metadata.get_frontmatter(note_path)
    prio_frontmatter = ctx.metadata.get_frontmatter(index_note_path) if index_note_path else None

    for attr, (ordering, fallback_field) in needed.items():
        field_name = ordering.by_metadata or fallback_field or DEFAULT_METADATA_FIELD
        setattr(item, attr, value_from_frontmatter(field_name, ordering, frontmatter, prio_frontmatter))
