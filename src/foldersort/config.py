"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

config.py
Loads a sorting specification from a TOML document.

This is a structured configuration format, not a rule language: every group
is one [[groups]] table. Errors are reported as SpecConfigError naming the
offending group.

Example:
    default-order = "alphabetical"
    hide = ["draft.md"]

    [[groups]]
    type = "exact-prefix"
    regex = "^Chapter (\\d+)"
    normalizer = "int"

    [[groups]]
    type = "outsiders"

    [icons]
    "Projects" = "folder-star"
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Mapping

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Python < 3.11: pip install tomli

from foldersort.core.extractors import get_extractor
from foldersort.core.models import GroupType, Ordering, RegexSpec, SortGroup, SortOrder, SortSpec
from foldersort.core.normalizer import NORMALIZERS


class SpecConfigError(ValueError):
    """Raised when a sorting specification document is invalid."""


@dataclass
class SortConfig:
    spec: SortSpec
    icons: Dict[str, str] = field(default_factory=dict)


GROUP_TYPE_NAMES = {t.value: t for t in GroupType}
SORT_ORDER_NAMES = {o.value: o for o in SortOrder}


def _parse_order_name(name: Any, where: str) -> SortOrder:
    if not isinstance(name, str) or name not in SORT_ORDER_NAMES:
        raise SpecConfigError(f"{where}: unknown order {name!r}")
    return SORT_ORDER_NAMES[name]


def parse_ordering(value: Any, where: str) -> Optional[Ordering]:
    """An ordering is either an order name or a table {order, field, extractor}."""
    if value is None:
        return None
    if isinstance(value, str):
        return Ordering(order=_parse_order_name(value, where))
    if not isinstance(value, Mapping):
        raise SpecConfigError(f"{where}: ordering must be a string or a table")

    ordering = Ordering(order=_parse_order_name(value.get("order"), where), by_metadata=value.get("field"))
    extractor_name = value.get("extractor")
    if extractor_name is not None:
        extractor = get_extractor(str(extractor_name))
        if extractor is None:
            raise SpecConfigError(f"{where}: unknown extractor {extractor_name!r}")
        ordering.metadata_value_extractor = extractor
    return ordering


def _compile(pattern: Any, normalizer_name: Optional[str], where: str) -> RegexSpec:
    try:
        regex = re.compile(str(pattern))
    except re.error as e:
        raise SpecConfigError(f"{where}: invalid regex {pattern!r}: {e}") from e
    normalizer = None
    if normalizer_name is not None:
        normalizer = NORMALIZERS.get(normalizer_name)
        if normalizer is None:
            raise SpecConfigError(f"{where}: unknown normalizer {normalizer_name!r}")
    return RegexSpec(regex=regex, normalizer=normalizer)


def _optional_int(data: Mapping[str, Any], key: str, where: str) -> Optional[int]:
    value = data.get(key)
    # bool is a subclass of int but never a valid index or priority
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise SpecConfigError(f"{where}: '{key}' must be an integer")
    return value


def _string_list(data: Mapping[str, Any], key: str) -> List[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise SpecConfigError(f"'{key}' must be an array of strings")
    return value


def parse_group(data: Mapping[str, Any], idx: int) -> SortGroup:
    where = f"group {idx}"
    type_name = data.get("type")
    if type_name not in GROUP_TYPE_NAMES:
        raise SpecConfigError(f"{where}: unknown group type {type_name!r}")

    group = SortGroup(
        type=GROUP_TYPE_NAMES[type_name],
        exact_text=data.get("text"),
        exact_prefix=data.get("prefix"),
        exact_suffix=data.get("suffix"),
        sorting=parse_ordering(data.get("order"), where),
        secondary_sorting=parse_ordering(data.get("secondary-order"), where),
        files_only=bool(data.get("files-only", False)),
        folders_only=bool(data.get("folders-only", False)),
        match_filename_with_ext=bool(data.get("with-ext", False)),
        with_metadata_field_name=data.get("metadata-field"),
        icon_name=data.get("icon"),
        priority=_optional_int(data, "priority", where),
        combine_with_idx=_optional_int(data, "combine-with", where),
    )
    normalizer_name = data.get("normalizer")
    # "regex" is the single regex of exact-name / exact-prefix / exact-suffix groups
    if "regex" in data:
        spec = _compile(data["regex"], normalizer_name, where)
        if group.type == GroupType.EXACT_SUFFIX:
            group.regex_suffix = spec
        else:
            group.regex_prefix = spec
    if "regex-prefix" in data:
        group.regex_prefix = _compile(data["regex-prefix"], normalizer_name, where)
    if "regex-suffix" in data:
        group.regex_suffix = _compile(data["regex-suffix"], normalizer_name, where)

    _validate_group(group, where)
    return group


def _validate_group(group: SortGroup, where: str) -> None:
    for key, literal in (("text", group.exact_text), ("prefix", group.exact_prefix), ("suffix", group.exact_suffix)):
        if literal is not None and (not isinstance(literal, str) or not literal):
            raise SpecConfigError(f"{where}: '{key}' must be a non-empty string")
    kind = group.type
    if kind == GroupType.EXACT_NAME and group.exact_text is None and group.regex_prefix is None:
        raise SpecConfigError(f"{where}: exact-name needs 'text' or 'regex'")
    if kind == GroupType.EXACT_PREFIX and group.exact_prefix is None and group.regex_prefix is None:
        raise SpecConfigError(f"{where}: exact-prefix needs 'prefix' or 'regex'")
    if kind == GroupType.EXACT_SUFFIX and group.exact_suffix is None and group.regex_suffix is None:
        raise SpecConfigError(f"{where}: exact-suffix needs 'suffix' or 'regex'")
    if kind == GroupType.EXACT_HEAD_AND_TAIL:
        if group.exact_prefix is None and group.regex_prefix is None:
            raise SpecConfigError(f"{where}: exact-head-and-tail needs 'prefix' or 'regex-prefix'")
        if group.exact_suffix is None and group.regex_suffix is None:
            raise SpecConfigError(f"{where}: exact-head-and-tail needs 'suffix' or 'regex-suffix'")
    if kind == GroupType.HAS_METADATA_FIELD and not group.with_metadata_field_name:
        raise SpecConfigError(f"{where}: has-metadata-field needs 'metadata-field'")
    if group.files_only and group.folders_only:
        raise SpecConfigError(f"{where}: 'files-only' and 'folders-only' are exclusive")


def parse_spec(data: Mapping[str, Any]) -> SortSpec:
    """Build a SortSpec from an already parsed TOML mapping."""
    raw_groups = data.get("groups", [])
    if not isinstance(raw_groups, list):
        raise SpecConfigError("'groups' must be an array of tables")

    spec = SortSpec(
        groups=[parse_group(g, idx) for idx, g in enumerate(raw_groups)],
        target_folders_paths=list(_string_list(data, "target-folders")),
        default_sorting=parse_ordering(data.get("default-order"), "default-order"),
        default_secondary_sorting=parse_ordering(data.get("default-secondary-order"), "default-secondary-order"),
        items_to_hide=set(_string_list(data, "hide")),
        items_to_ignore=set(_string_list(data, "ignore")),
        implicit=bool(data.get("implicit", False)),
    )

    for idx, group in enumerate(spec.groups):
        if group.combine_with_idx is not None and not 0 <= group.combine_with_idx < len(spec.groups):
            raise SpecConfigError(f"group {idx}: 'combine-with' index out of range")
        if group.type != GroupType.OUTSIDERS:
            continue
        if group.files_only:
            spec.outsiders_files_group_idx = idx
        elif group.folders_only:
            spec.outsiders_folders_group_idx = idx
        else:
            spec.outsiders_group_idx = idx

    if any(g.priority is not None for g in spec.groups):
        candidates = [idx for idx, g in enumerate(spec.groups) if g.type != GroupType.OUTSIDERS]
        # sorted() is stable, equal priorities keep their declaration order
        spec.priority_order = sorted(candidates, key=lambda i: -(spec.groups[i].priority or 0))

    return spec


def loads(text: str) -> SortConfig:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise SpecConfigError(f"Invalid TOML: {e}") from e
    icons = data.get("icons", {})
    if not isinstance(icons, Mapping):
        raise SpecConfigError("'icons' must be a table")
    return SortConfig(spec=parse_spec(data), icons={str(k): str(v) for k, v in icons.items()})


def load(path: str) -> SortConfig:
    with open(path, "rb") as f:
        text = f.read().decode("utf-8")
    return loads(text)
