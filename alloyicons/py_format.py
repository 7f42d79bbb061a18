from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .bindings import BindingModule, LookupFunction, MapEntry


MODULE_FILE = "icon_utils.py"
HEADER = '''# @generated by alloyicons. DO NOT EDIT.
"""Alloy Icons constants and lookup."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class IconMetadata:
    class_name: str
    unicode: str
    categories: Tuple[str, ...]
'''


def py_string(value: str) -> str:
    return repr(value)


def py_tuple(items: Iterable[str]) -> str:
    items = list(items)
    if len(items) == 1:
        return f"({items[0]},)"
    return "(" + ", ".join(items) + ")"


def format_parse(lookup: LookupFunction) -> List[str]:
    prefix, _, suffix = lookup.warning.partition("{key}")
    return [
        f"def {lookup.name}(icon_key: str) -> IconMetadata:",
        f"    if icon_key in {lookup.map_name}:",
        f"        return {lookup.map_name}[icon_key]",
        f"    message = {py_string(prefix)} + icon_key + {py_string(suffix)}",
        '    print(f"Warning: {message}", file=sys.stderr)',
        '    return IconMetadata(icon_key, "", ())',
    ]


def format_map(name: str, annotation: str, entries: Tuple[MapEntry, ...], single: bool) -> List[str]:
    if not entries:
        return [f"{name}: {annotation} = {{}}"]
    lines = [f"{name}: {annotation} = {{"]
    for entry in entries:
        value = entry.refs[0] if single else py_tuple(entry.refs)
        lines.append(f"    {py_string(entry.key)}: {value},")
    lines.append("}")
    return lines


def format_module(module: BindingModule) -> str:
    lines = [HEADER, "", "# categories"]
    for category in module.categories:
        lines.append(f"{category.name} = {py_string(category.key)}")
    lines.extend(["", "# icons"])
    for icon in module.icons:
        lines.append(
            f"{icon.name} = IconMetadata("
            f"{py_string(icon.class_name)}, {py_string(icon.unicode)}, {py_tuple(icon.categories)})"
        )
    lines.extend(["", "# maps"])
    lines.extend(format_map("CATEGORIES", "Dict[str, Tuple[IconMetadata, ...]]", module.category_map, single=False))
    lines.extend(format_map(module.lookup.map_name, "Dict[str, IconMetadata]", module.icon_map, single=True))
    lines.extend(["", ""])
    lines.extend(format_parse(module.lookup))
    lines.append("")
    return "\n".join(lines)


def format_files(module: BindingModule) -> Dict[str, str]:
    return {MODULE_FILE: format_module(module)}
