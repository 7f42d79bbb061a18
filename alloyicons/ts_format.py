from __future__ import annotations

import json
from typing import Dict, Iterable, List, Tuple

from .bindings import BindingModule, LookupFunction, MapEntry


CLASS_NAME = "IconUtils"
HEADER = [
    "// tslint:disable",
    "// @generated by alloyicons. DO NOT EDIT.",
]

METADATA_CLASS = """export class IconMetadata {
  public readonly className: string;
  public readonly unicode: string;
  public readonly categories: Readonly<string[]>;
  constructor(className: string, unicode: string, categories: string[]) {
    this.className = className;
    this.unicode = unicode;
    this.categories = categories;
  }
}"""


def ts_string(value: str) -> str:
    """TypeScript string literal; JSON string syntax is a subset of it."""
    return json.dumps(value, ensure_ascii=True)


def ts_ref(name: str) -> str:
    return f"{CLASS_NAME}.{name}"


def ts_array(refs: Iterable[str]) -> str:
    return "[" + ", ".join(ts_ref(r) for r in refs) + "]"


def format_parse(lookup: LookupFunction) -> List[str]:
    prefix, _, suffix = lookup.warning.partition("{key}")
    return [
        f"public static {lookup.name}(iconKey: string): IconMetadata {{",
        f"  if ({ts_ref(lookup.map_name)}.has(iconKey)) {{",
        f"    return {ts_ref(lookup.map_name)}.get(iconKey)!;",
        "  }",
        f"  const message = {ts_string(prefix)} + iconKey + {ts_string(suffix)};",
        "  // tslint:disable-next-line:no-console",
        "  console.warn(message);",
        "  return new IconMetadata(iconKey, '', []);",
        "}",
    ]


def format_map_entries(entries: Tuple[MapEntry, ...], single: bool) -> str:
    items = []
    for entry in entries:
        value = ts_ref(entry.refs[0]) if single else ts_array(entry.refs)
        items.append(f"[{ts_string(entry.key)}, {value}]")
    return "[" + ", ".join(items) + "]"


def format_module(module: BindingModule) -> str:
    body: List[str] = ["// categories"]
    for category in module.categories:
        body.append(f"public static readonly {category.name} = {ts_string(category.key)};")
    body.append("// icons")
    for icon in module.icons:
        body.append(
            f"public static readonly {icon.name} = new IconMetadata("
            f"{ts_string(icon.class_name)}, {ts_string(icon.unicode)}, {ts_array(icon.categories)});"
        )
    body.append("// parse function")
    body.extend(format_parse(module.lookup))
    body.append("// maps and arrays")
    body.append(
        "public static readonly CATEGORIES: Readonly<Map<string, IconMetadata[]>> = "
        f"new Map({format_map_entries(module.category_map, single=False)});"
    )
    body.append(
        f"private static readonly {module.lookup.map_name}: Readonly<Map<string, IconMetadata>> = "
        f"new Map({format_map_entries(module.icon_map, single=True)});"
    )

    lines = HEADER + ["", METADATA_CLASS, "", f"export abstract class {CLASS_NAME} {{"]
    lines.extend(f"  {line}" for line in body)
    lines.extend(["}", ""])
    return "\n".join(lines)


def format_index() -> str:
    return "\n".join([HEADER[0], f"export * from './{CLASS_NAME}';", ""])


def format_files(module: BindingModule) -> Dict[str, str]:
    return {
        f"{CLASS_NAME}.ts": format_module(module),
        "index.ts": format_index(),
    }
