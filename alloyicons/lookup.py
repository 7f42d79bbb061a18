from __future__ import annotations

import json
from typing import Dict

from .catalog import Catalog, class_name


def emit_lookup(catalog: Catalog) -> Dict[str, dict]:
    return {
        class_name(name): {"unicode": entry.unicode, "categories": list(entry.category_keys)}
        for name, entry in catalog.icons.items()
    }


def render_lookup(mapping: Dict[str, dict]) -> str:
    return json.dumps(mapping, ensure_ascii=True, indent=2) + "\n"
