from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

import jsonschema


SCHEMA_PATH = Path(__file__).resolve().parent / "schema" / "categories.schema.json"


@dataclass(frozen=True)
class CategoryRecord:
    key: str
    icons: Tuple[str, ...]


def load_schema() -> dict:
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema not found: {SCHEMA_PATH}")
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def parse_manifest(data: dict) -> List[CategoryRecord]:
    jsonschema.Draft202012Validator(load_schema()).validate(data)
    return [CategoryRecord(c["key"], tuple(c["icons"])) for c in data["categories"]]


def load_manifest(path: Path) -> List[CategoryRecord]:
    if not path.exists():
        raise FileNotFoundError(f"Category manifest not found: {path}")
    return parse_manifest(json.loads(path.read_text(encoding="utf-8")))
