from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List

from rpmcodec.header import Index, IndexEntry, int32_entry, binary_entry, string_array_entry
from rpmcodec.tags import region_number, tag_number

MANIFEST_TYPES = ("int32", "binary", "string_array")


def region_name(name: str, version: str, release: str, kind: str = "hdr") -> str:
    return f"{name}-{version}-{release}.{kind}"


def load_manifest(path: Path | str) -> Dict[str, Any]:
    m = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(m, dict):
        raise ValueError(f"load_manifest: {path}: top-level JSON must be an object")
    return m


def _entry(spec: Dict[str, Any]) -> IndexEntry:
    kind = spec.get("type")
    if kind not in MANIFEST_TYPES:
        raise ValueError(f"build_index: unknown entry type {kind!r} (expected one of {MANIFEST_TYPES})")
    if "value" not in spec:
        raise ValueError("build_index: entry without 'value'")
    value = spec["value"]
    if kind == "int32":
        values = value if isinstance(value, list) else [value]
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
            raise ValueError("build_index: int32 value must be an int or a list of ints")
        return int32_entry(values)
    if kind == "string_array":
        values = value if isinstance(value, list) else [value]
        if not all(isinstance(v, str) for v in values):
            raise ValueError("build_index: string_array value must be a str or a list of str")
        return string_array_entry(values)
    if not isinstance(value, str):
        raise ValueError("build_index: binary value must be a hex string")
    return binary_entry(bytes.fromhex(value))


def build_index(manifest: Dict[str, Any]) -> Index:
    """
    Manifeste JSON -> Index.

    {"region": "immutable", "entries": [{"tag": "name", "type": "string_array", "value": ["pkg"]}]}

    `tag` accepte un nom connu (cf. rpmcodec.tags) ou un entier. Un tag répété
    écrase le précédent, comme `Index.add`.
    """
    region = region_number(manifest.get("region", "immutable"))
    entries: List[Dict[str, Any]] = manifest.get("entries", [])
    if not isinstance(entries, list):
        raise ValueError("build_index: 'entries' must be a list")
    idx = Index(region)
    for spec in entries:
        if not isinstance(spec, dict) or "tag" not in spec:
            raise ValueError(f"build_index: malformed entry {spec!r}")
        idx.add(tag_number(spec["tag"], region), _entry(spec))
    return idx
