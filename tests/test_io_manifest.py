from __future__ import annotations
import json, struct
import pytest

from rpmcodec.header import EntryType, Index, IndexEntry, string_array_entry, write_index, write_region_file, lead
from rpmwf import build_index, load_manifest


MANIFEST = {
    "region": "immutable",
    "entries": [
        {"tag": "name", "type": "string_array", "value": "pkg"},
        {"tag": "buildtime", "type": "int32", "value": 1700000000},
        {"tag": 5000, "type": "binary", "value": "deadbeef"},
    ],
}


def test_write_index_file_roundtrip(tmp_path):
    idx = Index(63)
    idx.add(1000, string_array_entry(["pkg"]))
    out = tmp_path / "pkg.hdr"
    n = write_index(idx, out)
    assert out.read_bytes() == idx.to_bytes()
    assert n == len(idx.to_bytes())
    assert not (tmp_path / "pkg.hdr.tmp").exists()


def test_write_index_failure_leaves_no_temp_file(tmp_path):
    idx = Index(63)
    idx.add(1000, IndexEntry(EntryType.BINARY, 1, None))  # type: ignore[arg-type]
    out = tmp_path / "x.hdr"
    with pytest.raises(TypeError):
        write_index(idx, out)
    assert not out.exists()
    assert not (tmp_path / "x.hdr.tmp").exists()


def test_write_region_file_creates_parents(tmp_path):
    out = tmp_path / "a" / "b" / "pkg.lead"
    write_region_file(lead("pkg", "1", "1"), out)
    assert len(out.read_bytes()) == 96
    assert not (tmp_path / "a" / "b" / "pkg.lead.tmp").exists()


def test_build_index_from_manifest(tmp_path):
    p = tmp_path / "m.json"
    p.write_text(json.dumps(MANIFEST), encoding="utf-8")
    idx = build_index(load_manifest(p))
    assert idx.region_tag == 63
    assert idx.tags() == [1000, 1006, 5000]
    assert idx[1000].data == b"pkg\x00\x00"
    assert idx[1006].count == 1
    assert idx[1006].data == struct.pack(">i", 1700000000)
    assert idx[5000].data == b"\xde\xad\xbe\xef"


def test_build_index_signature_names():
    idx = build_index({"region": "signatures",
                       "entries": [{"tag": "payloadsize", "type": "int32", "value": [10]}]})
    assert idx.region_tag == 62 and idx.tags() == [1007]


@pytest.mark.parametrize("bad", [
    {"entries": [{"tag": "name", "type": "int64", "value": 1}]},
    {"entries": [{"tag": "name", "type": "int32"}]},
    {"entries": [{"type": "int32", "value": 1}]},
    {"entries": {"name": 1}},
    {"region": "nowhere", "entries": []},
    {"entries": [{"tag": "nope", "type": "int32", "value": 1}]},
    # valeurs mal typées
    {"entries": [{"tag": "buildtime", "type": "int32", "value": "1700000000"}]},
    {"entries": [{"tag": "buildtime", "type": "int32", "value": [1, "2"]}]},
    {"entries": [{"tag": "buildtime", "type": "int32", "value": True}]},
    {"entries": [{"tag": "buildtime", "type": "int32", "value": [1.5]}]},
    {"entries": [{"tag": "name", "type": "string_array", "value": 42}]},
    {"entries": [{"tag": "name", "type": "string_array", "value": ["pkg", 1]}]},
    {"entries": [{"tag": 5000, "type": "binary", "value": [1, 2]}]},
])
def test_build_index_rejects_bad_manifest(bad):
    with pytest.raises(ValueError):
        build_index(bad)


def test_load_manifest_rejects_non_object(tmp_path):
    p = tmp_path / "m.json"
    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_manifest(p)
