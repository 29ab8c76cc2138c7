# packages/rpmcodec/src/rpmcodec/header/io.py
from __future__ import annotations
import os
from pathlib import Path

from .index import Index

__all__ = ["write_index", "write_region_file"]


def write_index(index: Index, path: str | Path) -> int:
    """Serialize `index` to `path` through a `.tmp` sibling; returns byte count.

    The temp file is removed if the write fails, so `path` never holds a
    partial region.  # [STORE:OVERWRITE]
    """
    p = Path(path)
    tmp = p.with_suffix(p.suffix + ".tmp")
    try:
        with open(tmp, "wb") as f:
            index.write(f)
            size = f.tell()
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    tmp.replace(p)
    return size


def write_region_file(data: bytes, path: str | Path) -> None:
    """Atomic write of an already encoded region (lead or header), parents created."""
    p = Path(path)
    tmp = p.with_suffix(p.suffix + ".tmp")
    tmp.parent.mkdir(parents=True, exist_ok=True)
    with open(tmp, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, p)
