# packages/rpmcodec/src/rpmcodec/header/index.py
"""
RPM header region writer.

Layout produced by `Index.write`::

    8e ad e8 01 00 00 00 00          magic + reserved
    int32 count                      real entries + 1 (region trailer)
    int32 size                       data blob length
    16 B  region descriptor          written first
    16 B  descriptor * n             ascending tag order
    size  data blob                  entries, then the 16 B region trailer

Int32 data is aligned on 4 bytes inside the blob; every other type is packed
as-is. Offsets are recomputed on each write, the index itself is never mutated.
"""
from __future__ import annotations
import io
import logging
import struct
from typing import BinaryIO, Dict, Iterator, List, Tuple

from .entries import IndexEntry
from .region import pack_descriptor, region_trailer

__all__ = ["HEADER_MAGIC", "Index"]

log = logging.getLogger(__name__)

HEADER_MAGIC = b"\x8e\xad\xe8\x01"
_PREAMBLE = HEADER_MAGIC + b"\x00" * 4
_COUNTS = struct.Struct(">2i")


def _pad(offset: int, alignment: int) -> bytes:
    if alignment <= 1 or offset % alignment == 0:
        return b""
    return b"\x00" * (alignment - offset % alignment)


class Index:
    """Ensemble d'entrées indexées par tag numérique, pour une région donnée.

    `region_tag` identifie la région (62 = signatures, 63 = header principal).
    """

    def __init__(self, region_tag: int):
        self.region_tag = int(region_tag)
        self.entries: Dict[int, IndexEntry] = {}

    def add(self, tag: int, entry: IndexEntry) -> None:
        # pas de validation : un tag existant est écrasé
        self.entries[int(tag)] = entry

    def tags(self) -> List[int]:
        return sorted(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, tag: object) -> bool:
        try:
            return int(tag) in self.entries  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return False

    def __getitem__(self, tag: int) -> IndexEntry:
        return self.entries[int(tag)]

    def __iter__(self) -> Iterator[Tuple[int, IndexEntry]]:
        for tag in self.tags():
            yield tag, self.entries[tag]

    def trailer(self) -> IndexEntry:
        return region_trailer(self.region_tag, len(self.entries))

    def _layout(self) -> Tuple[List[Tuple[int, IndexEntry, int]], bytes]:
        """Place les entrées dans le data blob -> ([(tag, entry, offset)], blob)."""
        blob = io.BytesIO()
        placed: List[Tuple[int, IndexEntry, int]] = []
        for tag, e in self:
            blob.write(_pad(blob.tell(), e.alignment))
            placed.append((tag, e, blob.tell()))
            blob.write(e.data)
        blob.write(self.trailer().data)
        return placed, blob.getvalue()

    def write(self, w: BinaryIO) -> None:
        """Write preamble, descriptor table and data blob to `w`.

        Only the sink can fail; its exception propagates and whatever was
        already written must be discarded by the caller.
        """
        placed, blob = self._layout()
        trailer = self.trailer()
        log.debug("header region %d: %d entries, %d data bytes",
                  self.region_tag, len(placed), len(blob))

        w.write(_PREAMBLE)
        w.write(_COUNTS.pack(len(placed) + 1, len(blob)))
        # le descripteur de région est identique à son contenu
        w.write(trailer.data)
        for tag, e, offset in placed:
            w.write(pack_descriptor(tag, e.type, offset, e.count))
        w.write(blob)

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.write(buf)
        return buf.getvalue()

    def __repr__(self) -> str:
        return f"Index(region_tag={self.region_tag}, tags={self.tags()})"
