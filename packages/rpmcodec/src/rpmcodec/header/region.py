# packages/rpmcodec/src/rpmcodec/header/region.py
from __future__ import annotations
import struct

from .entries import EntryType, IndexEntry, binary_entry

__all__ = ["DESCRIPTOR_SIZE", "pack_descriptor", "region_trailer"]

#: (tag, type, offset, count), quatre int32 big-endian
_DESCRIPTOR = struct.Struct(">4i")
DESCRIPTOR_SIZE = _DESCRIPTOR.size  # 16


def pack_descriptor(tag: int, rpmtype: int, offset: int, count: int) -> bytes:
    """Pack one 16-byte index descriptor."""
    return _DESCRIPTOR.pack(int(tag), int(rpmtype), int(offset), int(count))


def region_trailer(region_tag: int, n_entries: int) -> IndexEntry:
    """
    Entrée synthétique de fin de région (tag 62/63).

    Son descripteur est écrit en tête de la table d'index, mais son contenu
    ferme le data blob. Le contenu est lui-même un descripteur
    (region_tag, BIN, offset, 16) dont l'offset vaut -(16 * (n + 1)) :
    moins la taille de la table d'index, entrée de région comprise.
    """
    offset = -(DESCRIPTOR_SIZE * (n_entries + 1))
    return binary_entry(pack_descriptor(region_tag, EntryType.BINARY, offset, DESCRIPTOR_SIZE))
