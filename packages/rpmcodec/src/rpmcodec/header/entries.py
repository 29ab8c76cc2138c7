# packages/rpmcodec/src/rpmcodec/header/entries.py
# -----------------------------------------------------------------------------
# Entrées d'index RPM : valeur sémantique -> (type, count, data)
# Ensemble fermé de types : INT32 / BIN / STRING_ARRAY.

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Dict

import numpy as np

__all__ = [
    "EntryType", "IndexEntry", "ALIGNMENT",
    "int32_entry", "binary_entry", "string_array_entry",
]


class EntryType(IntEnum):
    """Type tags as stored in the `type` field of an index descriptor."""
    INT32 = 0x04
    BINARY = 0x07
    STRING_ARRAY = 0x08


#: Alignement requis dans le data blob (types absents => pas de padding)
ALIGNMENT: Dict[EntryType, int] = {
    EntryType.INT32: 4,
}


@dataclass(frozen=True)
class IndexEntry:
    """Une entrée typée, prête à être placée dans un `Index`.

    `count` est le nombre d'éléments (entiers, octets ou chaînes), pas la taille
    de `data` en octets.
    """
    type: EntryType
    count: int
    data: bytes = field(default_factory=bytes)

    @property
    def alignment(self) -> int:
        return ALIGNMENT.get(self.type, 1)


def int32_entry(values: Iterable[int]) -> IndexEntry:
    """Big-endian signed 32-bit integers, concatenated in input order."""
    arr = np.asarray(list(values), dtype=">i4")
    return IndexEntry(EntryType.INT32, int(arr.size), arr.tobytes())


def binary_entry(value: bytes) -> IndexEntry:
    return IndexEntry(EntryType.BINARY, len(value), bytes(value))


def string_array_entry(values: Iterable[str]) -> IndexEntry:
    """NUL-terminated UTF-8 strings followed by one extra NUL.

    ["a", "bb"] -> b"a\\0bb\\0\\0", count=2
    """
    items = [str(v).encode("utf-8") + b"\x00" for v in values]
    return IndexEntry(EntryType.STRING_ARRAY, len(items), b"".join(items) + b"\x00")
